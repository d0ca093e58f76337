"""
Command-line interface for the linguistic client.

Provides one sub-command per service operation:
- translate: Translate text (source language optional)
- detect: Detect the language of a text
- lookup: Look a word up in the dictionary
- complete: Suggest completions for a partial text
- spell: Spell-check one or more texts
- langs: List the languages / directions a service supports

Usage:
    linguistic translate "good morning" --to ru
    linguistic detect "guten Morgen" --hint de --hint en
    linguistic lookup time --lang en-ru --flag morpho
    linguistic complete "hel" --lang en --limit 3
    linguistic spell "helo wrld" --lang en
    linguistic langs translator

Every command accepts --json to print the decoded result as JSON, and
--config to read a specific INI file (see linguistic.config for the
environment variables that override it).

Exit codes:
    0: success
    1: the service call failed (error printed to stderr)
    2: invalid arguments
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from linguistic.config import ClientConfig, LoggingSettings, load_config
from linguistic.errors import LinguisticError, UnknownCodeError
from linguistic.parameters import Flag, Format, Language, LanguagePair, Option
from linguistic.response.models import (
    CompletionResult,
    LookupResult,
    SpellCheckResult,
    TranslationResult,
)
from linguistic.services import Dictionary, Predictor, Speller, Translator

LOG_FORMATS = {
    "simple": "%(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
}

SERVICE_CLASSES = {
    "dictionary": Dictionary,
    "predictor": Predictor,
    "speller": Speller,
    "translator": Translator,
}


# ============================================================================
# ARGUMENT TYPES
# ============================================================================


def _language(code: str) -> Language:
    try:
        return Language.by_code(code.lower())
    except UnknownCodeError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _language_pair(code: str) -> LanguagePair:
    try:
        return LanguagePair.by_code(code.lower())
    except UnknownCodeError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _flag(name: str) -> Flag:
    try:
        return Flag[name.upper().replace("-", "_")]
    except KeyError:
        choices = ", ".join(flag.name.lower() for flag in Flag)
        raise argparse.ArgumentTypeError(f"Unknown flag: {name} (choose from {choices})") from None


def _option(name: str) -> Option:
    try:
        return Option[name.upper().replace("-", "_")]
    except KeyError:
        choices = ", ".join(option.name.lower() for option in Option)
        raise argparse.ArgumentTypeError(
            f"Unknown option: {name} (choose from {choices})"
        ) from None


# ============================================================================
# OUTPUT
# ============================================================================


def configure_logging(settings: LoggingSettings, verbose: bool = False) -> None:
    """Configure root logging for command-line use.

    Raises:
        ValueError: ``settings.level`` is not a logging level name.
    """
    logging.basicConfig(format=LOG_FORMATS[settings.format])
    logging.getLogger().setLevel(logging.DEBUG if verbose else settings.level)


def _json_default(value: Any) -> Any:
    if isinstance(value, Language | LanguagePair):
        return value.code
    if isinstance(value, Enum):
        return value.name
    raise TypeError(f"Cannot serialise {type(value).__name__}")


def to_json(result: Any) -> str:
    """Render a decoded result (or list of results) as JSON."""
    if is_dataclass(result) and not isinstance(result, type):
        payload: Any = asdict(result)
    elif isinstance(result, list):
        payload = [asdict(item) if is_dataclass(item) else item for item in result]
    else:
        payload = result
    return json.dumps(payload, default=_json_default, ensure_ascii=False, indent=2)


def format_translation(result: TranslationResult) -> str:
    source = result.source_language.code or "auto"
    return f"[{source} -> {result.target_language.code}] {result.translated_text}"


def format_lookup(result: LookupResult) -> str:
    if result.is_empty:
        return "No definitions found."

    lines: list[str] = []
    for definition in result.definitions:
        header = definition.text
        if definition.transcription:
            header += f" [{definition.transcription}]"
        if definition.attributes.part_of_speech:
            header += f" ({definition.attributes.part_of_speech})"
        lines.append(header)

        for translation in definition.translations:
            lines.append(f"  - {translation.text}")
            if translation.synonyms:
                lines.append("    syn: " + ", ".join(s.text for s in translation.synonyms))
            if translation.meanings:
                lines.append("    mean: " + ", ".join(m.text for m in translation.meanings))
            for example in translation.examples:
                snippets = "; ".join(s.text for s in example.snippets)
                line = f"    ex: {example.text}"
                lines.append(f"{line} ({snippets})" if snippets else line)
    return "\n".join(lines)


def format_completion(result: CompletionResult) -> str:
    if not result.suggestions:
        return "No suggestions."
    return "\n".join(result.suggestions)


def format_spelling(result: SpellCheckResult) -> str:
    if result.is_correct:
        return f"{result.text}: no mistakes"

    lines = [f"{result.text}:"]
    for miss in result.misspellings:
        suggestions = ", ".join(miss.suggestions) or "no suggestions"
        where = f"row {miss.row}, col {miss.column}, {miss.kind.name.lower()}"
        lines.append(f"  {miss.word} ({where}): {suggestions}")
    return "\n".join(lines)


def _emit(args: argparse.Namespace, result: Any, text: str) -> None:
    print(to_json(result) if args.json else text)


def _open(args: argparse.Namespace, service: str) -> Any:
    cfg: ClientConfig = args.cfg
    return SERVICE_CLASSES[service].from_config(cfg)


# ============================================================================
# COMMANDS
# ============================================================================


def cmd_translate(args: argparse.Namespace) -> int:
    """Translate text."""
    text_format = Format.HTML if args.html else Format.PLAIN
    with _open(args, "translator") as translator:
        result = translator.translate(
            args.text,
            args.to,
            *args.option,
            source=args.source,
            text_format=text_format,
        )
    _emit(args, result, format_translation(result))
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    """Detect the language of a text."""
    with _open(args, "translator") as translator:
        language = translator.detect(args.text, *args.hint)
    _emit(args, language, f"{language.code} ({language.description})")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Look a word up in the dictionary."""
    with _open(args, "dictionary") as dictionary:
        result = dictionary.lookup(args.text, args.lang, *args.flag, ui=args.ui)
    _emit(args, result, format_lookup(result))
    return 0


def cmd_complete(args: argparse.Namespace) -> int:
    """Suggest completions."""
    with _open(args, "predictor") as predictor:
        result = predictor.complete(args.text, args.lang, limit=args.limit)
    _emit(args, result, format_completion(result))
    return 0


def cmd_spell(args: argparse.Namespace) -> int:
    """Spell-check one or more texts."""
    text_format = Format.HTML if args.html else Format.PLAIN
    with _open(args, "speller") as speller:
        if len(args.text) == 1:
            results = [
                speller.check(args.text[0], args.lang, *args.option, text_format=text_format)
            ]
        else:
            results = speller.check_many(
                args.text, args.lang, *args.option, text_format=text_format
            )
    payload = results[0] if len(results) == 1 else results
    _emit(args, payload, "\n".join(format_spelling(result) for result in results))
    return 0


def cmd_langs(args: argparse.Namespace) -> int:
    """List the languages or language pairs a service supports."""
    with _open(args, args.service) as service:
        directions = service.directions()
    _emit(args, directions, "\n".join(f"{d.code}\t{d.description}" for d in directions))
    return 0


# ============================================================================
# PARSER
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="INI file to read instead of config/client.ini")
    common.add_argument("--json", action="store_true", help="Print the result as JSON")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="linguistic",
        description="Translate, look up, complete and spell-check text from the command line",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # translate command
    translate_parser = subparsers.add_parser("translate", parents=[common], help="Translate text")
    translate_parser.add_argument("text")
    translate_parser.add_argument("--to", required=True, type=_language, help="Target language")
    translate_parser.add_argument(
        "--from",
        dest="source",
        type=_language,
        help="Source language (default: detected by the service)",
    )
    translate_parser.add_argument("--html", action="store_true", help="Text is HTML")
    translate_parser.add_argument(
        "--option", action="append", type=_option, default=[], help="Translator option"
    )
    translate_parser.set_defaults(func=cmd_translate)

    # detect command
    detect_parser = subparsers.add_parser("detect", parents=[common], help="Detect the language")
    detect_parser.add_argument("text")
    detect_parser.add_argument(
        "--hint", action="append", type=_language, default=[], help="Likely language"
    )
    detect_parser.set_defaults(func=cmd_detect)

    # lookup command
    lookup_parser = subparsers.add_parser("lookup", parents=[common], help="Dictionary lookup")
    lookup_parser.add_argument("text")
    lookup_parser.add_argument(
        "--lang", required=True, type=_language_pair, help="Lookup direction, e.g. en-ru"
    )
    lookup_parser.add_argument(
        "--ui", type=_language, default=Language.ENGLISH, help="Annotation language"
    )
    lookup_parser.add_argument(
        "--flag", action="append", type=_flag, default=[], help="Lookup flag"
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    # complete command
    complete_parser = subparsers.add_parser("complete", parents=[common], help="Complete text")
    complete_parser.add_argument("text")
    complete_parser.add_argument("--lang", required=True, type=_language, help="Text language")
    complete_parser.add_argument("--limit", type=int, default=1, help="Maximum suggestions")
    complete_parser.set_defaults(func=cmd_complete)

    # spell command
    spell_parser = subparsers.add_parser("spell", parents=[common], help="Spell-check text")
    spell_parser.add_argument("text", nargs="+")
    spell_parser.add_argument("--lang", required=True, type=_language, help="Text language")
    spell_parser.add_argument("--html", action="store_true", help="Text is HTML")
    spell_parser.add_argument(
        "--option", action="append", type=_option, default=[], help="Speller option"
    )
    spell_parser.set_defaults(func=cmd_spell)

    # langs command
    langs_parser = subparsers.add_parser(
        "langs", parents=[common], help="List supported languages"
    )
    langs_parser.add_argument("service", choices=["dictionary", "predictor", "translator"])
    langs_parser.set_defaults(func=cmd_langs)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        args.cfg = load_config(args.config)
        configure_logging(args.cfg.logging, verbose=args.verbose)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return args.func(args)
    except (LinguisticError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
