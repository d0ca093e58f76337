"""Generic recursive decoder for the dictionary lookup tree.

The lookup document nests six node kinds (definition, translation, synonym,
meaning, example, snippet) that all share one shape: a required ``text``,
the optional ``num``/``gen``/``pos`` attributes, a few node-specific
optional fields, and zero or more named child arrays.  Instead of one parser
per kind, each kind is described by a :class:`NodeSchema` and decoded by
the same two functions:

``decode_node(document, schema)``
    Returns the node, or ``None`` when the document has no usable ``text``.
    ``None`` means "drop this node and its subtree"; it is not an error.

``decode_node_list(documents, schema)``
    Decodes an array and filters out the dropped nodes, so one incomplete
    entry never aborts the rest of the tree.

The wire shape (field names are fixed by the service)::

    {"def": [{"text", "ts", "pos", "gen", "num",
              "tr": [{"text", "pos", "gen", "num",
                      "syn":  [{"text", ...}],
                      "mean": [{"text", ...}],
                      "ex":   [{"text", ..., "tr": [{"text", ...}]}]}]}]}

Scalar values are accepted as strings, and numbers are rendered with
``str()``.  ``null`` or any other type counts as absent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from linguistic.errors import DecodeError
from linguistic.response.decoders import load_json
from linguistic.response.models import (
    Attributes,
    Definition,
    Example,
    LookupResult,
    Meaning,
    Snippet,
    Synonym,
    Translation,
)

logger = logging.getLogger(__name__)

# Wire key → Attributes field, shared by every node kind.
ATTRIBUTE_KEYS: Mapping[str, str] = {
    "num": "number",
    "gen": "gender",
    "pos": "part_of_speech",
}


@dataclass(frozen=True)
class ChildSpec:
    """A named child array of a node kind.

    Attributes:
        field:  Node field that receives the decoded tuple.
        schema: Schema of the child nodes.
    """

    field: str
    schema: NodeSchema


@dataclass(frozen=True)
class NodeSchema:
    """Description of one lookup tree node kind.

    Attributes:
        name:         Human-readable kind name, used in log messages.
        factory:      Callable building the node from keyword fields.
        required_key: Wire key whose absence drops the node.
        optional:     Node-specific optional fields, wire key → node field.
        children:     Child arrays, wire key → :class:`ChildSpec`.
    """

    name: str
    factory: Callable[..., Any]
    required_key: str = "text"
    optional: Mapping[str, str] = field(default_factory=dict)
    children: Mapping[str, ChildSpec] = field(default_factory=dict)


def _scalar(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return None


def _decode_attributes(document: Mapping[str, Any]) -> Attributes:
    return Attributes(
        **{name: _scalar(document.get(wire_key)) for wire_key, name in ATTRIBUTE_KEYS.items()}
    )


def decode_node(document: Any, schema: NodeSchema) -> Any | None:
    """Decode one node, or return ``None`` when it has no usable ``text``."""
    if not isinstance(document, dict):
        logger.debug("Skipping %s: not a JSON object", schema.name)
        return None

    text = _scalar(document.get(schema.required_key))
    if text is None:
        logger.debug("Skipping %s without '%s'", schema.name, schema.required_key)
        return None

    fields: dict[str, Any] = {"text": text, "attributes": _decode_attributes(document)}

    for wire_key, name in schema.optional.items():
        value = _scalar(document.get(wire_key))
        if value is not None:
            fields[name] = value

    for wire_key, child in schema.children.items():
        fields[child.field] = decode_node_list(document.get(wire_key), child.schema)

    return schema.factory(**fields)


def decode_node_list(documents: Any, schema: NodeSchema) -> tuple[Any, ...]:
    """Decode an array of nodes, dropping entries without ``text``.

    An absent array decodes to an empty tuple.
    """
    if documents is None:
        return ()
    if not isinstance(documents, list):
        logger.debug("Ignoring %s list: not a JSON array", schema.name)
        return ()

    nodes = (decode_node(document, schema) for document in documents)
    return tuple(node for node in nodes if node is not None)


# ── Node kinds ────────────────────────────────────────────────────────────────

SNIPPET = NodeSchema(name="snippet", factory=Snippet)
SYNONYM = NodeSchema(name="synonym", factory=Synonym)
MEANING = NodeSchema(name="meaning", factory=Meaning)

EXAMPLE = NodeSchema(
    name="example",
    factory=Example,
    children={"tr": ChildSpec("snippets", SNIPPET)},
)

TRANSLATION = NodeSchema(
    name="translation",
    factory=Translation,
    children={
        "syn": ChildSpec("synonyms", SYNONYM),
        "mean": ChildSpec("meanings", MEANING),
        "ex": ChildSpec("examples", EXAMPLE),
    },
)

DEFINITION = NodeSchema(
    name="definition",
    factory=Definition,
    optional={"ts": "transcription"},
    children={"tr": ChildSpec("translations", TRANSLATION)},
)


def decode_lookup(body: bytes) -> LookupResult:
    """Decode a dictionary ``lookup`` response.

    A document without ``def`` is an empty result, not an error.

    Raises:
        DecodeError: The body is not a JSON object.
    """
    document = load_json(body)
    if not isinstance(document, dict):
        raise DecodeError(
            f"Expected lookup result to be a JSON object, got {type(document).__name__}"
        )
    return LookupResult(definitions=decode_node_list(document.get("def"), DEFINITION))
