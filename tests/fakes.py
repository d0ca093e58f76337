"""
Test doubles shared across the suite.

FakeTransport stands in for the HTTP transports and RecordingHandler for a
caller's ResponseHandler. Neither touches the network.
"""

import json
import threading
from typing import Any

from linguistic.errors import TransportError
from linguistic.http.request import RequestDescriptor
from linguistic.http.transport import DoneCallback, TransportResponse


def json_body(document: Any) -> bytes:
    """Encode a document the way the services send it."""
    return json.dumps(document, ensure_ascii=False).encode("utf-8")


def ok(document: Any) -> TransportResponse:
    """A 200 response carrying ``document`` as JSON."""
    return TransportResponse(status_code=200, body=json_body(document), message="OK")


# ============================================================================
# FAKE TRANSPORT
# ============================================================================


class FakeTransport:
    """
    Transport double that records requests and replays queued outcomes.

    Each queued outcome is either a TransportResponse (returned) or a
    TransportError (raised). ``submit`` completes on a fresh thread so that
    callback tests observe off-thread delivery, and records the name of
    the thread each completion ran on.
    """

    def __init__(self, *outcomes: TransportResponse | TransportError) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[RequestDescriptor] = []
        self.completion_threads: list[str] = []
        self.threads: list[threading.Thread] = []
        self.closed = False

    def queue(self, outcome: TransportResponse | TransportError) -> None:
        self.outcomes.append(outcome)

    @property
    def last(self) -> RequestDescriptor:
        return self.requests[-1]

    def execute(self, descriptor: RequestDescriptor) -> TransportResponse:
        self.requests.append(descriptor)
        if not self.outcomes:
            raise AssertionError(f"No response queued for {descriptor.path}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, TransportError):
            raise outcome
        return outcome

    def submit(self, descriptor: RequestDescriptor, on_done: DoneCallback) -> None:
        if self.closed:
            raise TransportError("Transport is closed", descriptor.path)

        def run() -> None:
            self.completion_threads.append(threading.current_thread().name)
            try:
                response = self.execute(descriptor)
            except TransportError as exc:
                on_done(None, exc)
                return
            on_done(response, None)

        thread = threading.Thread(target=run, name=f"fake-transport-{len(self.threads)}")
        self.threads.append(thread)
        thread.start()

    def join(self, timeout: float = 5.0) -> None:
        for thread in self.threads:
            thread.join(timeout)

    def close(self) -> None:
        self.closed = True


class RecordingHandler:
    """ResponseHandler that records every notification and signals completion."""

    def __init__(self) -> None:
        self.responses: list[Any] = []
        self.failures: list[BaseException] = []
        self.threads: list[str] = []
        self.done = threading.Event()

    def on_response(self, result: Any) -> None:
        self.threads.append(threading.current_thread().name)
        self.responses.append(result)
        self.done.set()

    def on_failure(self, error: BaseException) -> None:
        self.threads.append(threading.current_thread().name)
        self.failures.append(error)
        self.done.set()

    @property
    def calls(self) -> int:
        return len(self.responses) + len(self.failures)

    def wait(self, timeout: float = 5.0) -> None:
        assert self.done.wait(timeout), "handler was never notified"
