"""
Clinter interactive prompt.

ask() writes a question followed by the "► " marker, then reads the input
stream on a daemon thread until the first line terminator ("\\n", "\\r" or
"\\r\\n") arrives. The answer, stripped of its terminator, is delivered once:
to the optional callback first, then through the returned Future.

- the call returns immediately; the host decides whether to wait on the future.
- an input stream that ends before any terminator fails the future with
  EOFError and never calls the callback.
- there is no cancellation and no timeout.
"""
import sys
import threading
from concurrent.futures import Future

from rich.text import Text

from .faults import outlet, palette
from .utils import *

MARKER = "► "


def _question(question, sink, colorful):
    if not colorful:
        sink.file.write(f"{question}\n{MARKER}")
    else:
        styles = palette()
        sink.print(
            Text.assemble((f"{question}\n", styles["prompt-question"]), (MARKER, styles["prompt-marker"])),
            end="", soft_wrap=True, crop=False, highlight=False
        )
    sink.file.flush()


def _readline(stream):
    """
    read one line and strip its terminator; raise EOFError when the stream ends
    before a terminator is seen.
    """
    line = stream.readline()
    if not line.endswith(("\n", "\r")):
        raise EOFError("input stream ended before a line terminator")
    return line.rstrip("\r\n")


def ask(question, callback=Unset, /, *, stdin=Unset, console=Unset, colorful=False):
    """
    prompt a question and deliver the first answered line asynchronously.

    parameters
    - question: str, written before the marker.
    - callback: callable(answer) | Unset, called exactly once with the answer.
    - stdin: text stream to read from (defaults to sys.stdin at call time).
    - console: rich Console to write the question on (defaults to stdout).
    - colorful: style the question and marker with the palette.

    returns
    - concurrent.futures.Future resolving to the answer.
    """
    if not isinstance(question, str):
        raise TypeError("ask() question must be a string")
    if callback is not Unset and not callable(callback):
        raise TypeError("ask() callback must be callable")

    stream = coalesce(stdin, sys.stdin)
    sink = coalesce(console, outlet)
    future = Future()
    future.set_running_or_notify_cancel()

    _question(question, sink, colorful)

    @rename("reader")
    def reader():
        try:
            answer = _readline(stream)
            if callback is not Unset:
                callback(answer)
        except Exception as exception:
            future.set_exception(exception)
        else:
            future.set_result(answer)

    threading.Thread(target=reader, name="PromptReader", daemon=True).start()
    return future


__all__ = (
    "ask",
)
