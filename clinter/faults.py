"""
Clinter faults (errors and notices) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing fault, grouped by
  domain so that hosts can search or remap them.
- CommandException: base type for faults that stop a dispatch (configuration
  and usage errors). They are surfaced on the error console, never raised by
  the parser itself.
- CommandNotice: base type for informational faults (an unknown command) that
  are surfaced on the output console.
- trigger(): central entry point to surface any fault with runtime options.

Rendering
- faults implement the rich protocol (__rich__). without "colorful" they are
  written verbatim to the console file, so sinks receive the exact message.
- when the "colorful" option is set, a palette styles the message; the host can
  override palette entries with a __styles__ mapping in __main__.

Integration
- the pipeline returns faults instead of raising them; the parser merges its
  runtime options (console, colorful, tool) and calls trigger(fault, **options).
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)
outlet = Console()


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - routing (1110x): UNKNOWN_COMMAND
    - declarations (1111x): MALFORMED_ALIAS
    - values (1112x): OPTION_VALUE_REQUIRED, INVALID_NUMBER
    """
    # --- routing (11xxx) ---
    UNKNOWN_COMMAND       = 11101

    # --- declaration errors (11xxx) ---
    MALFORMED_ALIAS       = 11111

    # --- value errors (11xxx) ---
    OPTION_VALUE_REQUIRED = 11121
    INVALID_NUMBER        = 11122

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host may define a __codes__ mapping in __main__ to relabel codes;
        otherwise the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def palette():
    return defaultdict(str, {
        "error-message": "bold #FF4DA6",  # friendly pinky errors
        "notice-message": "#C8C8D0",  # soft light gray notices
        "prompt-question": "bold #E6E6F0",  # near-white question
        "prompt-marker": "bold #00E5FF",  # neon cyan marker
    } | getattr(__import__("__main__"), "__styles__", {}))


def _render(fault, style):
    if not fault.options.get("colorful", False):
        return Text(str(fault.message))
    return Text(str(fault.message), palette()[style])


def _emit(fault, sink):
    # plain output bypasses rich so tabs and control characters survive
    if fault.options.get("colorful", False):
        sink.print(fault, soft_wrap=True, crop=False, highlight=False)
    else:
        sink.file.write(f"{fault.message}\n")
        sink.file.flush()


class CommandException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, "error-message")

    def __trigger__(self) -> None:
        _emit(self, self.options.get("console", console))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParserInitializationError(CommandException): ...
class OptionValueRequiredError(CommandException): ...
class InvalidNumberError(CommandException): ...


class CommandNotice:
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, "notice-message")

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"

    def __trigger__(self) -> None:
        _emit(self, self.options.get("console", outlet))

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownCommandNotice(CommandNotice): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace() before triggering.

    typical options
    - console (rich Console to print on), colorful, tool, code.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "ParserInitializationError",
    "OptionValueRequiredError",
    "InvalidNumberError",
    "CommandNotice",
    "UnknownCommandNotice",
    "trigger",
)
