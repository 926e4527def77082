"""
Clinter command layer: register commands and dispatch process arguments.

What this module provides
- Command: an immutable record pairing a dispatch pattern, its option
  declarations and an action callback.
- Parser: the registry. It snapshots the raw arguments at construction, keeps
  commands in registration order and, on parse(), runs the matching command.

Dispatch
- the first whitespace-delimited token of a pattern is its dispatch key; the
  first registered command whose key equals the first raw argument wins.
- no match prints a single notice on the output console and returns.
- a match runs clinter.pipeline over the remaining arguments; a fault is
  printed on the error console and the action is skipped, otherwise the
  action is called once with the option-values mapping.
- nothing here raises for user input and nothing calls sys.exit().

Quick start
    from clinter import Parser

    parser = Parser("tool")

    @parser.register("build <path>", [{"name": "out", "type": "string", "alias": "o"}])
    def build(values):
        print(values)

    if __name__ == "__main__":
        parser.parse()
"""
import os.path
import sys
from collections.abc import Iterable

from rich.console import Console

from .faults import *
from .faults import console, outlet
from .options import option
from .pipeline import parse_arguments
from .prompt import ask
from .utils import *


class Command:
    """
    a registered command.

    properties
    - pattern: the registration pattern (e.g., "build <path>").
    - key: first whitespace-delimited token of the pattern.
    - options: tuple of Option declarations.
    - action: callable receiving the option-values mapping.
    """

    pattern = mirror("pattern")
    options = mirror("options")
    action = mirror("action")

    def __init__(self, pattern, options=(), action=Unset, /):
        if not isinstance(pattern, str):
            raise TypeError("command 'pattern' must be a string")
        if not pattern.strip():
            raise ValueError("command 'pattern' must be a non-empty string")
        if isinstance(options, str | bytes) or not isinstance(options, Iterable):
            raise TypeError("command 'options' must be an iterable of option declarations")
        if not callable(action):
            raise TypeError("command 'action' must be callable")

        self._pattern = pattern
        self._options = tuple(map(option, options))
        self._action = action

    @property
    def key(self):
        return self._pattern.split(maxsplit=1)[0]

    def __rich_repr__(self):
        yield "pattern", self._pattern
        yield "options", self._options
        yield "action", getattr(self._action, "__qualname__", self._action)

    def __repr__(self):
        return "command(%s)" % ", ".join("%s=%r" % item for item in self.__rich_repr__())


def _console(stream, *, stderr=False):
    if stream is Unset:
        return console if stderr else outlet
    if isinstance(stream, Console):
        return stream
    if not hasattr(stream, "write"):
        raise TypeError("parser output streams must be writable text streams or consoles")
    return Console(file=stream)


class Parser:
    """
    registry and dispatcher for commands.

    parameters
    - name: str, the tool name (kept for introspection).
    - args: Iterable[str] | Unset, raw arguments without program name; defaults
      to sys.argv[1:]. a tuple snapshot is taken immediately.
    - bin: str | Unset, binary name used in the unknown-command notice;
      defaults to __prog__ in __main__, else the basename of sys.argv[0].
    - stdin: text stream for ask() (defaults to sys.stdin when asking).
    - stdout / stderr: text streams or rich Consoles for notices and errors.
    - colorful: bool, style output with the palette.
    """

    name = mirror("name")
    bin = mirror("bin")
    args = mirror("args")
    commands = mirror("commands")
    colorful = mirror("colorful")

    def __init__(
            self,
            name,
            /,
            args=Unset,
            *,
            bin=Unset,
            stdin=Unset,
            stdout=Unset,
            stderr=Unset,
            colorful=Unset
    ):
        if not isinstance(name, str):
            raise TypeError("parser 'name' must be a string")
        if not name.strip():
            raise ValueError("parser 'name' must be a non-empty string")

        args = coalesce(args, sys.argv[1:])
        if isinstance(args, str) or not isinstance(args, Iterable):
            raise TypeError("parser 'args' must be an iterable of strings")
        args = tuple(args)
        if not all(isinstance(arg, str) for arg in args):
            raise TypeError("parser 'args' must be an iterable of strings")

        bin = coalesce(bin, getattr(__import__("__main__"), "__prog__", os.path.basename(sys.argv[0])))
        if not isinstance(bin, str):
            raise TypeError("parser 'bin' must be a string")

        self._name = name
        self._args = args
        self._bin = bin
        self._stdin = stdin
        self._stdout = _console(stdout)
        self._stderr = _console(stderr, stderr=True)
        self._colorful = bool(coalesce(colorful, False))
        self._commands = []
        self._fallback = Unset

    def register(self, pattern, options=(), action=Unset, /):
        """
        register a command and return the parser (chainable).

        when action is omitted a decorator is returned instead; it registers the
        decorated callable and hands it back unchanged:

            @parser.register("clean", [{"name": "force", "type": "boolean", "alias": "f"}])
            def clean(values): ...

        option aliases are not validated here, only when the command is dispatched.
        """
        if action is Unset:
            @rename("register")
            def wrapper(action, /):
                self.register(pattern, options, action)
                return action
            return wrapper

        self._commands.append(Command(pattern, options, action))
        return self

    command = register

    def fallback(self, fallback, /):
        """
        register a one-time handler that receives every fault instead of the consoles.

        returns the handler, so it can be used as a decorator.
        """
        if not callable(fallback):
            raise TypeError("parser fallback must be callable")
        if self._fallback is not Unset:
            raise TypeError("parser fallback cannot be overridden")
        self._fallback = fallback
        return fallback

    def trigger(self, fault, /, **options):
        """
        merge the parser runtime options into a fault and surface it.

        notices go to the output console, exceptions to the error console.
        """
        sink = self._stdout if isinstance(fault, CommandNotice) else self._stderr
        options = {"console": sink, "colorful": self._colorful, "tool": self} | options
        if self._fallback is not Unset:
            self._fallback(fault.__replace__(**options))
        else:
            trigger(fault, **options)

    def lookup(self, token, /):
        """
        return the first registered command whose dispatch key equals token, or None.
        """
        for command in self._commands:
            if command.key == token:
                return command
        return None

    def dispatch(self, args, /):
        """
        dispatch a raw argument sequence (first item is the command token).
        """
        args = list(args)
        token = args[0] if args else ""

        if (command := self.lookup(token)) is None:
            self.trigger(UnknownCommandNotice(
                "Unknown command '%s'.\n\nExecute '%s help' to view all available commands." % (token, self._bin),
                code=FaultCode.UNKNOWN_COMMAND,
                token=token,
            ))
            return

        result = parse_arguments(args[1:], command.options)
        if isinstance(result, CommandException):
            self.trigger(result, command=command)
            return

        command.action(result)

    def parse(self):
        """
        dispatch the argument snapshot taken at construction.
        """
        self.dispatch(self._args)

    def ask(self, question, callback=Unset, /):
        """
        prompt a question on the parser streams; see clinter.prompt.ask().
        """
        return ask(question, callback, stdin=self._stdin, console=self._stdout, colorful=self._colorful)

    def __rich_repr__(self):
        yield "name", self._name
        yield "bin", self._bin
        yield "args", self._args
        yield "commands", tuple(self._commands)

    def __repr__(self):
        return "parser(%s)" % ", ".join("%s=%r" % item for item in self.__rich_repr__())


__all__ = (
    "Command",
    "Parser",
)
