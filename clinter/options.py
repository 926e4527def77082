r"""
Clinter option declarations.

Overview
- OptionKind: the declared value type of an option.
  • STRING  → value-bearing, delivers the next raw token as str.
  • BOOLEAN → presence-only, delivers True.
  • NUMBER  → value-bearing, delivers the next raw token as int (or float).

- Option: one named flag a command accepts (name, kind, optional alias).
- option(declaration): coerce an Option or a {name, type, alias} mapping.

Validation
- name must be a non-empty string, type must be a known kind and alias, when
  given, must be a string. All of these raise immediately.
- the alias length is not checked here: a multi-character alias is
  reported by the pipeline when its command is dispatched.

Quick example:
    >>> from clinter.options import Option, option
    >>> Option("force", type="boolean", alias="f").flag
    '--force'
    >>> option({"name": "out", "type": "string"}).valued
    True
"""
import functools
import operator
from collections.abc import Mapping
from enum import StrEnum

from .utils import *


class OptionKind(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"

    @property
    def valued(self):
        """whether an option of this kind consumes the following token."""
        return self is not OptionKind.BOOLEAN


class Option:
    """
    declaration of a single named option.

    properties
    - name: full option name, matched as "--<name>".
    - type: OptionKind.
    - alias: single-character short name matched as "-<alias>", or None.
    - flag / short: the long and short spellings.
    - valued: whether the option expects a value token.
    """

    name = mirror("name")
    type = mirror("type")
    alias = mirror("alias")

    def __init__(self, name, /, type=OptionKind.STRING, alias=Unset):
        if not isinstance(name, str):
            raise TypeError("option 'name' must be a string")
        if not name.strip():
            raise ValueError("option 'name' must be a non-empty string")
        try:
            kind = OptionKind(type)
        except ValueError:
            raise ValueError(f"option 'type' must be one of {', '.join(map(repr, map(str, OptionKind)))}") from None
        if not isinstance(alias, str | Unset):
            raise TypeError("option 'alias' must be a string")

        self._name = name
        self._type = kind
        self._alias = coalesce(alias)

    @property
    def flag(self):
        return "--" + self._name

    @property
    def short(self):
        return None if self._alias is None else "-" + self._alias

    @property
    def valued(self):
        return self._type.valued

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return (self._name, self._type, self._alias) == (other._name, other._type, other._alias)

    def __hash__(self):
        return hash((self._name, self._type, self._alias))

    def __rich_repr__(self):
        yield "name", self._name
        yield "type", str(self._type)
        if self._alias is not None:
            yield "alias", self._alias

    def __repr__(self):
        return f"option({", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))})"


def option(declaration, /):
    """
    coerce a declaration into an Option.

    accepted shapes
    - Option: returned as-is.
    - Mapping: keys "name" (required), "type" (defaults to "string"), "alias".
    """
    if isinstance(declaration, Option):
        return declaration
    if isinstance(declaration, Mapping):
        if "name" not in declaration:
            raise TypeError("option() mapping must have a 'name' key")
        if unknown := set(declaration) - {"name", "type", "alias"}:
            raise TypeError(f"option() mapping has unknown keys: {", ".join(map(repr, sorted(unknown)))}")
        return Option(
            declaration["name"],
            declaration.get("type", OptionKind.STRING),
            declaration.get("alias", Unset)
        )
    raise TypeError("option() argument must be an option or a mapping")


__all__ = (
    "OptionKind",
    "Option",
    "option",
)
