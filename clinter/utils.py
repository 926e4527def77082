"""
Clinter utilities (internal helpers).

Overview
- UnsetType / Unset
  • singleton sentinel for "not provided", kept apart from None so that
    callers can still pass falsy values on purpose.

- coalesce(value, default=None)
  • turn Unset into a concrete default; every other value passes through.

- rename(callable, name) / @rename("name")
  • give generated callables (decorators, readers) stable names for tracebacks.

- mirror("attr")
  • read-only property over a private backing field (self._attr) that hands
    out copies of containers, so registered state cannot be mutated from outside.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> class Box:
    ...     items = mirror("items")
    ...     def __init__(self): self._items = [1, 2]
    >>> Box().items
    [1, 2]
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    sentinel type for values that were not provided.

    - bool(Unset) is False, but Unset is neither None nor 0.
    - repr(Unset) is "Unset".
    - UnsetType() always returns the same instance; subclassing is refused.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    return `default` when `object` is Unset, otherwise `object` unchanged.

    falsy values (None, 0, "", ()) are kept as they are.
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    set __name__/__qualname__ on a callable, or build a decorator that does it.

    forms
    - rename(callable, name) -> callable
    - rename(name)           -> decorator
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _immortalize(object):
    """
    copy containers so callers never hold the backing objects.

    tuples stay tuples (registered commands and options are stored as tuples),
    other sequences become lists, mappings become dicts and sets become sets.
    strings and scalars are returned as-is.
    """
    if isinstance(object, tuple):
        return tuple(map(_immortalize, object))
    elif isinstance(object, Sequence) and not isinstance(object, str):
        return list(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set):
        return set(map(_immortalize, object))
    return object


def mirror(name, /):
    """
    read-only property returning a copy of self._<name>.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _immortalize(getattr(self, "_" + name))

    return property(getter)


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
)
