"""
Bound targets: what a matched spelling does.

A target decides whether it accepts the remainder left by the walk and, if it
does, runs against the parser that matched it.

- Action: zero-argument callback; the token must match the spelling exactly.
- Store: an Action that writes a value into the parser's namespace.
- Remainder: takes whatever follows the spelling in the same token, verbatim
  ("-fhello" -> "hello", "-o=out" -> "=out").
- Adjacent: takes the next token instead ("-n 3"), optionally converted.

A single spelling is either a bare flag or a value-taking option, never both:
Action/Store/Adjacent require an empty remainder, Remainder a non-empty one.
"""
from abc import ABC, abstractmethod

from .utils import Unset


class Target(ABC):
    """Interface shared by every bound target."""
    __slots__ = ()

    @abstractmethod
    def accepts(self, remainder, /):
        """Return whether this target can run with the given remainder."""

    @abstractmethod
    def invoke(self, parser, remainder, /):
        """Run the target; `parser` gives access to the token stream and namespace."""


class Action(Target):
    __slots__ = ("callback",)

    def __init__(self, callback, /):
        if not callable(callback):
            raise TypeError("Action() argument must be callable")
        self.callback = callback

    def accepts(self, remainder, /):
        return not remainder

    def invoke(self, parser, remainder, /):
        self.callback()

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.callback)


class Store(Action):
    """
    Set `dest` to `value` in the parser's namespace when matched.

    The namespace lives on the parser and is returned by Parser.parse(), so
    callers read results from there instead of module-level flags.
    """
    __slots__ = ("dest", "value")

    def __init__(self, dest, /, value=True):
        if not isinstance(dest, str):
            raise TypeError("Store() first argument must be a string")
        elif not dest:
            raise ValueError("Store() first argument must be a non-empty string")
        self.dest = dest
        self.value = value

    def invoke(self, parser, remainder, /):
        parser._namespace[self.dest] = self.value

    def __repr__(self):
        return "%s(%r, value=%r)" % (type(self).__name__, self.dest, self.value)


class Remainder(Target):
    __slots__ = ("handler",)

    def __init__(self, handler, /):
        if not callable(handler):
            raise TypeError("Remainder() argument must be callable")
        self.handler = handler

    def accepts(self, remainder, /):
        return bool(remainder)

    def invoke(self, parser, remainder, /):
        self.handler(remainder)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.handler)


class Adjacent(Target):
    """
    Hand the token after the matched one to `handler`.

    The value is read through Parser.next_value(type), which advances the
    stream; the consumed token is not parsed as an option afterwards.
    """
    __slots__ = ("handler", "type")

    def __init__(self, handler, /, type=Unset):
        if not callable(handler):
            raise TypeError("Adjacent() first argument must be callable")
        elif type is not Unset and not callable(type):
            raise TypeError("Adjacent() 'type' must be callable")
        self.handler = handler
        self.type = type

    def accepts(self, remainder, /):
        return not remainder

    def invoke(self, parser, remainder, /):
        if self.type is Unset:
            self.handler(parser.next_token())
        else:
            self.handler(parser.next_value(self.type))

    def __repr__(self):
        return "%s(%r, type=%r)" % (type(self).__name__, self.handler, self.type)


__all__ = (
    "Target",
    "Action",
    "Store",
    "Remainder",
    "Adjacent",
)
