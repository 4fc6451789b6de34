"""
trieparse faults (registration errors, parse faults) and their rendering.

Scope
- FaultCode: stable numeric identifiers for every issue the parser can raise.
- RegistrationError family: programming errors found while building the trie
  (duplicate spelling, second bind). Raised immediately; callers treat them as
  fatal to startup.
- ParserException family: recoverable faults found while parsing a token
  (invalid option, missing value, wrong value). They carry a message plus
  options and know how to render themselves through rich.
- ParserExit: groups the faults of a strict run.
- trigger(): central entry point to surface a fault with runtime options.

Rendering
- Header "[ prog — code | title ]", a one-sentence message and a "→ hint" line.
- Colors and panel chrome follow the colorful/fancy options; the host can
  override styles via __styles__, codes via __codes__ and the program name
  via __prog__ in __main__.
- In non-shell mode faults are raised; in shell mode they are printed to the
  stderr console.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - registration (2110x): EMPTY_SPELLING, MULTIPLE_DEFINITION, MULTIPLE_BIND
    - parsing (2111x): INVALID_OPTION, MISSING_VALUE, WRONG_VALUE
    """
    # --- registration errors (2110x) ---
    EMPTY_SPELLING      = 21101
    MULTIPLE_DEFINITION = 21102
    MULTIPLE_BIND       = 21103

    # --- parse faults (2111x) ---
    INVALID_OPTION      = 21111
    MISSING_VALUE       = 21112
    WRONG_VALUE         = 21113

    def normalize(self):
        """
        return a host-normalized label for this code.

        the host may provide a __codes__ mapping in __main__ to replace the
        numeric ids; otherwise the value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class RegistrationError(Exception):
    """
    a spelling or target could not be registered.

    attributes
    - spelling: the spelling involved, when there is one.
    - code: the FaultCode of the failure.
    """
    code = Unset

    def __init__(self, message, /, spelling=None):
        super().__init__(message)
        self.message = message
        self.spelling = spelling


class EmptySpellingError(RegistrationError, ValueError):
    code = FaultCode.EMPTY_SPELLING


class MultipleDefinitionError(RegistrationError):
    code = FaultCode.MULTIPLE_DEFINITION


class MultipleBindError(RegistrationError):
    code = FaultCode.MULTIPLE_BIND


def _prog(options):
    main = __import__("__main__")
    try:
        return getattr(main, "__prog__")
    except AttributeError:
        pass
    parser = options.get("parser")
    return getattr(parser, "name", None) or "trieparse"


class ParserException(Exception):
    """
    base type of every recoverable parse fault.

    the message is a short, lowercased sentence; everything else (title, code,
    hint, token, index and the rendering flags) travels in `options`, which is
    read-only and replaced wholesale through copy.replace().
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def token(self):
        return self.options.get("token")

    @property
    def hint(self):
        return self.options.get("hint")

    @property
    def code(self):
        return self.options.get("code")

    @property
    def index(self):
        return self.options.get("index")

    def __str__(self):
        if self.hint:
            return "%s (%s)" % (self.message, self.hint)
        return str(self.message)

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",

            # body
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        code = self.options.get("code")
        header = Text.assemble(
            "[ ",
            text(_prog(self.options), "prog-name"),
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else "?", "code"),
            " | ",
            text(str(self.options.get("title", "error")).title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")

        if not self.hint:
            body = Group(message)
        else:
            body = Group(message, Text.assemble(text(" → ", "hint-arrow"), text(self.hint, "hint")))

        if fancy:
            return Panel(body, title=header, title_align="left")
        return Group(header, body)

    def __trigger__(self):
        if not self.options.get("shell"):
            raise self from None
        console.print(self)
        if self.options.get("soft"):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidOptionError(ParserException):
    """the token does not resolve to a complete, correctly-shaped match."""

    @property
    def suggestion(self):
        """deepest registered spelling passed by the failed walk, or None."""
        return self.options.get("suggestion")


class MissingValueError(InvalidOptionError):
    """a value-taking option matched but no value was available."""


class WrongValueError(ParserException):
    """a value was available but could not be converted."""


class ParserExit(ExceptionGroup[ParserException]):
    """every fault reported by a strict run, surfaced once after the loop."""

    def __new__(cls, exceptions, **options):
        return super().__new__(cls, "bad exit", tuple(exceptions))

    def __init__(self, exceptions, **options):
        super().__init__("bad exit", tuple(exceptions))
        self.options = MappingProxyType(options)

    def __rich__(self):
        renders = [copy.replace(exception, fancy=False) for exception in self.exceptions]
        header = Text.assemble("[ ", _prog(self.options), " — ", "%d invalid option(s)" % len(renders), " ]")
        if self.options.get("fancy"):
            return Panel(Group(*renders), title=header, title_align="left")
        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell"):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.exceptions, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ (see ParserException).
    - options are merged into a copy of the fault before triggering.
    - shell mode prints via the rich console; otherwise the fault is raised.
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
    "RegistrationError",
    "EmptySpellingError",
    "MultipleDefinitionError",
    "MultipleBindError",
    "ParserException",
    "InvalidOptionError",
    "MissingValueError",
    "WrongValueError",
    "ParserExit",
    "console",
    "trigger",
)
