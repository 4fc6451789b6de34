"""
trieparse parser engine: register spellings, walk tokens, dispatch targets.

What this module provides
- Parser: owns the option trie and every bound target; registers spellings,
  keeps the token stream and turns failed walks into reported faults.
- Registration: fluent builder returned by Parser.add(); collects an alias
  group and binds one target to all of its spellings.
- Outcome: what Parser.parse() hands back (namespace + faults).

Quick start
    from trieparse import Parser

    parser = Parser("demo", shell=True)
    parser.add("-test").alias("-t").store("test")
    parser.add("-f").handle(print)                # "-fhello" prints "hello"
    parser.add("-n").follow(print, type=int)      # "-n 3" prints 3

    outcome = parser.parse(["-t", "-fhello", "-n", "3", "-x"])
    outcome.namespace["test"]                     # True
    outcome.faults                                # (InvalidOptionError(...),)

Matching rules
- Matching ignores ASCII case; registered spellings are kept as written.
- A token matches when its walk ends on a registered spelling whose target
  accepts the remainder: empty for flags and adjacent-value options, non-empty
  for remainder handlers.
- A failed match reports "invalid option", suggesting the deepest registered
  spelling passed on the way ("-tx" -> did you mean '-t'?).

Fault flow
- Registration errors (duplicate spelling, second bind) raise immediately.
- Parse faults are reported per token and never stop the loop: printed on the
  stderr console in shell mode and collected otherwise. In strict mode they
  are surfaced together after the loop as a ParserExit (raised, or printed
  once in shell mode).
"""
import copy
import os.path
import shlex
import sys
from collections.abc import Iterable
from types import MappingProxyType
from typing import NamedTuple

from .faults import *
from .targets import Target, Action, Store, Remainder, Adjacent
from .trie import Node, walk, insert, lookup, spellings
from .utils import *


class Outcome(NamedTuple):
    """Result of one Parser.parse() run."""
    namespace: MappingProxyType
    faults: tuple[ParserException, ...]


class Registration:
    """
    Alias group under construction.

    Parser.add() inserts the first spelling and returns this builder; alias()
    inserts more spellings right away; bind() (or one of its shortcuts) sets
    the single shared target on every node of the group. Spellings aliased
    after bind() pick the bound target up as they are inserted.
    """
    __slots__ = ("_parser", "_nodes", "_target")

    def __init__(self, parser, node, /):
        self._parser = parser
        self._nodes = [node]
        self._target = None

    @property
    def spellings(self):
        return tuple(node.terminal for node in self._nodes)

    @property
    def target(self):
        return self._target

    def alias(self, spelling, /):
        """Register another spelling for the same target."""
        node = insert(self._parser._root, spelling)
        self._nodes.append(node)
        if self._target is not None:
            node.target = self._target
        return self

    def bind(self, target, /):
        """
        Bind the group's target. A plain callable becomes an Action.

        Raises
        - MultipleBindError when the group is already bound (the first target stays).
        - TypeError when target is neither a Target nor a callable.
        """
        if self._target is not None:
            raise MultipleBindError(
                "multiple bind on %s" % ", ".join(map(repr, self.spellings)),
                self._nodes[0].terminal
            )
        if not isinstance(target, Target):
            if not callable(target):
                raise TypeError("bind() argument must be a target or a callable")
            target = Action(target)

        self._target = self._parser._adopt(target)
        for node in self._nodes:
            node.target = target
        return self

    def handle(self, handler, /):
        """Bind a handler for the text embedded after the spelling ("-fvalue")."""
        return self.bind(Remainder(handler))

    def follow(self, handler, /, type=Unset):
        """Bind a handler for the token following the spelling ("-f value")."""
        return self.bind(Adjacent(handler, type))

    def store(self, dest, /, value=True):
        """Bind a flag writing `value` into the parser namespace under `dest`."""
        return self.bind(Store(dest, value))

    def __repr__(self):
        return "<%s %s -> %r>" % (type(self).__name__, ", ".join(map(repr, self.spellings)), self._target)


class Parser:
    """
    Trie-backed option parser.

    Lifecycle
    - Register every spelling first (add/alias/bind, flag, gets).
    - Then parse a token list: parse(prompt), or init(prompt) followed by parse().
    - The trie is not locked; do not register while a parse is running.

    Options
    - name: program name used in fault headers (defaults to argv[0]'s basename).
    - shell: print faults on the stderr console as they are reported.
    - fancy, colorful: rendering options forwarded to faults.
    - strict: after the loop, surface all faults at once as a ParserExit.
    """

    def __init__(self, name=Unset, /, *, shell=False, fancy=False, colorful=False, strict=False):
        if not isinstance(name := coalesce(name, os.path.basename(sys.argv[0]) or "trieparse"), str):
            raise TypeError("Parser() argument must be a string")
        self._name = name
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)
        self._strict = bool(strict)

        self._root = Node()
        self._targets = []
        self._fallback = Unset

        self._tokens = None
        self._index = 0
        self._cursor = None
        self._namespace = {}
        self._faults = []

    name = property(lambda self: self._name)
    shell = property(lambda self: self._shell)
    fancy = property(lambda self: self._fancy)
    colorful = property(lambda self: self._colorful)
    strict = property(lambda self: self._strict)

    @property
    def targets(self):
        """Every bound target, once each regardless of how many spellings share it."""
        return tuple(self._targets)

    @property
    def namespace(self):
        return MappingProxyType(self._namespace)

    @property
    def faults(self):
        return tuple(self._faults)

    # ── registration ──────────────────────────────────────────────────────

    def add(self, spelling, /):
        """Register `spelling` and return the builder for its alias group."""
        return Registration(self, insert(self._root, spelling))

    def flag(self, spelling, dest, /, value=True):
        """Shortcut for add(spelling).store(dest, value)."""
        return self.add(spelling).store(dest, value)

    def gets(self, spelling, handler, /):
        """Shortcut for add(spelling).handle(handler)."""
        return self.add(spelling).handle(handler)

    def _adopt(self, target):
        self._targets.append(target)
        return target

    def fallback(self, fallback, /):
        """
        Replace the default fault reporter.

        The callable receives every reported fault (already carrying the
        parser's rendering options) instead of the console. Usable as a
        decorator.
        """
        if not callable(fallback):
            raise TypeError("fallback() argument must be callable")
        self._fallback = fallback
        return fallback

    # ── token stream ──────────────────────────────────────────────────────

    def init(self, prompt=Unset, /, *, ignore_first=False):
        """
        Load the token stream.

        - Unset: sys.argv[1:].
        - str: split with shlex.split.
        - Iterable[str]: used as-is (tokens are not trimmed).
        ignore_first drops token 0 of an explicit prompt (e.g. a full argv).
        """
        if prompt is Unset:
            tokens = sys.argv[1:]
        elif isinstance(prompt, str):
            tokens = shlex.split(prompt)
        elif isinstance(prompt, Iterable):
            tokens = list(prompt)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("init() argument must be a string or an iterable of strings")
        else:
            raise TypeError("init() argument must be a string or an iterable of strings")

        if ignore_first and prompt is not Unset:
            tokens = tokens[1:]

        self._tokens = tokens
        self._index = 0

    def has_more_tokens(self):
        """Whether a token follows the one being parsed."""
        return self._tokens is not None and self._index + 1 < len(self._tokens)

    def next_token(self):
        """
        Consume and return the token after the current one.

        Raises
        - MissingValueError when the stream is exhausted.
        """
        if not self.has_more_tokens():
            spelling = self._spelling()
            raise MissingValueError(
                "option %r%s requires a value" % (spelling, self._where()),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                hint="pass the value as the next argument (for example: %s <value>)" % spelling,
                token=self._current(),
                index=self._position()
            )
        self._index += 1
        return self._tokens[self._index]

    def next_value(self, type=str, /):
        """
        Consume the next token and convert it with `type`.

        Raises
        - MissingValueError when the stream is exhausted.
        - WrongValueError when `type` rejects the token (ValueError/TypeError).
        """
        token = self.next_token()
        try:
            return type(token)
        except (ValueError, TypeError):
            spelling = self._spelling()
            raise WrongValueError(
                "option %r got a wrong value %r" % (spelling, token),
                title="wrong value",
                code=FaultCode.WRONG_VALUE,
                hint="expected a value accepted by %s" % getattr(type, "__name__", repr(type)),
                token=token,
                index=self._position()
            ) from None

    def _current(self):
        if self._tokens is not None and self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _position(self):
        if self._tokens is not None and self._index < len(self._tokens):
            return self._index + 1
        return None

    def _where(self):
        if (position := self._position()) is None:
            return ""
        return " at %s position" % ordinal(position)

    def _spelling(self):
        if self._cursor is not None and self._cursor.node.terminal is not None:
            return self._cursor.node.terminal
        return self._current()

    # ── dispatch ──────────────────────────────────────────────────────────

    def last_match_hint(self):
        """
        The deepest registered spelling passed by the most recent walk.

        After a successful match this is the matched spelling; None before
        the first walk or when the walk passed no registered spelling.
        """
        return self._cursor.hint if self._cursor is not None else None

    def parse_one(self, token, /):
        """
        Walk one token through the trie and run its target.

        Returns
        - the Target that ran.

        Raises
        - InvalidOptionError when the token does not resolve; the hint names
          the deepest registered spelling passed, if any.
        - MissingValueError when a remainder handler matched without text
          after its spelling (or an adjacent handler found no next token).
        - WrongValueError from adjacent handlers with a converter.
        """
        if not isinstance(token, str):
            raise TypeError("parse_one() argument must be a string")

        self._cursor = cursor = walk(self._root, token)
        node, remainder, hint = cursor

        target = node.target if node.terminal is not None else None
        if target is not None and target.accepts(remainder):
            target.invoke(self, remainder)
            return target

        if isinstance(target, Remainder):
            raise MissingValueError(
                "option %r%s requires a value" % (node.terminal, self._where()),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                hint="append the value to the option (for example: %s<value>)" % node.terminal,
                token=token,
                index=self._position(),
                suggestion=hint
            )
        raise InvalidOptionError(
            "invalid option %r%s" % (token, self._where()),
            title="invalid option",
            code=FaultCode.INVALID_OPTION,
            hint="did you mean %r?" % hint if hint is not None else None,
            token=token,
            index=self._position(),
            suggestion=hint
        )

    def _report(self, fault):
        fault = copy.replace(
            fault,
            parser=self,
            shell=self._shell,
            fancy=self._fancy,
            colorful=self._colorful,
            soft=True
        )
        self._faults.append(fault)
        if self._fallback:
            self._fallback(fault)
        elif self._shell and not self._strict:
            trigger(fault)
        return fault

    def parse(self, prompt=Unset, /):
        """
        Parse every token of the stream.

        - prompt is loaded through init() when given, or when init() was never
          called (then sys.argv[1:] is used).
        - each token goes through parse_one(); a ParserException is reported
          and the loop moves on to the next token. Other exceptions propagate.
        - tokens consumed by adjacent handlers are skipped.

        Returns
        - Outcome(namespace, faults).

        Raises
        - ParserExit in strict mode when faults were reported (printed and
          followed by sys.exit(1) in shell mode instead).
        """
        if prompt is not Unset or self._tokens is None:
            self.init(prompt)

        self._index = 0
        self._namespace.clear()
        self._faults.clear()

        while self._index < len(self._tokens):
            try:
                self.parse_one(self._tokens[self._index])
            except ParserException as fault:
                self._report(fault)
            self._index += 1

        if self._strict and self._faults:
            trigger(
                ParserExit(self._faults),
                parser=self,
                shell=self._shell,
                fancy=self._fancy,
                colorful=self._colorful
            )

        return Outcome(MappingProxyType(dict(self._namespace)), tuple(self._faults))

    # ── introspection ─────────────────────────────────────────────────────

    def __contains__(self, spelling):
        return isinstance(spelling, str) and lookup(self._root, spelling) is not None

    def __iter__(self):
        return spellings(self._root)

    def __repr__(self):
        return "<%s %r spellings=%d targets=%d>" % (
            type(self).__name__, self._name, sum(1 for _ in self), len(self._targets)
        )

    def __rich_repr__(self):
        yield "name", self._name
        yield "spellings", tuple(self)
        yield "targets", tuple(self._targets)
        yield "shell", self._shell, False
        yield "fancy", self._fancy, False
        yield "colorful", self._colorful, False
        yield "strict", self._strict, False


__all__ = (
    "Outcome",
    "Registration",
    "Parser",
)
