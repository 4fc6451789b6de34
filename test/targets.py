# python
"""
Bound target tests (Action, Store, Remainder, Adjacent).

Scope
- Validate which remainders each target accepts.
- Validate what each target receives when invoked.
- Validate constructor guards.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from trieparse import Parser, Target, Action, Store, Remainder, Adjacent


class TestAction(TestCase):
    """Behavioral tests for zero-argument actions."""

    def testAcceptsOnlyEmptyRemainder(self):
        action = Action(lambda: None)
        self.assertTrue(action.accepts(""))
        self.assertFalse(action.accepts("x"))

    def testInvokeCallsCallback(self):
        calls = []
        Action(lambda: calls.append(True)).invoke(Parser("demo"), "")
        self.assertEqual(calls, [True])

    def testRejectsNonCallable(self):
        with self.assertRaises(TypeError):
            Action("not callable")

    def testIsATarget(self):
        self.assertIsInstance(Action(print), Target)


class TestStore(TestCase):
    """Behavioral tests for namespace-writing flags."""

    def testWritesIntoParserNamespace(self):
        parser = Parser("demo")
        Store("debug").invoke(parser, "")
        Store("level", 3).invoke(parser, "")
        self.assertEqual(dict(parser.namespace), {"debug": True, "level": 3})

    def testBehavesAsAction(self):
        store = Store("debug")
        self.assertIsInstance(store, Action)
        self.assertTrue(store.accepts(""))
        self.assertFalse(store.accepts("=1"))

    def testDestinationMustBeNonEmptyString(self):
        with self.assertRaises(TypeError):
            Store(1)
        with self.assertRaises(ValueError):
            Store("")


class TestRemainder(TestCase):
    """Behavioral tests for embedded-suffix handlers."""

    def testAcceptsOnlyNonEmptyRemainder(self):
        remainder = Remainder(print)
        self.assertFalse(remainder.accepts(""))
        self.assertTrue(remainder.accepts("x"))

    def testReceivesSuffixVerbatim(self):
        received = []
        target = Remainder(received.append)
        for suffix in ("hello", "=value", " padded ", "-dashed"):
            target.invoke(Parser("demo"), suffix)
        self.assertEqual(received, ["hello", "=value", " padded ", "-dashed"])

    def testRejectsNonCallable(self):
        with self.assertRaises(TypeError):
            Remainder(None)


class TestAdjacent(TestCase):
    """Behavioral tests for next-token handlers."""

    def testAcceptsOnlyEmptyRemainder(self):
        adjacent = Adjacent(print)
        self.assertTrue(adjacent.accepts(""))
        self.assertFalse(adjacent.accepts("3"))

    def testConsumesNextToken(self):
        parser = Parser("demo")
        parser.init(["-o", "out.txt"])
        received = []
        Adjacent(received.append).invoke(parser, "")
        self.assertEqual(received, ["out.txt"])
        self.assertFalse(parser.has_more_tokens())

    def testConvertsNextToken(self):
        parser = Parser("demo")
        parser.init(["-n", "42"])
        received = []
        Adjacent(received.append, type=int).invoke(parser, "")
        self.assertEqual(received, [42])

    def testRejectsNonCallables(self):
        with self.assertRaises(TypeError):
            Adjacent(None)
        with self.assertRaises(TypeError):
            Adjacent(print, type="int")


if __name__ == "__main__":
    unittest.main()
