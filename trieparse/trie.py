"""
Option trie: character nodes, prefix walk and insertion.

Every registered spelling is a path from the root, one node per character,
with edges chosen by charmap.ctoi() (so matching ignores ASCII case). The node
where a spelling ends carries it as `terminal`; alias group members share one
`target`.

walk() does two jobs in a single descent: it finds the deepest node the input
reaches (prefix matching, the rest of the input is the remainder) and it
remembers the deepest terminal passed on the way, which the parser offers as
a "did you mean" hint when the match fails.
"""
from typing import NamedTuple

from .charmap import ctoi, BUCKETS
from .faults import EmptySpellingError, MultipleDefinitionError


class Node:
    """
    One character position along one or more registered spellings.

    - children: BUCKETS slots, each None or an owned child Node.
    - terminal: the full spelling that ends exactly here, or None.
    - target: the bound target shared by the spelling's alias group, or None.
    """
    __slots__ = ("children", "terminal", "target")

    def __init__(self):
        self.children = [None] * BUCKETS
        self.terminal = None
        self.target = None

    def __repr__(self):
        return "<%s terminal=%r>" % (type(self).__name__, self.terminal)


class Cursor(NamedTuple):
    """Result of one walk: node reached, unconsumed input and deepest terminal passed."""
    node: Node
    remainder: str
    hint: str | None


def walk(root, input, /):
    """
    Descend from `root` along `input` for as long as edges exist.

    The hint starts empty on every call and is updated each time the newly
    reached node is a terminal, including the last node reached.
    """
    node = root
    hint = None
    for index, char in enumerate(input):
        if (child := node.children[ctoi(char)]) is None:
            return Cursor(node, input[index:], hint)
        node = child
        if node.terminal is not None:
            hint = node.terminal
    return Cursor(node, "", hint)


def insert(root, spelling, /):
    """
    Register `spelling` under `root` and return its terminal node.

    Raises
    - TypeError when spelling is not a string.
    - EmptySpellingError when spelling is empty (it would end on the root).
    - MultipleDefinitionError when the spelling (or a case variant of it)
      is already registered. The check runs before any node is created.
    """
    if not isinstance(spelling, str):
        raise TypeError("insert() argument must be a string")
    elif not spelling:
        raise EmptySpellingError("option spelling must be a non-empty string", spelling)

    node, remainder, _ = walk(root, spelling)

    # A collision needs the whole spelling to already be a path.
    if not remainder and node.terminal is not None:
        raise MultipleDefinitionError(
            "multiple definition of %r (already registered as %r)" % (spelling, node.terminal),
            spelling
        )

    for char in remainder:
        node.children[ctoi(char)] = child = Node()
        node = child

    node.terminal = spelling
    return node


def lookup(root, spelling, /):
    """Return the node `spelling` is registered on, or None."""
    node, remainder, _ = walk(root, spelling)
    if remainder or node is root or node.terminal is None:
        return None
    return node


def spellings(root, /):
    """Yield every registered spelling, depth first in bucket order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.terminal is not None:
            yield node.terminal
        stack.extend(child for child in reversed(node.children) if child is not None)


__all__ = (
    "Node",
    "Cursor",
    "walk",
    "insert",
    "lookup",
    "spellings",
)
