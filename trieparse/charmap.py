"""
Character index function for the option trie.

The trie branches on small dense integers rather than on characters. ctoi()
folds every character into one of BUCKETS slots:

- printable ASCII [32, 126] is packed onto [0, 68];
- ASCII letters ignore case ('T' and 't' share a slot);
- the upper-case block is squeezed out, so code points at or above 'A' are
  shifted down by 26 after folding ('[' -> 33, 'a' -> 39, '~' -> 68);
- anything outside [32, 126] lands in slot 0.

Slot 0 is shared between the space character and every non-printable or
non-ASCII character. This is a known collision: a spelling containing a tab
and one containing a space at the same position walk the same edge.
"""

_FIRST = 32   # ' '
_LAST = 126   # '~'
_SHIFT = 26   # width of the folded upper-case block


def ctoi(char, /):
    """
    Map a single character onto its trie bucket.

    Total over characters: never fails for a one-character string.

    Raises
    - TypeError when `char` is not a string of length one.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise TypeError("ctoi() argument must be a single character")

    code = ord(char)
    if not _FIRST <= code <= _LAST:
        return 0
    if code >= ord("A"):
        if code <= ord("Z"):
            code |= 0x20
        code -= _SHIFT
    return code - _FIRST


# Everything past 7-bit ASCII is bucket 0, so the ASCII range is exhaustive.
BUCKETS = max(map(ctoi, map(chr, range(0x80)))) + 1


__all__ = (
    "ctoi",
    "BUCKETS",
)
