"""
trieparse utilities (internal helpers shared by the parser and its faults).

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “not provided”, distinct from None.
  • Falsey, printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; None and other falsey values pass through.

- ordinal(number)
  • Human-friendly 1-based position labels (“first”, “second”, ..., “11th”)
    used by fault messages so users see where a bad token sits.

Stability
- Names listed in __all__ are re-exported by the package; the rest is internal.
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Sentinel type for parameters that were not provided.

    Used where None is a legitimate value (a fault without a hint, a missing
    terminal) but the API still needs to tell “omitted” apart.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

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

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return `default` when `object` is Unset, otherwise `object` unchanged.

    Examples
    - coalesce("prog", "fallback") -> "prog"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return default if object is Unset else object


@functools.lru_cache(maxsize=None, typed=True)
def ordinal(number, /):
    """
    Return an ordinal label for a 1-based token position.

    - 1..10 are spelled out ("first"…"tenth").
    - Larger numbers use numeric suffixes, with 11th/12th/13th handled.
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError("ordinal() argument must be an integer")
    elif number < 1:
        raise ValueError("ordinal() argument must be a positive integer")

    try:
        return (
            "first", "second", "third", "fourth", "fifth",
            "sixth", "seventh", "eighth", "ninth", "tenth",
        )[number - 1]
    except IndexError:
        pass

    if 10 < number % 100 < 20:
        return f"{number}th"
    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


Unset = UnsetType()


__all__ = (
    "coalesce",
    "ordinal",
    "UnsetType",
    "Unset",
)
