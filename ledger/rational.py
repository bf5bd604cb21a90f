import re
import sys
from fractions import Fraction
from typing import Any


MIXED_NUMBER = re.compile(r"(-)?(?:(\d+)(?: (\d+/\d+))?|(\d+/\d+))", re.ASCII)

# Amounts have no magnitude limit; CPython caps int<->str conversion at 4300 digits by default
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


class MalformedLiteral(ValueError):
    def __init__(
        self,
        literal: Any,
        reason: str = "not a valid rational literal",
        location: tuple = (),
    ):
        self.literal = literal
        self.reason = reason
        self.location = location
        where = f" at {'.'.join(str(p) for p in location)}" if location else ""
        super().__init__(f"{reason}{where}: {literal!r}")


def _parse_component(text: str, literal: str) -> Fraction:
    head, _, tail = text.partition("/")
    numerator = int(head)
    denominator = int(tail) if tail else 1
    if denominator == 0:
        raise MalformedLiteral(literal, "zero denominator")
    return Fraction(numerator, denominator)


def parse_rational(literal: Any) -> Fraction:
    """
    Convert an integer or a text literal into an exact Fraction.

    Accepted text forms: "3", "-3", "5/9", "-5/9", "3 1/2", "-3 1/2".
    The sign applies to the whole value, so "-3 1/2" is -(3 + 1/2).
    """
    # bool is an int subclass but never an amount
    if isinstance(literal, bool):
        raise MalformedLiteral(literal, "expected a number or string")
    if isinstance(literal, int):
        return Fraction(literal)
    if not isinstance(literal, str):
        raise MalformedLiteral(literal, "expected a number or string")

    # fullmatch: "$" alone would let a trailing newline through
    match = MIXED_NUMBER.fullmatch(literal)
    if match is None:
        raise MalformedLiteral(literal)

    negative, whole, remainder, fraction = match.groups()
    result = Fraction(0)
    for part in (whole, remainder, fraction):
        if part is not None:
            result += _parse_component(part, literal)
    return -result if negative else result


def format_rational(value: Fraction) -> str:
    return f"{value.numerator}/{value.denominator}"
