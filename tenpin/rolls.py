"""
rolls.py

Roll tokens and the notation they are parsed from.
"""

import string
from collections import namedtuple
from enum import Enum

from .errors import MalformedRollError
from .rules import tenpin_rules


class Mark(Enum):
    SPARE = "/"
    STRIKE = "X"

    def __str__(self):
        return self.value


class Pins(namedtuple("pins", ["count"])):
    """A roll that is neither a strike nor a spare."""

    __slots__ = ()

    def __new__(cls, count):
        # no upper bound here, oversized counts are caught by the scorer
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise MalformedRollError(count)
        return super().__new__(cls, count)

    def __str__(self):
        return str(self.count)


SPARE = Mark.SPARE
STRIKE = Mark.STRIKE


def parse_roll(token, ruleset=tenpin_rules):
    """Convert a single notation token to a roll.

    Rolls that are already typed are returned as they are.
    """
    if isinstance(token, (Mark, Pins)):
        return token

    if not isinstance(token, str):
        raise MalformedRollError(token)

    for mark in Mark:
        if token == mark.value:
            return mark

    if len(token) != 1 or token not in string.digits:
        raise MalformedRollError(token)

    count = int(token)
    if count >= ruleset.num_pins:
        raise MalformedRollError(token)

    return Pins(count)


def parse_rolls(tokens, ruleset=tenpin_rules):
    return tuple(parse_roll(token, ruleset) for token in tokens)


def format_roll(roll):
    return str(roll)
