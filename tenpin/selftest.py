"""
selftest.py

Reference roll sequences and a console harness that checks the scorer against
them.
"""

import json

import click

from .errors import MalformedRollError, ScoreTooLarge, SpareOutOfPlace, StrikeOutOfPlace
from .rolls import Pins, SPARE
from .scoring import score

REFERENCE_CASES = [
    # empty input does not blow up
    ([], []),
    (["1"], [None]),
    (["1", "2"], [3]),
    # full game without marks
    (
        ["1", "8", "3", "3", "0", "0", "7", "2", "6", "1"]
        + ["0", "5", "1", "0", "2", "4", "7", "1", "1", "2"],
        [9, 6, 0, 9, 7, 5, 1, 6, 8, 3],
    ),
    # perfect game
    (["X"] * 12, [30] * 10),
    # nearly perfect game
    (["X"] * 11 + ["9"], [30] * 9 + [29]),
    # nearly perfect game, spare edition
    (["X"] * 10 + ["9", "/"], [30] * 8 + [29, 20]),
    # a strike without two following rolls leaves two frames open
    (["1", "2", "X", "3"], [3, None, None]),
    (["2", "3", "6", "/"], [5, None]),
    (["1", "/", "5", "3"], [15, 8]),
    (["1", "/", "X"], [20, None]),
    (["/"], SpareOutOfPlace),
    (["1", "X"], StrikeOutOfPlace),
    (["9", "9"], ScoreTooLarge),
    (["3", "/", "/"], SpareOutOfPlace),
    # multi-digit pin counts are rejected by the parser
    (["3", "/", "11"], MalformedRollError),
    ([Pins(3), SPARE, Pins(11)], ScoreTooLarge),
]


def _as_json(rolls):
    return json.dumps([str(roll) for roll in rolls])


def run_case(rolls, expected, echo=click.echo):
    """Score one sequence and report whether the outcome matches ``expected``.

    ``expected`` is either a list of frame results or the error class the
    sequence should be rejected with.
    """
    expects_error = isinstance(expected, type) and issubclass(expected, Exception)

    echo(f"input is {_as_json(rolls)}")
    echo(f"expected output is {expected.__name__ if expects_error else json.dumps(expected)}")

    try:
        output = score(rolls)
    except ValueError as e:
        echo(f"output is {e}")
        passed = expects_error and isinstance(e, expected)
    else:
        echo(f"output is {json.dumps(output)}")
        passed = not expects_error and output == expected

    echo(f"passed: {passed}")
    echo("-" * 15)
    return passed


def run_selftest(cases=REFERENCE_CASES, echo=click.echo):
    results = [run_case(rolls, expected, echo=echo) for rolls, expected in cases]
    echo(f"{sum(results)}/{len(results)} cases passed")
    return all(results)
