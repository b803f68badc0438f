"""
scoring.py

Turns a roll sequence into per-frame scores.

Every pass through the frame loop starts at the first roll of a frame. Strikes
and spares are resolved by looking ahead at the rolls that follow them, which
structurally belong to later frames. Validation happens while scoring, so the
first invalid roll aborts the whole computation.
"""

from loguru import logger

from .errors import ScoreTooLarge, SpareOutOfPlace, StrikeOutOfPlace
from .rolls import Mark, parse_rolls
from .rules import tenpin_rules

# marks a frame that cannot be resolved with the rolls seen so far
INCOMPLETE = None


def strike_score(rolls, cursor, ruleset=tenpin_rules):
    """Score the strike at ``rolls[cursor]`` from the two rolls after it.

    Returns ``INCOMPLETE`` if fewer than two rolls follow the strike.
    """
    if cursor + 2 >= len(rolls):
        return INCOMPLETE

    num_pins = ruleset.num_pins
    frame_score = num_pins

    next_roll = rolls[cursor + 1]
    if next_roll is Mark.SPARE:
        raise SpareOutOfPlace(position=cursor + 1)
    elif next_roll is Mark.STRIKE:
        frame_score = 2 * num_pins
    else:
        frame_score += next_roll.count

    after_next = rolls[cursor + 2]
    if after_next is Mark.SPARE:
        # XX/ is not a valid sequence
        if frame_score == 2 * num_pins:
            raise SpareOutOfPlace(position=cursor + 2)
        frame_score = 2 * num_pins
    elif after_next is Mark.STRIKE:
        # only a strike can follow a strike without a frame in between
        if frame_score != 2 * num_pins:
            raise StrikeOutOfPlace(position=cursor + 2)
        frame_score = 3 * num_pins
    else:
        frame_score += after_next.count

    if frame_score > ruleset.max_strike_score:
        raise ScoreTooLarge(position=cursor)

    return frame_score


def spare_score(rolls, cursor, ruleset=tenpin_rules):
    """Score the spare at ``rolls[cursor]`` from the roll after it.

    Returns ``INCOMPLETE`` if nothing follows the spare.
    """
    if cursor + 1 >= len(rolls):
        return INCOMPLETE

    num_pins = ruleset.num_pins

    next_roll = rolls[cursor + 1]
    if next_roll is Mark.SPARE:
        raise SpareOutOfPlace(position=cursor + 1)

    if next_roll is Mark.STRIKE:
        return 2 * num_pins

    frame_score = num_pins + next_roll.count
    if frame_score > ruleset.max_spare_score:
        raise ScoreTooLarge(position=cursor + 1)

    return frame_score


def open_frame_score(first_roll, second_roll, cursor, ruleset=tenpin_rules):
    frame_score = first_roll.count + second_roll.count
    if frame_score > ruleset.max_open_score:
        raise ScoreTooLarge(position=cursor + 1)
    return frame_score


def score(rolls, ruleset=tenpin_rules):
    """Compute the score of each frame in a roll sequence.

    Rolls may be notation strings (``"0"`` to ``"9"``, ``"/"``, ``"X"``) or
    already parsed rolls. The result holds one entry per frame, at most
    ``ruleset.num_frames`` of them, where ``INCOMPLETE`` marks frames that need
    more rolls to be resolved.

    Raises a subclass of ``ScoringError`` for the first invalid roll found.
    """
    rolls = parse_rolls(rolls, ruleset)

    frame_scores = []
    cursor = 0

    while cursor < len(rolls) and len(frame_scores) < ruleset.num_frames:
        frame_number = len(frame_scores) + 1
        roll = rolls[cursor]

        if roll is Mark.STRIKE:
            frame_score = strike_score(rolls, cursor, ruleset)
            logger.debug("Frame {}: strike at roll {} -> {}", frame_number, cursor, frame_score)
            frame_scores.append(frame_score)
            cursor += 1
            continue

        if roll is Mark.SPARE:
            raise SpareOutOfPlace(position=cursor)

        if cursor + 1 >= len(rolls):
            logger.debug("Frame {}: waiting for second roll", frame_number)
            frame_scores.append(INCOMPLETE)
            cursor += 1
            continue

        next_roll = rolls[cursor + 1]

        if next_roll is Mark.SPARE:
            frame_score = spare_score(rolls, cursor + 1, ruleset)
            logger.debug("Frame {}: spare at roll {} -> {}", frame_number, cursor + 1, frame_score)
        elif next_roll is Mark.STRIKE:
            raise StrikeOutOfPlace(position=cursor + 1)
        else:
            frame_score = open_frame_score(roll, next_roll, cursor, ruleset)
            logger.debug("Frame {}: open frame -> {}", frame_number, frame_score)

        frame_scores.append(frame_score)
        cursor += 2

    return frame_scores
