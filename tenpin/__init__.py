try:
    from ._version import version as __version__
except ImportError:  # not installed
    __version__ = "unknown"

from .errors import (  # noqa: F401
    ErrorKind,
    MalformedRollError,
    ScoreTooLarge,
    ScoringError,
    SpareOutOfPlace,
    StrikeOutOfPlace,
)
from .rolls import Mark, Pins, SPARE, STRIKE, format_roll, parse_roll, parse_rolls  # noqa: F401
from .rules import AVAILABLE_RULESETS, Ruleset, tenpin_rules  # noqa: F401
from .scoring import INCOMPLETE, score, spare_score, strike_score  # noqa: F401
