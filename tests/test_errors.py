import pytest

from tenpin.errors import (
    ErrorKind,
    MalformedRollError,
    ScoreTooLarge,
    ScoringError,
    SpareOutOfPlace,
    StrikeOutOfPlace,
)


@pytest.mark.parametrize(
    "error_cls,kind,message",
    [
        (SpareOutOfPlace, ErrorKind.SPARE_OUT_OF_PLACE, "Encountered a / in an unexpected spot"),
        (StrikeOutOfPlace, ErrorKind.STRIKE_OUT_OF_PLACE, "Encountered a X in an unexpected spot"),
        (ScoreTooLarge, ErrorKind.SCORE_TOO_LARGE, "Encountered a frame with too big of a score"),
    ],
)
def test_error_kinds(error_cls, kind, message):
    error = error_cls(position=3)
    assert isinstance(error, ScoringError)
    assert isinstance(error, ValueError)
    assert error.kind is kind
    assert error.position == 3
    assert str(error) == message
    assert repr(error) == f"{error_cls.__name__}(position=3)"


def test_malformed_roll_is_not_a_scoring_error():
    error = MalformedRollError("11")
    assert not isinstance(error, ScoringError)
    assert error.token == "11"
    assert "11" in str(error)
