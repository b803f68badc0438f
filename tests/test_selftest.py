from tenpin.errors import SpareOutOfPlace
from tenpin.selftest import REFERENCE_CASES, run_case, run_selftest


def test_reference_cases_pass():
    lines = []
    assert run_selftest(echo=lines.append)
    assert lines[-1] == f"{len(REFERENCE_CASES)}/{len(REFERENCE_CASES)} cases passed"


def test_run_case_output():
    lines = []
    assert run_case(["1", "/", "X"], [20, None], echo=lines.append)
    assert lines == [
        'input is ["1", "/", "X"]',
        "expected output is [20, null]",
        "output is [20, null]",
        "passed: True",
        "-" * 15,
    ]


def test_run_case_reports_errors():
    lines = []
    assert run_case(["/"], SpareOutOfPlace, echo=lines.append)
    assert lines[1] == "expected output is SpareOutOfPlace"
    assert lines[2] == "output is Encountered a / in an unexpected spot"


def test_run_case_mismatch():
    lines = []
    assert not run_case(["1", "2"], [4], echo=lines.append)
    assert not run_case(["1", "X"], [1], echo=lines.append)
    assert not run_case(["1", "2"], SpareOutOfPlace, echo=lines.append)
    assert lines.count("passed: False") == 3


def test_failing_case_fails_selftest():
    lines = []
    assert not run_selftest(cases=[(["1", "2"], [3]), (["9", "9"], [18])], echo=lines.append)
    assert lines[-1] == "1/2 cases passed"
