import pytest

from rule_grammar.exceptions import (
    format_ids,
    RuleGrammarError,
    ParseError,
    UnknownReferenceError,
    UndefinedRootError,
    StalledClosureError,
    ChunkLengthError,
)


@pytest.mark.parametrize(
    "ids,exp",
    [
        ([], ""),
        ([3], "3"),
        ([11, 8], "8 and 11"),
        (set([11, 0, 8]), "0, 8 and 11"),
    ],
)
def test_format_ids(ids, exp):
    assert format_ids(ids) == exp


@pytest.mark.parametrize(
    "exception,exp_str",
    [
        (
            ParseError("0 1 2", "expected '<id>: <rule>'", 3),
            "Could not parse '0 1 2' (line 3): expected '<id>: <rule>'.",
        ),
        (
            ParseError("x: 1", "'x' is not a valid rule id"),
            "Could not parse 'x: 1': 'x' is not a valid rule id.",
        ),
        (
            UnknownReferenceError({0: set([9])}),
            "Rule 0 refers to undefined rule 9.",
        ),
        (
            UnknownReferenceError({0: set([9, 10]), 2: set([9])}),
            "Rules 0 and 2 refer to undefined rules 9 and 10.",
        ),
        (
            UndefinedRootError(0),
            "Root rule 0 is not defined.",
        ),
        (
            StalledClosureError([1]),
            "Closure stalled with rule 1 unresolved.",
        ),
        (
            StalledClosureError(set([11, 0, 8]), 0),
            "Closure stalled with rules 0, 8 and 11 unresolved while matching "
            "against rule 0.",
        ),
        (
            ChunkLengthError(set([1, 2])),
            "Repeated rules match strings of length 1 or 2 but must all match "
            "strings of one non-zero length.",
        ),
        (
            ChunkLengthError(set()),
            "Repeated rules must match at least one string.",
        ),
    ],
)
def test_str_is_explanation_summary(exception, exp_str):
    assert isinstance(exception, RuleGrammarError)
    assert str(exception) == exp_str
    assert exception.explain().strip().replace("\n", " ").startswith(
        exp_str.split()[0]
    )


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        raise ParseError("0 1 2", "expected '<id>: <rule>'")


def test_parse_error_ellipsises_long_lines():
    error = ParseError("0: " + " ".join(["1"] * 100), "too long")
    assert "..." in str(error)
    assert len(str(error)) < 100


def test_stalled_closure_error_sorts_ids():
    assert StalledClosureError(set([11, 0, 8])).stuck == (0, 8, 11)


def test_undefined_root_error_is_unknown_reference_error():
    error = UndefinedRootError(42)
    assert isinstance(error, UnknownReferenceError)
    assert error.root_id == 42
    assert error.missing_ids() == set([42])


def test_unknown_reference_error_missing_ids():
    error = UnknownReferenceError({0: set([9, 10]), 2: set([9])})
    assert error.missing_ids() == set([9, 10])


def test_base_explain_not_implemented():
    with pytest.raises(NotImplementedError):
        RuleGrammarError().explain()
