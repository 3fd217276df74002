"""Unit tests for step classification."""

from fm_steps.steps import StepKind, classify


def test_comment_id_is_comment():
    """Step id 89 is the comment step."""
    assert classify(89) is StepKind.COMMENT


def test_numeric_string_id():
    """Ids read from XML attributes arrive as strings."""
    assert classify("89") is StepKind.COMMENT
    assert classify(" 89 ") is StepKind.COMMENT


def test_known_and_unknown_ids_are_generic():
    """Anything not in the registry renders as a generic step."""
    for step_id in (1, 22, 75, 79, 86, 182, 99999, -1):
        assert classify(step_id) is StepKind.GENERIC


def test_never_fails_on_garbage():
    """Missing or non-numeric ids fall back to GENERIC instead of raising."""
    for step_id in (None, "", "abc", "8.9", object(), True):
        assert classify(step_id) is StepKind.GENERIC
