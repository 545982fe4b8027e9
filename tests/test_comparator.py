"""
Unit tests for the verdict comparator.
"""

import dataclasses

import pytest

from memobench.benchmark import FasterFunction, Verdict, compare

TIMING_PAIRS = [
    (0.0, 0.0),
    (0.0, 1.5),
    (5.0, 5.0),
    (10.0, 3.4),
    (0.25, 0.125),
    (1e-6, 2e-6),
    (1234.5, 1234.0),
]


class TestCompare:
    """Test the three verdict outcomes."""

    def test_equal_timings_no_diff(self):
        """Equal timings should report no difference and zero margin."""
        verdict = compare(5.0, 5.0)
        assert verdict.faster_function is FasterFunction.NO_DIFF
        assert verdict.faster_by == 0

    def test_slower_function_means_memo_faster(self):
        """A slower direct call should favour memo by the difference."""
        verdict = compare(10.0, 3.4)
        assert verdict.faster_function is FasterFunction.MEMO
        assert verdict.faster_by == pytest.approx(6.6)

    def test_slower_memo_means_function_faster(self):
        """A slower memoized call should favour the function by the difference."""
        verdict = compare(3.4, 10.0)
        assert verdict.faster_function is FasterFunction.FUNCTION
        assert verdict.faster_by == pytest.approx(6.6)

    def test_zero_timings(self):
        """Two zero timings are a tie."""
        assert compare(0.0, 0.0) == Verdict(FasterFunction.NO_DIFF, 0.0)

    @pytest.mark.parametrize(("a", "b"), TIMING_PAIRS)
    def test_swapping_arguments_flips_label(self, a, b):
        """Swapping arguments should flip the label and keep the margin."""
        forward = compare(a, b)
        backward = compare(b, a)

        if a == b:
            assert forward.faster_function is FasterFunction.NO_DIFF
            assert backward.faster_function is FasterFunction.NO_DIFF
        else:
            assert {forward.faster_function, backward.faster_function} == {
                FasterFunction.FUNCTION,
                FasterFunction.MEMO,
            }
        assert forward.faster_by == backward.faster_by
        assert forward.faster_by == pytest.approx(abs(a - b))

    @pytest.mark.parametrize(("a", "b"), TIMING_PAIRS)
    def test_margin_never_negative(self, a, b):
        """fasterBy should never be negative."""
        assert compare(a, b).faster_by >= 0


class TestVerdict:
    """Test the Verdict value object."""

    def test_to_dict_uses_report_keys(self):
        """to_dict should use the fasterFunction/fasterBy report keys."""
        assert compare(5.0, 5.0).to_dict() == {"fasterFunction": "no diff", "fasterBy": 0.0}
        assert compare(3.0, 1.0).to_dict() == {"fasterFunction": "memo", "fasterBy": 2.0}
        assert compare(1.0, 3.0).to_dict() == {"fasterFunction": "function", "fasterBy": 2.0}

    def test_verdict_is_immutable(self):
        """Verdict fields cannot be reassigned."""
        verdict = compare(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            verdict.faster_by = 0.0

    def test_verdicts_compare_by_value(self):
        """Verdicts with the same fields are equal."""
        assert compare(4.0, 1.0) == Verdict(FasterFunction.MEMO, 3.0)

    def test_label_values(self):
        """Enum values match the reported strings."""
        assert FasterFunction.FUNCTION.value == "function"
        assert FasterFunction.MEMO.value == "memo"
        assert FasterFunction.NO_DIFF.value == "no diff"
