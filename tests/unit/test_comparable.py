"""Tests for ordering predicates on string subjects."""

import pytest

from vouch import StringSubject, UsageError, assert_that, expect_failure


def test_ordering_predicates_pass():
    assert_that("b").is_at_least("a")
    assert_that("b").is_at_least("b")
    assert_that("b").is_at_most("c")
    assert_that("b").is_greater_than("a")
    assert_that("b").is_less_than("c")


@pytest.mark.parametrize(
    "call, key",
    [
        (lambda s: s.is_at_least("c"), "expected to be at least"),
        (lambda s: s.is_at_most("a"), "expected to be at most"),
        (lambda s: s.is_greater_than("b"), "expected to be greater than"),
        (lambda s: s.is_less_than("b"), "expected to be less than"),
    ],
)
def test_ordering_predicates_fail(call, key):
    failure = expect_failure(lambda w: call(w.that("b")))

    assert failure.keys == [key, "but was"]
    assert failure.value_of("but was") == "b"


def test_none_actual_uses_dedicated_fact():
    failure = expect_failure(lambda w: w.about(StringSubject).that(None).is_greater_than("a"))

    assert failure.keys == ["expected a value that is greater than", "but was"]


class TestRanges:
    def test_is_in_range_is_closed(self):
        assert_that("a").is_in_range("a", "c")
        assert_that("c").is_in_range("a", "c")

    def test_is_in_range_fails(self):
        failure = expect_failure(lambda w: w.that("d").is_in_range("a", "c"))

        assert failure.keys == ["expected to be in range", "but was"]
        assert failure.value_of("expected to be in range") == "[a..c]"

    def test_is_in_open_range_excludes_bounds(self):
        assert_that("b").is_in_open_range("a", "c")

        failure = expect_failure(lambda w: w.that("a").is_in_open_range("a", "c"))
        assert failure.value_of("expected to be in range") == "(a..c)"

    def test_inverted_bounds_are_usage_error(self):
        with pytest.raises(UsageError, match="must not be greater than"):
            assert_that("b").is_in_range("c", "a")

    def test_none_actual(self):
        failure = expect_failure(lambda w: w.about(StringSubject).that(None).is_in_range("a", "c"))

        assert failure.keys == ["expected a value in range", "but was"]


class TestEquivalentAccordingToCompareTo:
    def test_warns_for_strings(self):
        with pytest.warns(DeprecationWarning, match="is_equal_to"):
            assert_that("abc").is_equivalent_according_to_compare_to("abc")

    def test_fails_when_sort_order_differs(self):
        with pytest.warns(DeprecationWarning):
            failure = expect_failure(lambda w: w.that("abc").is_equivalent_according_to_compare_to("abd"))

        assert failure.value_of("expected value that sorts equal to") == "abd"
