"""
Tests for the double-ended run-length encoder.
"""

import itertools
import logging

import pytest

from runiter import (
    BackwardIterationError,
    RunLengthEncode,
    RunPair,
    SequenceProducer,
    SupportsEq,
    run_length_encode,
)

from conftest import FlakySource, PartialEq


def drain_alternating(rle, forward=True):
    """Pull alternately from the front and back until a pull is exhausted."""
    observed = []
    while True:
        pair = rle.pull_front() if forward else rle.pull_back()
        if pair is None:
            return observed
        observed.append(pair)
        forward = not forward


class TestForward:
    """Tests for encoding from the front."""

    def test_empty_source(self):
        """Test that an empty source is exhausted immediately."""
        rle = run_length_encode("")
        assert rle.pull_front() is None
        with pytest.raises(StopIteration):
            next(rle)

    def test_sorted_str(self):
        """Test counting chars in a sorted string."""
        observed = run_length_encode("122333444455555").collect()
        expected = [(1, "1"), (2, "2"), (3, "3"), (4, "4"), (5, "5")]
        assert observed == expected

    def test_unsorted_str(self):
        """Test that non-adjacent repeats are separate runs."""
        observed = run_length_encode("501hexdead").collect()
        expected = [(1, c) for c in "501hexdead"]
        assert observed == expected

    def test_yields_run_pairs(self):
        """Test that pairs are RunPair named tuples."""
        pair = next(run_length_encode("aab"))
        assert isinstance(pair, RunPair)
        assert pair.count == 2
        assert pair.item == "a"

    def test_extra_calls_continue_to_yield_none(self):
        """Test that exhaustion is sticky."""
        rle = run_length_encode("5")
        for i in range(100):
            if i == 0:
                assert rle.pull_front() is not None
            else:
                assert rle.pull_front() is None

    def test_first_element_is_representative(self, tagged_runs):
        """Test that front pulls surface the first element of each run."""
        pairs = run_length_encode(tagged_runs).collect()
        assert len(pairs) == 10
        for count, item in pairs:
            assert count == 10
            assert item.tag == 0

    def test_infinite_source(self):
        """Test that a front-only infinite source is encoded lazily."""
        rle = run_length_encode(itertools.cycle("aab"))
        observed = [next(rle) for _ in range(4)]
        assert observed == [(2, "a"), (1, "b"), (2, "a"), (1, "b")]

    def test_forward_only_source_rejects_back_pull(self):
        """Test that pulling a plain iterator from the back raises."""
        rle = run_length_encode(iter("aab"))
        with pytest.raises(BackwardIterationError):
            rle.next_back()
        # The failed pull leaves the front untouched.
        assert rle.collect() == [(2, "a"), (1, "b")]


class TestBackward:
    """Tests for encoding from the back."""

    def test_empty_source(self):
        """Test that an empty source is exhausted immediately from the back."""
        rle = run_length_encode([])
        assert rle.pull_back() is None
        assert rle.pull_front() is None

    def test_sorted_str(self):
        """Test that back pulls yield runs in reverse order."""
        observed = run_length_encode("122333444455555").collect_back()
        expected = [(5, "5"), (4, "4"), (3, "3"), (2, "2"), (1, "1")]
        assert observed == expected

    def test_reversed_builtin(self):
        """Test that reversed() drives the back cursor."""
        observed = list(reversed(run_length_encode("aabccc")))
        assert observed == [(3, "c"), (1, "b"), (2, "a")]

    def test_last_element_is_representative(self, tagged_runs):
        """Test that back pulls surface the last element of each run."""
        for count, item in run_length_encode(tagged_runs).rev():
            assert count == 10
            assert item.tag == 9

    def test_single_element_then_front_is_exhausted(self):
        """Test that a single element is emitted once, from either end."""
        rle = run_length_encode("5")
        assert rle.pull_back() == (1, "5")
        assert rle.pull_front() is None
        assert rle.pull_back() is None


class TestAlternating:
    """Tests for interleaved front and back pulls."""

    def test_starting_forward(self):
        """Test alternating pulls starting from the front."""
        rle = run_length_encode("122333444455555")
        observed = drain_alternating(rle, forward=True)
        expected = [(1, "1"), (5, "5"), (2, "2"), (4, "4"), (3, "3")]
        assert observed == expected

    def test_starting_backward(self):
        """Test alternating pulls starting from the back."""
        rle = run_length_encode("122333444455555")
        observed = drain_alternating(rle, forward=False)
        expected = [(5, "5"), (1, "1"), (4, "4"), (2, "2"), (3, "3")]
        assert observed == expected

    def test_representative_alternates(self, tagged_runs):
        """Test first/last representatives when alternating ends."""
        rle = run_length_encode(tagged_runs)
        forward = True
        seen = 0
        while True:
            pair = rle.pull_front() if forward else rle.pull_back()
            if pair is None:
                break
            count, item = pair
            assert count == 10
            assert item.tag == (0 if forward else 9)
            seen += 1
            forward = not forward
        assert seen == 10

    def test_exhaustion_is_sticky_for_both_ends(self):
        """Test that a drained encoder stays empty from both ends."""
        rle = run_length_encode("aabbb")
        drain_alternating(rle)
        for _ in range(10):
            assert rle.pull_front() is None
            assert rle.pull_back() is None


class TestMeetingInTheMiddle:
    """Tests for reconciling pending runs once the source runs dry."""

    def make_items(self):
        return [
            PartialEq("x", "x0"),
            PartialEq("b", "first"),
            PartialEq("b", "middle"),
            PartialEq("b", "last"),
            PartialEq("y", "y0"),
        ]

    def test_merge_on_front_pull_uses_front_representative(self):
        """Test a merge completed by a front pull."""
        rle = run_length_encode(self.make_items())
        assert next(rle).item.tag == "x0"
        assert rle.next_back().item.tag == "y0"
        count, item = next(rle)
        assert count == 3
        assert item.tag == "first"
        assert rle.pull_back() is None

    def test_merge_on_back_pull_uses_back_representative(self):
        """Test a merge completed by a back pull."""
        rle = run_length_encode(self.make_items())
        next(rle)
        rle.next_back()
        count, item = rle.next_back()
        assert count == 3
        assert item.tag == "last"
        assert rle.pull_front() is None

    def test_different_pending_runs_are_emitted_separately(self):
        """Test that unequal pending runs are not merged."""
        rle = run_length_encode("abc")
        assert next(rle) == (1, "a")
        assert rle.next_back() == (1, "c")
        assert next(rle) == (1, "b")
        assert rle.pull_back() is None

    def test_back_pending_drained_by_front_pull(self):
        """Test that the front delivers the back's pending tail."""
        rle = run_length_encode("ab")
        assert rle.next_back() == (1, "b")
        assert next(rle) == (1, "a")
        assert rle.pull_front() is None

    def test_front_merges_back_pending(self):
        """Test a front pull that finishes a run started from the back."""
        items = [PartialEq("a", 0), PartialEq("a", 1), PartialEq("b", 2)]
        rle = run_length_encode(items)
        assert rle.next_back().item.tag == 2
        count, item = next(rle)
        assert count == 2
        assert item.tag == 0

    def test_merge_is_logged(self, caplog):
        """Test that merging pending runs is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="runiter.rle"):
            drain_alternating(run_length_encode("aaabbbbccc"))
        assert any("Merged" in r.getMessage() for r in caplog.records)


class TestTerminalOperations:
    """Tests for folding and searching run pairs."""

    def test_fold(self):
        """Test that counts fold to the source length."""
        rle = run_length_encode("122333444455555")
        assert rle.fold(0, lambda acc, pair: acc + pair.count) == 15

    def test_longest_run(self):
        """Test finding the longest run."""
        rle = run_length_encode("1223336666666666444455555")
        assert rle.max(key=lambda pair: pair.count) == (10, "6")

    def test_count_runs(self):
        """Test counting runs."""
        assert run_length_encode("aabbbcd").count() == 4


class TestConstruction:
    """Tests for wrapping sources directly."""

    def test_wraps_producer(self):
        """Test building an encoder from a producer."""
        rle = RunLengthEncode(SequenceProducer([1, 1, 2]))
        assert rle.collect() == [(2, 1), (1, 2)]

    def test_from_double_ended_iter(self):
        """Test the run_length_encode method on iterators."""
        from runiter import into_de_iter

        rle = into_de_iter("aAbB").map(str.lower).run_length_encode()
        assert rle.collect() == [(2, "a"), (2, "b")]

    def test_repr_shows_pending_state(self):
        """Test that repr exposes pending runs."""
        rle = run_length_encode("aab")
        next(rle)
        assert "front=_PendingRun(item='b', count=1)" in repr(rle)
        assert "back=None" in repr(rle)


class TestFusing:
    """Tests for encoding sources that resume after exhaustion."""

    def test_empty_resuming_source_stays_exhausted(self):
        """Test that a source resuming after exhaustion is ignored."""
        source = FlakySource()
        rle = RunLengthEncode(source)
        for _ in range(10):
            assert rle.pull_front() is None
            assert rle.pull_back() is None
        assert source.calls == 1

    def test_pending_run_emitted_once_then_exhausted(self):
        """Test that the last run is not extended by resumed elements."""
        source = FlakySource("aab")
        rle = RunLengthEncode(source)
        assert rle.collect() == [(2, "a"), (1, "b")]
        for _ in range(10):
            assert rle.pull_front() is None
            assert rle.pull_back() is None
        assert source.calls == 4


class TestElementCapability:
    """Tests for the element type bound."""

    def test_encoder_elements_support_eq(self):
        """Test that the encoder's element type is bound to SupportsEq."""
        (param,) = RunLengthEncode.__type_params__
        assert param.__bound__ is SupportsEq

    def test_entry_point_elements_support_eq(self):
        """Test that run_length_encode's element type is bound to SupportsEq."""
        (param,) = run_length_encode.__type_params__
        assert param.__bound__ is SupportsEq
