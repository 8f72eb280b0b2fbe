"""Tests for resolution depth arithmetic."""

import pytest

from heritage.resolution import MAX_RESOLUTION_DEPTH, clamp_depth, decrement_depth, is_exhausted


class TestClampDepth:
    """Test clamp_depth."""

    @pytest.mark.parametrize(("depth", "expected"), [(-5, 0), (0, 0), (3, 3), (10, 10), (42, 10)])
    def test_clamps_to_supported_range(self, depth: int, expected: int) -> None:
        assert clamp_depth(depth) == expected

    def test_custom_maximum(self) -> None:
        assert clamp_depth(7, maximum=2) == 2

    def test_custom_maximum_cannot_exceed_hard_cap(self) -> None:
        assert clamp_depth(50, maximum=100) == MAX_RESOLUTION_DEPTH


class TestDecrementDepth:
    """Test decrement_depth."""

    @pytest.mark.parametrize(("depth", "expected"), [(1, 0), (2, 1), (10, 9)])
    def test_decrements_by_one(self, depth: int, expected: int) -> None:
        assert decrement_depth(depth) == expected

    def test_idempotent_at_floor(self) -> None:
        assert decrement_depth(0) == 0
        assert decrement_depth(decrement_depth(0)) == 0

    def test_never_negative(self) -> None:
        assert decrement_depth(-3) == 0

    def test_requested_depth_above_cap_is_capped_first(self) -> None:
        assert decrement_depth(25) == MAX_RESOLUTION_DEPTH - 1

    def test_monotonically_non_increasing(self) -> None:
        depth = MAX_RESOLUTION_DEPTH
        seen = [depth]
        for _ in range(MAX_RESOLUTION_DEPTH + 3):
            depth = decrement_depth(depth)
            seen.append(depth)

        assert seen == sorted(seen, reverse=True)
        assert seen[-1] == 0


def test_is_exhausted() -> None:
    assert is_exhausted(0)
    assert is_exhausted(-1)
    assert not is_exhausted(1)
