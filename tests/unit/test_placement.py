"""
Unit tests for mine placement strategies and layout parsing.
"""
import pytest
import numpy as np
from mineboard import (
    FixedLayout,
    InvalidConfiguration,
    MineBoard,
    PredicatePlacement,
    RandomPlacement,
    parse_layout,
)


# ============================================================================
# Layout Parsing Tests
# ============================================================================

class TestParseLayout:
    """Test text layout parsing."""

    def test_parse_dimensions_and_mines(self) -> None:
        width, height, mines = parse_layout(
            """
            _ x _
            _ _ _
            x _ _
            _ _ _
            """
        )
        assert (width, height) == (3, 4)
        assert mines == {(1, 0), (0, 2)}

    def test_blank_lines_ignored(self) -> None:
        width, height, mines = parse_layout("\n\n_ x\n\n x _\n")
        assert (width, height) == (2, 2)
        assert mines == {(1, 0), (0, 1)}

    def test_empty_layout_raises(self) -> None:
        with pytest.raises(InvalidConfiguration, match="empty"):
            parse_layout("   \n  ")

    def test_ragged_rows_raise(self) -> None:
        with pytest.raises(InvalidConfiguration, match="row 1"):
            parse_layout("_ _ _\n_ _\n")


# ============================================================================
# Random Placement Tests
# ============================================================================

class TestRandomPlacement:
    """Test uniform random placement."""

    def test_mask_has_requested_mines(self) -> None:
        mask = RandomPlacement(10, rng=3).mine_mask(6, 4, (0, 0))
        assert mask.shape == (4, 6)
        assert mask.dtype == bool
        assert mask.sum() == 10

    def test_safe_position_never_drawn(self) -> None:
        placement = RandomPlacement(8, rng=5)
        for _ in range(50):
            assert not placement.mine_mask(3, 3, (2, 1))[1, 2]

    def test_negative_count_raises(self) -> None:
        with pytest.raises(InvalidConfiguration):
            RandomPlacement(-1)

    @pytest.mark.parametrize("count", [2.5, "3", True])
    def test_non_integer_count_fails_construction(self, count) -> None:
        """A fractional or non-numeric count is rejected before any click."""
        with pytest.raises(InvalidConfiguration, match="must be an integer"):
            MineBoard(5, 5, RandomPlacement(count))

    def test_numpy_integer_count_accepted(self) -> None:
        """numpy integer counts are stored as plain ints."""
        placement = RandomPlacement(np.int64(3), rng=0)
        assert type(placement.mine_count) is int
        board = MineBoard(4, 4, placement)
        board.click(0, 0)
        assert board.mine_count == 3

    def test_too_many_for_board_raises(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            MineBoard(2, 2, RandomPlacement(4))

    def test_accepts_generator(self) -> None:
        rng = np.random.default_rng(11)
        assert RandomPlacement(1, rng=rng).rng is rng


# ============================================================================
# Deterministic Placement Tests
# ============================================================================

class TestFixedLayout:
    """Test pre-drawn layouts."""

    def test_mask_matches_positions(self) -> None:
        mask = FixedLayout([(0, 1), (2, 0)]).mine_mask(3, 2, (1, 1))
        np.testing.assert_array_equal(
            mask, [[False, False, True], [True, False, False]]
        )

    def test_from_text_records_dimensions(self) -> None:
        layout = FixedLayout.from_text("_ _\n_ x\n_ _")
        assert (layout.width, layout.height) == (2, 3)
        assert layout.mines == {(1, 1)}

    def test_dimension_mismatch_raises(self) -> None:
        layout = FixedLayout.from_text("_ _\n_ x")
        with pytest.raises(InvalidConfiguration, match="wide"):
            MineBoard(3, 2, layout)
        with pytest.raises(InvalidConfiguration, match="tall"):
            MineBoard(2, 3, layout)

    def test_mine_outside_board_raises(self) -> None:
        with pytest.raises(InvalidConfiguration, match="outside"):
            MineBoard(3, 3, FixedLayout([(3, 0)]))

    def test_layout_boards_are_reproducible(self) -> None:
        text = "_ _ _\n_ x _\n_ _ _"
        first = MineBoard.from_layout(text).click(0, 0)
        second = MineBoard.from_layout(text).click(0, 0)
        assert first == second


class TestPredicatePlacement:
    """Test predicate-driven layouts."""

    def test_predicate_queried_once_per_cell(self) -> None:
        calls = []

        def predicate(x: int, y: int) -> bool:
            calls.append((x, y))
            return False

        PredicatePlacement(predicate).mine_mask(4, 3, (0, 0))
        assert sorted(calls) == sorted((x, y) for x in range(4) for y in range(3))

    def test_truthy_results_become_mines(self) -> None:
        mask = PredicatePlacement(lambda x, y: (x + y) % 2).mine_mask(2, 2, (0, 0))
        np.testing.assert_array_equal(mask, [[False, True], [True, False]])
