"""Unit tests for pastel board and richness rules."""

import random

import pytest
import numpy as np
from pastel.core.board import PastelBoard
from pastel.core.ingredients import Ingredient, SOURCE_INGREDIENTS, validate_ingredients
from pastel.core.validator import (
    is_rich_line,
    is_rich_pastel,
    is_row_rich,
    is_col_rich,
    pastel_signature,
    rich_lines,
)


class TestRichLine:
    """Tests for the single-line rule."""

    def test_same_ingredients(self):
        """Three equal ingredients make a rich line."""
        assert is_rich_line(2, 2, 2)
        assert is_rich_line(1, 1, 1)

    def test_masita_with_matching_pair(self):
        """A masita plus two equal ingredients is rich, wherever it sits."""
        assert is_rich_line(4, 3, 3)
        assert is_rich_line(3, 4, 3)
        assert is_rich_line(3, 3, 4)

    def test_masita_with_different_pair(self):
        """A masita does not help two different ingredients."""
        assert not is_rich_line(4, 3, 2)
        assert not is_rich_line(3, 4, 2)
        assert not is_rich_line(3, 2, 4)

    def test_no_match(self):
        """Three different ingredients are not rich."""
        assert not is_rich_line(1, 2, 3)
        assert not is_rich_line(1, 1, 2)

    def test_first_masita_decides(self):
        """With two masitas only the first one in line order is considered."""
        # Masita first: compares the last two
        assert not is_rich_line(4, 4, 1)
        assert is_rich_line(4, 1, 1)
        # Masita in the middle: compares first and last
        assert is_rich_line(1, 4, 1)
        assert not is_rich_line(1, 4, 4)


class TestRichPastel:
    """Tests for whole-pastel richness."""

    def test_rich_row(self):
        """A single rich row makes the pastel rich."""
        pastel = [2, 2, 2, 1, 3, 1, 3, 1, 3]
        assert is_row_rich(pastel, 0)
        assert is_rich_pastel(pastel)

    def test_rich_column(self):
        """A single rich column makes the pastel rich."""
        pastel = [3, 2, 1, 1, 4, 3, 1, 2, 3]
        assert not any(is_row_rich(pastel, row) for row in range(3))
        assert is_col_rich(pastel, 1)
        assert is_rich_pastel(pastel)

    def test_masita_without_pair(self):
        """A masita between two different ingredients is not enough."""
        pastel = [1, 2, 3, 2, 3, 1, 4, 1, 2]
        assert not is_rich_pastel(pastel)

    def test_poor_pastel(self):
        """No rich row or column means a poor pastel."""
        pastel = [1, 2, 3, 2, 3, 1, 3, 1, 2]
        assert not is_rich_pastel(pastel)
        assert rich_lines(pastel) == []

    def test_rich_lines_lists_rows_then_columns(self):
        """All rich lines are reported, rows first."""
        pastel = [1, 1, 1, 1, 2, 3, 1, 3, 2]
        assert rich_lines(pastel) == [("row", 0), ("col", 0)]

    def test_transpose_symmetry(self):
        """A pastel and its transpose agree on richness."""
        rng = random.Random(42)
        for _ in range(2000):
            tokens = [rng.randint(1, 4) for _ in range(9)]
            board = PastelBoard.from_sequence(tokens)
            assert board.is_rich() == board.transpose().is_rich()


class TestSignature:
    """Tests for pastel signatures."""

    def test_base_ten_digits(self):
        """Cell i contributes its token times 10**i."""
        pastel = [1, 2, 3, 4, 1, 2, 3, 4, 1]
        assert pastel_signature(pastel) == 143214321

    def test_deterministic(self):
        """The same pastel always gets the same signature."""
        pastel = [4, 3, 3, 1, 1, 1, 2, 2, 2]
        assert pastel_signature(pastel) == pastel_signature(list(pastel))

    def test_injective(self):
        """Different pastels never share a signature."""
        rng = random.Random(7)
        seen = {}
        for _ in range(5000):
            tokens = tuple(rng.randint(1, 4) for _ in range(9))
            signature = pastel_signature(tokens)
            assert seen.setdefault(signature, tokens) == tokens

    def test_board_signature_matches(self):
        """Board and list signatures agree."""
        board = PastelBoard.from_string("123412341")
        assert board.signature() == pastel_signature(board.to_sequence())


class TestPastelBoard:
    """Tests for PastelBoard class."""

    def test_from_string_digits_and_symbols(self):
        """Digits and ingredient symbols describe the same board."""
        assert PastelBoard.from_string("111222334") == PastelBoard.from_string("DDDFFFCCM")

    def test_get(self):
        """Cells come back as ingredients."""
        board = PastelBoard.from_string("111222334")
        assert board.get(2, 2) is Ingredient.MASITA
        assert board.get(0, 0) is Ingredient.DULCE

    def test_rows_and_columns(self):
        """Rows and columns are read from the grid."""
        board = PastelBoard.from_string("123412341")
        assert list(board.get_row(1)) == [4, 1, 2]
        assert list(board.get_col(1)) == [2, 1, 4]

    def test_transpose(self):
        """Transposing swaps rows and columns."""
        board = PastelBoard.from_string("123412341")
        assert list(board.transpose().get_row(1)) == list(board.get_col(1))
        assert board.transpose().transpose() == board

    def test_from_signature_round_trip(self):
        """A signature decodes back to its board."""
        board = PastelBoard.from_string("432143214")
        assert PastelBoard.from_signature(board.signature()) == board

    def test_leftover(self):
        """The unused ingredient of the pool is reported."""
        board = PastelBoard.from_string("111222334")
        assert board.leftover() == [Ingredient.CONFITE]

    def test_leftover_overused(self):
        """A board needing more of an ingredient than the pool has is rejected."""
        board = PastelBoard.from_string("444222333")
        with pytest.raises(ValueError):
            board.leftover(SOURCE_INGREDIENTS)

    def test_copy(self):
        """Copies are independent."""
        board = PastelBoard.from_string("111222334")
        copy = board.copy()
        copy.grid[0, 0] = 4
        assert board.get(0, 0) is Ingredient.DULCE

    def test_invalid_inputs(self):
        """Malformed boards raise ValueError."""
        with pytest.raises(ValueError):
            PastelBoard.from_string("1112223")
        with pytest.raises(ValueError):
            PastelBoard.from_string("111222335")
        with pytest.raises(ValueError):
            PastelBoard.from_string("11122233X")
        with pytest.raises(ValueError):
            PastelBoard(np.zeros((2, 2), dtype=np.int32))
        with pytest.raises(ValueError):
            PastelBoard.from_signature(0)

    def test_str(self):
        """Boards print with ingredient symbols."""
        board = PastelBoard.from_string("111222334")
        assert "| D D D |" in str(board)
        assert "| C C M |" in str(board)


class TestIngredients:
    """Tests for the ingredient pool."""

    def test_source_pool(self):
        """The pool holds three of each common ingredient and one masita."""
        assert list(SOURCE_INGREDIENTS) == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4]

    def test_validate_ingredients(self):
        """Pools are checked for unknown tokens and size."""
        assert validate_ingredients(SOURCE_INGREDIENTS) == (1, 1, 1, 2, 2, 2, 3, 3, 3, 4)
        with pytest.raises(ValueError):
            validate_ingredients([1, 2, 3])
        with pytest.raises(ValueError):
            validate_ingredients([1, 1, 1, 2, 2, 2, 3, 3, 3, 5])

    def test_symbols(self):
        """Each ingredient has a distinct symbol."""
        symbols = {ingredient.symbol for ingredient in Ingredient}
        assert symbols == {"D", "F", "C", "M"}
        assert Ingredient.from_symbol("m") is Ingredient.MASITA


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
