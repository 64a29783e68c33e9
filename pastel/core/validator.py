"""Richness rules and signatures for pastels."""

from __future__ import annotations
from typing import List, Sequence, Tuple

from .ingredients import Ingredient, LINE_SIZE

MASITA = int(Ingredient.MASITA)

ROW_LINES: Tuple[Tuple[int, int, int], ...] = tuple(
    (row * LINE_SIZE, row * LINE_SIZE + 1, row * LINE_SIZE + 2)
    for row in range(LINE_SIZE)
)
COL_LINES: Tuple[Tuple[int, int, int], ...] = tuple(
    (col, col + LINE_SIZE, col + 2 * LINE_SIZE)
    for col in range(LINE_SIZE)
)


def is_rich_line(a: int, b: int, c: int) -> bool:
    """
    Check whether a row or column makes the pastel rich.

    A line is rich when its three ingredients are the same, or when it
    holds a masita and the other two ingredients match. The first masita
    found (in line order) decides which pair is compared.
    """
    if a == b and a == c:
        return True

    if a == MASITA:
        return b == c
    elif b == MASITA:
        return a == c
    elif c == MASITA:
        return a == b
    return False


def is_row_rich(pastel: Sequence[int], row: int) -> bool:
    """Check whether the given row makes the pastel rich."""
    i, j, k = ROW_LINES[row]
    return is_rich_line(pastel[i], pastel[j], pastel[k])


def is_col_rich(pastel: Sequence[int], col: int) -> bool:
    """Check whether the given column makes the pastel rich."""
    i, j, k = COL_LINES[col]
    return is_rich_line(pastel[i], pastel[j], pastel[k])


def is_rich_pastel(pastel: Sequence[int]) -> bool:
    """
    Check if a complete pastel is rich.

    Rows are checked before columns and the check stops at the first
    rich line.

    Args:
        pastel: Nine ingredient tokens in row-major order.

    Returns:
        True if at least one row or column is rich.
    """
    for row in range(LINE_SIZE):
        if is_row_rich(pastel, row):
            return True

    for col in range(LINE_SIZE):
        if is_col_rich(pastel, col):
            return True

    return False


def rich_lines(pastel: Sequence[int]) -> List[Tuple[str, int]]:
    """List every rich line as ("row", index) or ("col", index)."""
    lines = [("row", row) for row in range(LINE_SIZE) if is_row_rich(pastel, row)]
    lines += [("col", col) for col in range(LINE_SIZE) if is_col_rich(pastel, col)]
    return lines


def pastel_signature(pastel: Sequence[int]) -> int:
    """
    Compute the signature of a pastel.

    The signature reads the pastel as a base-10 numeral where position i
    contributes pastel[i] * 10**i. Tokens are single digits, so equal
    pastels always share a signature and different pastels never do.
    """
    signature = 0
    power = 1

    for token in pastel:
        signature += token * power
        power *= 10
    return signature
