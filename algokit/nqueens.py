"""Placing n non-attacking queens by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _place(
    n: int, column: int, rows: list[int], used: set[int], falling: set[int], rising: set[int]
) -> Iterator[list[list[int]]]:
    if column == n:
        yield [[1 if rows[col] == row else 0 for col in range(n)] for row in range(n)]
        return
    for row in range(n):
        if row in used or row - column in falling or row + column in rising:
            continue
        rows.append(row)
        used.add(row)
        falling.add(row - column)
        rising.add(row + column)
        yield from _place(n, column + 1, rows, used, falling, rising)
        rows.pop()
        used.discard(row)
        falling.discard(row - column)
        rising.discard(row + column)


def solve_n_queens(n: int) -> Iterator[list[list[int]]]:
    """Yield every board with ``n`` non-attacking queens (1 marks a queen).

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    return _place(n, 0, [], set(), set(), set())


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Return the board as one line of digits per row."""
    return "".join("".join(str(cell) for cell in row) + "\n" for row in board)