"""All placements of n non-attacking queens, found by backtracking."""

from __future__ import annotations


def solve_n_queens(n):
    """Return every solution as an ``n x n`` board of 0s and 1s.

    Queens are placed column by column, trying rows in increasing order,
    and the boards are returned in the order they are found.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows_used: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    placement: list[int] = []
    solutions = []

    def place(col: int) -> None:
        if col == n:
            board = [[0] * n for _ in range(n)]
            for c, r in enumerate(placement):
                board[r][c] = 1
            solutions.append(board)
            return
        for row in range(n):
            if row in rows_used or row + col in rising or row - col in falling:
                continue
            rows_used.add(row)
            rising.add(row + col)
            falling.add(row - col)
            placement.append(row)
            place(col + 1)
            placement.pop()
            rows_used.remove(row)
            rising.remove(row + col)
            falling.remove(row - col)

    place(0)
    return solutions