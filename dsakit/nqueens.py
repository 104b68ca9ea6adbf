"""The N-queens puzzle solved by backtracking."""

from __future__ import annotations

import argparse
from typing import Iterator, Optional, Sequence

Board = list[list[bool]]


def is_safe(board: Sequence[Sequence[bool]], row: int, col: int) -> bool:
    """Tell whether a queen at ``(row, col)`` is attacked by any queen in earlier rows."""
    if any(board[r][col] for r in range(row)):
        return False
    for step in range(1, min(row, col) + 1):
        if board[row - step][col - step]:
            return False
    last_col = len(board[0]) - 1
    for step in range(1, min(row, last_col - col) + 1):
        if board[row - step][col + step]:
            return False
    return True


def solve_n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board."""
    if n < 1:
        raise ValueError("n must be at least 1")
    board = [[False] * n for _ in range(n)]

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield [line[:] for line in board]
            return
        for col in range(n):
            if is_safe(board, row, col):
                board[row][col] = True
                yield from place(row + 1)
                board[row][col] = False

    yield from place(0)


def render_board(board: Sequence[Sequence[bool]]) -> str:
    """Draw a board as lines of ``Q`` for queens and ``-`` for empty squares."""
    return "\n".join(" ".join("Q" if cell else "-" for cell in row) for row in board)


def main(argv: Optional[list[str]] = None) -> int:
    """Print every solution of the N-queens puzzle, each followed by a blank line."""
    parser = argparse.ArgumentParser(
        description="Print every solution of the N-queens puzzle."
    )
    parser.add_argument("n", nargs="?", type=int, default=4, help="board size")
    args = parser.parse_args(argv)
    if args.n < 1:
        parser.error("n must be at least 1")
    for board in solve_n_queens(args.n):
        print(render_board(board))
        print()
    return 0