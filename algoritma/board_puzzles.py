"""Backtracking solvers for board puzzles: knight's tour, n queens, maze, sudoku."""

from __future__ import annotations

from collections.abc import Sequence

Board = list[list[int]]

_KNIGHT_MOVES = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

_HIGHLIGHT = "\033[93m"
_RESET = "\033[0m"


def knight_tour(n: int) -> Board | None:
    """Find a knight's tour of an ``n`` by ``n`` board starting in the corner.

    Each cell of the returned board holds the move number at which the knight
    visits it, starting with 0 at the top-left corner. Returns ``None`` when
    no tour exists.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    board = [[-1] * n for _ in range(n)]
    board[0][0] = 0
    total = n * n

    def free(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < n and board[x][y] == -1

    def solve(x: int, y: int, move: int) -> bool:
        if move == total:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if free(nx, ny):
                board[nx][ny] = move
                if solve(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if solve(0, 0, 1) else None


def n_queens(n: int) -> list[Board]:
    """All placements of ``n`` non-attacking queens, as 0/1 boards.

    Queens are placed column by column, trying rows from the top, so the
    solutions come out in that order.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    solutions: list[Board] = []
    rows_by_column: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != row and abs(placed - row) != col - other
            for other, placed in enumerate(rows_by_column)
        )

    def place(col: int) -> None:
        if col == n:
            board = [[0] * n for _ in range(n)]
            for column, row in enumerate(rows_by_column):
                board[row][column] = 1
            solutions.append(board)
            return
        for row in range(n):
            if safe(row, col):
                rows_by_column.append(row)
                place(col + 1)
                rows_by_column.pop()

    place(0)
    return solutions


def solve_maze(maze: Sequence[Sequence[int]]) -> Board | None:
    """Find a path from the top-left to the bottom-right of a square maze.

    Open cells hold 1. The rat moves only right or down. Returns a board
    marking the path with 1, or ``None`` when there is no path.
    """
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("maze must be a non-empty square grid")
    path = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(row: int, col: int) -> bool:
        path[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == 1 and walk(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == 1 and walk(row + 1, col):
            return True
        path[row][col] = 0
        return False

    return path if walk(0, 0) else None


def _check_sudoku(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku grid must be 9 by 9")


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Board | None:
    """Fill the empty cells (zeros) of a 9 by 9 sudoku.

    Returns a new solved grid, or ``None`` when the puzzle has no solution.
    """
    _check_sudoku(grid)
    board = [list(row) for row in grid]

    def possible(i: int, j: int, number: int) -> bool:
        if any(board[x][j] == number or board[i][x] == number for x in range(9)):
            return False
        top, left = i // 3 * 3, j // 3 * 3
        return all(
            board[x][y] != number
            for x in range(top, top + 3)
            for y in range(left, left + 3)
        )

    empty = [(i, j) for i in range(9) for j in range(9) if board[i][j] == 0]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        i, j = empty[index]
        for number in range(1, 10):
            if possible(i, j, number):
                board[i][j] = number
                if fill(index + 1):
                    return True
        board[i][j] = 0
        return False

    return board if fill(0) else None


def format_sudoku(
    grid: Sequence[Sequence[int]], start: Sequence[Sequence[int]]
) -> str:
    """Render a sudoku grid, highlighting cells that differ from ``start``.

    A tab follows every third column and a blank line every third row.
    """
    _check_sudoku(grid)
    _check_sudoku(start)
    lines = []
    for i, (row, start_row) in enumerate(zip(grid, start)):
        cells = []
        for j, (value, original) in enumerate(zip(row, start_row)):
            if value != original:
                cells.append(f"{_HIGHLIGHT}{value}{_RESET} ")
            else:
                cells.append(f"{value} ")
            if (j + 1) % 3 == 0:
                cells.append("\t")
        lines.append("".join(cells) + "\n")
        if (i + 1) % 3 == 0:
            lines.append("\n")
    return "".join(lines)