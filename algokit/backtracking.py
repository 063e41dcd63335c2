"""Backtracking solvers: graph colouring, N queens, rat in a maze, sudoku."""

from __future__ import annotations

from collections.abc import Sequence

_SUDOKU_SIZE = 9
_BOX = 3


def graph_coloring(graph: Sequence[Sequence[bool]], m: int) -> list[int] | None:
    """Colour the vertices of an adjacency matrix with colours 1..m.

    Returns the first valid colouring in lexicographic order, or None when
    m colours are not enough. Edges are read from the upper triangle.
    """
    matrix = [list(row) for row in graph]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    colors = [0] * size

    def fits(vertex: int, color: int) -> bool:
        return all(
            colors[other] != color
            for other, row in enumerate(matrix[:vertex])
            if row[vertex]
        )

    def assign(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, m + 1):
            if fits(vertex, color):
                colors[vertex] = color
                if assign(vertex + 1):
                    return True
        colors[vertex] = 0
        return False

    return colors if assign(0) else None


def solve_n_queens(n: int) -> list[list[str]]:
    """All placements of n non-attacking queens, as rows of '.' and 'Q'."""
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    solutions: list[list[str]] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placement: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placement])
            return
        for col in range(n):
            if col in columns or row + col in diagonals or col - row in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(col - row)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(col - row)

    place(0)
    return solutions


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path from the top-left to the bottom-right cell moving down or right.

    Truthy cells are open. Returns a grid marking the path with 1 and all
    other cells with 0, or None when there is no path. Down is tried first.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must have at least one cell")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")

    def is_open(r: int, c: int) -> bool:
        return r < rows and c < cols and bool(grid[r][c])

    if not is_open(0, 0):
        return None
    goal = (rows - 1, cols - 1)
    path = [(0, 0)]
    tried = [0]
    dead: set[tuple[int, int]] = set()
    while path:
        r, c = path[-1]
        if (r, c) == goal:
            solution = [[0] * cols for _ in range(rows)]
            for pr, pc in path:
                solution[pr][pc] = 1
            return solution
        move = tried[-1]
        if move == 2:
            dead.add(path.pop())
            tried.pop()
            continue
        tried[-1] += 1
        nxt = (r + 1, c) if move == 0 else (r, c + 1)
        if is_open(*nxt) and nxt not in dead:
            path.append(nxt)
            tried.append(0)
    return None


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a 9x9 sudoku grid; None when no solution exists.

    The input is left unchanged; the solved grid is returned as a new list.
    """
    board = [list(row) for row in grid]
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("sudoku grid must be 9x9")
    if any(not isinstance(v, int) or not 0 <= v <= _SUDOKU_SIZE for row in board for v in row):
        raise ValueError("sudoku cells must be integers from 0 to 9")

    def box_of(r: int, c: int) -> int:
        return (r // _BOX) * _BOX + c // _BOX

    row_sets = [set() for _ in range(_SUDOKU_SIZE)]
    col_sets = [set() for _ in range(_SUDOKU_SIZE)]
    box_sets = [set() for _ in range(_SUDOKU_SIZE)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == 0:
                empties.append((r, c))
            else:
                row_sets[r].add(value)
                col_sets[c].add(value)
                box_sets[box_of(r, c)].add(value)

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        b = box_of(r, c)
        for num in range(1, _SUDOKU_SIZE + 1):
            if num in row_sets[r] or num in col_sets[c] or num in box_sets[b]:
                continue
            board[r][c] = num
            row_sets[r].add(num)
            col_sets[c].add(num)
            box_sets[b].add(num)
            if fill(index + 1):
                return True
            row_sets[r].discard(num)
            col_sets[c].discard(num)
            box_sets[b].discard(num)
        board[r][c] = 0
        return False

    return board if fill(0) else None