"""Divide-and-conquer exercises: partial merge sort, fractals, folding and packing."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def _is_power_of_three(n: int) -> bool:
    if n < 1:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def partial_merge_sort(values: Iterable[int], sections: int) -> list[int]:
    """Merge sort that stops merging once runs span more than len(values) // sections.

    Each of the ``sections`` people sorts their own share; the shares are
    then left as they are.
    """
    items = list(values)
    if sections < 1:
        raise ValueError("sections must be at least 1")
    limit = len(items) // sections

    def sort_range(first: int, end: int) -> None:
        if first >= end:
            return
        mid = (first + end) // 2
        sort_range(first, mid)
        sort_range(mid + 1, end)
        if end - first < limit:
            items[first:end + 1] = list(
                heapq.merge(items[first:mid + 1], items[mid + 1:end + 1])
            )

    sort_range(0, len(items) - 1)
    return items


def count_paper(matrix: Sequence[Sequence[int]]) -> tuple[int, int, int]:
    """Pieces of paper holding only -1, only 0, and only 1 after nine-way cutting.

    A square that is not uniform is cut into nine equal squares, recursively.
    Values other than -1 and 0 are counted with the 1s.
    """
    grid = [list(row) for row in matrix]
    size = len(grid)
    if not _is_power_of_three(size):
        raise ValueError(f"matrix side {size} is not a power of three")
    if any(len(row) != size for row in grid):
        raise ValueError("matrix must be square")

    counts = {-1: 0, 0: 0, 1: 0}

    def split(x: int, y: int, side: int) -> None:
        first = grid[x][y]
        uniform = all(
            grid[i][j] == first
            for i in range(x, x + side)
            for j in range(y, y + side)
        )
        if uniform:
            counts[first if first in (-1, 0) else 1] += 1
            return
        step = side // 3
        for i in range(3):
            for j in range(3):
                split(x + i * step, y + j * step, step)

    split(0, 0, size)
    return counts[-1], counts[0], counts[1]


def can_fold(paper: str) -> bool:
    """Whether a strip with these crease directions can be folded back up.

    Around the middle of each remaining left part, creases facing each other
    must differ.
    """
    end = len(paper) - 1
    while end > 0:
        a, b = 0, end
        while a < b:
            if paper[a] == paper[b]:
                return False
            a += 1
            b -= 1
        end = b - 1
    return True


def _is_blank(row: int, col: int) -> bool:
    while row or col:
        if row % 3 == 1 and col % 3 == 1:
            return True
        row //= 3
        col //= 3
    return False


def star_pattern(size: int) -> list[str]:
    """Rows of the recursive star square of the given side, a power of three."""
    if not _is_power_of_three(size):
        raise ValueError(f"size {size} is not a power of three")
    return [
        "".join(" " if _is_blank(row, col) else "*" for col in range(size))
        for row in range(size)
    ]


def cantor(order: int) -> str:
    """The Cantor set of the given order drawn with dashes and spaces."""
    if order < 0:
        raise ValueError("order must not be negative")
    line = "-"
    for _ in range(order):
        line = line + " " * len(line) + line
    return line


def fill_box(
    length: int, width: int, height: int, cubes: Iterable[tuple[int, int]]
) -> int | None:
    """Number of cubes used to fill a box, taking the largest cube that fits first.

    cubes holds (exponent, count) pairs in ascending order of exponent, a
    cube of exponent e having side 2**e. Returns None when the box cannot
    be filled.
    """
    sides: list[int] = []
    counts: list[int] = []
    for exponent, count in cubes:
        if exponent < 0:
            raise ValueError(f"cube exponent {exponent} is negative")
        sides.append(1 << exponent)
        counts.append(count)

    used = 0
    pending = [(length, width, height, len(sides) - 1)]
    while pending:
        l, w, h, top = pending.pop()
        if l == 0 or w == 0 or h == 0:
            continue
        for i in range(top, -1, -1):
            side = sides[i]
            if counts[i] <= 0 or l < side or w < side or h < side:
                continue
            counts[i] -= 1
            used += 1
            pending.extend(
                reversed(
                    (
                        (side, w - side, side, i),
                        (l - side, w, side, i),
                        (l, w, h - side, i),
                    )
                )
            )
            break
        else:
            return None
    return used