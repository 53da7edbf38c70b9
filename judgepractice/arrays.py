"""Exercises on lists: counting, rearranging, sorting and two-pointer scans."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_CLASS_SIZE = 30
_REMAINDER_BASE = 42


def zero_sum(values: Iterable[int]) -> int:
    """Sum of the numbers left after each 0 erases the latest number kept.

    A 0 arriving when nothing is kept is ignored.
    """
    kept: list[int] = []
    for value in values:
        if value == 0:
            if kept:
                kept.pop()
        else:
            kept.append(value)
    return sum(kept)


def count_occurrences(values: Iterable[int], target: int) -> int:
    return sum(1 for value in values if value == target)


def fill_buckets(count: int, operations: Iterable[tuple[int, int, int]]) -> list[int]:
    """Buckets 1..count after each (first, last, ball) fills first..last with ball.

    Buckets never filled hold 0.
    """
    buckets = [0] * count
    for first, last, ball in operations:
        if not 1 <= first or last > count:
            raise IndexError(f"range {first}..{last} outside 1..{count}")
        buckets[first - 1:last] = [ball] * max(0, last - first + 1)
    return buckets


def reverse_ranges(count: int, ranges: Iterable[tuple[int, int]]) -> list[int]:
    """Baskets numbered 1..count after reversing each inclusive (first, last) range."""
    baskets = list(range(1, count + 1))
    for first, last in ranges:
        if first < last:
            if first < 1 or last > count:
                raise IndexError(f"range {first}..{last} outside 1..{count}")
            baskets[first - 1:last] = baskets[first - 1:last][::-1]
    return baskets


def swap_buckets(count: int, swaps: Iterable[tuple[int, int]]) -> list[int]:
    """Balls numbered 1..count after swapping the contents of each bucket pair."""
    buckets = list(range(1, count + 1))
    for a, b in swaps:
        if not (1 <= a <= count and 1 <= b <= count):
            raise IndexError(f"bucket pair ({a}, {b}) outside 1..{count}")
        buckets[a - 1], buckets[b - 1] = buckets[b - 1], buckets[a - 1]
    return buckets


def min_max(values: Iterable[int]) -> tuple[int, int]:
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return min(items), max(items)


def less_than(values: Iterable[int], limit: int) -> list[int]:
    """The values below limit, in their original order."""
    return [value for value in values if value < limit]


def total_wait_time(times: Iterable[int]) -> int:
    """Least total of waiting plus withdrawal times when serving shortest first."""
    ordered = sorted(times)
    remaining = len(ordered)
    total = 0
    for time in ordered:
        total += remaining * time
        remaining -= 1
    return total


def sort_words(words: Iterable[str]) -> list[str]:
    """Distinct words ordered by length, then alphabetically."""
    return sorted(set(words), key=lambda word: (len(word), word))


def compress_coordinates(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of distinct values smaller than it."""
    rank = {value: position for position, value in enumerate(sorted(set(values)))}
    return [rank[value] for value in values]


def max_recruits(applicants: Iterable[tuple[int, int]]) -> int:
    """Applicants not beaten in both rankings by any other applicant.

    Each applicant is a (document rank, interview rank) pair.
    """
    ordered = sorted(applicants)
    if not ordered:
        return 0
    hired = 1
    best_interview = ordered[0][1]
    for _, interview in ordered[1:]:
        if best_interview > interview:
            hired += 1
            best_interview = interview
    return hired


def closest_to_zero(values: Iterable[int]) -> tuple[int, int]:
    """The two values, smaller first, whose sum lies nearest to zero."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    left, right = 0, len(ordered) - 1
    best: tuple[int, int] | None = None
    best_size = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if best is None or best_size > abs(total):
            best_size = abs(total)
            best = (ordered[left], ordered[right])
        if total > 0:
            right -= 1
        else:
            left += 1
    assert best is not None
    return best


def max_with_position(values: Iterable[int]) -> tuple[int, int]:
    """The largest value and the 1-based position of its first occurrence."""
    best: tuple[int, int] | None = None
    for position, value in enumerate(values, start=1):
        if best is None or value > best[0]:
            best = (value, position)
    if best is None:
        raise ValueError("values must not be empty")
    return best


def selection_sort(values: Iterable[int]) -> list[int]:
    """Values in ascending order, arranged by repeatedly selecting the smallest."""
    result = list(values)
    for start in range(len(result)):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if result[smallest] < result[start]:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def sorted_values(values: Iterable[int]) -> list[int]:
    return sorted(values)


def _c_remainder(value: int, base: int) -> int:
    remainder = abs(value) % base
    return -remainder if value < 0 else remainder


def distinct_remainders(values: Iterable[int]) -> int:
    """Number of different remainders the values leave when divided by 42."""
    return len({_c_remainder(value, _REMAINDER_BASE) for value in values})


def count_pairs(values: Iterable[int], target: int) -> int:
    """Pairs of values summing to target, each value used in at most one pair."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    pairs = 0
    while left < right:
        total = ordered[left] + ordered[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            left += 1
            right -= 1
            pairs += 1
    return pairs


def missing_students(submitted: Iterable[int]) -> list[int]:
    """Attendance numbers 1..30 that did not hand anything in, ascending."""
    handed_in = set(submitted)
    return [number for number in range(1, _CLASS_SIZE + 1) if number not in handed_in]


def min_flights(countries: int, routes: Iterable[tuple[int, int]]) -> int:
    """Fewest airlines needed to visit every country of a connected route map."""
    for _ in routes:
        pass
    return countries - 1