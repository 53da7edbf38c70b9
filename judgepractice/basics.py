"""Introductory input/output and arithmetic exercises."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_DIGITS = frozenset("0123456789")
_WORD_SEPARATORS = re.compile("[ \0]")

_CAT_LINES = (
    "\\    /\\",
    " )  ( ')",
    "(  /  )",
    " \\(__)|",
)

_DOG_LINES = (
    "|\\_/|",
    "|q p|   /}",
    "( 0 )\"\"\"\\",
    "|\"^\"`    |",
    "||_/=\\\\__|",
)

_TREE_LINES = (
    "         ,r'\"7",
    "r`-_   ,'  ,/",
    " \\. \". L_r'",
    "   `~\\/",
    "      |",
    "      |",
)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: float, b: float) -> float:
    """Real-valued quotient of two numbers."""
    return float(a) / float(b)


def modulo_identities(a: int, b: int, c: int) -> tuple[int, int, int, int]:
    """The four expressions of the modular arithmetic identities."""
    return (
        _trunc_mod(a + b, c),
        _trunc_mod(_trunc_mod(a, c) + _trunc_mod(b, c), c),
        _trunc_mod(a * b, c),
        _trunc_mod(_trunc_mod(a, c) * _trunc_mod(b, c), c),
    )


def four_operations(a: int, b: int) -> tuple[int, int, int, int, int]:
    """Sum, difference, product, quotient and remainder of two integers."""
    return a + b, a - b, a * b, _trunc_div(a, b), _trunc_mod(a, b)


def sum_three(a: int, b: int, c: int) -> int:
    return a + b + c


def buddhist_to_gregorian(year: int) -> int:
    """Convert a year of the Buddhist era to the Gregorian calendar."""
    return year - 543


def abs_difference(a: int, b: int) -> int:
    return abs(a - b)


def long_multiplication(a: int, b: int) -> tuple[int, int, int, int]:
    """Partial products of a times each digit of a three-digit b, then the total."""
    ones = a * _trunc_mod(b, 10)
    tens = a * _trunc_mod(_trunc_div(b, 10), 10)
    hundreds = a * _trunc_div(b, 100)
    return ones, tens, hundreds, ones + tens * 10 + hundreds * 100


def triangular(n: int) -> int:
    """Sum of the integers from 1 to n."""
    return n * (n + 1) // 2


def surprised(name: str) -> str:
    return name + "??!"


def ascii_code(ch: str) -> int:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ord(ch)


def concat_minus(a: int, b: int, c: int) -> tuple[int, int]:
    """a + b - c, and the number formed by writing a then b, minus c."""
    return a + b - c, int(f"{a}{b}") - c


def hello_world() -> str:
    return "Hello World!"


def _art(lines: Iterable[str]) -> str:
    return "".join(line + "\n" for line in lines)


def cat_art() -> str:
    return _art(_CAT_LINES)


def dog_art() -> str:
    return _art(_DOG_LINES)


def tree_art() -> str:
    return _art(_TREE_LINES)


def multiplication_table(n: int) -> list[str]:
    return [f"{n} * {i} = {n * i}" for i in range(1, 10)]


def count_up(n: int) -> list[int]:
    return list(range(1, n + 1))


def string_length(text: str) -> int:
    return len(text)


def char_at(text: str, index: int) -> str:
    """The character at a 1-based position."""
    if not 1 <= index <= len(text):
        raise IndexError(f"position {index} outside 1..{len(text)}")
    return text[index - 1]


def first_last(text: str) -> str:
    if not text:
        raise ValueError("text must not be empty")
    return text[0] + text[-1]


def digit_sum(count: int, digits: str) -> int:
    """Sum of the first count digits of a digit string."""
    if not 0 <= count <= len(digits):
        raise ValueError(f"count {count} outside 0..{len(digits)}")
    head = digits[:count]
    if not set(head) <= _DIGITS:
        raise ValueError(f"not a digit string: {head!r}")
    return sum(int(d) for d in head)


def count_words(line: str) -> int:
    """Number of space-separated words in a line."""
    return sum(1 for token in _WORD_SEPARATORS.split(line) if token)


def verification_digit(values: Sequence[int]) -> int:
    """Sum of the squares of five numbers, modulo 10."""
    if len(values) != 5:
        raise ValueError(f"expected five values, got {len(values)}")
    return sum(v * v for v in values) % 10


def long_int_type(n: int) -> str:
    """Name of the integer type holding n bytes."""
    return "long " * (n // 4) + "int"


def left_triangle(n: int) -> list[str]:
    return ["*" * k for k in range(1, n + 1)]


def right_triangle(n: int) -> list[str]:
    return [" " * (n - k) + "*" * k for k in range(1, n + 1)]


def sum_pairs(pairs: Iterable[tuple[int, int]]) -> list[int]:
    return [a + b for a, b in pairs]


def sum_until_zeros(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Sums of pairs, stopping at the first pair of two zeros."""
    sums = []
    for a, b in pairs:
        if a == 0 and b == 0:
            break
        sums.append(a + b)
    return sums


def case_sums(pairs: Iterable[tuple[int, int]]) -> list[str]:
    return [f"Case #{i}: {a + b}" for i, (a, b) in enumerate(pairs, start=1)]


def case_equations(pairs: Iterable[tuple[int, int]]) -> list[str]:
    return [
        f"Case #{i}: {a} + {b} = {a + b}" for i, (a, b) in enumerate(pairs, start=1)
    ]