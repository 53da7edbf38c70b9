"""Command line: solve a practice problem by number, reading its input text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from judgepractice.arrays import (
    closest_to_zero,
    compress_coordinates,
    count_occurrences,
    count_pairs,
    distinct_remainders,
    fill_buckets,
    less_than,
    max_recruits,
    max_with_position,
    min_flights,
    min_max,
    missing_students,
    reverse_ranges,
    selection_sort,
    sort_words,
    sorted_values,
    swap_buckets,
    total_wait_time,
    zero_sum,
)
from judgepractice.basics import (
    abs_difference,
    add,
    ascii_code,
    buddhist_to_gregorian,
    case_equations,
    case_sums,
    cat_art,
    char_at,
    concat_minus,
    count_up,
    count_words,
    digit_sum,
    divide,
    dog_art,
    first_last,
    four_operations,
    hello_world,
    left_triangle,
    long_int_type,
    long_multiplication,
    modulo_identities,
    multiplication_table,
    multiply,
    right_triangle,
    string_length,
    subtract,
    sum_pairs,
    sum_three,
    sum_until_zeros,
    surprised,
    tree_art,
    triangular,
    verification_digit,
)
from judgepractice.conditionals import (
    alarm_clock,
    compare,
    dice_prize,
    grade,
    is_leap_year,
    oven_clock,
    quadrant,
    receipt_matches,
    room_number,
)
from judgepractice.recursion import (
    can_fold,
    cantor,
    count_paper,
    fill_box,
    partial_merge_sort,
    star_pattern,
)
from judgepractice.structures import (
    card_game,
    is_balanced,
    is_vps,
    josephus,
    printer_queue,
    run_queue_commands,
    run_stack_commands,
    stack_sequence,
)
from judgepractice.trees import find_parents, traversals


class _Reader:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def real(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]

    def remaining_integers(self) -> Iterator[int]:
        for token in self._tokens:
            try:
                yield int(token)
            except ValueError:
                return

    def remaining_pairs(self) -> Iterator[tuple[int, int]]:
        numbers = self.remaining_integers()
        for a in numbers:
            b = next(numbers, None)
            if b is None:
                return
            yield a, b


_Solver = Callable[[_Reader], str]
_SOLVERS: dict[str, _Solver] = {}


def _problem(*numbers: str) -> Callable[[_Solver], _Solver]:
    def register(func: _Solver) -> _Solver:
        for number in numbers:
            _SOLVERS[number] = func
        return func

    return register


def _lines(items: Iterable[object]) -> str:
    return "".join(f"{item}\n" for item in items)


def _spaced(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


@_problem("1000")
def _p1000(r: _Reader) -> str:
    return str(add(r.integer(), r.integer()))


@_problem("1001")
def _p1001(r: _Reader) -> str:
    return str(subtract(r.integer(), r.integer()))


@_problem("1008")
def _p1008(r: _Reader) -> str:
    return f"{divide(r.real(), r.real()):.100f}"


@_problem("10171")
def _p10171(r: _Reader) -> str:
    return cat_art()


@_problem("10172")
def _p10172(r: _Reader) -> str:
    return dog_art()


@_problem("10250")
def _p10250(r: _Reader) -> str:
    cases = r.integer()
    return _lines(room_number(*r.integers(3)) for _ in range(cases))


@_problem("10430")
def _p10430(r: _Reader) -> str:
    return _lines(modulo_identities(*r.integers(3)))


@_problem("10773")
def _p10773(r: _Reader) -> str:
    return _lines([zero_sum(r.integers(r.integer()))])


@_problem("10807")
def _p10807(r: _Reader) -> str:
    values = r.integers(r.integer())
    return str(count_occurrences(values, r.integer()))


@_problem("10810")
def _p10810(r: _Reader) -> str:
    count, tries = r.integer(), r.integer()
    operations = [tuple(r.integers(3)) for _ in range(tries)]
    return _spaced(fill_buckets(count, operations))


@_problem("10811")
def _p10811(r: _Reader) -> str:
    count, tries = r.integer(), r.integer()
    return _spaced(reverse_ranges(count, r.pairs(tries)))


@_problem("10813")
def _p10813(r: _Reader) -> str:
    count, tries = r.integer(), r.integer()
    return _spaced(swap_buckets(count, r.pairs(tries)))


@_problem("10818")
def _p10818(r: _Reader) -> str:
    low, high = min_max(r.integers(r.integer()))
    return f"{low} {high}"


def _commands(r: _Reader) -> Iterator[str]:
    for _ in range(r.integer()):
        name = r.word()
        yield f"{name} {r.integer()}" if name == "push" else name


@_problem("10828")
def _p10828(r: _Reader) -> str:
    return _lines(run_stack_commands(_commands(r)))


@_problem("10845")
def _p10845(r: _Reader) -> str:
    return _lines(run_queue_commands(_commands(r)))


@_problem("10869")
def _p10869(r: _Reader) -> str:
    return _lines(four_operations(r.integer(), r.integer()))


@_problem("10871")
def _p10871(r: _Reader) -> str:
    count, limit = r.integer(), r.integer()
    return _spaced(less_than(r.integers(count), limit))


@_problem("10926")
def _p10926(r: _Reader) -> str:
    return surprised(r.word())


@_problem("10950", "15552")
def _p10950(r: _Reader) -> str:
    return _lines(sum_pairs(r.pairs(r.integer())))


@_problem("10951")
def _p10951(r: _Reader) -> str:
    return _lines(sum_pairs(r.remaining_pairs()))


@_problem("10952")
def _p10952(r: _Reader) -> str:
    return _lines(sum_until_zeros(r.remaining_pairs()))


@_problem("10998")
def _p10998(r: _Reader) -> str:
    return str(multiply(r.integer(), r.integer()))


@_problem("11021")
def _p11021(r: _Reader) -> str:
    return _lines(case_sums(r.pairs(r.integer())))


@_problem("11022")
def _p11022(r: _Reader) -> str:
    return _lines(case_equations(r.pairs(r.integer())))


@_problem("11382")
def _p11382(r: _Reader) -> str:
    return str(sum_three(*r.integers(3)))


@_problem("11399")
def _p11399(r: _Reader) -> str:
    return _lines([total_wait_time(r.integers(r.integer()))])


@_problem("1152")
def _p1152(r: _Reader) -> str:
    first_line = r.text.split("\n", 1)[0].rstrip("\r")
    return _lines([count_words(first_line)])


@_problem("1158")
def _p1158(r: _Reader) -> str:
    people, step = r.integer(), r.integer()
    return "<" + ", ".join(map(str, josephus(people, step))) + ">"


@_problem("11582")
def _p11582(r: _Reader) -> str:
    values = r.integers(r.integer())
    return _spaced(partial_merge_sort(values, r.integer()))


@_problem("11654")
def _p11654(r: _Reader) -> str:
    return str(ascii_code(r.word()[0]))


@_problem("11720")
def _p11720(r: _Reader) -> str:
    count = r.integer()
    return str(digit_sum(count, r.word()))


@_problem("11725")
def _p11725(r: _Reader) -> str:
    count = r.integer()
    return _lines(find_parents(count, r.pairs(max(0, count - 1))))


@_problem("1181")
def _p1181(r: _Reader) -> str:
    count = r.integer()
    return _lines(sort_words([r.word() for _ in range(count)]))


@_problem("1330")
def _p1330(r: _Reader) -> str:
    return compare(r.integer(), r.integer())


@_problem("14681")
def _p14681(r: _Reader) -> str:
    return str(quadrant(r.integer(), r.integer()))


@_problem("1493")
def _p1493(r: _Reader) -> str:
    length, width, height = r.integers(3)
    cubes = r.pairs(r.integer())
    used = fill_box(length, width, height, cubes)
    return "-1" if used is None else str(used)


@_problem("1780")
def _p1780(r: _Reader) -> str:
    size = r.integer()
    matrix = [r.integers(size) for _ in range(size)]
    return _lines(count_paper(matrix))


@_problem("1802")
def _p1802(r: _Reader) -> str:
    cases = r.integer()
    return _lines("YES" if can_fold(r.word()) else "NO" for _ in range(cases))


@_problem("18108")
def _p18108(r: _Reader) -> str:
    return str(buddhist_to_gregorian(r.integer()))


@_problem("1874")
def _p1874(r: _Reader) -> str:
    operations = stack_sequence(r.integers(r.integer()))
    return "NO\n" if operations is None else _lines(operations)


@_problem("18870")
def _p18870(r: _Reader) -> str:
    return _spaced(compress_coordinates(r.integers(r.integer())))


@_problem("1946")
def _p1946(r: _Reader) -> str:
    cases = r.integer()
    return _lines(max_recruits(r.pairs(r.integer())) for _ in range(cases))


@_problem("1966")
def _p1966(r: _Reader) -> str:
    results = []
    for _ in range(r.integer()):
        count, index = r.integer(), r.integer()
        results.append(printer_queue(r.integers(count), index))
    return _lines(results)


@_problem("1991")
def _p1991(r: _Reader) -> str:
    children = {}
    for _ in range(r.integer()):
        node, left, right = r.word()[0], r.word()[0], r.word()[0]
        children[node] = (left, right)
    return _lines(traversals(children))


@_problem("2164")
def _p2164(r: _Reader) -> str:
    return _lines([card_game(r.integer())])


@_problem("2420")
def _p2420(r: _Reader) -> str:
    return str(abs_difference(r.integer(), r.integer()))


@_problem("2438")
def _p2438(r: _Reader) -> str:
    return _lines(left_triangle(r.integer()))


@_problem("2439")
def _p2439(r: _Reader) -> str:
    return _lines(right_triangle(r.integer()))


@_problem("2447")
def _p2447(r: _Reader) -> str:
    return _lines(star_pattern(r.integer()))


@_problem("2470")
def _p2470(r: _Reader) -> str:
    left, right = closest_to_zero(r.integers(r.integer()))
    return f"{left} {right}"


@_problem("2475")
def _p2475(r: _Reader) -> str:
    return str(verification_digit(r.integers(5)))


@_problem("2480")
def _p2480(r: _Reader) -> str:
    return str(dice_prize(*r.integers(3)))


@_problem("25083")
def _p25083(r: _Reader) -> str:
    return tree_art()


@_problem("2525")
def _p2525(r: _Reader) -> str:
    hour, minute = oven_clock(*r.integers(3))
    return f"{hour} {minute}"


@_problem("25304")
def _p25304(r: _Reader) -> str:
    total = r.integer()
    items = r.pairs(r.integer())
    return "Yes" if receipt_matches(total, items) else "No"


@_problem("25314")
def _p25314(r: _Reader) -> str:
    return long_int_type(r.integer())


@_problem("2557")
def _p2557(r: _Reader) -> str:
    return hello_world()


@_problem("2562")
def _p2562(r: _Reader) -> str:
    value, position = max_with_position(r.integers(9))
    return f"{value}\n{position}"


@_problem("2588")
def _p2588(r: _Reader) -> str:
    return _lines(long_multiplication(r.integer(), r.integer()))


@_problem("2739")
def _p2739(r: _Reader) -> str:
    return _lines(multiplication_table(r.integer()))


@_problem("2741")
def _p2741(r: _Reader) -> str:
    return _lines(count_up(r.integer()))


@_problem("2743")
def _p2743(r: _Reader) -> str:
    return str(string_length(r.word()))


@_problem("2750")
def _p2750(r: _Reader) -> str:
    return _lines(selection_sort(r.integers(r.integer())))


@_problem("2751")
def _p2751(r: _Reader) -> str:
    return _lines(sorted_values(r.integers(r.integer())))


@_problem("2753")
def _p2753(r: _Reader) -> str:
    leap = is_leap_year(r.integer())
    return str(int(leap))


@_problem("27866")
def _p27866(r: _Reader) -> str:
    text = r.word()
    return char_at(text, r.integer())


@_problem("2884")
def _p2884(r: _Reader) -> str:
    hour, minute = alarm_clock(r.integer(), r.integer())
    return f"{hour} {minute}"


@_problem("3052")
def _p3052(r: _Reader) -> str:
    return _lines([distinct_remainders(r.integers(10))])


@_problem("31403")
def _p31403(r: _Reader) -> str:
    return _lines(concat_minus(*r.integers(3)))


@_problem("3273")
def _p3273(r: _Reader) -> str:
    values = r.integers(r.integer())
    return str(count_pairs(values, r.integer()))


@_problem("4779")
def _p4779(r: _Reader) -> str:
    return _lines(cantor(order) for order in r.remaining_integers())


@_problem("4949")
def _p4949(r: _Reader) -> str:
    answers = []
    for line in r.text.splitlines():
        if line == ".":
            break
        answers.append("yes" if is_balanced(line) else "no")
    return _lines(answers)


@_problem("5597")
def _p5597(r: _Reader) -> str:
    return _lines(missing_students(r.integers(28)))


@_problem("8393")
def _p8393(r: _Reader) -> str:
    return str(triangular(r.integer()))


@_problem("9012")
def _p9012(r: _Reader) -> str:
    cases = r.integer()
    return _lines("YES" if is_vps(r.word()) else "NO" for _ in range(cases))


@_problem("9086")
def _p9086(r: _Reader) -> str:
    cases = r.integer()
    return _lines(first_last(r.word()) for _ in range(cases))


@_problem("9372")
def _p9372(r: _Reader) -> str:
    results = []
    for _ in range(r.integer()):
        countries, flights = r.integer(), r.integer()
        results.append(min_flights(countries, r.pairs(flights)))
    return _lines(results)


@_problem("9498")
def _p9498(r: _Reader) -> str:
    return grade(r.integer())


def solve(problem: str | int, text: str) -> str:
    """Output of the given problem for the given input text."""
    key = str(problem)
    try:
        solver = _SOLVERS[key]
    except KeyError:
        raise ValueError(f"unknown problem {key!r}") from None
    return solver(_Reader(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="judgepractice",
        description="Solve a practice problem, reading its input and printing its answer.",
    )
    parser.add_argument("problem", help="problem number")
    parser.add_argument(
        "input", nargs="?", help="file holding the input (default: standard input)"
    )
    args = parser.parse_args(argv)
    if args.problem not in _SOLVERS:
        parser.error(f"unknown problem {args.problem!r}")

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = solve(args.problem, text)
    except (ValueError, IndexError, ZeroDivisionError) as exc:
        print(f"judgepractice: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())