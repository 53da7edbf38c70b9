# judgepractice

Small, self-contained solutions to well-known online-judge practice problems.
Each solution is an ordinary Python function that takes Python values and
returns the answer, so the solutions can be imported, tested and reused. A
command line tool runs any of them on judge-style input text.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `judgepractice.basics`: arithmetic, fixed text output, and simple string
  and loop exercises (`add`, `divide`, `four_operations`, `modulo_identities`,
  `long_multiplication`, `count_words`, `digit_sum`, `char_at`,
  `left_triangle`, `right_triangle`, `multiplication_table`, `case_sums`,
  `cat_art`, `dog_art`, `tree_art`, ...).
- `judgepractice.conditionals`: branching exercises (`compare`, `quadrant`,
  `dice_prize`, `oven_clock`, `alarm_clock`, `is_leap_year`, `grade`,
  `receipt_matches`, `room_number`).
- `judgepractice.arrays`: list processing, sorting and two-pointer problems
  (`zero_sum`, `fill_buckets`, `reverse_ranges`, `swap_buckets`, `min_max`,
  `sort_words`, `compress_coordinates`, `max_recruits`, `closest_to_zero`,
  `count_pairs`, `selection_sort`, `missing_students`, ...).
- `judgepractice.structures`: stack and queue problems (`run_stack_commands`,
  `run_queue_commands`, `josephus`, `stack_sequence`, `printer_queue`,
  `card_game`, `is_balanced`, `is_vps`).
- `judgepractice.trees`: tree problems (`find_parents`, `preorder`, `inorder`,
  `postorder`, `traversals`).
- `judgepractice.recursion`: divide-and-conquer problems (`partial_merge_sort`,
  `count_paper`, `can_fold`, `star_pattern`, `cantor`, `fill_box`).
- `judgepractice.cli`: the command line tool, and `solve(problem, text)`,
  which returns the output of a problem for the given input text.

Functions raise `ValueError` or `IndexError` on input they cannot handle
(an empty list where one value is needed, a position out of range, a size
that is not a power of three, and so on). A few return `None` where the
problem's answer is "impossible": `stack_sequence` and `fill_box`.

## Using the library

```python
from judgepractice.basics import add
from judgepractice.conditionals import is_leap_year, grade
from judgepractice.structures import card_game, josephus
from judgepractice.arrays import compress_coordinates

add(1, 2)                               # 3
is_leap_year(2000)                      # True
grade(95)                               # "A"
card_game(6)                            # 4
josephus(7, 3)                          # [3, 6, 2, 7, 5, 1, 4]
compress_coordinates([2, 4, -10, 4, -9])  # [2, 3, 0, 3, 1]
```

## Command line

```
judgepractice PROBLEM [INPUT]
```

`PROBLEM` is the judge's problem number. The input is read from the file
`INPUT`, or from standard input when no file is given, and the answer is
written to standard output in the format the judge expects:

```
$ echo "1 2" | judgepractice 1000
3
```

An unknown problem number is reported as a usage error. Input that cannot
be parsed or solved prints a message to standard error and exits with
status 1. Run `judgepractice --help` for the usage summary.

The same work is available from Python:

```python
from judgepractice.cli import solve

solve(1000, "1 2")   # "3"
```

Problem numbers the tool knows: 1000, 1001, 1008, 10171, 10172, 10250,
10430, 10773, 10807, 10810, 10811, 10813, 10818, 10828, 10845, 10869, 10871,
10926, 10950, 10951, 10952, 10998, 11021, 11022, 11382, 11399, 1152, 1158,
11582, 11654, 11720, 11725, 1181, 1330, 14681, 1493, 15552, 1780, 1802,
18108, 1874, 18870, 1946, 1966, 1991, 2164, 2420, 2438, 2439, 2447, 2470,
2475, 2480, 25083, 2525, 25304, 25314, 2557, 2562, 2588, 2739, 2741, 2743,
2750, 2751, 2753, 27866, 2884, 3052, 31403, 3273, 4779, 4949, 5597, 8393,
9012, 9086, 9372, 9498.

## What it does not do

The tool only computes answers. It does not fetch problems, check answers
against expected output, or submit anything to a judge.