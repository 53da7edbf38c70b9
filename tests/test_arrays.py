import pytest

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


def test_zero_sum_erases_latest():
    assert zero_sum([3, 0, 4]) == 4


def test_zero_sum_ignores_zero_on_empty():
    assert zero_sum([0, 0, 9]) == 9


def test_zero_sum_everything_erased():
    assert zero_sum([5, 6, 0, 0]) == 0


def test_count_occurrences():
    values = [7, 7, 7]
    assert count_occurrences(values, 7) == len(values)
    assert count_occurrences([1, 2, 3], 9) == 0


def test_fill_buckets_overwrites():
    assert fill_buckets(3, [(1, 3, 9)]) == [9, 9, 9]
    assert fill_buckets(3, [(1, 3, 9), (2, 2, 4)]) == [9, 4, 9]


def test_fill_buckets_untouched_are_zero():
    assert fill_buckets(2, []) == [0, 0]


def test_fill_buckets_out_of_range():
    with pytest.raises(IndexError):
        fill_buckets(2, [(1, 3, 5)])


def test_reverse_ranges_whole():
    assert reverse_ranges(4, [(1, 4)]) == [4, 3, 2, 1]


def test_reverse_ranges_twice_is_identity():
    assert reverse_ranges(6, [(2, 5), (2, 5)]) == [1, 2, 3, 4, 5, 6]


def test_reverse_ranges_single_position():
    assert reverse_ranges(3, [(2, 2)]) == [1, 2, 3]


def test_swap_buckets():
    assert swap_buckets(3, [(1, 3)]) == [3, 2, 1]
    assert swap_buckets(4, [(1, 2), (1, 2)]) == [1, 2, 3, 4]
    assert swap_buckets(2, [(2, 2)]) == [1, 2]


def test_swap_buckets_out_of_range():
    with pytest.raises(IndexError):
        swap_buckets(2, [(1, 3)])


def test_min_max():
    assert min_max([20, 10, 35, 30, 7]) == (7, 35)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_less_than_keeps_order():
    assert less_than([1, 10, 4, 9, 2, 3, 8, 5, 7, 6], 5) == [1, 4, 2, 3]


def test_total_wait_time_example():
    assert total_wait_time([3, 1, 4, 3, 2]) == 32


def test_total_wait_time_order_independent():
    assert total_wait_time([5, 2, 8]) == total_wait_time([8, 5, 2])
    assert total_wait_time([6]) == 6


def test_sort_words():
    words = ["but", "i", "wont", "hesitate", "no", "more", "no", "more",
             "it", "cannot", "wait", "im", "yours"]
    assert sort_words(words) == [
        "i", "im", "it", "no", "but", "more", "wait", "wont", "yours",
        "cannot", "hesitate",
    ]


def test_compress_coordinates_example():
    assert compress_coordinates([2, 4, -10, 4, -9]) == [2, 3, 0, 3, 1]


def test_compress_coordinates_invariants():
    values = [50, -3, 50, 7, 7, 100]
    ranks = compress_coordinates(values)
    assert sorted(set(ranks)) == list(range(len(set(values))))
    assert ranks[0] == ranks[2]


def test_max_recruits_example():
    assert max_recruits([(3, 2), (1, 4), (4, 1), (2, 3), (5, 5)]) == 4


def test_max_recruits_all_dominated():
    assert max_recruits([(1, 1), (2, 2), (3, 3)]) == 1


def test_max_recruits_none_dominated():
    applicants = [(1, 3), (2, 2), (3, 1)]
    assert max_recruits(applicants) == len(applicants)


def test_closest_to_zero():
    assert closest_to_zero([-2, 4, -99, -1, 98]) == (-99, 98)


def test_closest_to_zero_needs_two():
    with pytest.raises(ValueError):
        closest_to_zero([5])


def test_max_with_position_first_occurrence():
    assert max_with_position([5, 9, 9]) == (9, 2)


def test_max_with_position_empty():
    with pytest.raises(ValueError):
        max_with_position([])


@pytest.mark.parametrize(
    "values",
    [[5, 2, 3, 4, 1], [], [1], [3, 3, 1, 2, 1], [-4, 10, 0, -4, 7]],
)
def test_selection_sort_matches_sorted(values):
    assert selection_sort(values) == sorted(values)
    assert sorted_values(values) == sorted(values)


def test_selection_sort_does_not_mutate():
    values = [3, 1, 2]
    selection_sort(values)
    assert values == [3, 1, 2]


def test_distinct_remainders():
    values = list(range(1, 11))
    assert distinct_remainders(values) == len(values)
    assert distinct_remainders([42, 84, 126]) == 1


def test_distinct_remainders_negative_sign_kept():
    assert distinct_remainders([-1, 41]) == 2


def test_count_pairs_example():
    assert count_pairs([5, 12, 7, 10, 9, 1, 2, 3, 11], 13) == 3


def test_count_pairs_none():
    assert count_pairs([1, 2], 10) == 0


def test_missing_students():
    assert missing_students(range(3, 31)) == [1, 2]
    assert missing_students(n for n in range(1, 31) if n not in (5, 17)) == [5, 17]


def test_min_flights():
    assert min_flights(2, [(1, 2)]) == 1
    assert min_flights(3, [(1, 2), (2, 3), (1, 3)]) == 2