"""Tests for List transformations (map/filter/reduce, grouping, numerics)."""

import math

import pytest

from immutable_list import InvalidArgumentError, List


class TestMapFilterReduce:
    """Test element-wise transformations and folds."""

    def test_map(self):
        result = List.of(1, 2, 3, 4, 5).map(lambda x: x * 2)
        assert result.to_list() == [2, 4, 6, 8, 10]
        assert result.size == 5

    def test_filter(self):
        result = List.range(0, 10).filter(lambda x: x % 2 == 0)
        assert result.to_list() == [0, 2, 4, 6, 8, 10]

    def test_compact_drops_only_none(self):
        result = List.of(1, None, 0, None, "", False).compact()
        assert result.to_list() == [1, 0, "", False]

    def test_compact_map(self):
        result = List.range(1, 10).compact_map(lambda x: x if x % 2 == 0 else None)
        assert result.to_list() == [2, 4, 6, 8, 10]

    def test_reduce_is_left_fold(self):
        assert List.of(1, 2, 3, 4).reduce(0, lambda acc, x: acc + x) == 10
        assert List.of("a", "b", "c").reduce("", lambda acc, x: acc + x) == "abc"
        assert List.of(1, 2, 3).reduce(10, lambda acc, x: acc - x) == 4

    def test_reduce_on_empty_returns_initial(self, empty):
        assert empty.reduce(42, lambda acc, x: acc + x) == 42

    def test_each_returns_same_instance(self):
        seen = []
        lst = List.range(0, 5)

        result = lst.each(seen.append)

        assert seen == [0, 1, 2, 3, 4, 5]
        assert result is lst

    def test_enumerate(self):
        result = List.range(10, 13).enumerate()
        assert result.to_list() == [(0, 10), (1, 11), (2, 12), (3, 13)]

    @pytest.mark.parametrize(
        "method", ["map", "compact_map", "each", "group_by", "count_by"]
    )
    def test_callback_is_required(self, numbers, method):
        with pytest.raises(InvalidArgumentError, match="'callback' must be callable"):
            getattr(numbers, method)(None)

    def test_filter_requires_predicate(self, numbers):
        with pytest.raises(InvalidArgumentError, match="'predicate' must be callable"):
            numbers.filter("not a function")

    def test_reduce_requires_callback(self, numbers):
        with pytest.raises(InvalidArgumentError):
            numbers.reduce(0, None)


class TestGrouping:
    """Test group_by and count_by."""

    def test_group_by_preserves_order(self, pets):
        groups = pets.group_by(lambda pet: pet.kind)

        assert list(groups) == ["dog", "cat"]
        assert [pet.name for pet in groups["dog"]] == ["Rex", "Fido"]
        assert [pet.name for pet in groups["cat"]] == ["Tom", "Kit"]

    def test_count_by(self):
        lst = List.of({"type": "dog"}, {"type": "cat"}, {"type": "dog"})
        assert lst.count_by(lambda o: o["type"]) == {"dog": 2, "cat": 1}

    def test_grouping_empty(self, empty):
        assert empty.group_by(str) == {}
        assert empty.count_by(str) == {}


class TestFlattenAndPipe:
    def test_flatten_one_level(self):
        lst = List.of(1, [2, 3], (4, [5, 6]), List.of(7))
        assert lst.flatten().to_list() == [1, 2, 3, 4, [5, 6], 7]

    def test_flatten_deeper(self):
        lst = List.of(1, [2, [3, [4]]])
        assert lst.flatten(2).to_list() == [1, 2, 3, [4]]
        assert lst.flatten(10).to_list() == [1, 2, 3, 4]

    def test_flatten_leaves_strings_and_dicts(self):
        lst = List.of("ab", {"k": 1}, ["c"])
        assert lst.flatten().to_list() == ["ab", {"k": 1}, "c"]

    def test_flatten_zero_depth_copies(self):
        lst = List.of([1], [2])
        assert lst.flatten(0) == lst

    def test_pipe(self, numbers):
        result = numbers.pipe(lambda lst: lst.filter(lambda x: x > 2), lambda lst: lst.sum())
        assert result == 12


class TestNumericAggregation:
    """Test aggregation over the numeric subset."""

    def test_sum(self):
        assert List.of(1, 2, 3.5).sum() == 6.5

    def test_sum_skips_non_numeric(self):
        lst = List.of(1, "2", None, True, 3, float("nan"), float("inf"))
        assert lst.sum() == 4

    def test_avg(self):
        assert List.of(1, 2, 3, 4).avg() == 2.5

    def test_avg_of_empty_is_zero(self):
        assert List.empty().avg() == 0
        assert List.of("a", None).avg() == 0

    def test_min_max(self):
        lst = List.of(4, "z", -2, 9.5)
        assert lst.min() == -2
        assert lst.max() == 9.5

    def test_min_max_of_empty(self, empty):
        assert empty.min() is None
        assert empty.max() is None

    def test_element_wise_operations(self):
        lst = List.of(-2, "x", 3)
        assert lst.abs().to_list() == [2, 3]
        assert lst.square().to_list() == [4, 9]
        assert lst.cube().to_list() == [-8, 27]
        assert lst.subtract(1).to_list() == [-3, 2]
        assert lst.divide(2).to_list() == [-1.0, 1.5]
        assert lst.power(2).to_list() == [4, 9]

    def test_sqrt_of_negative_is_nan(self):
        result = List.of(4, -1).sqrt()
        assert result.first() == 2.0
        assert math.isnan(result.last())

    def test_fractional_power_of_negative_is_nan(self):
        assert math.isnan(List.of(-8).power(0.5).first())

    def test_divide_by_zero_rejected(self, numbers):
        with pytest.raises(InvalidArgumentError, match="'divisor' must be a non-zero number"):
            numbers.divide(0)

    def test_non_numeric_operands_rejected(self, numbers):
        with pytest.raises(InvalidArgumentError):
            numbers.subtract("1")
        with pytest.raises(InvalidArgumentError):
            numbers.power(None)
