"""Immutable ordered sequence entity.

:class:`List` wraps a dense tuple of elements and exposes a functional API
for access, transformation, structural editing, set-like operations,
numeric aggregation and ordering. Every operation that looks like a
mutation returns a new instance; the receiver is never altered.

Index arguments follow one contract throughout: negative indices count
from the end, and an index that still falls outside the list after that
resolution yields ``None``, an empty list or an unchanged copy, never an
error.
"""

from collections.abc import Callable, Iterable, Iterator
import copy
from functools import cmp_to_key, reduce as fold
from itertools import dropwhile, takewhile
import math
import operator
from random import Random
from typing import Any, Generic, TypeVar

from attrs import define, field
from toolz import concat, countby, groupby, partition_all
from toolz import pipe as thread

from immutable_list.config import get_logger, logged_operation
from immutable_list.domain.errors import InvalidArgumentError
from immutable_list.domain.randomness import resolve_random

from .shared import (
    ItemSet,
    in_bounds,
    is_defined,
    is_numeric,
    require_callable,
    resolve_index,
    same_value,
)

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")

Number = int | float


@define(frozen=True, slots=True, repr=False)
class List(Generic[T]):
    """Immutable, generic, ordered sequence.

    Build instances with :meth:`empty`, :meth:`of`, :meth:`from_iterable`
    or :meth:`range`. Two lists are equal when their element sequences
    compare equal; a list is hashable when its elements are. Membership
    and set-like operations are stricter, see :meth:`has`.

    Example:
        >>> List.of(3, 1, 2).sort().append(4).to_list()
        [1, 2, 3, 4]
    """

    _items: tuple[T, ...] = field(factory=tuple, converter=tuple)

    # === Construction ===

    @classmethod
    def empty(cls) -> "List[T]":
        return cls()

    @classmethod
    def of(cls, *items: T) -> "List[T]":
        return cls(items)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "List[T]":
        """Copy the elements produced by any finite iterable, in order."""
        return cls(iterable)

    @classmethod
    @logged_operation("range")
    def range(cls, start: Number, stop: Number, step: Number = 1) -> "List[Number]":
        """Numbers from ``start`` up to and including ``stop``.

        Args:
            start: First value
            stop: Inclusive upper bound
            step: Strictly positive increment

        Raises:
            InvalidArgumentError: If step is not a positive number or a
                bound is not a finite number
        """
        if not is_numeric(step) or step <= 0:
            raise InvalidArgumentError("'step' must be a positive number")
        if not (is_numeric(start) and is_numeric(stop)):
            raise InvalidArgumentError("'start' and 'stop' must be finite numbers")

        if start > stop:
            return cls()

        # Values are start + k*step; the float quotient only estimates the
        # last k
        last = math.floor((stop - start) / step)
        while start + (last + 1) * step <= stop:
            last += 1
        while last > 0 and start + last * step > stop:
            last -= 1
        return cls(start + k * step for k in range(last + 1))

    # === Access ===

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def at(self, index: int) -> T | None:
        """Element at ``index`` (negative counts from the end), or None."""
        resolved = resolve_index(len(self._items), index)
        if not in_bounds(len(self._items), resolved):
            return None
        return self._items[resolved]

    def first(self) -> T | None:
        return self.at(0)

    def last(self) -> T | None:
        return self.at(-1)

    def has(self, item: Any) -> bool:
        """Check for an element that is the same value as ``item``.

        Scalars match by type and value; other objects only by identity,
        so an equal but distinct list is not found.
        """
        return any(same_value(element, item) for element in self._items)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        require_callable(predicate, "predicate")
        return next((item for item in self._items if predicate(item)), None)

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        require_callable(predicate, "predicate")
        return next(
            (i for i, item in enumerate(self._items) if predicate(item)),
            -1,
        )

    def find_last(self, predicate: Callable[[T], bool]) -> T | None:
        require_callable(predicate, "predicate")
        return next((item for item in reversed(self._items) if predicate(item)), None)

    def find_last_index(self, predicate: Callable[[T], bool]) -> int:
        require_callable(predicate, "predicate")
        return next(
            (
                i
                for i in range(len(self._items) - 1, -1, -1)
                if predicate(self._items[i])
            ),
            -1,
        )

    def some(self, predicate: Callable[[T], bool]) -> bool:
        require_callable(predicate, "predicate")
        return any(predicate(item) for item in self._items)

    def every(self, predicate: Callable[[T], bool]) -> bool:
        require_callable(predicate, "predicate")
        return all(predicate(item) for item in self._items)

    # === Transformation ===

    def map(self, callback: Callable[[T], U]) -> "List[U]":
        require_callable(callback)
        return self._derive(callback(item) for item in self._items)

    def filter(self, predicate: Callable[[T], bool]) -> "List[T]":
        require_callable(predicate, "predicate")
        return self._derive(item for item in self._items if predicate(item))

    def compact(self) -> "List[T]":
        """Drop None elements."""
        return self.filter(is_defined)

    def compact_map(self, callback: Callable[[T], U | None]) -> "List[U]":
        """Map, then drop None results, in a single pass."""
        require_callable(callback)
        return self._derive(
            result
            for result in (callback(item) for item in self._items)
            if result is not None
        )

    def reduce(self, initial: U, callback: Callable[[U, T], U]) -> U:
        """Left fold: ``acc = callback(acc, item)`` for each item in order."""
        require_callable(callback)
        return fold(callback, self._items, initial)

    def each(self, callback: Callable[[T], Any]) -> "List[T]":
        """Call ``callback`` for every element; returns this same instance."""
        require_callable(callback)
        for item in self._items:
            callback(item)
        return self

    def enumerate(self) -> "List[tuple[int, T]]":
        return self._derive(enumerate(self._items))

    def group_by(self, key_fn: Callable[[T], K]) -> dict[K, list[T]]:
        """Partition elements by key, in first-seen key order."""
        require_callable(key_fn)
        return groupby(key_fn, self._items)

    def count_by(self, key_fn: Callable[[T], K]) -> dict[K, int]:
        require_callable(key_fn)
        return dict(countby(key_fn, self._items))

    def flatten(self, depth: int = 1) -> "List[Any]":
        """Splice nested lists, tuples and Lists into the result.

        Args:
            depth: How many levels of nesting to flatten; below 1 copies
        """
        return self._derive(_flatten_items(self._items, depth))

    def pipe(self, *functions: Callable[[Any], Any]) -> Any:
        """Thread this list through ``functions`` left to right."""
        for function in functions:
            require_callable(function, "function")
        return thread(self, *functions)

    # === Numeric aggregation ===
    # Only finite int/float/Fraction elements take part; everything else
    # is skipped silently.

    def _numbers(self) -> list[Number]:
        return [item for item in self._items if is_numeric(item)]

    def sum(self) -> Number:
        return sum(self._numbers())

    def avg(self) -> Number:
        """Arithmetic mean of the numeric elements, 0 when there are none."""
        numbers = self._numbers()
        if not numbers:
            return 0
        return sum(numbers) / len(numbers)

    def min(self) -> Number | None:
        return min(self._numbers(), default=None)

    def max(self) -> Number | None:
        return max(self._numbers(), default=None)

    def abs(self) -> "List[Number]":
        return self._derive(abs(number) for number in self._numbers())

    def square(self) -> "List[Number]":
        return self._derive(number * number for number in self._numbers())

    def cube(self) -> "List[Number]":
        return self._derive(number**3 for number in self._numbers())

    def sqrt(self) -> "List[float]":
        """Square roots; negative inputs map to NaN."""
        return self._derive(
            math.sqrt(number) if number >= 0 else math.nan
            for number in self._numbers()
        )

    @logged_operation("power")
    def power(self, exponent: Number) -> "List[Number]":
        if not is_numeric(exponent):
            raise InvalidArgumentError("'exponent' must be a finite number")
        return self._derive(_power(number, exponent) for number in self._numbers())

    @logged_operation("divide")
    def divide(self, divisor: Number) -> "List[Number]":
        if not is_numeric(divisor) or divisor == 0:
            raise InvalidArgumentError("'divisor' must be a non-zero number")
        return self._derive(number / divisor for number in self._numbers())

    @logged_operation("subtract")
    def subtract(self, amount: Number) -> "List[Number]":
        if not is_numeric(amount):
            raise InvalidArgumentError("'amount' must be a finite number")
        return self._derive(number - amount for number in self._numbers())

    # === Structural editing ===

    def append(self, *items: T) -> "List[T]":
        return self._derive(self._items + items)

    def prepend(self, *items: T) -> "List[T]":
        return self._derive(items + self._items)

    def concat(self, *others: Iterable[T]) -> "List[T]":
        return self._derive(concat([self._items, *others]))

    def insert_at(self, index: int, item: T) -> "List[T]":
        """Insert before ``index``; an index equal to the size appends."""
        size = len(self._items)
        resolved = resolve_index(size, index)
        if not 0 <= resolved <= size:
            logger.debug(f"insert_at ignored: index {index} out of range for size {size}")
            return self.clone()
        return self._derive(self._items[:resolved] + (item,) + self._items[resolved:])

    def remove_at(self, index: int) -> "List[T]":
        resolved = resolve_index(len(self._items), index)
        if not in_bounds(len(self._items), resolved):
            logger.debug(f"remove_at ignored: index {index} out of range")
            return self.clone()
        return self._derive(self._items[:resolved] + self._items[resolved + 1 :])

    def replace_at(self, index: int, item: T) -> "List[T]":
        resolved = resolve_index(len(self._items), index)
        if not in_bounds(len(self._items), resolved):
            logger.debug(f"replace_at ignored: index {index} out of range")
            return self.clone()
        return self._derive(
            self._items[:resolved] + (item,) + self._items[resolved + 1 :]
        )

    def update_at(self, index: int, callback: Callable[[T], T]) -> "List[T]":
        """Replace the element at ``index`` with ``callback(element)``."""
        require_callable(callback)
        resolved = resolve_index(len(self._items), index)
        if not in_bounds(len(self._items), resolved):
            logger.debug(f"update_at ignored: index {index} out of range")
            return self.clone()
        return self.replace_at(resolved, callback(self._items[resolved]))

    def swap(self, index1: int, index2: int) -> "List[T]":
        """Exchange two elements.

        Returns an unchanged copy when either index is out of range.
        """
        size = len(self._items)
        first = resolve_index(size, index1)
        second = resolve_index(size, index2)
        if not (in_bounds(size, first) and in_bounds(size, second)):
            logger.debug(f"swap ignored: indices ({index1}, {index2}) out of range")
            return self.clone()

        items = list(self._items)
        items[first], items[second] = items[second], items[first]
        return self._derive(items)

    def move(self, from_index: int, to_index: int) -> "List[T]":
        """Remove the element at ``from_index`` and reinsert it at ``to_index``.

        ``to_index`` is taken in the coordinates left after the removal, so
        it shifts down by one when it lies after ``from_index``. Returns
        this same instance when either index is out of range.
        """
        size = len(self._items)
        source = resolve_index(size, from_index)
        target = resolve_index(size, to_index)
        if not (in_bounds(size, source) and in_bounds(size, target)):
            logger.debug(f"move ignored: indices ({from_index}, {to_index}) out of range")
            return self

        items = list(self._items)
        item = items.pop(source)
        if target > source:
            target -= 1
        items.insert(target, item)
        return self._derive(items)

    def slice(self, start: int | None = None, end: int | None = None) -> "List[T]":
        """Half-open range ``[start, end)``, clamped to the list bounds."""
        return self._derive(self._items[start:end])

    def splice(
        self,
        start: int | None = None,
        delete_count: int | None = None,
        *items: T,
    ) -> "List[T]":
        """Remove ``delete_count`` elements at ``start`` and insert ``items``.

        Without ``start`` the result is a copy; without ``delete_count`` it
        is everything before ``start``; a negative ``delete_count`` also
        gives a copy.
        """
        if start is None:
            return self.slice()

        size = len(self._items)
        resolved = min(max(resolve_index(size, start), 0), size)

        if delete_count is None:
            return self.slice(0, resolved)
        if delete_count < 0:
            return self.slice()

        return self._derive(
            self._items[:resolved] + items + self._items[resolved + delete_count :]
        )

    @logged_operation("chunk")
    def chunk(self, size: int) -> "List[List[T]]":
        """Consecutive groups of ``size`` elements; the last may be shorter."""
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidArgumentError("'size' must be a positive integer")
        return self._derive(
            self._derive(group) for group in partition_all(size, self._items)
        )

    @logged_operation("drop")
    def drop(self, count: int) -> "List[T]":
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidArgumentError("'count' must be greater than zero")
        return self._derive(self._items[count:])

    def take(self, count: int) -> "List[T]":
        """First ``count`` elements; negative counts give an empty list."""
        return self._derive(self._items[: max(count, 0)])

    def drop_while(self, predicate: Callable[[T], bool]) -> "List[T]":
        require_callable(predicate, "predicate")
        return self._derive(dropwhile(predicate, self._items))

    def take_while(self, predicate: Callable[[T], bool]) -> "List[T]":
        require_callable(predicate, "predicate")
        return self._derive(takewhile(predicate, self._items))

    def tail(self) -> "List[T]":
        return self._derive(self._items[1:])

    # === Set-like operations ===

    def unique(self) -> "List[T]":
        """Keep the first occurrence of each distinct value (see :meth:`has`)."""
        seen = ItemSet()
        unique_items = []
        for item in self._items:
            if item not in seen:
                seen.add(item)
                unique_items.append(item)
        return self._derive(unique_items)

    def union(self, other: Iterable[T]) -> "List[T]":
        return self.concat(other).unique()

    def intersection(self, other: Iterable[T]) -> "List[T]":
        """Elements found in both, each at most once, in this list's order."""
        remaining = ItemSet(other)
        shared_items = []
        for item in self._items:
            if item in remaining:
                shared_items.append(item)
                remaining.discard(item)
        return self._derive(shared_items)

    def difference(self, other: Iterable[T]) -> "List[T]":
        """Elements absent from ``other``, keeping order and repeats."""
        excluded = ItemSet(other)
        return self._derive(item for item in self._items if item not in excluded)

    def zip(self, other: Iterable[U]) -> "List[tuple[T, U]]":
        return self._derive(zip(self._items, other))

    # === Ordering ===

    def sort(self, compare: Callable[[T, T], int] | None = None) -> "List[T]":
        """Stable sort, ascending by ``<`` unless a comparator is given.

        Args:
            compare: Three-way comparator; a negative result puts its first
                argument before the second

        Raises:
            TypeError: Without a comparator, when elements cannot be ordered
                by ``<`` (None mixed with numbers, str mixed with int)
        """
        if compare is None:
            return self._derive(sorted(self._items))
        require_callable(compare, "compare")
        return self._derive(sorted(self._items, key=cmp_to_key(compare)))

    def sort_by(self, key: Callable[[T], Any], reverse: bool = False) -> "List[T]":
        require_callable(key, "key")
        return self._derive(sorted(self._items, key=key, reverse=reverse))

    def reverse(self) -> "List[T]":
        return self._derive(reversed(self._items))

    def shuffle(self, rng: Random | None = None) -> "List[T]":
        """Same elements in uniformly random order (Fisher-Yates on a copy).

        Args:
            rng: Random source to use instead of the ambient one
        """
        items = list(self._items)
        resolve_random(rng).shuffle(items)
        return self._derive(items)

    def random(self, rng: Random | None = None) -> T | None:
        """One uniformly chosen element, or None when empty."""
        if not self._items:
            return None
        return resolve_random(rng).choice(self._items)

    # === Conversion ===

    def clone(self, deep: bool = False) -> "List[T]":
        """Copy the list; ``deep`` also copies the elements recursively."""
        if deep:
            return self._derive(copy.deepcopy(self._items))
        return self._derive(self._items)

    def to_list(self) -> list[T]:
        return list(self._items)

    def to_json(self) -> list[T]:
        """Plain-list form used by :func:`json_default`."""
        return list(self._items)

    # === Python protocols ===

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: Any) -> bool:
        return self.has(item)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._items[index])
        position = operator.index(index)
        resolved = resolve_index(len(self._items), position)
        if not in_bounds(len(self._items), resolved):
            raise IndexError(
                f"List index {position} out of range for size {len(self._items)}"
            )
        return self._items[resolved]

    def __add__(self, other: Any) -> "List[T]":
        if not isinstance(other, List):
            return NotImplemented
        return self.concat(other)

    def __str__(self) -> str:
        """Comma-joined elements; None renders as an empty field."""
        return ",".join("" if item is None else str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.of({', '.join(map(repr, self._items))})"

    def _derive(self, items: Iterable[Any]) -> "List[Any]":
        return self.__class__(items)


def json_default(value: Any) -> Any:
    """``default`` hook for ``json.dumps`` that serializes List instances.

    Example:
        >>> json.dumps({"ids": List.of(1, 2)}, default=json_default)
        '{"ids": [1, 2]}'
    """
    if isinstance(value, List):
        return value.to_json()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _flatten_items(items: Iterable[Any], depth: int) -> Iterator[Any]:
    for item in items:
        if depth >= 1 and isinstance(item, list | tuple | List):
            yield from _flatten_items(item, depth - 1)
        else:
            yield item


def _power(base: Number, exponent: Number) -> Number:
    try:
        result = base**exponent
    except ZeroDivisionError:
        return math.inf
    except OverflowError:
        return math.inf
    # Fractional powers of negative numbers come back complex
    return math.nan if isinstance(result, complex) else result
