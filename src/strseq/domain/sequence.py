"""Ordered sequence of string-encoded values.

`OrderedStringSequence` wraps a ``list[str]`` and offers the convenience
operations of a dynamic-language list: append, insert, remove, pop,
membership, count, union, sum/min/max and coercion of the elements to
integers, booleans or strings.

Invariants:

* Every element is stored as text. Inputs are converted with the
  instance's `CoercionPolicy`.
* Each instance owns its storage. Constructors and `copy` never share the
  backing list with another instance.
* The length is always derived from the backing list, so it cannot go stale
  after mutation.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, overload

from .coercion import DEFAULT_POLICY, CoercionPolicy
from .errors import EmptySequenceError, SequenceIndexError

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


class OrderedStringSequence:
    """A mutable, ordered sequence of textual values.

    Args:
        items: Values to store; each one is converted to text.
        policy: Coercion policy for all conversions performed by this
            instance. Defaults to `LenientCoercion`.

    Example:
        >>> seq = OrderedStringSequence.from_value(["3", "1", 2])
        >>> seq.min(), seq.max(), seq.sum()
        (1, 3, 6)
    """

    __slots__ = ("_items", "_policy", "_exponent")
    __hash__ = None  # type: ignore[assignment]  # mutable

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        policy: CoercionPolicy | None = None,
    ) -> None:
        self._policy = policy or DEFAULT_POLICY
        self._items: list[str] = [self._policy.to_text(item) for item in items]
        self._exponent: int | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: Any, *, policy: CoercionPolicy | None = None) -> Self:
        """Coerce an arbitrary list-like value into a sequence.

        Strings are split on whitespace and scalars become a single element.
        Under the lenient policy an unsupported value yields an empty (or
        best-effort) sequence instead of an error.
        """
        policy = policy or DEFAULT_POLICY
        seq = cls(policy=policy)
        seq._items = policy.to_texts(value)
        return seq

    @classmethod
    def empty(cls, *, policy: CoercionPolicy | None = None) -> Self:
        """Return a zero-length sequence."""
        return cls(policy=policy)

    @classmethod
    def from_fixed_point(
        cls, value: Any, length: int, *, policy: CoercionPolicy | None = None
    ) -> Self:
        """Build a single-element sequence tagged with a fixed-point exponent.

        The element is the coercion of ``value``; ``length`` is kept as the
        `exponent` attribute (``value * 10 ** length``) and has no bearing on
        the size of the sequence.
        """
        seq = cls([value], policy=policy)
        seq._exponent = length
        return seq

    def copy(self) -> Self:
        """Return an independent copy; mutations to one are not seen by the other."""
        dup = type(self)(policy=self._policy)
        dup._items = list(self._items)
        dup._exponent = self._exponent
        return dup

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    def _derive(self, items: list[str]) -> Self:
        seq = type(self)(policy=self._policy)
        seq._items = items
        return seq

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def policy(self) -> CoercionPolicy:
        return self._policy

    @property
    def exponent(self) -> int | None:
        return self._exponent

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Return the current number of elements."""
        return len(self._items)

    def to_ints(self) -> list[int]:
        return [self._policy.to_int(item) for item in self._items]

    def to_bools(self) -> list[bool]:
        return [self._policy.to_bool(item) for item in self._items]

    def to_strings(self) -> list[str]:
        return list(self._items)

    def min(self) -> int:
        """Return the smallest element as an integer.

        Raises:
            EmptySequenceError: If the sequence has no elements.
        """
        if not self._items:
            raise EmptySequenceError("min")
        return min(self.to_ints())

    def max(self) -> int:
        """Return the largest element as an integer.

        Raises:
            EmptySequenceError: If the sequence has no elements.
        """
        if not self._items:
            raise EmptySequenceError("max")
        return max(self.to_ints())

    def sum(self) -> int:
        return sum(self.to_ints())

    def abs(self) -> Self:
        """Return a new sequence with negative integers replaced by their magnitude.

        Elements that are not negative integers are kept verbatim.
        """
        out: list[str] = []
        for item in self._items:
            number = self._policy.to_int(item)
            out.append(str(-number) if number < 0 else item)
        return self._derive(out)

    def contains(self, value: Any) -> bool:
        return self.index_of(value) != -1

    def index_of(self, value: Any) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        target = self._policy.to_text(value)
        for i, item in enumerate(self._items):
            if item == target:
                return i
        return -1

    def count(self, value: Any) -> int:
        target = self._policy.to_text(value)
        return sum(1 for item in self._items if item == target)

    def equal(self, other: OrderedStringSequence) -> bool:
        """Element-wise, order- and length-sensitive equality."""
        return self._items == other._items

    def equals(self, other: OrderedStringSequence) -> bool:
        """Deprecated alias of `equal`."""
        warnings.warn(
            "equals() is deprecated, use equal() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.equal(other)

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------

    def add(self, other: OrderedStringSequence) -> Self:
        """Return the concatenation of this sequence and ``other``."""
        return self._derive(self._items + other._items)

    def union(self, other: OrderedStringSequence) -> Self:
        """Return the distinct elements of both sequences.

        Elements appear in order of first occurrence, scanning this sequence
        and then ``other``.
        """
        return self._derive(list(dict.fromkeys(self._items + other._items)))

    def sub(self, other: OrderedStringSequence) -> Self:
        """Deprecated alias of `union`; it never computed a difference."""
        warnings.warn(
            "sub() returns the union of both sequences; use union() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.union(other)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def extend(self, values: Any) -> None:
        self._items.extend(self._policy.to_texts(values))

    def append(self, value: Any) -> None:
        self._items.append(self._policy.to_text(value))

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index``.

        Raises:
            SequenceIndexError: Unless ``0 <= index <= len(self)``.
        """
        size = len(self._items)
        if not 0 <= index <= size:
            raise SequenceIndexError("insert", index, size)
        self._items.insert(index, self._policy.to_text(value))

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``.

        Returns:
            bool: True if an element was removed, False if none matched.
        """
        index = self.index_of(value)
        if index == -1:
            logger.debug("remove(%r): no matching element", value)
            return False
        del self._items[index]
        return True

    def pop(self, index: int = -1) -> str:
        """Remove and return the element at ``index``.

        Negative indices count from the end of the current contents.

        Raises:
            SequenceIndexError: If ``index`` is out of range.
        """
        size = len(self._items)
        effective = size + index if index < 0 else index
        if not 0 <= effective < size:
            raise SequenceIndexError("pop", index, size)
        return self._items.pop(effective)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def value(self) -> list[str]:
        """Return the string-sequence form used by persistence adapters."""
        return list(self._items)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    @overload
    def __getitem__(self, index: int) -> str: ...
    @overload
    def __getitem__(self, index: slice) -> Self: ...
    def __getitem__(self, index: int | slice) -> str | Self:
        if isinstance(index, slice):
            return self._derive(self._items[index])
        try:
            return self._items[index]
        except IndexError as e:
            raise SequenceIndexError("getitem", index, len(self._items)) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedStringSequence):
            return NotImplemented
        return self.equal(other)

    def __add__(self, other: object) -> Self:
        if not isinstance(other, OrderedStringSequence):
            return NotImplemented
        return self.add(other)

    def __or__(self, other: object) -> Self:
        if not isinstance(other, OrderedStringSequence):
            return NotImplemented
        return self.union(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
