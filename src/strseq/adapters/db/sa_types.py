"""Custom SQLAlchemy types for strseq.

`StringSequenceType` is the serialization hook of `OrderedStringSequence`:
it stores the sequence's string-sequence form (`OrderedStringSequence.value`)
in a JSON column and rebuilds the sequence when rows are loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator

from strseq.domain.coercion import DEFAULT_POLICY, CoercionPolicy
from strseq.domain.sequence import OrderedStringSequence

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["PORTABLE_JSON", "StringSequenceType"]


PORTABLE_JSON = JSON(none_as_null=True).with_variant(
    JSONB(none_as_null=True), "postgresql"
)


class StringSequenceType(TypeDecorator[OrderedStringSequence]):  # pylint: disable=too-many-ancestors
    """JSON-backed column holding an `OrderedStringSequence`.

    Bound values may be an `OrderedStringSequence` or any list-like value
    accepted by `OrderedStringSequence.from_value`. Loaded values are always
    `OrderedStringSequence` instances using the column's coercion policy.

    Args:
        policy: Coercion policy used for bound list-like values and for
            sequences rebuilt from rows.
    """

    impl = PORTABLE_JSON
    cache_ok = True

    def __init__(self, policy: CoercionPolicy | None = None) -> None:
        super().__init__()
        self.policy = policy or DEFAULT_POLICY

    def process_bind_param(
        self, value: OrderedStringSequence | Any | None, dialect: Dialect
    ) -> list[str] | None:
        if value is None:
            return None
        if not isinstance(value, OrderedStringSequence):
            value = OrderedStringSequence.from_value(value, policy=self.policy)
        return value.value()

    def process_result_value(
        self, value: Any, dialect: Dialect
    ) -> OrderedStringSequence | None:
        if value is None:
            return None
        return OrderedStringSequence.from_value(value, policy=self.policy)

    def process_literal_param(self, value: Any, dialect: Dialect) -> Any:
        # just reuse bind logic for literal rendering
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[OrderedStringSequence]:
        return OrderedStringSequence
