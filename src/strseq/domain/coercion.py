"""Coercion policies for converting arbitrary values to text, integers and booleans.

Every conversion is split into two steps:

* a *parser* (``parse_text``, ``parse_texts``, ``parse_int``, ``parse_bool``)
  that never raises and returns a `Coerced` result carrying the converted
  value together with an explicit ``ok`` flag, and
* a *policy* (`CoercionPolicy`) that decides what happens when ``ok`` is
  False.

Two policies ship with the package:

* `LenientCoercion`: the default. Failed conversions fall back to the
  zero-equivalent (``""``, ``0``, ``False``, ``[]``). Information is lost:
  ``"0"`` and ``"abc"`` both become ``0``.
* `StrictCoercion`: failed conversions raise `CoercionError`.

Integer text is read as decimal unless it carries a ``0x``/``0o``/``0b``
prefix. Unlike base-0 parsing, a leading zero does not mean octal
(``"010"`` is 10) and digit separators are rejected (``"1_000"`` fails).

Custom policies can subclass `CoercionPolicy` and override the ``parse_*``
methods to change the conversion rules themselves.
"""

from __future__ import annotations

import abc
import logging
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from .errors import CoercionError, UnknownCoercionPolicyError

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_DECIMAL_INT = re.compile(r"[+-]?\d+")
_PREFIXED_INT = re.compile(r"[+-]?0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_ZERO_FRACTION = re.compile(r"([+-]?\d+)\.0*")


@dataclass(frozen=True, slots=True)
class Coerced(Generic[T]):
    """Result of a conversion attempt.

    Attributes:
        value: The converted value, or the zero-equivalent when ``ok`` is False.
        ok: Whether the conversion succeeded without losing information.
    """

    value: T
    ok: bool = True


# ============================================================================
#                               Parsers
# ============================================================================


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    # shortest round-trip digits, never in exponent notation
    return format(Decimal(repr(value)), "f")


def parse_text(value: Any) -> Coerced[str]:
    """Convert a scalar to its textual representation.

    Args:
        value: ``None``, a bool, a number, bytes or a string.

    Returns:
        Coerced[str]: The text, or ``""`` with ``ok=False`` for unsupported types.
    """
    match value:
        case None:
            return Coerced("")
        case str():
            return Coerced(value)
        case bool():
            return Coerced("true" if value else "false")
        case int():
            return Coerced(str(value))
        case float():
            return Coerced(_format_float(value))
        case bytes() | bytearray():
            try:
                return Coerced(bytes(value).decode("utf-8"))
            except UnicodeDecodeError:
                return Coerced("", ok=False)
        case _:
            return Coerced("", ok=False)


def parse_texts(value: Any) -> Coerced[list[str]]:
    """Convert a list-like value to a list of texts.

    Strings are split on whitespace, scalars become a single-element list and
    other iterables are converted element by element. Mappings and arbitrary
    objects are rejected.

    Args:
        value: The value to convert.

    Returns:
        Coerced[list[str]]: The texts; ``ok`` is False if any part failed.
    """
    if value is None:
        return Coerced([])
    if isinstance(value, str):
        return Coerced(value.split())
    if isinstance(value, (bool, int, float, bytes, bytearray)):
        single = parse_text(value)
        return Coerced([single.value], ok=single.ok)
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return Coerced([], ok=False)
    results = [parse_text(item) for item in value]
    return Coerced([r.value for r in results], ok=all(r.ok for r in results))


def parse_int(value: Any) -> Coerced[int]:
    """Convert a value to an integer.

    Text is stripped and a trailing zero fraction (``"3.00"``) is dropped
    before parsing as a decimal or ``0x``/``0o``/``0b`` prefixed integer.
    Floats are truncated toward zero.

    Args:
        value: The value to convert.

    Returns:
        Coerced[int]: The integer, or ``0`` with ``ok=False``.
    """
    match value:
        case bool():
            return Coerced(int(value))
        case int():
            return Coerced(value)
        case float():
            if not math.isfinite(value):
                return Coerced(0, ok=False)
            return Coerced(int(value))
        case str():
            text = value.strip()
            if m := _ZERO_FRACTION.fullmatch(text):
                text = m.group(1)
            if _DECIMAL_INT.fullmatch(text):
                return Coerced(int(text, 10))
            if _PREFIXED_INT.fullmatch(text):
                return Coerced(int(text, 0))
            return Coerced(0, ok=False)
        case None:
            return Coerced(0)
        case _:
            return Coerced(0, ok=False)


def parse_bool(value: Any) -> Coerced[bool]:
    """Convert a value to a boolean using conventional truthy-string rules.

    Args:
        value: The value to convert.

    Returns:
        Coerced[bool]: The boolean, or ``False`` with ``ok=False``.
    """
    match value:
        case bool():
            return Coerced(value)
        case int() | float():
            return Coerced(value != 0)
        case str():
            text = value.strip()
            if text in TRUE_STRINGS:
                return Coerced(True)
            if text in FALSE_STRINGS:
                return Coerced(False)
            return Coerced(False, ok=False)
        case None:
            return Coerced(False)
        case _:
            return Coerced(False, ok=False)


# ============================================================================
#                               Policies
# ============================================================================


class CoercionPolicy(abc.ABC):
    """Base class for coercion policies.

    Subclasses decide how failed conversions are settled via `settle`. The
    ``parse_*`` methods may be overridden to plug in different parsers.
    """

    name: ClassVar[str]

    def parse_text(self, value: Any) -> Coerced[str]:
        return parse_text(value)

    def parse_texts(self, value: Any) -> Coerced[list[str]]:
        return parse_texts(value)

    def parse_int(self, value: Any) -> Coerced[int]:
        return parse_int(value)

    def parse_bool(self, value: Any) -> Coerced[bool]:
        return parse_bool(value)

    @abc.abstractmethod
    def settle(self, result: Coerced[T], value: Any, target: str) -> T:
        """Turn a parse result into a value, or raise.

        Args:
            result: The parser output.
            value: The original input, for diagnostics.
            target: Human-readable name of the target type.

        Returns:
            The value to use.
        """

    def to_text(self, value: Any) -> str:
        return self.settle(self.parse_text(value), value, "str")

    def to_texts(self, value: Any) -> list[str]:
        return self.settle(self.parse_texts(value), value, "list[str]")

    def to_int(self, value: Any) -> int:
        return self.settle(self.parse_int(value), value, "int")

    def to_bool(self, value: Any) -> bool:
        return self.settle(self.parse_bool(value), value, "bool")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LenientCoercion(CoercionPolicy):
    """Best-effort coercion that never fails; failures become zero-equivalents."""

    name = "lenient"

    def settle(self, result: Coerced[T], value: Any, target: str) -> T:
        if not result.ok:
            logger.debug(
                "Lenient coercion of %r to %s failed; using %r",
                value,
                target,
                result.value,
            )
        return result.value


class StrictCoercion(CoercionPolicy):
    """Coercion that raises `CoercionError` on any failed conversion."""

    name = "strict"

    def settle(self, result: Coerced[T], value: Any, target: str) -> T:
        if not result.ok:
            raise CoercionError(value, target)
        return result.value


POLICIES: dict[str, type[CoercionPolicy]] = {
    LenientCoercion.name: LenientCoercion,
    StrictCoercion.name: StrictCoercion,
}

DEFAULT_POLICY: CoercionPolicy = LenientCoercion()


def get_policy(name: str) -> CoercionPolicy:
    """Return a policy instance by name (case-insensitive).

    Raises:
        UnknownCoercionPolicyError: If no policy is registered under ``name``.
    """
    try:
        return POLICIES[name.strip().lower()]()
    except KeyError as e:
        raise UnknownCoercionPolicyError(name) from e
