"""Capability model for node identifiers and edge weights.

A graph is parameterized by two capability objects:

- :class:`NodeIdType` describes the unsigned integer width used for node
  identifiers and how an identifier maps to a dense array index.
- :class:`WeightType` describes the numeric type used for edge costs, integer
  or floating point.

Each capability wraps a numpy scalar type, so arithmetic, ordering and
accumulation follow numpy semantics for that width. The capability adds the
constants (``zero``, ``one``, ``max_value``), a checked textual parse and a
checked ``add``. numpy integer scalars wrap around silently, so every sum the
algorithms form goes through ``add``, which raises ``OverflowError`` instead.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Type, TypeVar

import numpy as np

#: Node identifier value (a numpy unsigned integer scalar).
N = TypeVar("N", bound=np.unsignedinteger)

#: Edge weight value (a numpy integer or floating scalar).
W = TypeVar("W", bound=np.number)

# ASCII only: Python's int() and float() also accept "1_0" and non-ASCII digits
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_TOKEN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII
)


def parse_integer(token: str) -> int:
    """Parse a plain decimal integer token.

    Raises:
        ValueError: If ``token`` is not an optionally signed run of ASCII digits.
    """
    if not _INTEGER_TOKEN.fullmatch(token):
        raise ValueError(f"Cannot parse '{token}' as an integer")
    return int(token)


@dataclass(frozen=True)
class _NumericType:
    name: str
    scalar: Type[np.number]

    @property
    def is_integer(self) -> bool:
        return bool(np.issubdtype(self.scalar, np.integer))

    @property
    def zero(self) -> Any:
        return self.scalar(0)

    @property
    def one(self) -> Any:
        return self.scalar(1)

    @property
    def min_value(self) -> Any:
        if self.is_integer:
            return self.scalar(np.iinfo(self.scalar).min)
        return self.scalar(np.finfo(self.scalar).min)

    @property
    def max_value(self) -> Any:
        if self.is_integer:
            return self.scalar(np.iinfo(self.scalar).max)
        return self.scalar(np.finfo(self.scalar).max)

    def cast(self, value: Any) -> Any:
        """Convert a Python number to this type, rejecting out-of-range values.

        Raises:
            ValueError: If ``value`` cannot be represented by this type.
        """
        if self.is_integer:
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"Value {value} is not an integer ({self.name})")
            info = np.iinfo(self.scalar)
            if not info.min <= value <= info.max:
                raise ValueError(
                    f"Value {value} is out of range [{info.min}, {info.max}] "
                    f"for {self.name}"
                )
            return self.scalar(int(value))

        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Value {value} is not finite ({self.name})")
        if abs(value) > float(np.finfo(self.scalar).max):
            raise ValueError(f"Value {value} is out of range for {self.name}")
        return self.scalar(value)

    def parse(self, token: str) -> Any:
        """Parse a text token into a value of this type.

        Raises:
            ValueError: If the token is not a number or is out of range.
        """
        pattern = _INTEGER_TOKEN if self.is_integer else _FLOAT_TOKEN
        if not pattern.fullmatch(token):
            raise ValueError(f"Cannot parse '{token}' as {self.name}")
        value: Any = int(token) if self.is_integer else float(token)
        return self.cast(value)

    def add(self, a: Any, b: Any) -> Any:
        """Return ``a + b`` as this type, refusing to wrap around.

        Raises:
            OverflowError: If the exact sum is not representable.
        """
        if self.is_integer:
            total = int(a) + int(b)
            info = np.iinfo(self.scalar)
            if not info.min <= total <= info.max:
                raise OverflowError(
                    f"Sum {a} + {b} = {total} overflows {self.name} "
                    f"[{info.min}, {info.max}]"
                )
            return self.scalar(total)

        total = float(a) + float(b)
        if not abs(total) <= float(np.finfo(self.scalar).max):
            raise OverflowError(f"Sum {a} + {b} overflows {self.name}")
        return self.scalar(total)


@dataclass(frozen=True)
class NodeIdType(_NumericType):
    """Unsigned integer type used for node identifiers."""

    def to_index(self, node: Any) -> int:
        """Return the dense array index for ``node``."""
        return int(node)

    def from_index(self, index: int) -> Any:
        """Return the node identifier stored at dense ``index``."""
        return self.cast(index)


@dataclass(frozen=True)
class WeightType(_NumericType):
    """Integer or floating-point type used for edge costs."""


NODE_ID_TYPES: Dict[str, NodeIdType] = {
    "u8": NodeIdType("u8", np.uint8),
    "u16": NodeIdType("u16", np.uint16),
    "u32": NodeIdType("u32", np.uint32),
    "u64": NodeIdType("u64", np.uint64),
    "usize": NodeIdType("usize", np.uintp),
}

#: Registered edge weight types. There is no ``u128`` or ``i128``: numpy has
#: no 128-bit integer scalars, and a Python ``int`` stand-in would not share
#: the fixed-width arithmetic the other entries rely on.
WEIGHT_TYPES: Dict[str, WeightType] = {
    "u8": WeightType("u8", np.uint8),
    "u16": WeightType("u16", np.uint16),
    "u32": WeightType("u32", np.uint32),
    "u64": WeightType("u64", np.uint64),
    "i8": WeightType("i8", np.int8),
    "i16": WeightType("i16", np.int16),
    "i32": WeightType("i32", np.int32),
    "i64": WeightType("i64", np.int64),
    "f32": WeightType("f32", np.float32),
    "f64": WeightType("f64", np.float64),
}


def get_node_id_type(name: str) -> NodeIdType:
    """Resolve a node identifier type by name (case-insensitive).

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        return NODE_ID_TYPES[name.lower()]
    except KeyError:
        valid = ", ".join(NODE_ID_TYPES)
        raise ValueError(
            f"Invalid node id type '{name}'. Valid values are: {valid}"
        ) from None


def get_weight_type(name: str) -> WeightType:
    """Resolve an edge weight type by name (case-insensitive).

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        return WEIGHT_TYPES[name.lower()]
    except KeyError:
        valid = ", ".join(WEIGHT_TYPES)
        raise ValueError(
            f"Invalid weight type '{name}'. Valid values are: {valid}"
        ) from None
