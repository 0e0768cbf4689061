"""Boolean operation variants accepted by WhereBuilder.add

Each variant is a plain frozen dataclass describing one predicate request.
Rendering lives in the builder, not here.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class BooleanOperation:
    """Base class for all predicate requests on a single column"""

    column: str


@dataclass(frozen=True)
class Equals(BooleanOperation):
    """Equality (or inequality when negated); None means IS [NOT] NULL"""

    value: Any
    negated: bool = False


@dataclass(frozen=True)
class LessThan(BooleanOperation):
    value: Any


@dataclass(frozen=True)
class GreaterThan(BooleanOperation):
    value: Any


@dataclass(frozen=True)
class Between(BooleanOperation):
    """Range with optional bounds

    A missing lower bound becomes ``<=``, a missing upper bound becomes
    ``>=``, and with neither bound the operation renders nothing.
    """

    lower: Any = None
    upper: Any = None


@dataclass(frozen=True)
class In(BooleanOperation):
    """Set membership (NOT IN when negated)

    ``values`` is stored as a tuple. None or an empty sequence renders
    nothing, so an empty list never filters rows out. A bare ``str`` or
    ``bytes`` is rejected instead of being split into characters.
    """

    values: Optional[Sequence[Any]] = None
    negated: bool = False

    def __post_init__(self):
        """Freeze values into a tuple"""
        if isinstance(self.values, (str, bytes)):
            msg = (
                f"In values for {self.column!r} must be a sequence of values, "
                f"not {type(self.values).__name__}: {self.values!r}"
            )
            raise TypeError(msg)
        if self.values is not None:
            object.__setattr__(self, 'values', tuple(self.values))


@dataclass(frozen=True)
class Like(BooleanOperation):
    """Substring match; the value is wrapped in ``%`` without escaping"""

    value: Any
