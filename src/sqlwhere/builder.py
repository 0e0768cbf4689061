"""Accumulate predicates and render them as a parameterized WHERE clause"""

import logging
from typing import Any, Iterable, Optional, Sequence

from sqlwhere.operations import (
    BooleanOperation,
    Between,
    Equals,
    GreaterThan,
    In,
    LessThan,
    Like,
)
from sqlwhere.utils.values import normalize_value

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"
CONJUNCTION = " AND "
WHERE_PREFIX = " WHERE "


class WhereBuilder:
    """Build a flat, AND-joined WHERE clause with qmark placeholders

    Each appended predicate renders at most one fragment together with the
    values for its placeholders. Fragments and values are stored as pairs,
    so the placeholders in ``clause()`` always line up with ``bindings()``.

    Example:
        >>> where = WhereBuilder().equals("a", 1).greater_than("b", 2)
        >>> where.clause()
        ' WHERE a = ? AND b > ?'
        >>> where.bindings()
        (1, 2)
        >>> sql = f"SELECT * FROM t{where.clause()} ORDER BY a"
    """

    def __init__(self, operations: Optional[Iterable[BooleanOperation]] = None):
        """Initialize empty, or replay the given operations through add()"""
        self._operations: list[BooleanOperation] = []
        self._parts: list[tuple[str, tuple[Any, ...]]] = []
        if operations is not None:
            for op in operations:
                self.add(op)

    def equals(self, column: str, value: Any) -> 'WhereBuilder':
        """Append ``column = ?``, or ``column IS NULL`` when value is None"""
        return self.add(Equals(column, value))

    def not_equals(self, column: str, value: Any) -> 'WhereBuilder':
        """Append ``column <> ?``, or ``column IS NOT NULL`` when value is None"""
        return self.add(Equals(column, value, negated=True))

    def less_than(self, column: str, value: Any) -> 'WhereBuilder':
        """Append ``column < ?``"""
        return self.add(LessThan(column, value))

    def greater_than(self, column: str, value: Any) -> 'WhereBuilder':
        """Append ``column > ?``"""
        return self.add(GreaterThan(column, value))

    def between(self, column: str, lower: Any, upper: Any) -> 'WhereBuilder':
        """Append a range on column; either bound may be None"""
        return self.add(Between(column, lower, upper))

    def in_(self, column: str, values: Optional[Sequence[Any]]) -> 'WhereBuilder':
        """Append ``column IN (?, ...)``; None or empty values add nothing"""
        return self.add(In(column, values))

    def not_in(self, column: str, values: Optional[Sequence[Any]]) -> 'WhereBuilder':
        """Append ``column NOT IN (?, ...)``; None or empty values add nothing"""
        return self.add(In(column, values, negated=True))

    def like(self, column: str, value: Any) -> 'WhereBuilder':
        """Append ``column LIKE ?`` bound to ``%value%``"""
        return self.add(Like(column, value))

    def add(self, op: BooleanOperation) -> 'WhereBuilder':
        """Append a pre-built operation

        Raises:
            TypeError: If op is not one of the supported operation types
        """
        if isinstance(op, Equals):
            part = self._render_equals(op)
        elif isinstance(op, LessThan):
            part = (f"{op.column} < {PLACEHOLDER}", (op.value,))
        elif isinstance(op, GreaterThan):
            part = (f"{op.column} > {PLACEHOLDER}", (op.value,))
        elif isinstance(op, Between):
            part = self._render_between(op)
        elif isinstance(op, In):
            part = self._render_in(op)
        elif isinstance(op, Like):
            part = (f"{op.column} LIKE {PLACEHOLDER}", (f"%{op.value}%",))
        else:
            raise TypeError(f"Unsupported operation: {type(op).__name__}")

        self._operations.append(op)
        if part is None:
            logger.debug(f"{op!r} imposes no constraint, no fragment added")
        else:
            self._parts.append(part)
        return self

    @staticmethod
    def _render_equals(op: Equals) -> tuple[str, tuple[Any, ...]]:
        if op.value is not None:
            operator = "<>" if op.negated else "="
            return f"{op.column} {operator} {PLACEHOLDER}", (op.value,)
        if op.negated:
            return f"{op.column} IS NOT NULL", ()
        return f"{op.column} IS NULL", ()

    @staticmethod
    def _render_between(op: Between) -> Optional[tuple[str, tuple[Any, ...]]]:
        if op.lower is not None and op.upper is not None:
            return (
                f"{op.column} BETWEEN {PLACEHOLDER} AND {PLACEHOLDER}",
                (op.lower, op.upper),
            )
        if op.lower is not None:
            return f"{op.column} >= {PLACEHOLDER}", (op.lower,)
        if op.upper is not None:
            return f"{op.column} <= {PLACEHOLDER}", (op.upper,)
        return None

    @staticmethod
    def _render_in(op: In) -> Optional[tuple[str, tuple[Any, ...]]]:
        if not op.values:
            return None
        operator = "NOT IN" if op.negated else "IN"
        placeholders = ", ".join(PLACEHOLDER for _ in op.values)
        return f"{op.column} {operator} ({placeholders})", tuple(op.values)

    @property
    def operations(self) -> tuple[BooleanOperation, ...]:
        """Every operation appended so far, including ones that rendered nothing"""
        return tuple(self._operations)

    def clause_body(self) -> str:
        """Get the fragments joined with AND, without the WHERE keyword"""
        return CONJUNCTION.join(fragment for fragment, _ in self._parts)

    def clause(self) -> str:
        """Get ``' WHERE <body>'``, or an empty string when nothing was added

        The leading space is intentional and there is no trailing space, so
        the result can be spliced straight after a table name:
        ``f"SELECT c FROM t{where.clause()} ORDER BY x"``.
        """
        if not self._parts:
            return ""
        return WHERE_PREFIX + self.clause_body()

    def bindings(self) -> tuple[Any, ...]:
        """Get the bind values in placeholder order, normalized for export"""
        return tuple(
            normalize_value(value)
            for _, values in self._parts
            for value in values
        )

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Get both the clause and bindings as a tuple"""
        return self.clause(), self.bindings()

    def __len__(self) -> int:
        """Number of rendered fragments"""
        return len(self._parts)

    def __repr__(self) -> str:
        """String representation"""
        return f"WhereBuilder(clause={self.clause()!r}, bindings={self.bindings()!r})"
