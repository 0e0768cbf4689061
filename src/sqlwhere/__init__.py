"""
sqlwhere - parameterized WHERE clauses for prepared statements

Code is organized in layers
- operations defines the predicate requests as plain data
- builder accumulates them and renders the clause and its bindings
- sqlalchemy optionally runs the result on a SQLAlchemy connection

The SQLAlchemy layer is not imported here so the core has no dependencies
"""

# Layer 1: Operation variants
from sqlwhere.operations import (
    BooleanOperation,
    Equals,
    LessThan,
    GreaterThan,
    Between,
    In,
    Like,
)

# Layer 2: Builder
from sqlwhere.builder import WhereBuilder
from sqlwhere.utils import normalize_value

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Operations
    "BooleanOperation",
    "Equals",
    "LessThan",
    "GreaterThan",
    "Between",
    "In",
    "Like",
    # Layer 2: Builder
    "WhereBuilder",
    "normalize_value",
]
