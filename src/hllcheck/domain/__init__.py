"""Domain model for hllcheck.

Re-exports the public types for convenient access:
    from hllcheck.domain import Result, ResultSet, InvalidParameter
"""
from hllcheck.domain.errors import (
    ConfigurationError,
    HllCheckError,
    InvalidParameter,
    NotReady,
)
from hllcheck.domain.results import Result, ResultSet
from hllcheck.domain.types import Cardinality, EncodedValue, Percent, StreamValue

__all__ = [
    "Cardinality",
    "ConfigurationError",
    "EncodedValue",
    "HllCheckError",
    "InvalidParameter",
    "NotReady",
    "Percent",
    "Result",
    "ResultSet",
    "StreamValue",
]
