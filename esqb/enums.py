"""String enumerations used in query clauses."""

from __future__ import annotations

from enum import Enum

__all__ = ["Operator", "ScoreMode", "Mode", "Order"]


class _StrEnum(str, Enum):
    """A string-valued enum that prints and serialises as its value."""

    def __str__(self) -> str:
        return str(self.value)


class Operator(_StrEnum):
    """Logical operator that combines the terms of a match query."""

    OR = "or"
    AND = "and"


class ScoreMode(_StrEnum):
    """How the scores of matching nested documents are combined."""

    AVG = "avg"
    MAX = "max"
    MIN = "min"
    NONE = "none"
    SUM = "sum"


class Mode(_StrEnum):
    """How a multi-valued field is reduced to one value when sorting."""

    MIN = "min"
    MAX = "max"
    SUM = "sum"
    AVG = "avg"
    MEDIAN = "median"
    DEFAULT = "_default"


class Order(_StrEnum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
    DEFAULT = "_default"