"""
casewise — `when` expressions for Python.

    from casewise import when, then, DEFAULT

    def spelled_out(n: int) -> str:
        return when(n,
            1 >> then(lambda: "one"),
            2 >> then(lambda: "two"),
            3 >> then(lambda: "three"),
            DEFAULT >> then(lambda: "I can only count up to three, sorry."),
        )
"""

from casewise._types import (
    Default,
    DEFAULT,
    Case,
    Branch,
    CaseList,
    MatchPolicy,
    NoMatch,
    NonExhaustiveMatch,
    Producer,
)
from casewise._case import associate, on, otherwise, then
from casewise._collect import cases, CasesBuilder, builder
from casewise._match import select, match, match_result, match_async, when

__version__ = "0.1.0"

__all__ = (
    # Types
    "Default",
    "DEFAULT",
    "Case",
    "Branch",
    "CaseList",
    "MatchPolicy",
    "NoMatch",
    "NonExhaustiveMatch",
    "Producer",
    # Construction
    "associate",
    "on",
    "otherwise",
    "then",
    # Collection
    "cases",
    "CasesBuilder",
    "builder",
    # Matching
    "select",
    "match",
    "match_result",
    "match_async",
    "when",
)
