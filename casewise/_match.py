"""
Matching — select and evaluate exactly one producer.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable

from kungfu import Result, Ok, Error, LazyCoroResult, Some

from casewise._collect import cases as collect
from casewise._types import (
    Case,
    CaseList,
    MatchPolicy,
    NoMatch,
    NonExhaustiveMatch,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# select() — Linear Scan
# ═══════════════════════════════════════════════════════════════════════════════


def select[T, R](value: T, cases: CaseList[T, R]) -> Result[Case[T, R], NoMatch]:
    """
    Find the winning case without invoking any producer.

    First equal candidate wins. Otherwise the first default.
    """
    eq = cases.policy.eq
    fallback: Case[T, R] | None = None
    checked = 0

    for i, c in enumerate(cases.entries):
        match c.candidate:
            case Some(candidate):
                checked += 1
                if eq(value, candidate):
                    logger.debug("matched %r at case %d", value, i)
                    return Ok(c)
            case _:
                if fallback is None:
                    fallback = c

    if fallback is not None:
        logger.debug("no case matched %r, using default", value)
        return Ok(fallback)

    return Error(NoMatch(
        value=value,
        cases_checked=checked,
        type_hint=type(value).__name__,
    ))


# ═══════════════════════════════════════════════════════════════════════════════
# match_result() — Typed Error
# ═══════════════════════════════════════════════════════════════════════════════


def match_result[T, R](value: T, cases: CaseList[T, R]) -> Result[R, NoMatch]:
    """
    Match and evaluate, returning NoMatch instead of raising.

    Example:
        result = match_result(9, spelled)

        match result:
            case Ok(text):
                print(text)
            case Error(e):
                print(e.message)
    """
    match select(value, cases):
        case Ok(c):
            return Ok(c.produce())
        case Error(e):
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# match() — Exhaustive
# ═══════════════════════════════════════════════════════════════════════════════


def match[T, R](value: T, cases: CaseList[T, R]) -> R:
    """
    Match and evaluate the winning producer.

    A case list with no match and no default is a caller defect:
    raises NonExhaustiveMatch. Producer exceptions propagate unchanged.

    Example:
        spelled = cases(
            associate(1, lambda: "one"),
            associate(2, lambda: "two"),
            associate(DEFAULT, lambda: "many"),
        )
        match(2, spelled)  # "two"
        match(9, spelled)  # "many"
    """
    match select(value, cases):
        case Ok(c):
            return c.produce()
        case Error(e):
            raise NonExhaustiveMatch(e)


def when[T, R](
    value: T,
    *entries: Case[T, R],
    policy: MatchPolicy | None = None,
) -> R:
    """
    Inline form: collect and match in one call.

    Example:
        def spelled_out(n: int) -> str:
            return when(n,
                1 >> then(lambda: "one"),
                2 >> then(lambda: "two"),
                Default(of=int) >> then(lambda: "many"),
            )
    """
    return match(value, collect(*entries, policy=policy))


# ═══════════════════════════════════════════════════════════════════════════════
# match_async() — Lazy, Awaitable Producers
# ═══════════════════════════════════════════════════════════════════════════════


def match_async[T, R](
    value: T,
    cases: CaseList[T, Awaitable[R]],
) -> LazyCoroResult[R, NoMatch]:
    """
    Match against awaitable producers.

    Nothing runs until the result is awaited.

    Example:
        handlers = cases(
            associate("user", lambda: fetch_user(uid)),
            associate(DEFAULT, lambda: fetch_guest()),
        )
        result = await match_async(kind, handlers)
    """

    async def execute() -> Result[R, NoMatch]:
        match select(value, cases):
            case Ok(c):
                return Ok(await c.produce())
            case Error(e):
                return Error(e)

    return LazyCoroResult(execute)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("select", "match_result", "match", "when", "match_async")
