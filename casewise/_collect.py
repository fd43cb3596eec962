"""
Case collection — variadic collector and fluent builder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from casewise._case import on as make_on, otherwise as make_otherwise
from casewise._types import Case, CaseList, MatchPolicy, Producer

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# cases() — Variadic Collector
# ═══════════════════════════════════════════════════════════════════════════════


def cases[T, R](
    *entries: Case[T, R],
    policy: MatchPolicy | None = None,
) -> CaseList[T, R]:
    """
    Collect cases in declaration order.

    Example:
        from casewise import cases, associate, DEFAULT

        spelled = cases(
            associate(1, lambda: "one"),
            associate(2, lambda: "two"),
            associate(DEFAULT, lambda: "many"),
        )
    """
    policy = policy if policy is not None else MatchPolicy()

    for i, entry in enumerate(entries):
        if not isinstance(entry, Case):
            raise TypeError(f"entry {i} is not a Case: {entry!r}")

    if policy.warn_unreachable:
        _warn_unreachable_defaults(entries)

    return CaseList(entries=entries, policy=policy)


def _warn_unreachable_defaults(entries: tuple[Case[object, object], ...]) -> None:
    defaults = [i for i, c in enumerate(entries) if c.is_default]
    for i in defaults[1:]:
        logger.warning(
            "%s at position %d is unreachable, %s at position %d wins",
            entries[i].label,
            i,
            entries[defaults[0]].label,
            defaults[0],
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CasesBuilder — Fluent API
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class CasesBuilder[T, R]:
    """
    Fluent case builder. Each step returns a new builder.

    Example:
        spelled = (
            builder()
            .on(1, lambda: "one")
            .on(2, lambda: "two")
            .otherwise(lambda: "many")
            .build()
        )
    """

    _entries: tuple[Case[T, R], ...] = ()
    _policy: MatchPolicy = field(default_factory=MatchPolicy)

    def case(self, c: Case[T, R]) -> CasesBuilder[T, R]:
        """Append a prebuilt case."""
        return CasesBuilder(_entries=(*self._entries, c), _policy=self._policy)

    def on(self, value: T, producer: Producer[R]) -> CasesBuilder[T, R]:
        """Append positive case."""
        return self.case(make_on(value, producer))

    def otherwise(self, producer: Producer[R]) -> CasesBuilder[T, R]:
        """Append default case."""
        return self.case(make_otherwise(producer))

    def build(self) -> CaseList[T, R]:
        """Collect into a CaseList."""
        return cases(*self._entries, policy=self._policy)


def builder(policy: MatchPolicy | None = None) -> CasesBuilder[object, object]:
    """Create empty builder: builder().on(...).otherwise(...).build()"""
    return CasesBuilder(_entries=(), _policy=policy if policy is not None else MatchPolicy())


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("cases", "CasesBuilder", "builder")
