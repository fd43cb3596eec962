"""
Core types for casewise.

Re-exports from kungfu + case, marker, policy and error types.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

# Re-export from kungfu
from kungfu import Option, Some, Nothing

# ═══════════════════════════════════════════════════════════════════════════════
# Producer — Deferred Branch Body
# ═══════════════════════════════════════════════════════════════════════════════

type Producer[R] = Callable[[], R]
"""Zero-argument callable producing a case result. Invoked only if selected."""

type Eq = Callable[[object, object], bool]
"""Equality between scrutinee (left) and candidate (right)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Default Marker
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Default:
    """
    Marker standing in for a candidate to designate the default case.

    `of` is the scrutinee type token, kept on the default Case and used
    only in diagnostics.

    Example:
        associate(DEFAULT, lambda: "unknown")
        associate(Default(of=int), lambda: "unknown")
    """
    of: type | None = None

    def __rshift__[R](self, branch: Branch[R]) -> Case[object, R]:
        if not isinstance(branch, Branch):
            return NotImplemented
        return Case(candidate=Nothing(), produce=branch.produce, of=self.of)


DEFAULT = Default()

# ═══════════════════════════════════════════════════════════════════════════════
# Case — Candidate + Producer
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Case[T, R]:
    """
    One (candidate, producer) pair.

    Some(v) matches when equal to the scrutinee; Nothing() is the default.
    `of` is the Default marker's type token, None for positive cases.
    """

    candidate: Option[T]
    produce: Producer[R]
    of: type | None = None

    @property
    def is_default(self) -> bool:
        return not isinstance(self.candidate, Some)

    @property
    def label(self) -> str:
        """Human-readable case name for diagnostics."""
        match self.candidate:
            case Some(v):
                return f"case {v!r}"
            case _:
                if self.of is None:
                    return "default case"
                return f"default case for {self.of.__name__}"


@dataclass(frozen=True, slots=True)
class Branch[R]:
    """Producer waiting for its candidate: `1 >> then(...)`."""

    produce: Producer[R]

    def __rrshift__(self, candidate: object) -> Case[object, R]:
        return Case(candidate=Some(candidate), produce=self.produce)

# ═══════════════════════════════════════════════════════════════════════════════
# Policy
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MatchPolicy:
    """Matching configuration carried by a CaseList."""
    eq: Eq = operator.eq
    warn_unreachable: bool = True

# ═══════════════════════════════════════════════════════════════════════════════
# CaseList — Ordered, Immutable
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CaseList[T, R]:
    """Ordered cases; first match wins, first default is the fallback."""

    entries: tuple[Case[T, R], ...]
    policy: MatchPolicy = field(default_factory=MatchPolicy)

    @property
    def default(self) -> Option[Case[T, R]]:
        for c in self.entries:
            if c.is_default:
                return Some(c)
        return Nothing()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Case[T, R]]:
        return iter(self.entries)

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class NoMatch:
    """No candidate matched and no default was supplied."""
    value: object
    cases_checked: int
    type_hint: str

    @property
    def message(self) -> str:
        return (
            f"no case matched {self.value!r} ({self.cases_checked} checked) "
            f"and no default was supplied, add one as "
            f"Default(of={self.type_hint}) >> then(...)"
        )


class NonExhaustiveMatch(AssertionError):
    """Raised by match() when the case list cannot handle the scrutinee."""

    def __init__(self, error: NoMatch) -> None:
        super().__init__(error.message)
        self.error = error

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Option",
    "Some",
    "Nothing",
    # Aliases
    "Producer",
    "Eq",
    # Cases
    "Default",
    "DEFAULT",
    "Case",
    "Branch",
    "CaseList",
    # Policy
    "MatchPolicy",
    # Errors
    "NoMatch",
    "NonExhaustiveMatch",
)
