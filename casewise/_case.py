"""
Case construction.
"""

from __future__ import annotations

from kungfu import Some, Nothing

from casewise._types import Case, Branch, Default, Producer

# ═══════════════════════════════════════════════════════════════════════════════
# associate() — Primary Constructor
# ═══════════════════════════════════════════════════════════════════════════════


def associate[T, R](
    candidate: T | Default,
    producer: Producer[R],
) -> Case[T, R]:
    """
    Pair a candidate (or a Default marker) with a deferred producer.

    Args:
        candidate: Value compared against the scrutinee, or a Default
            instance to designate the fallback case
        producer: Zero-argument callable, invoked only if this case wins

    Example:
        from casewise import associate, DEFAULT

        one = associate(1, lambda: "one")
        fallback = associate(DEFAULT, lambda: "unknown")
    """
    _require_callable(producer)
    if isinstance(candidate, Default):
        return Case(candidate=Nothing(), produce=producer, of=candidate.of)
    return Case(candidate=Some(candidate), produce=producer)


def on[T, R](value: T, producer: Producer[R]) -> Case[T, R]:
    """Positive case, even when `value` is a Default marker."""
    _require_callable(producer)
    return Case(candidate=Some(value), produce=producer)


def otherwise[R](producer: Producer[R]) -> Case[object, R]:
    """Default case."""
    _require_callable(producer)
    return Case(candidate=Nothing(), produce=producer)


# ═══════════════════════════════════════════════════════════════════════════════
# then() — Infix Form
# ═══════════════════════════════════════════════════════════════════════════════


def then[R](producer: Producer[R]) -> Branch[R]:
    """
    Wrap a producer for infix case construction.

    Example:
        when(n,
            1 >> then(lambda: "one"),
            2 >> then(lambda: "two"),
            DEFAULT >> then(lambda: "many"),
        )
    """
    _require_callable(producer)
    return Branch(produce=producer)


def _require_callable(producer: object) -> None:
    if not callable(producer):
        raise TypeError(
            f"producer must be a zero-argument callable, got {type(producer).__name__}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("associate", "on", "otherwise", "then")
