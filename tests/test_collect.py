import logging

import pytest
from kungfu import Some

from casewise import (
    DEFAULT,
    CaseList,
    Default,
    MatchPolicy,
    associate,
    builder,
    cases,
    otherwise,
)


def test_cases_keeps_declaration_order():
    first = associate(1, lambda: "a")
    second = associate(2, lambda: "b")
    collected = cases(first, second)

    assert isinstance(collected, CaseList)
    assert list(collected) == [first, second]
    assert len(collected) == 2


def test_cases_empty():
    assert len(cases()) == 0


def test_cases_rejects_non_case():
    with pytest.raises(TypeError):
        cases(associate(1, lambda: "a"), (2, lambda: "b"))


def test_default_property_returns_first_default():
    first_default = otherwise(lambda: "first")
    collected = cases(
        associate(1, lambda: "a"),
        first_default,
        otherwise(lambda: "second"),
    )
    match collected.default:
        case Some(c):
            assert c is first_default
        case _:
            pytest.fail("expected a default case")


def test_default_property_empty_without_default():
    assert not isinstance(cases(associate(1, lambda: "a")).default, Some)


def test_unreachable_default_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="casewise"):
        cases(
            otherwise(lambda: "first"),
            associate(1, lambda: "a"),
            otherwise(lambda: "second"),
        )
    assert "position 2 is unreachable" in caplog.text


def test_unreachable_default_warning_disabled(caplog):
    with caplog.at_level(logging.WARNING, logger="casewise"):
        cases(
            otherwise(lambda: "first"),
            otherwise(lambda: "second"),
            policy=MatchPolicy(warn_unreachable=False),
        )
    assert caplog.text == ""


def test_builder_is_immutable():
    base = builder().on(1, lambda: "one")
    extended = base.otherwise(lambda: "other")

    assert len(base.build()) == 1
    assert len(extended.build()) == 2
    assert extended.build().entries[1].is_default


def test_builder_carries_policy():
    policy = MatchPolicy(warn_unreachable=False)
    assert builder(policy).case(associate(DEFAULT, lambda: "x")).build().policy is policy


def test_unreachable_default_names_marker_type(caplog):
    with caplog.at_level(logging.WARNING, logger="casewise"):
        cases(
            associate(Default(of=int), lambda: "first"),
            associate(Default(of=str), lambda: "second"),
        )
    assert (
        "default case for str at position 1 is unreachable, "
        "default case for int at position 0 wins"
    ) in caplog.text
