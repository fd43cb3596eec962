"""
Spelled out — the classic `when` demo.

Three ways to write the same case list:
- infix:   1 >> then(...)
- calls:   associate(1, ...)
- builder: builder().on(1, ...)
"""

from kungfu import Ok, Error
from casewise import (
    DEFAULT,
    Default,
    NonExhaustiveMatch,
    associate,
    builder,
    cases,
    match,
    match_result,
    then,
    when,
)
from examples._infra import banner


def spelled_out(n: int) -> str:
    return when(n,
        1 >> then(lambda: "one"),
        2 >> then(lambda: "two"),
        3 >> then(lambda: "three"),
        Default(of=int) >> then(lambda: "I can only count up to three, sorry."),
    )


# Same cases, built once and reused
spelled = cases(
    associate(1, lambda: "one"),
    associate(2, lambda: "two"),
    associate(3, lambda: "three"),
    associate(DEFAULT, lambda: "I can only count up to three, sorry."),
)

# No default: only 1 is handled
strict = builder().on(1, lambda: "one").build()


def main() -> None:
    banner("when: infix form")
    print(f"  2 → {spelled_out(2)}")
    print(f"  4 → {spelled_out(4)}")

    banner("match: collected cases")
    for n in (1, 3, 9):
        print(f"  {n} → {match(n, spelled)}")

    banner("Missing default")
    match match_result(2, strict):
        case Ok(text):
            print(f"  2 → {text}")
        case Error(e):
            print(f"  error: {e.message}")

    try:
        match(2, strict)
    except NonExhaustiveMatch as exc:
        print(f"  raised: {exc}")

    print("\nDone!")


if __name__ == "__main__":
    main()
