"""
Async — awaitable producers with match_async.

Only the selected producer is called, and only once the result is awaited.
"""

from kungfu import Ok, Error
from casewise import DEFAULT, associate, cases, match_async
from examples._infra import banner, run, fetch_user, fetch_guest


handlers = cases(
    associate("alice", lambda: fetch_user(1)),
    associate("bob", lambda: fetch_user(2)),
    associate(DEFAULT, lambda: fetch_guest()),
)


async def main() -> None:
    banner("match_async: lazy selection")

    for login in ("bob", "mallory"):
        pending = match_async(login, handlers)
        print(f"\n{login}: built, nothing fetched yet")
        match await pending:
            case Ok(user):
                print(f"   → {user.name}")
            case Error(e):
                print(f"   error: {e.message}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
