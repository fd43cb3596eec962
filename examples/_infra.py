"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass


# Types
@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


# Fake DB
async def fetch_user(user_id: int) -> User:
    await asyncio.sleep(0.01)
    print(f"  [ORIGIN] Fetching user {user_id} from DB...")
    return User(user_id, f"user-{user_id}")


async def fetch_guest() -> User:
    await asyncio.sleep(0.01)
    return User(0, "guest")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
