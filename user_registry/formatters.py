"""Plain-text rendering of registry results.

The ``User { ... }`` line and ``No users available`` are relied on by
existing callers, so keep them byte-for-byte stable.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from user_registry.registry import User

NO_USERS = "No users available"
NO_LOGIN_HISTORY = "No login history available"


def format_user(user: User) -> str:
    return str(user)


def format_users(users: Iterable[User]) -> str:
    lines = [format_user(u) for u in users]
    if not lines:
        return NO_USERS
    return "\n".join(lines)


def format_login_history(history: Mapping[str, Sequence[str]]) -> str:
    if not history:
        return NO_LOGIN_HISTORY
    return "\n".join("%s -> [%s]" % (email, ", ".join(events)) for email, events in history.items())
