from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from user_registry.models import UserRole

logger = logging.getLogger(__name__)

LOGIN_EVENT = "User logged in"


def normalize_email(email: str) -> str:
    return (email or "").lower()


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    role: UserRole
    active: bool

    def __str__(self) -> str:
        return "User { id = %s, name = %s, email = %s, role = %s, active = %s }" % (
            self.id,
            self.name,
            self.email,
            self.role.value,
            "true" if self.active else "false",
        )


class DuplicateUserError(ValueError):
    def __init__(self, email: str):
        super().__init__("Duplicate email not allowed: %s" % email)
        self.email = email


class UserRegistry:
    """Thread-safe in-memory user registry.

    Storage semantics:
    - Users are keyed by normalized (lower-cased) email; the original casing
      is kept on the stored record.
    - Iteration order is insertion order, so listings come back in the order
      users were added.
    - Login history is an append-only list of event descriptions per
      normalized email. An email does not have to belong to a registered
      user to have history.
    - Nothing is ever removed and there is no capacity limit.

    Every query returns an immutable snapshot taken under the lock, so later
    inserts never show up in (or tear) a result a caller already holds.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}
        self._login_history: Dict[str, List[str]] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, email: object) -> bool:
        if not isinstance(email, str):
            return False
        with self._lock:
            return normalize_email(email) in self._users

    def new_user(self, *, name: str, email: str, role: UserRole, active: bool) -> User:
        """Allocate the next id and build an unsaved :class:`User`.

        The id is consumed even if the user is later rejected by
        :meth:`add_user`. Use :meth:`register` to allocate only on success.
        """
        with self._lock:
            user_id = self._allocate_id_locked()
        return User(id=user_id, name=name, email=email, role=role, active=active)

    def add_user(self, user: User) -> None:
        key = normalize_email(user.email)
        with self._lock:
            self._insert_locked(key, user)

    def register(self, *, name: str, email: str, role: UserRole, active: bool) -> User:
        key = normalize_email(email)
        with self._lock:
            if key in self._users:
                self._reject(email)
            user = User(id=self._allocate_id_locked(), name=name, email=email, role=role, active=active)
            self._insert_locked(key, user)
        return user

    def get_all_users(self) -> Tuple[User, ...]:
        with self._lock:
            return tuple(self._users.values())

    def get_users_by_role(self, role: UserRole) -> Tuple[User, ...]:
        with self._lock:
            return tuple(u for u in self._users.values() if u.role == role)

    def get_active_users_sorted_by_name(self) -> Tuple[User, ...]:
        with self._lock:
            active = [u for u in self._users.values() if u.active]
        # sorted() is stable: names equal ignoring case keep insertion order.
        return tuple(sorted(active, key=lambda u: u.name.lower()))

    def record_login(self, email: str) -> None:
        key = normalize_email(email)
        with self._lock:
            self._login_history.setdefault(key, []).append(LOGIN_EVENT)
        logger.debug("Login recorded", extra={"email": key})

    def get_login_history(self) -> Mapping[str, Tuple[str, ...]]:
        with self._lock:
            snapshot = {email: tuple(events) for email, events in self._login_history.items()}
        return MappingProxyType(snapshot)

    def _allocate_id_locked(self) -> int:
        user_id = self._next_id
        self._next_id += 1
        return user_id

    def _insert_locked(self, key: str, user: User) -> None:
        if key in self._users:
            self._reject(user.email)
        self._users[key] = user
        logger.info("User added", extra={"user_id": user.id, "email": key})

    def _reject(self, email: str) -> None:
        logger.warning("Rejected duplicate user", extra={"email": normalize_email(email)})
        raise DuplicateUserError(email)
