from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/registry_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from user_registry.formatters import format_login_history, format_users
from user_registry.models import UserRole
from user_registry.registry import DuplicateUserError, UserRegistry


def main() -> int:
    reg = UserRegistry()

    print("users(empty)", format_users(reg.get_all_users()))

    reg.register(name="Razeena", email="razeena@gmail.com", role=UserRole.admin, active=True)
    try:
        reg.register(name="Dup", email="RAZEENA@gmail.com", role=UserRole.standard, active=False)
    except DuplicateUserError as e:
        print("duplicate rejected:", e)
    else:
        print("duplicate was accepted")
        return 1

    reg.record_login("Razeena@Gmail.com")
    print("users(after)")
    print(format_users(reg.get_all_users()))
    print(format_login_history(reg.get_login_history()))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
