"""Command-line interface for the in-memory user registry."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from user_registry.formatters import format_login_history, format_users
from user_registry.logging_config import configure_logging
from user_registry.models import UserInput, UserRole, parse_role
from user_registry.registry import DuplicateUserError, UserRegistry
from user_registry.settings import get_settings

DEMO_USERS = (
    ("Razeena", "razeena@gmail.com", UserRole.admin, True),
    ("Nishad", "nishad@gmail.com", UserRole.standard, True),
    ("Najeeb", "najeeb@gmail.com", UserRole.standard, False),
)

MENU = """
==== USER MANAGEMENT ====
1. Add User
2. View Users
3. View Users By Role
4. View Active Users
5. Record Login
6. View Login History
7. Exit"""

Reader = Callable[[str], str]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory user registry")
    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="menu")

    subparsers.add_parser("menu", help="Run the interactive user management menu")
    subparsers.add_parser("demo", help="Register the demo users and print every listing")

    return parser.parse_args(argv)


def seed_demo_users(registry: UserRegistry) -> None:
    for name, email, role, active in DEMO_USERS:
        try:
            registry.register(name=name, email=email, role=role, active=active)
        except DuplicateUserError as e:
            print(f"Error: {e}")


def run_demo(registry: UserRegistry) -> None:
    seed_demo_users(registry)
    for _, email, _, _ in DEMO_USERS:
        registry.record_login(email)

    print("\n--- ALL USERS ---")
    print(format_users(registry.get_all_users()))

    print("\n--- ADMIN USERS ---")
    print(format_users(registry.get_users_by_role(UserRole.admin)))

    print("\n--- ACTIVE USERS SORTED BY NAME ---")
    print(format_users(registry.get_active_users_sorted_by_name()))

    print("\n--- LOGIN HISTORY ---")
    print(format_login_history(registry.get_login_history()))


def _add_user(registry: UserRegistry, read: Reader) -> None:
    try:
        data = UserInput(
            name=read("Enter name: "),
            email=read("Enter email: "),
            role=read("Enter role (ADMIN/USER): "),
            active=read("Is active (true/false): ").strip(),
        )
    except ValidationError as e:
        errors = e.errors()
        if any(err["loc"] and err["loc"][0] == "role" for err in errors):
            print("Invalid role entered!")
        else:
            print(f"Invalid input: {errors[0]['msg']}")
        return

    try:
        registry.register(name=data.name, email=data.email, role=data.role, active=data.active)
    except DuplicateUserError as e:
        print(f"Error: {e}")
        return
    print("User added successfully")


def _view_by_role(registry: UserRegistry, read: Reader) -> None:
    try:
        role = parse_role(read("Enter role (ADMIN/USER): "))
    except ValueError:
        print("Invalid role entered!")
        return
    print(format_users(registry.get_users_by_role(role)))


def _record_login(registry: UserRegistry, read: Reader) -> None:
    registry.record_login(read("Enter email: "))
    print("Login recorded")


def run_menu(registry: UserRegistry, *, read: Optional[Reader] = None) -> None:
    """Interactive loop. ``read`` defaults to :func:`input`; EOF exits."""
    read = read or input
    while True:
        print(MENU)
        try:
            raw = read("Enter choice: ")
            try:
                choice = int(raw.strip())
            except ValueError:
                choice = 0

            if choice == 1:
                _add_user(registry, read)
            elif choice == 2:
                print(format_users(registry.get_all_users()))
            elif choice == 3:
                _view_by_role(registry, read)
            elif choice == 4:
                print(format_users(registry.get_active_users_sorted_by_name()))
            elif choice == 5:
                _record_login(registry, read)
            elif choice == 6:
                print(format_login_history(registry.get_login_history()))
            elif choice == 7:
                print("Exiting...")
                return
            else:
                print("Invalid choice!")
        except EOFError:
            print("Exiting...")
            return


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    registry = UserRegistry()
    if args.command == "demo":
        run_demo(registry)
        return 0

    if settings.seed_demo:
        seed_demo_users(registry)
    run_menu(registry)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
