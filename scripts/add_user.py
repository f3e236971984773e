#!/usr/bin/env python3
"""
Register a new user directly in the configured backend.

Usage:
  python scripts/add_user.py --username alice --email a@x.com [--backend document|relational]
"""
from __future__ import annotations

import argparse
import dataclasses
import sys

from users_api.app import build_store
from users_api.core.config import BACKENDS, get_settings
from users_api.domain import NewUser, StoreError
from users_api.services.user_service import UserService


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Register a user")
    ap.add_argument("--username", required=True, help="Unique username (e.g. alice)")
    ap.add_argument("--email", required=True, help="E-mail address")
    ap.add_argument("--backend", choices=BACKENDS, help="Override STORAGE_BACKEND")
    args = ap.parse_args(argv)

    username = (args.username or "").strip()
    email = (args.email or "").strip()
    if not username or not email:
        raise SystemExit("username and email must not be empty")

    settings = get_settings()
    if args.backend:
        settings = dataclasses.replace(settings, storage_backend=args.backend)

    store = build_store(settings)
    try:
        svc = UserService(store)
        svc.create_user(NewUser(username=username, email=email))
        user = svc.get_user(username)
    finally:
        store.close()
    print("OK: user registered")
    print(f"  ID: {user.id}")
    print(f"  Username: {user.username}")
    print(f"  Email: {user.email}")


if __name__ == "__main__":
    try:
        main()
    except StoreError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
