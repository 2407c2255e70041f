#!/usr/bin/env python3
"""
Generate the ADMIN_PASSWORD_HASH value for the admin login.

Uso:
  python scripts/hash_password.py            # pide la contraseña sin eco
  python scripts/hash_password.py --password s3cret
"""
from __future__ import annotations

import argparse
import getpass
import shlex
import sys

from projectboard.core.security import hash_password


def env_line(hashed: str) -> str:
    """Shell-safe assignment; the Argon2 hash contains ``$`` characters."""
    return f"ADMIN_PASSWORD_HASH={shlex.quote(hashed)}"


def main() -> None:
    ap = argparse.ArgumentParser(description="Generar ADMIN_PASSWORD_HASH")
    ap.add_argument("--password", help="Contraseña en claro (por defecto se pide por consola)")
    args = ap.parse_args()

    password = args.password
    if password is None:
        password = getpass.getpass("Contraseña de admin: ")
        if password != getpass.getpass("Repite la contraseña: "):
            raise SystemExit("Las contraseñas no coinciden")
    if not password:
        raise SystemExit("Contraseña vacia")

    print(env_line(hash_password(password)))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
