"""Prepare the configured database: create it if needed, then its tables.

PostgreSQL databases are created through the ``postgres`` maintenance
database; SQLite files appear on first connect.

Usage: ``python -m patidestek.scripts.ensure_db [--drop-tables]``.
"""
from __future__ import annotations

import argparse
import sys

import psycopg
from psycopg import sql
from psycopg.conninfo import make_conninfo
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from patidestek.core.settings import settings


def maintenance_conninfo(url: URL) -> str:
    """Return a libpq connection string for the server's ``postgres`` database."""
    params = {
        "host": url.host,
        "port": url.port,
        "user": url.username,
        "password": url.password,
        "dbname": "postgres",
    }
    return make_conninfo(**{k: str(v) for k, v in params.items() if v is not None})


def ensure_postgres_database(url: URL) -> bool:
    """Create ``url.database`` when missing; return True if it was created."""
    target = url.database or "postgres"
    with psycopg.connect(maintenance_conninfo(url), autocommit=True) as conn:
        exists = conn.execute(
            "SELECT 1 FROM pg_database WHERE datname = %s", (target,)
        ).fetchone()
        if exists:
            return False
        conn.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(target)))
    return True


def ensure_schema(drop_first: bool = False) -> None:
    from patidestek.db.session import create_tables, drop_tables

    if drop_first:
        drop_tables()
        print("[ensure_db] dropped all tables")
    create_tables()
    print("[ensure_db] tables are in place")


def main() -> None:
    parser = argparse.ArgumentParser(description="Ensure the configured database and schema exist")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop every table before recreating the schema.",
    )
    args = parser.parse_args()

    try:
        url = make_url(settings.database_url_sync)
        if url.get_backend_name() == "postgresql":
            created = ensure_postgres_database(url)
            state = "created" if created else "already exists"
            print(f"[ensure_db] database {url.database} {state}")
        ensure_schema(drop_first=args.drop_tables)
    except (ArgumentError, psycopg.Error, SQLAlchemyError) as exc:
        print(f"[ensure_db] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
