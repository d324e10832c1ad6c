#!/usr/bin/env python3
"""
Invoice dashboard management CLI.

Usage:
    python manage.py migrate     Apply pending database migrations
    python manage.py status      Show applied and pending migrations
    python manage.py verify      Check database integrity and tables
    python manage.py serve       Start the API server (uvicorn)
"""

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations."""
    from invoice_dashboard.infrastructure.storage.sqlite.migrations import run_migrations

    results = asyncio.run(run_migrations(args.db_path))
    if not results:
        print("Database is up to date.")
    for result in results:
        state = "SUCCESS" if result.success else "FAILED"
        print(f"[{state}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")
    if any(not r.success for r in results):
        sys.exit(1)


def cmd_status(args: argparse.Namespace) -> None:
    """Print migration status."""
    from invoice_dashboard.infrastructure.storage.sqlite.migrations import get_migration_status

    status = asyncio.run(get_migration_status(args.db_path))
    print(f"Database exists: {status['exists']}")
    print(f"Current version: {status['current_version'] or 'N/A'}")
    print(f"Applied migrations: {status['applied_migrations']}")
    print(f"Pending migrations: {status['pending_migrations']}")


def cmd_verify(args: argparse.Namespace) -> None:
    """Run schema integrity checks."""
    from invoice_dashboard.infrastructure.storage.sqlite.migrations import verify_schema_integrity

    checks = asyncio.run(verify_schema_integrity(args.db_path))
    failed = False
    for check in checks:
        print(f"[{check['status']}] {check['check']}")
        if check["status"] != "PASS":
            failed = True
            for key, value in check.items():
                if key not in ("check", "status"):
                    print(f"       {key}: {value}")
    if failed:
        sys.exit(1)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run uvicorn in the foreground."""
    uvicorn_cmd = [
        sys.executable, "-m", "uvicorn",
        "invoice_dashboard.api.main:app",
        "--host", args.host,
        "--port", str(args.port),
    ]
    if args.reload:
        uvicorn_cmd.append("--reload")

    print(f"Starting server on {args.host}:{args.port}...")
    sys.exit(subprocess.call(uvicorn_cmd, cwd=str(ROOT_DIR)))


def main() -> None:
    parser = argparse.ArgumentParser(description="Invoice dashboard management")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("migrate", cmd_migrate, "Apply pending migrations"),
        ("status", cmd_status, "Show migration status"),
        ("verify", cmd_verify, "Verify schema integrity"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--db-path", type=Path, help="Database path (default from settings)")
        p.set_defaults(func=func)

    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
