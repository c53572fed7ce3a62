#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_test(args: argparse.Namespace) -> int:
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    pytest_args = ["pytest"]
    if args.quiet:
        pytest_args.append("-q")
    if args.k:
        pytest_args += ["-k", args.k]
    return run(pytest_args)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("flisol.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def cmd_token(args: argparse.Namespace) -> int:
    from flisol.core.security import create_access_token

    token = create_access_token(
        args.sub,
        permissions=args.permission or [],
        admin=args.admin,
        expires_minutes=args.minutes,
    )
    sys.stdout.write(token + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="flisol-cli", description="Project CLI helper")
    sub = parser.add_subparsers(dest="command", required=True)

    p_test = sub.add_parser("test", help="Run pytest")
    p_test.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (-q)")
    p_test.add_argument("-k", help="Only run tests matching expression")
    p_test.set_defaults(func=cmd_test)

    p_serve = sub.add_parser("serve", help="Run the API with uvicorn")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    p_token = sub.add_parser("token", help="Print a signed access token for local use")
    p_token.add_argument("--sub", default="dev", help="Token subject")
    p_token.add_argument("--permission", action="append",
                         help="Granted permission, repeatable (e.g. --permission 'access content')")
    p_token.add_argument("--admin", action="store_true", help="Grant every permission")
    p_token.add_argument("--minutes", type=int, default=None, help="Lifetime in minutes")
    p_token.set_defaults(func=cmd_token)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
