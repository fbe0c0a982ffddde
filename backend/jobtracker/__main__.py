import argparse

import uvicorn

from jobtracker.config import settings
from jobtracker.database import SessionLocal, init_db
from jobtracker.services.session_service import session_service


def serve(args):
    uvicorn.run("jobtracker.main:app", host=args.host, port=args.port)


def create_session(args):
    """Register (or reuse) a user and print a fresh session token.

    Stands in for the identity provider's sign-in: the token goes in the
    session cookie or an ``Authorization: Bearer`` header.
    """
    init_db()
    db = SessionLocal()
    try:
        user = session_service.get_or_create_user(db, email=args.email, name=args.name)
        token = session_service.create_session(db, user.id, ttl_seconds=args.ttl_seconds)
    finally:
        db.close()
    print(token)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jobtracker", description="Job application tracker")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the API server (default)")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(func=serve)

    session_parser = subparsers.add_parser("create-session", help="Open a session for a user and print its token")
    session_parser.add_argument("--email", required=True)
    session_parser.add_argument("--name")
    session_parser.add_argument("--ttl-seconds", type=int, default=None,
                                help=f"Session lifetime (default {settings.session_ttl_seconds})")
    session_parser.set_defaults(func=create_session)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["serve"])
    args.func(args)


if __name__ == "__main__":
    main()
