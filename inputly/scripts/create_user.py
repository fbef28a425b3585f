"""
Create an account (e.g. the first admin). Run from project root:
  python -m inputly.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m inputly.scripts.create_user "Site Admin" admin@inputly.io your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError

from inputly.core.database import SessionLocal
from inputly.core.errors import DuplicateAccount
from inputly.schemas.auth import RegisterRequest
from inputly.services import accounts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Inputly account from the command line.")
    parser.add_argument("name", help="Display name (3-30 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest(
            name=args.name, email=args.email, password=args.password, role=args.role
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = accounts.register(
            db, name=body.name, email=body.email, password=body.password, role=body.role
        )
    except DuplicateAccount:
        print(f"User '{body.email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
