"""
Create a dashboard user. Run from project root:
  python -m ems_api.scripts.create_user USER_NAME PASSWORD [role]
Example:
  python -m ems_api.scripts.create_user operator s3cret admin

The password is stored as given; login compares it verbatim.
"""
import argparse
import sys

from ems_api.core.database import SessionLocal
from ems_api.models.user import User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an EMS dashboard user.")
    parser.add_argument("user_name", help="User name (1-255 chars)")
    parser.add_argument("password", help="Password (1-255 chars)")
    parser.add_argument("role", nargs="?", default="user")
    args = parser.parse_args(argv)

    user_name = args.user_name.strip()
    if not user_name or len(user_name) > 255:
        print("Invalid user name length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 255:
        print("Password must be 1-255 characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.user_name == user_name).first()
        if existing:
            print(f"User '{user_name}' already exists.", file=sys.stderr)
            return 1
        user = User(user_name=user_name, password=args.password, role=args.role)
        db.add(user)
        db.commit()
        print(f"Created user '{user_name}' (id {user.user_id}) with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
