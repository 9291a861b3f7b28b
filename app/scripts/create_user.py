"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Shop Admin" admin@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import EMAIL_MAX_LEN, NAME_MAX_LEN, PASSWORD_MAX_LEN, ROLES, hash_password
from app.models.user import User


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a back-office user.")
    parser.add_argument("name", help=f"Display name (1-{NAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Login email (unique)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    args = parser.parse_args()

    name = args.name.strip()
    email = args.email.strip()
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if "@" not in email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(args.password),
            role=args.role,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
