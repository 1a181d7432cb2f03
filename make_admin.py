#!/usr/bin/env python3
"""
Script to create an admin account, or reactivate an existing one.
Usage: python make_admin.py EMAIL PASSWORD [--name NAME]
"""

import argparse
import sys

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.orm import Session  # noqa: E402

from crudhub.core.security import get_password_hash  # noqa: E402
from crudhub.db.database import SessionLocal  # noqa: E402
from crudhub.domain.enums import AccountStatus  # noqa: E402
from crudhub.infrastructure.orm.account_model import AdminModel  # noqa: E402


def create_admin(db: Session, email: str, password: str, display_name: str = "Administrator") -> AdminModel:
    """Create an admin by email; an existing admin gets a new password and is reactivated."""
    email = email.lower()
    admin = db.query(AdminModel).filter(AdminModel.email == email).first()

    if admin:
        admin.password_hash = get_password_hash(password)
        admin.status = AccountStatus.ACTIVE.value
        admin.deleted_at = None
    else:
        admin = AdminModel(
            email=email,
            password_hash=get_password_hash(password),
            display_name=display_name,
        )
        db.add(admin)

    db.commit()
    return admin


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create or reactivate an admin account")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default="Administrator", help="display name for a new admin")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        admin = create_admin(db, args.email, args.password, args.name)
        print(f"Admin ready: {admin.email} ({admin.id})")
        return 0
    except Exception as e:
        db.rollback()
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
