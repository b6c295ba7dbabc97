import argparse

from app.db import base  # noqa: F401  registers every model on Base.metadata
from app.db.session import SessionLocal
from app.models.admins import Admin
from app.core.security import hash_password


def create_admin(email, name, password, role="admin"):
    db = SessionLocal()
    try:
        email = email.strip().lower()
        existing_admin = db.query(Admin).filter_by(email=email).first()
        if existing_admin:
            print("❌ Admin '%s' already exists." % email)
            return None

        admin = Admin(
            email=email,
            name=name,
            password=hash_password(password),
            role=role,
            is_active=True,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)

        print("✅ Admin '%s' created successfully." % email)
        return admin
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create an admin account.")
    parser.add_argument("email", help="The admin's login email")
    parser.add_argument("name", help="The admin's display name")
    parser.add_argument("password", help="The admin's password")
    parser.add_argument("--role", default="admin", help="Role label (default: admin)")
    args = parser.parse_args()

    create_admin(args.email, args.name, args.password, args.role)
