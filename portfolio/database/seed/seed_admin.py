import os

from portfolio.extensions import db, bcrypt
from portfolio.models import Admin


def seed():
    print("🌱 Seeding admin...")

    email = os.getenv("ADMIN_EMAIL", "admin@portfolio.dev").lower()
    password = os.getenv("ADMIN_PASSWORD", "admin123")

    # prevent duplicates
    if Admin.query.filter_by(email=email).first():
        print(f"ℹ️ Admin {email} already exists, skipping")
        return

    db.session.add(Admin(
        email=email,
        password=bcrypt.generate_password_hash(password).decode("utf-8"),
    ))
    db.session.commit()
    print(f"✅ Admin {email} seeded successfully!")
