# portfolio/services/auth.py
import logging

from flask_jwt_extended import create_access_token

from portfolio.models import Admin
from portfolio.extensions import db, bcrypt
from portfolio.errors import Conflict, InvalidCredentials, ValidationError
from portfolio.validators import is_valid_email

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    @staticmethod
    def find_admin(email):
        if not email:
            return None
        return Admin.query.filter_by(email=email.strip().lower()).first()

    @staticmethod
    def login(email, password):
        """
        Check email & password using bcrypt.
        Return the bearer token and the admin's public fields.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        logger.info(f"🔐 Login attempt: {email}")

        admin = AuthService.find_admin(email)

        # same message for both cases so accounts cannot be enumerated
        if not admin:
            logger.info("❌ Admin not found")
            raise InvalidCredentials("Invalid credentials")

        if not bcrypt.check_password_hash(admin.password, password):
            logger.info("❌ Invalid password")
            raise InvalidCredentials("Invalid credentials")

        logger.info(f"✅ Login successful for {admin.email}")

        # expiry comes from JWT_ACCESS_TOKEN_EXPIRES (7 days)
        token = create_access_token(identity=str(admin.id))

        return {"token": token, "admin": {"id": admin.id, "email": admin.email}}

    @staticmethod
    def register(email, password):
        """
        Create a new admin account.
        Return the admin's public fields, never the hash.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        if not is_valid_email(email):
            raise ValidationError("Invalid email format")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

        logger.info(f"📝 Register attempt: {email}")

        if AuthService.find_admin(email):
            logger.info("❌ Email already registered")
            raise Conflict("Admin with this email already exists")

        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")
        admin = Admin(email=email.strip().lower(), password=hashed_password)

        try:
            db.session.add(admin)
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            logger.error(f"❌ Registration failed: {e}")
            raise

        logger.info(f"✅ Registration successful for {admin.email}")
        return admin.to_public_dict()

    @staticmethod
    def load_admin(identity):
        """Resolve a token identity to an existing admin, or None."""
        if identity is None:
            return None
        return db.session.get(Admin, str(identity))
