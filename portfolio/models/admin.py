from portfolio.extensions import db
from datetime import datetime
import uuid


class Admin(db.Model):
    __tablename__ = "admins"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_public_dict(self):
        """Fields safe to return to clients (never the password hash)."""
        return {
            "id": self.id,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    # for string representation
    def __repr__(self):
        return f"<Admin {self.email}>"
