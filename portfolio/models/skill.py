from portfolio.extensions import db
from datetime import datetime
import uuid

SKILL_TYPES = ("design", "development", "tools")


class Skill(db.Model):
    __tablename__ = "skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    percentage = db.Column(db.Integer, nullable=False)
    type = db.Column(db.Enum(*SKILL_TYPES, name="skill_types"), nullable=False)
    icon = db.Column(db.String(500), default="")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "percentage": self.percentage,
            "type": self.type,
            "icon": self.icon,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Skill {self.name} {self.percentage}%>"
