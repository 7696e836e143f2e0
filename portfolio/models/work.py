from portfolio.extensions import db
from datetime import datetime
import uuid


class Work(db.Model):
    __tablename__ = "works"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(255), nullable=False)
    # URL, newline separated URLs, or a gradient token such as "gradient-2"
    image = db.Column(db.Text, nullable=False, default="gradient-1")
    likes = db.Column(db.Integer, nullable=False, default=0)
    link = db.Column(db.String(500), default="#")
    description = db.Column(db.Text, default="")
    role = db.Column(db.String(255), default="")
    tools = db.Column(db.JSON, default=list)
    features = db.Column(db.JSON, default=list)
    live_demo_url = db.Column(db.String(500), default="")
    source_code_url = db.Column(db.String(500), default="")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "image": self.image,
            "likes": self.likes,
            "link": self.link,
            "description": self.description,
            "role": self.role,
            "tools": list(self.tools or []),
            "features": list(self.features or []),
            "liveDemoUrl": self.live_demo_url,
            "sourceCodeUrl": self.source_code_url,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Work {self.title}>"
