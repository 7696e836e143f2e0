from portfolio.extensions import db
from datetime import datetime
import uuid

# the only slot key a CV row may take, so the table holds at most one row
CURRENT_SLOT = "current"


class CV(db.Model):
    __tablename__ = "cvs"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slot = db.Column(db.String(20), unique=True, nullable=False, default=CURRENT_SLOT)
    filename = db.Column(db.String(255), nullable=False)
    original_name = db.Column(db.String(255))
    path = db.Column(db.String(500), nullable=False)
    size = db.Column(db.Integer)
    mime_type = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "filename": self.filename,
            "originalName": self.original_name,
            "url": f"/uploads/{self.filename}",
            "size": self.size,
            "mimeType": self.mime_type,
            "uploadedAt": self.created_at.isoformat() if self.created_at else None,
        }
