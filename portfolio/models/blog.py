from portfolio.extensions import db
from datetime import datetime
import uuid


class Blog(db.Model):
    __tablename__ = "blogs"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(255), nullable=False)
    read_time = db.Column(db.String(50), nullable=False, default="5 min read")
    excerpt = db.Column(db.Text, nullable=False)
    date = db.Column(db.String(50), nullable=False)
    image = db.Column(db.Text, nullable=False, default="gradient-1")
    # paragraphs separated by a blank line
    content = db.Column(db.Text, default="")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "readTime": self.read_time,
            "excerpt": self.excerpt,
            "date": self.date,
            "image": self.image,
            "content": self.content,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Blog {self.title}>"
