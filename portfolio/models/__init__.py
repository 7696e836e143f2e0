from .admin import Admin
from .work import Work
from .blog import Blog
from .skill import Skill, SKILL_TYPES
from .cv import CV, CURRENT_SLOT
from .contact_message import ContactMessage

__all__ = [
    "Admin",
    "Work",
    "Blog",
    "Skill",
    "SKILL_TYPES",
    "CV",
    "CURRENT_SLOT",
    "ContactMessage",
]
