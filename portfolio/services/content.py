# portfolio/services/content.py
"""
CRUD services for the portfolio content collections (work, blog, skills).

Create applies defaults; update is partial and follows one rule: a key present
in the payload is applied, an absent key is left untouched. Fields that
carry a default (image, link, readTime, date) fall back to that default
when cleared, and required fields refuse to be cleared.
"""
import logging
from datetime import datetime

from portfolio.models import Work, Blog, Skill, SKILL_TYPES
from portfolio.databases import list_records, get_record_or_404, save_record, delete_record
from portfolio.errors import ValidationError
from portfolio.validators import is_blank, require_fields, clamp, split_list

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "gradient-1"
DEFAULT_LINK = "#"
DEFAULT_READ_TIME = "5 min read"


def format_post_date(moment=None) -> str:
    """Format a date like ``Oct 9, 2026``."""
    moment = moment or datetime.utcnow()
    return f"{moment:%b} {moment.day}, {moment.year}"


def _text(value) -> str:
    return "" if value is None else str(value)


def _or_default(value, default):
    return default if is_blank(value) else str(value).strip()


def _required_update(data, field, label):
    value = data[field]
    if is_blank(value):
        raise ValidationError(f"{label} cannot be empty")
    return str(value).strip()


class ContentService:
    model = None
    label = None

    @classmethod
    def list(cls, **filters):
        return list_records(cls.model, **filters)

    @classmethod
    def get(cls, record_id):
        return get_record_or_404(cls.model, record_id, cls.label)

    @classmethod
    def delete(cls, record_id):
        record = cls.get(record_id)
        delete_record(record)
        logger.info(f"🗑️ {cls.label} {record_id} deleted")
        return {"message": f"{cls.label} deleted successfully"}


class WorkService(ContentService):
    model = Work
    label = "Work"

    @classmethod
    def create(cls, data):
        require_fields(data, ("title", "category"), "Title and category are required")

        likes = data.get("likes")
        link = _or_default(data.get("link"), DEFAULT_LINK)
        live_demo_url = data.get("liveDemoUrl")
        if is_blank(live_demo_url):
            # the project link doubles as the demo link when none is given
            live_demo_url = "" if link == DEFAULT_LINK else link

        work = Work(
            title=str(data["title"]).strip(),
            category=str(data["category"]).strip(),
            image=_or_default(data.get("image"), DEFAULT_IMAGE),
            likes=0 if is_blank(likes) else clamp(likes, 0, field="likes"),
            link=link,
            description=_text(data.get("description")),
            role=_text(data.get("role")),
            tools=split_list(data.get("tools"), ","),
            features=split_list(data.get("features"), "\n"),
            live_demo_url=_text(live_demo_url),
            source_code_url=_text(data.get("sourceCodeUrl")),
        )
        save_record(work)
        logger.info(f"✅ Work created: {work.title}")
        return work

    @classmethod
    def update(cls, record_id, data):
        work = cls.get(record_id)

        if "title" in data:
            work.title = _required_update(data, "title", "Title")
        if "category" in data:
            work.category = _required_update(data, "category", "Category")
        if "image" in data:
            work.image = _or_default(data["image"], DEFAULT_IMAGE)
        if "likes" in data:
            work.likes = clamp(data["likes"], 0, field="likes")
        if "link" in data:
            work.link = _or_default(data["link"], DEFAULT_LINK)
        if "description" in data:
            work.description = _text(data["description"])
        if "role" in data:
            work.role = _text(data["role"])
        if "tools" in data:
            work.tools = split_list(data["tools"], ",")
        if "features" in data:
            work.features = split_list(data["features"], "\n")
        if "liveDemoUrl" in data:
            work.live_demo_url = _text(data["liveDemoUrl"])
        if "sourceCodeUrl" in data:
            work.source_code_url = _text(data["sourceCodeUrl"])

        save_record(work)
        logger.info(f"✏️ Work updated: {work.id}")
        return work


class BlogService(ContentService):
    model = Blog
    label = "Blog"

    @classmethod
    def create(cls, data):
        require_fields(
            data, ("title", "category", "excerpt"),
            "Title, category, and excerpt are required",
        )

        blog = Blog(
            title=str(data["title"]).strip(),
            category=str(data["category"]).strip(),
            read_time=_or_default(data.get("readTime"), DEFAULT_READ_TIME),
            excerpt=str(data["excerpt"]),
            date=_or_default(data.get("date"), format_post_date()),
            image=_or_default(data.get("image"), DEFAULT_IMAGE),
            content=_text(data.get("content")),
        )
        save_record(blog)
        logger.info(f"✅ Blog created: {blog.title}")
        return blog

    @classmethod
    def update(cls, record_id, data):
        blog = cls.get(record_id)

        if "title" in data:
            blog.title = _required_update(data, "title", "Title")
        if "category" in data:
            blog.category = _required_update(data, "category", "Category")
        if "excerpt" in data:
            blog.excerpt = _required_update(data, "excerpt", "Excerpt")
        if "readTime" in data:
            blog.read_time = _or_default(data["readTime"], DEFAULT_READ_TIME)
        if "date" in data:
            blog.date = _or_default(data["date"], format_post_date(blog.created_at))
        if "image" in data:
            blog.image = _or_default(data["image"], DEFAULT_IMAGE)
        if "content" in data:
            blog.content = _text(data["content"])

        save_record(blog)
        logger.info(f"✏️ Blog updated: {blog.id}")
        return blog


class SkillService(ContentService):
    model = Skill
    label = "Skill"

    @classmethod
    def list(cls, skill_type=None):
        if skill_type:
            return list_records(Skill, type=skill_type)
        return list_records(Skill)

    @classmethod
    def top_skills(cls, limit=15):
        return list_records(Skill, order_by=Skill.percentage.desc(), limit=limit)

    @staticmethod
    def _check_type(skill_type):
        if skill_type not in SKILL_TYPES:
            raise ValidationError('Type must be one of "design", "development", or "tools"')
        return skill_type

    @classmethod
    def create(cls, data):
        if is_blank(data.get("name")) or data.get("percentage") is None or is_blank(data.get("type")):
            raise ValidationError("Name, percentage, and type are required")

        skill = Skill(
            name=str(data["name"]).strip(),
            percentage=clamp(data["percentage"], 0, 100, field="percentage"),
            type=cls._check_type(data["type"]),
            icon=_text(data.get("icon")).strip(),
        )
        save_record(skill)
        logger.info(f"✅ Skill created: {skill.name} ({skill.percentage}%)")
        return skill

    @classmethod
    def update(cls, record_id, data):
        skill = cls.get(record_id)

        if "name" in data:
            skill.name = _required_update(data, "name", "Name")
        if "percentage" in data:
            skill.percentage = clamp(data["percentage"], 0, 100, field="percentage")
        if "type" in data:
            skill.type = cls._check_type(data["type"])
        if "icon" in data:
            skill.icon = _text(data["icon"]).strip()

        save_record(skill)
        logger.info(f"✏️ Skill updated: {skill.id}")
        return skill
