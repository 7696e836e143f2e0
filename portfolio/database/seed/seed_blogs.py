from portfolio.extensions import db
from portfolio.models import Blog
from portfolio.services.content import format_post_date


def seed():
    print("🌱 Seeding blog posts...")

    blogs = [
        Blog(
            title="Designing for Accessibility",
            category="Design",
            excerpt="Small changes that make interfaces usable for everyone.",
            date=format_post_date(),
            content="Accessibility starts with contrast.\n\nThen comes keyboard navigation.",
        ),
        Blog(
            title="Structuring a REST API",
            category="Development",
            read_time="7 min read",
            excerpt="How I organize routes, services and models in a small backend.",
            date=format_post_date(),
            image="gradient-2",
            content="Keep routes thin.\n\nPut the rules in services.",
        ),
    ]

    for blog in blogs:
        if not Blog.query.filter_by(title=blog.title).first():
            db.session.add(blog)

    db.session.commit()
    print("✅ Blog posts seeded successfully!")
