from portfolio.extensions import db
from portfolio.models import Skill


def seed():
    print("🌱 Seeding skills...")

    skills = [
        ("React", 90, "development"),
        ("Node.js", 85, "development"),
        ("Python", 80, "development"),
        ("MongoDB", 75, "development"),
        ("Figma", 88, "design"),
        ("UI/UX Design", 85, "design"),
        ("Adobe Photoshop", 70, "design"),
        ("Git", 90, "tools"),
        ("Docker", 65, "tools"),
    ]

    for name, percentage, skill_type in skills:
        existing = Skill.query.filter_by(name=name, type=skill_type).first()
        if not existing:
            db.session.add(Skill(name=name, percentage=percentage, type=skill_type))

    db.session.commit()
    print("✅ Skills seeded successfully!")
