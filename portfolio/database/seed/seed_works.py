from portfolio.extensions import db
from portfolio.models import Work


def seed():
    print("🌱 Seeding works...")

    works = [
        Work(
            title="E-commerce Dashboard",
            category="Web Development",
            image="gradient-1",
            likes=42,
            description="Admin dashboard for an online store with sales analytics and inventory management.",
            role="Full-stack Developer",
            tools=["React", "Node.js", "MongoDB"],
            features=["Real-time sales charts", "Inventory alerts", "Role based access"],
        ),
        Work(
            title="Fitness Tracker App",
            category="Mobile Apps",
            image="gradient-2",
            likes=31,
            description="Cross-platform mobile app to log workouts and follow training plans.",
            role="Mobile Developer",
            tools=["React Native", "Firebase"],
            features=["Workout logging", "Progress statistics"],
        ),
        Work(
            title="Banking App Redesign",
            category="UI/UX Design",
            image="gradient-3",
            likes=57,
            description="Complete redesign of a retail banking app focused on accessibility.",
            role="Product Designer",
            tools=["Figma"],
            features=["Design system", "Accessible color palette"],
        ),
    ]

    for work in works:
        if not Work.query.filter_by(title=work.title).first():
            db.session.add(work)

    db.session.commit()
    print("✅ Works seeded successfully!")
