from flask.cli import with_appcontext
from portfolio.database.seed.seed_admin import seed as seed_admin
from portfolio.database.seed.seed_skills import seed as seed_skills
from portfolio.database.seed.seed_works import seed as seed_works
from portfolio.database.seed.seed_blogs import seed as seed_blogs
from portfolio.services.auth import AuthService
from portfolio.errors import ApiError

import click


@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_admin()
    seed_skills()
    seed_works()
    seed_blogs()
    click.echo("✅ All seeders completed!")


@click.command("create-admin")
@click.argument("email")
@click.argument("password")
@with_appcontext
def create_admin(email, password):
    """Create an admin account from the command line."""
    try:
        admin = AuthService.register(email, password)
    except ApiError as e:
        raise click.ClickException(e.message)
    click.echo(f"✅ Admin {admin['email']} created")
