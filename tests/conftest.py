import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from portfolio import create_app
from portfolio.extensions import db
from portfolio.services.auth import AuthService

ADMIN_EMAIL = "admin@portfolio.dev"
ADMIN_PASSWORD = "secret123"


class FakeMailer:
    """Stands in for SMTPMailer; records messages or raises ``error``."""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send_contact(self, contact):
        if self.error is not None:
            raise self.error
        self.sent.append(contact)


@pytest.fixture
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(Config)
    app.extensions["portfolio_mailer"] = FakeMailer()

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    return AuthService.register(ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def token(admin):
    return create_access_token(identity=admin["id"])


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mailer(app):
    return app.extensions["portfolio_mailer"]

