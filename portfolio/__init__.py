import os
import logging

from flask import Flask, jsonify
from sqlalchemy.engine import make_url
from pymysql import connect

from config import Config
from .extensions import *
from .models import *
from .errors import register_error_handlers
from .routes.auth_routes import auth_bp
from .routes.work_routes import work_bp
from .routes.blog_routes import blog_bp
from .routes.skill_routes import skills_bp
from .routes.cv_routes import cv_bp
from .routes.contact_routes import contact_bp
from .routes.chatbot_routes import chatbot_bp
from .routes.site_routes import site_bp
from .services.auth import AuthService
from .services.chatbot import ChatResponder
from .services.circuit_breaker import CircuitBreaker
from .services.mailer import SMTPMailer
from .services.openai_service import OpenAIChatClient
from portfolio.database.seed.seed_all import seed_all, create_admin

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Allow CORS from the public site and the admin panel
    origins = [app.config["CLIENT_URL"], app.config["ADMIN_URL"]]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}, r"/uploads/*": {"origins": origins}},
        supports_credentials=True,
    )

    create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)
    register_jwt_handlers()

    # collaborators shared by every request of this process
    app.extensions["portfolio_mailer"] = SMTPMailer.from_config(app.config)
    app.extensions["portfolio_chat_responder"] = ChatResponder(
        completion_client=OpenAIChatClient(
            api_key=app.config.get("OPENAI_API_KEY"),
            model=app.config.get("OPENAI_MODEL", "gpt-3.5-turbo"),
        ),
        breaker=CircuitBreaker(retry_after=app.config.get("CHATBOT_RETRY_AFTER")),
    )

    app.register_blueprint(site_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(work_bp, url_prefix="/api/work")
    app.register_blueprint(blog_bp, url_prefix="/api/blog")
    app.register_blueprint(skills_bp, url_prefix="/api/skills")
    app.register_blueprint(cv_bp, url_prefix="/api/cv")
    app.register_blueprint(contact_bp, url_prefix="/api/contact")
    app.register_blueprint(chatbot_bp, url_prefix="/api/chatbot")

    register_error_handlers(app)

    app.cli.add_command(seed_all)
    app.cli.add_command(create_admin)

    with app.app_context():
        db.create_all()

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def register_jwt_handlers():
    """Every token problem is a 401 with the usual ``{"error": ...}`` body."""

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": "Authentication required"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": "Invalid token"}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired"}), 401

    @jwt.user_lookup_loader
    def load_admin(jwt_header, jwt_payload):
        return AuthService.load_admin(jwt_payload.get("sub"))

    @jwt.user_lookup_error_loader
    def unknown_admin(jwt_header, jwt_payload):
        return jsonify({"error": "Invalid token"}), 401


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)
    if not url.drivername.startswith("mysql"):
        return

    logger.info(f"🔧 Ensuring database '{url.database}' exists...")
    logger.info(f"Connecting to DB server at {url.host}:{url.port or 3306} with user '{url.username}'")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
