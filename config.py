import os
import tempfile
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _optional_float(name):
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'portfolio-default-secret-key')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_TOKEN_LOCATION = ["headers"]

    DB_HOST = os.getenv('DB_HOST')
    DB_USER = os.getenv('DB_USER')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME')

    # Build MySQL connection string (using PyMySQL driver) unless a full URL is given
    if os.getenv('DATABASE_URL'):
        SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')
    elif DB_HOST:
        SQLALCHEMY_DATABASE_URI = (
            f"mysql+pymysql://{DB_USER}@{DB_HOST}/{DB_NAME}"
            if not DB_PASSWORD else
            f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
        )
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///portfolio.db"

    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    CLIENT_URL = os.getenv('CLIENT_URL', 'http://localhost:5173')
    ADMIN_URL = os.getenv('ADMIN_URL', 'http://localhost:5174')

    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'uploads'))
    # request cap; the 10MB file limit itself is checked on upload
    MAX_CONTENT_LENGTH = 11 * 1024 * 1024

    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo')
    # seconds before a rate-limited OpenAI path is tried again; unset = never
    CHATBOT_RETRY_AFTER = _optional_float('CHATBOT_RETRY_AFTER')

    GMAIL_USER = os.getenv('GMAIL_USER')
    GMAIL_APP_PASSWORD = os.getenv('GMAIL_APP_PASSWORD')
    RECIPIENT_EMAIL = os.getenv('RECIPIENT_EMAIL')
    SMTP_HOST = os.getenv('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.getenv('SMTP_PORT', '587'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), 'portfolio-test-uploads')
    OPENAI_API_KEY = None
    CHATBOT_RETRY_AFTER = None
    BCRYPT_LOG_ROUNDS = 4
    GMAIL_USER = None
    GMAIL_APP_PASSWORD = None
    RECIPIENT_EMAIL = None
