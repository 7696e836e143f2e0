# portfolio/services/contact.py
import logging

from flask import current_app

from portfolio.models import ContactMessage
from portfolio.databases import list_records, save_record
from portfolio.errors import ValidationError
from portfolio.validators import is_valid_email, require_fields

logger = logging.getLogger(__name__)


def get_mailer():
    return current_app.extensions["portfolio_mailer"]


class ContactService:
    @staticmethod
    def send(data):
        """
        Save a contact form submission, then relay it by email.

        The message is committed before the relay is attempted, so an
        EmailUnavailable raised by the mailer never loses the submission.
        """
        require_fields(
            data, ("name", "email", "subject", "message"),
            "Name, email, subject, and message are required",
        )
        email = str(data["email"]).strip()
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")

        contact = ContactMessage(
            name=str(data["name"]).strip(),
            phone=str(data.get("phone") or "").strip(),
            email=email.lower(),
            subject=str(data["subject"]).strip(),
            message=str(data["message"]),
        )
        save_record(contact)
        logger.info(f"💾 Contact message saved from {contact.email}")

        get_mailer().send_contact(contact)

        return {
            "message": "Message sent successfully! We will get back to you soon.",
            "success": True,
        }

    @staticmethod
    def list():
        return list_records(ContactMessage)
