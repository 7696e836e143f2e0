# portfolio/services/mailer.py
import html
import smtplib
import logging
from email.message import EmailMessage

from portfolio.errors import EmailUnavailable

logger = logging.getLogger(__name__)


class SMTPMailer:
    """Relays contact form submissions through an authenticated SMTP account."""

    def __init__(self, user=None, password=None, recipient=None,
                 host="smtp.gmail.com", port=587, timeout=15):
        self.user = user
        self.password = password
        self.recipient = recipient or user
        self.host = host
        self.port = port
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            user=config.get("GMAIL_USER"),
            password=config.get("GMAIL_APP_PASSWORD"),
            recipient=config.get("RECIPIENT_EMAIL"),
            host=config.get("SMTP_HOST", "smtp.gmail.com"),
            port=config.get("SMTP_PORT", 587),
        )

    def build_message(self, contact):
        msg = EmailMessage()
        msg["Subject"] = f"Portfolio Contact: {contact.subject}"
        msg["From"] = self.user
        msg["To"] = self.recipient
        msg["Reply-To"] = contact.email
        msg.set_content(render_text(contact))
        msg.add_alternative(render_html(contact), subtype="html")
        return msg

    def send_contact(self, contact):
        if not self.user or not self.password:
            logger.error("❌ Email configuration error: GMAIL_USER / GMAIL_APP_PASSWORD not set")
            raise EmailUnavailable("Email service not configured. Please contact the administrator.")
        if not self.recipient:
            raise EmailUnavailable("Recipient email not configured. Please set RECIPIENT_EMAIL.")

        msg = self.build_message(contact)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.starttls()
                server.login(self.user, self.password)
                server.send_message(msg)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"❌ SMTP authentication failed: {e}")
            raise EmailUnavailable("Email configuration error. Please check server settings.")
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"❌ Failed to relay contact message: {e}")
            raise EmailUnavailable("Failed to send message. Please try again later.")

        logger.info(f"📧 Contact message relayed to {self.recipient}")


def render_text(contact):
    lines = [
        "New Contact Form Submission",
        "",
        f"Name: {contact.name}",
        f"Email: {contact.email}",
    ]
    if contact.phone:
        lines.append(f"Phone: {contact.phone}")
    lines += [f"Subject: {contact.subject}", "", "Message:", contact.message]
    return "\n".join(lines)


def render_html(contact):
    e = html.escape
    phone = f"<p><strong>Phone:</strong> {e(contact.phone)}</p>" if contact.phone else ""
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h2 style="color: #FF2D6D;">New Contact Form Submission</h2>
      <div style="background-color: #f5f5f5; padding: 20px; border-radius: 8px; margin: 20px 0;">
        <p><strong>Name:</strong> {e(contact.name)}</p>
        <p><strong>Email:</strong> {e(contact.email)}</p>
        {phone}
        <p><strong>Subject:</strong> {e(contact.subject)}</p>
      </div>
      <div style="background-color: #ffffff; padding: 20px; border-left: 4px solid #FF2D6D; margin: 20px 0;">
        <h3 style="margin-top: 0;">Message:</h3>
        <p style="white-space: pre-wrap; line-height: 1.6;">{e(contact.message)}</p>
      </div>
      <p style="color: #666; font-size: 12px; margin-top: 20px;">
        This message was sent from your portfolio contact form.
      </p>
    </div>
    """
