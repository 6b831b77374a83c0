# fitdiet/mailer.py
import logging
import smtplib
from email.message import EmailMessage

logger = logging.getLogger(__name__)


class SmtpMailer:
    """Sends HTML mail over SMTP with STARTTLS. Does nothing until credentials are set."""

    def __init__(self, server, port, username=None, password=None, timeout=30):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            server=config.get("MAIL_SERVER"),
            port=config.get("MAIL_PORT", 587),
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
        )

    @property
    def configured(self):
        return bool(self.username and self.password)

    def send(self, to, subject, html):
        if not self.configured:
            logger.info("Email not configured, skipping message to %s", to)
            return False

        msg = EmailMessage()
        msg["From"] = self.username
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("Your weekly fitness report is best viewed in an HTML-capable mail client.")
        msg.add_alternative(html, subtype="html")

        with smtplib.SMTP(self.server, self.port, timeout=self.timeout) as smtp:
            smtp.starttls()
            smtp.login(self.username, self.password)
            smtp.send_message(msg)
        return True
