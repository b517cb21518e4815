"""Message composition and delivery."""

from inline_css_mailer.repository.email_repository import EmailRepository, Transport

__all__ = ["EmailRepository", "Transport"]
