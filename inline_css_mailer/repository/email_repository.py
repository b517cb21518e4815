"""Repository that composes outbound messages and hands them to a transport."""

from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import Any, Callable, Iterable, List

from inline_css_mailer.core.config import Settings, settings
from inline_css_mailer.core.exceptions import DeliveryError
from inline_css_mailer.models import EmailAttachment, EmailContent
from inline_css_mailer.services import InlineCssHook

logger = logging.getLogger(__name__)

Transport = Callable[[EmailMessage], Any]


class EmailRepository:
    """Build messages, run the delivery interceptors and call the transport."""

    def __init__(
        self,
        config: Settings | None = None,
        *,
        transport: Transport,
        interceptors: Iterable[Any] | None = None,
    ):
        self._settings = config or settings
        self._transport = transport
        self._interceptors: List[Any] = (
            list(interceptors) if interceptors is not None else [InlineCssHook(config=self._settings)]
        )

    def register_interceptor(self, interceptor: Any) -> None:
        """Run ``interceptor`` on every message before it reaches the transport.

        Either an object with a ``delivering_email(message)`` method or a plain
        callable taking the message.
        """
        self._interceptors.append(interceptor)

    @staticmethod
    def _add_attachment(message: EmailMessage, attachment: EmailAttachment) -> None:
        maintype, subtype = attachment.content_type.split("/", 1)
        cid = f"<{attachment.content_id}>" if attachment.content_id else None
        message.add_attachment(
            attachment.data,
            maintype=maintype,
            subtype=subtype,
            filename=attachment.filename,
            disposition="inline" if attachment.inline else "attachment",
            cid=cid,
        )

    def build_message(self, email: EmailContent) -> EmailMessage:
        if not email.sender:
            raise ValueError("An email needs a sender")
        if email.html_body is None and email.text_body is None:
            raise ValueError("An email needs an HTML or a text body")

        charset = email.charset or self._settings.INLINE_CSS_DEFAULT_CHARSET
        message = EmailMessage()
        message["Subject"] = email.subject
        message["From"] = email.sender
        message["To"] = ", ".join(email.recipients)

        if email.reply_to:
            message["Reply-To"] = email.reply_to
        if email.host:
            message["Host"] = email.host

        if email.html_body is None:
            message.set_content(email.text_body, charset=charset)
        elif email.text_body is None:
            message.set_content(email.html_body, subtype="html", charset=charset)
        else:
            message.set_content(email.text_body, charset=charset)
            message.add_alternative(email.html_body, subtype="html", charset=charset)

        for attachment in email.attachments:
            self._add_attachment(message, attachment)

        return message

    def _intercept(self, message: EmailMessage) -> None:
        for interceptor in self._interceptors:
            hook = getattr(interceptor, "delivering_email", interceptor)
            hook(message)

    def send_email(self, email: EmailContent) -> EmailMessage:
        message = self.build_message(email)
        self._intercept(message)

        try:
            self._transport(message)
        except Exception as exc:
            raise DeliveryError("Failed to deliver email") from exc

        logger.info(
            "Email '%s' delivered to %s as %s",
            email.subject,
            email.primary_recipient(),
            message.get_content_type(),
        )
        return message


__all__ = ["EmailRepository", "Transport"]
