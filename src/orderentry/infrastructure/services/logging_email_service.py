"""EmailService that records the confirmation in the log instead of mailing it."""

from __future__ import annotations

import logging

from orderentry.domain.service.email_service import EmailService

logger = logging.getLogger(__name__)


class LoggingEmailService(EmailService):

    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        logger.info(
            "Order confirmation email sent to customer #%s for order #%s",
            customer_id,
            order_id,
        )
