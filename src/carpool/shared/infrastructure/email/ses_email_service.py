from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from carpool.shared.domain import Err, Ok, Result
from carpool.shared.domain.exception import EmailError
from carpool.shared.domain.service import EmailService

logger = Logger(child=True)

WELCOME_SUBJECT = "Welcome to Carpool"


class SesEmailService(EmailService):
    """Amazon SES を使用した EmailService の具象実装

    enabled が False の場合は送信せずに成功を返す。
    """

    def __init__(self, client, sender: str, enabled: bool = True) -> None:
        self._client = client
        self._sender = sender
        self._enabled = enabled

    def send_welcome_email(self, to: str, first_name: str) -> Result[None, EmailError]:
        if not self._enabled:
            logger.debug("Email delivery disabled, skipping welcome email")
            return Ok(None)

        body = (
            f"Hello {first_name or 'there'},\n\n"
            "Your Carpool account is ready. You can now search for travels "
            "and book a seat.\n"
        )
        try:
            self._client.send_email(
                Source=self._sender,
                Destination={"ToAddresses": [to]},
                Message={
                    "Subject": {"Data": WELCOME_SUBJECT, "Charset": "UTF-8"},
                    "Body": {"Text": {"Data": body, "Charset": "UTF-8"}},
                },
            )
        except (BotoCoreError, ClientError) as e:
            return Err(EmailError("Failed to send welcome email", cause=e))
        return Ok(None)
