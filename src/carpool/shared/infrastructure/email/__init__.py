from .ses_email_service import SesEmailService

__all__ = ["SesEmailService"]
