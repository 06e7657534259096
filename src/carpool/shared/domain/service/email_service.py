from abc import ABC, abstractmethod

from carpool.shared.domain.exception import EmailError
from carpool.shared.domain.result import Result


class EmailService(ABC):
    """メール送信のインターフェース"""

    @abstractmethod
    def send_welcome_email(self, to: str, first_name: str) -> Result[None, EmailError]:
        """登録完了メールを送信する"""
        raise NotImplementedError
