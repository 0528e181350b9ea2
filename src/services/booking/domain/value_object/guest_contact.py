import re
from dataclasses import dataclass

from services.shared.domain.exception import ValidationException

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class GuestContact:
    """予約者の連絡先（氏名 + メールアドレス）"""

    name: str
    email: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationException("Guest name cannot be empty")
        if len(self.name) > 100:
            raise ValidationException("Guest name is too long (max 100 characters)")
        if not _EMAIL_PATTERN.match(self.email or ""):
            raise ValidationException(f"Invalid email address: {self.email!r}")
