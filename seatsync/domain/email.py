from __future__ import annotations

import re
from dataclasses import dataclass

from seatsync.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,7}$"
)


@dataclass(frozen=True, slots=True, order=True)
class Email:
    """Validated email address.

    The value is kept exactly as given: no lower-casing and no trimming, so two
    addresses differing only in case are distinct.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError(f"Invalid email format: {self.value!r}")

    @classmethod
    def of(cls, raw: str) -> Email:
        return cls(raw)

    def __str__(self) -> str:
        return self.value
