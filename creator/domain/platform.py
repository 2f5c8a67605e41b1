from enum import Enum

from creator.domain.exceptions import InvalidInputError


class Platform(str, Enum):
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"

    @classmethod
    def parse(cls, value: "str | Platform | None") -> "Platform":
        if isinstance(value, Platform):
            return value
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidInputError(f"unsupported platform: {value!r}") from None
