from enum import IntEnum


class EpochFlag(IntEnum):
    """
    RINEX observation epoch flag. Ordered by flag value, which is also the
    order in which records sharing one epoch are written.
    """

    OK = 0
    POWER_FAILURE = 1
    ANTENNA_BEING_MOVED = 2
    NEW_SITE_OCCUPATION = 3
    HEADER_INFORMATION_FOLLOWS = 4
    EXTERNAL_EVENT = 5
    CYCLE_SLIP = 6

    @classmethod
    def parse(cls, text: str) -> "EpochFlag":
        text = text.strip()
        if not text:
            return cls.OK
        try:
            return cls(int(text))
        except ValueError as e:
            raise ValueError(f"Invalid epoch flag: {text!r}") from e

    @property
    def has_event_body(self) -> bool:
        """True when the epoch is followed by header-like event lines."""
        return EpochFlag.ANTENNA_BEING_MOVED <= self <= EpochFlag.EXTERNAL_EVENT

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)
