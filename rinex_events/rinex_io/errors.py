from typing import Any


class ParsingError(ValueError):
    """Failure to read an event block embedded in the observation body."""


class EventLengthError(ParsingError):
    def __init__(self, actual: int, declared: int):
        self.actual = actual
        self.declared = declared
        super().__init__(
            f"Number of lines in the event ({actual}) doesn't match the declared one ({declared})"
        )


class CoordinatesParsingError(ParsingError):
    def __init__(self, field: str, raw: str):
        self.field = field
        self.raw = raw
        super().__init__(f'failed to parse "{field}" coordinates from "{raw}"')


class NotImplementedFlagError(ParsingError, NotImplementedError):
    def __init__(self, flag: Any):
        self.flag = flag
        super().__init__(f"parsing of {flag!r} events is not implemented")


class UnsupportedVersionError(NotImplementedError):
    def __init__(self, major_version: int):
        self.major_version = major_version
        super().__init__(
            f"epoch header formatting is not implemented for RINEX version {major_version}"
        )


class CombinationError(ValueError):
    def __init__(self, epoch: Any, flag: Any):
        self.epoch = epoch
        self.flag = flag
        super().__init__(
            f"epoch {epoch} with flag {flag} is present in both the observation and event records"
        )
