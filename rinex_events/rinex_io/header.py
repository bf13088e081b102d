"""
The part of the observation file header the epoch-event code depends on.
"""

from dataclasses import dataclass
from typing import Union

from ..time import TimeScale

LABEL_RINEX_VERSION_TYPE = "RINEX VERSION / TYPE"


@dataclass(frozen=True)
class RinexVersion:
    major: int
    minor: int = 0

    @classmethod
    def parse(cls, text: str) -> "RinexVersion":
        """
        Reads a version number such as `3.04`. The minor part is a decimal
        fraction, so `3.1` is version 3.10.
        """
        major_str, _, minor_str = text.strip().partition(".")
        try:
            major = int(major_str)
            if minor_str and not minor_str.isdigit():
                raise ValueError(f"invalid minor version {minor_str!r}")
            minor = round(float(f"0.{minor_str}") * 100) if minor_str else 0
        except ValueError as e:
            raise ValueError(f"Invalid RINEX version: {text!r}") from e
        return cls(major, minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor:02d}"


@dataclass(frozen=True)
class HeaderContext:
    version: RinexVersion
    file_type: str = "O"
    system_code: str = "M"
    time_scale: TimeScale = TimeScale.GPS

    @property
    def major_version(self) -> int:
        return self.version.major

    @classmethod
    def from_version_type_line(cls, line: str) -> "HeaderContext":
        line_label = line[60:].strip()
        if line_label != LABEL_RINEX_VERSION_TYPE:
            raise ValueError(
                f"Invalid RINEX file; expected `{LABEL_RINEX_VERSION_TYPE}`, got {line_label}"
            )
        version = RinexVersion.parse(line[:9])
        file_type = line[20:21].strip()
        system_code = line[40:41].strip()
        return cls(version, file_type, system_code)

    def format_version_type_line(self) -> str:
        return f"{str(self.version):>9}{'': <11}{self.file_type: <20}{self.system_code: <20}{LABEL_RINEX_VERSION_TYPE}"


VersionLike = Union[HeaderContext, RinexVersion, int]


def major_version_of(header: VersionLike) -> int:
    if isinstance(header, HeaderContext):
        return header.major_version
    if isinstance(header, RinexVersion):
        return header.major
    return int(header)
