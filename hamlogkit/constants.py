"""Operating modes, their categories and the known satellite names."""

from __future__ import annotations

from enum import IntEnum


class ModeType(IntEnum):
    """Category of an operating mode, as used for dupe checks and scoring."""

    UNKNOWN = 0
    CW = 1
    PH = 2
    DG = 3

    @property
    def label(self) -> str:
        """Short label shown on the display and written to the log."""
        return "*" if self is ModeType.UNKNOWN else self.name


# Mode names as reported by the rig; the position of each is its mode id.
MODE_NAMES: tuple[str, ...] = ("CW", "CW-R", "LSB", "USB", "FM", "AM", "RTTY")

_MODE_TYPES: dict[str, ModeType] = {
    "CW": ModeType.CW,
    "CW-R": ModeType.CW,
    "LSB": ModeType.PH,
    "USB": ModeType.PH,
    "FM": ModeType.PH,
    "AM": ModeType.PH,
    "RTTY": ModeType.DG,
}

# Satellites whose orbital elements are picked out of the TLE file.
SAT_NAMES: tuple[str, ...] = (
    "AO-07", "AO-27", "FO-29", "ISS", "AO-73",
    "XW-2A", "XW-2C", "XW-2D", "XW-2E", "XW-2F",
    "XW-2B", "CAS-4B", "CAS-4A", "AO-92", "RS-44",
    "EO-88", "JO-97", "AO-109", "FO-99", "HO-113",
    "IO-117", "FO-118", "CAS-10",
)

N_SATELLITES = len(SAT_NAMES) + 1

SETTINGS_FILE = "settings.txt"


def mode_id(name: str) -> int:
    """Return the numeric id of a mode name such as ``"USB"``."""
    try:
        return MODE_NAMES.index(name)
    except ValueError:
        raise ValueError(f"unknown mode: {name!r}") from None


def modetype_of(name: str) -> ModeType:
    """Return the category (CW, phone or digital) of a mode name."""
    try:
        return _MODE_TYPES[name]
    except KeyError:
        raise ValueError(f"unknown mode: {name!r}") from None