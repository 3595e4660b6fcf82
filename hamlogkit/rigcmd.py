"""Frequency-setting commands for CI-V and CAT controlled rigs."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

CAT_YAESU = 1
CAT_KENWOOD = 2
CAT_NONE = 3

_CIV_SET_VFO_FREQ = 0x25
_CIV_SET_FREQ = 0x05
_CIV_SELECT_VFO = 0x07
_CIV_MAIN = 0xD0
_CIV_SUB = 0xD1
_CIV_FREQ_DIGITS = 10

Command = Union[bytes, str]


class RigType(IntEnum):
    """Kind of rig, deciding how a frequency is sent to it."""

    IC705 = 0
    IC9700 = 1
    YAESU = 2
    KENWOOD = 3
    MANUAL = 4


def dec2bcd(value: int) -> int:
    """Encode a number from 0 to 99 as one packed BCD byte."""
    if not 0 <= value <= 99:
        raise ValueError(f"value out of BCD byte range: {value}")
    return (value // 10) << 4 | value % 10


def civ_frequency_bytes(freq: int) -> bytes:
    """Encode a frequency in Hz as the five CI-V BCD bytes, lowest digits first."""
    if not 0 <= freq < 10**_CIV_FREQ_DIGITS:
        raise ValueError(f"frequency out of CI-V range: {freq}")
    out = bytearray()
    for _ in range(_CIV_FREQ_DIGITS // 2):
        freq, pair = divmod(freq, 100)
        out.append(dec2bcd(pair))
    return bytes(out)


def frequency_commands(rig_type: RigType, cat_type: int, freq: int, vfo: int) -> list[Command]:
    """Return the commands that set ``freq`` on a rig.

    CI-V commands are returned as their body bytes (without preamble, address
    and end byte); CAT commands as strings. ``vfo`` is 0 for the main
    (selected) VFO and 1 for the sub (unselected) one.
    """
    rig_type = RigType(rig_type)
    if vfo not in (0, 1):
        raise ValueError(f"vfo must be 0 or 1: {vfo}")

    if rig_type is RigType.IC705:
        # The selected VFO byte is flipped for the sub VFO, which yields 0 either way.
        selector = 1 - vfo if vfo == 1 else vfo
        return [bytes([_CIV_SET_VFO_FREQ, selector]) + civ_frequency_bytes(freq)]

    if rig_type is RigType.IC9700:
        band = _CIV_SUB if vfo == 1 else _CIV_MAIN
        return [
            bytes([_CIV_SELECT_VFO, band]),
            bytes([_CIV_SET_FREQ]) + civ_frequency_bytes(freq),
            bytes([_CIV_SELECT_VFO, _CIV_SUB]),
        ]

    if rig_type in (RigType.YAESU, RigType.KENWOOD):
        if freq < 0:
            return []
        if cat_type == CAT_YAESU:
            return [f"FA{freq:09d};"]
        if cat_type == CAT_KENWOOD:
            return [f"FA{freq:011d};"]
        return []

    return []