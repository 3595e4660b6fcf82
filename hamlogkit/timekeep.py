"""Real-time clock display formats and NTP-based clock correction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

NTP_SERVER = "ntp.nict.jp"
NTP_OFFSET_SECONDS = 32400
NTP_UPDATE_INTERVAL_MS = 60000


def format_short(time: datetime) -> str:
    """Format a time as ``YY/MM/DD-hh:mm:ss``."""
    return (
        f"{time.year % 100:02d}/{time.month:02d}/{time.day:02d}-"
        f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
    )


def format_long(time: datetime) -> str:
    """Format a time as ``YYYY/MM/DD-hh:mm:ss``."""
    return (
        f"{time.year:04d}/{time.month:02d}/{time.day:02d}-"
        f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
    )


@dataclass
class ClockSync:
    """Correct the real-time clock from NTP after a persistent deviation.

    The clock is set from NTP once it has differed by at least ``threshold``
    seconds on ``required`` consecutive updates.
    """

    threshold: int = 2
    required: int = 10
    adj_count: int = 0
    adjusted: bool = False

    def update(self, rtc: datetime, ntp: Optional[datetime]) -> datetime:
        """Compare the clock with NTP time; return the time the clock now holds.

        ``ntp`` is None when no NTP time is available yet.
        """
        self.adjusted = False
        if ntp is None:
            return rtc
        dt = int(abs((rtc - ntp).total_seconds()))
        if dt < self.threshold:
            self.adj_count = 0
            return rtc
        self.adj_count += 1
        if self.adj_count >= self.required:
            self.adj_count = 0
            self.adjusted = True
            return ntp
        return rtc