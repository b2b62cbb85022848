from typing import List, Optional
import logging

from pydantic import BaseModel

from app.schemas.schedule import UnavailableDateEntry

logger = logging.getLogger(__name__)

class UnavailableDateSet(BaseModel):
    """
    One-off dates on which a product cannot be booked.

    Entries are unique by date and kept in ascending date order. Any date is
    accepted, including past ones.
    """
    entries: List[UnavailableDateEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def dates(self) -> List[str]:
        return [e.date for e in self.entries]

    def contains(self, date: str) -> bool:
        return self.get(date) is not None

    def get(self, date: str) -> Optional[UnavailableDateEntry]:
        for entry in self.entries:
            if entry.date == date:
                return entry
        return None

    def add(self, date: str, reason: str = "") -> bool:
        """Add a date. Returns False (and changes nothing) if it is already listed."""
        if self.contains(date):
            logger.warning(f"Unavailable date {date} already listed, ignoring")
            return False

        self.entries = sorted(
            self.entries + [UnavailableDateEntry(date=date, reason=reason or "")],
            key=lambda e: e.date,
        )
        return True

    def remove(self, date: str) -> bool:
        remaining = [e for e in self.entries if e.date != date]
        removed = len(remaining) != len(self.entries)
        self.entries = remaining
        return removed

    def update_reason(self, date: str, reason: str) -> bool:
        entry = self.get(date)
        if entry is None:
            return False
        entry.reason = reason
        return True
