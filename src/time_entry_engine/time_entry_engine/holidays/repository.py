from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(self, *, start: str, end: str, bundesland: Optional[str] = None) -> Sequence[Holiday]:
        """Holidays with start <= date <= end.

        With bundesland set, only that state's and nationwide holidays.
        """

        raise NotImplementedError
