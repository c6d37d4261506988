from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import NATIONWIDE_REGION


@dataclass(frozen=True)
class Holiday:
    """Public holiday (Feiertag). bundesland 'ALL' means nationwide."""

    date: str  # YYYY-MM-DD
    name: str
    bundesland: str = NATIONWIDE_REGION
