from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DayCell:
    date: date


@dataclass(frozen=True)
class EmptyCell:
    pass


GridCell = DayCell | EmptyCell
