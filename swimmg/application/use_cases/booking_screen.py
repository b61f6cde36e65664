from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from swimmg.application.ports.locale import LocalePort
from swimmg.application.use_cases.booking_selection import BookingSelectionController
from swimmg.domain.entities.booking_selection import SelectionPhase
from swimmg.domain.entities.grid_cell import DayCell


@dataclass(frozen=True)
class DayCellView:
    label: str  # empty for padding cells
    date: date | None
    is_selected: bool = False
    is_today: bool = False


@dataclass(frozen=True)
class SlotView:
    label: str
    start: datetime
    available: bool
    is_selected: bool = False


@dataclass(frozen=True)
class BookingScreenModel:
    phase: SelectionPhase
    month_title: str
    weekday_symbols: list[str]
    cells: list[DayCellView]
    slots: list[SlotView]
    show_slots: bool
    confirmation_visible: bool
    confirmation_prompt: str | None
    controls_enabled: bool
    error_message: str | None
    booking_id: str | None


class BookingScreenPresenter:
    """Turns controller state into what the booking screen draws."""

    def __init__(self, locale: LocalePort) -> None:
        self._locale = locale

    def present(self, controller: BookingSelectionController) -> BookingScreenModel:
        selection = controller.selection
        today = controller.today

        cells: list[DayCellView] = []
        for cell in controller.grid():
            if isinstance(cell, DayCell):
                cells.append(
                    DayCellView(
                        label=self._locale.day_label(cell.date),
                        date=cell.date,
                        is_selected=cell.date == selection.selected_date,
                        is_today=cell.date == today,
                    )
                )
            else:
                cells.append(DayCellView(label="", date=None))

        selected_start = selection.selected_slot.start if selection.selected_slot else None
        slots = [
            SlotView(
                label=self._locale.slot_label(slot.start),
                start=slot.start,
                available=slot.available,
                is_selected=slot.start == selected_start,
            )
            for slot in controller.slots()
        ]

        confirmation_visible = controller.is_confirmation_visible
        prompt = None
        if confirmation_visible and selected_start is not None:
            prompt = self._locale.confirmation_prompt(selected_start)

        return BookingScreenModel(
            phase=selection.phase,
            month_title=self._locale.month_title(selection.reference_month),
            weekday_symbols=self._locale.weekday_symbols(),
            cells=cells,
            slots=slots,
            show_slots=selection.selected_date is not None,
            confirmation_visible=confirmation_visible,
            confirmation_prompt=prompt,
            controls_enabled=controller.controls_enabled,
            error_message=selection.failure.message if selection.failure else None,
            booking_id=selection.booking_id,
        )
