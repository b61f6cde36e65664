#!/usr/bin/env python3
"""
Interactive local booking harness (no UI, no backend).

Usage:
  python3 scripts/book_local.py [--today 2025-05-10] [--taken 2025-05-10T10:00]

What it does:
- Starts one booking flow on the wired controller
- Prints the screen model after every command (grid, slots, dialog, errors)
- Uses MockBookingSubmission unless ENV and BOOKING_API_BASE_URL select the HTTP adapter
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date, datetime, time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from swimmg.application.exceptions import BookingError
from swimmg.application.use_cases.booking_screen import BookingScreenModel
from swimmg.core.logging import configure_logging
from swimmg.infrastructure.booking.mock_submission import MockBookingSubmission
from swimmg.infrastructure.clock.system_clock import FixedClock
from swimmg.wiring.dependencies import close_submission, get_booking_controller, get_presenter, get_timezone

HELP = """Commands:
  next | prev      -> change month
  date N           -> pick day N of the displayed month
  slot N           -> pick the N-th slot (1-based)
  confirm          -> submit the booking
  cancel | retry   -> close the dialog / retry after a failure
  quit"""


def _print_screen(model: BookingScreenModel) -> None:
    print("\n" + "-" * 60)
    print(f"{model.month_title}    [{model.phase.value}]")
    print(" ".join(f"{s:>4}" for s in model.weekday_symbols))
    for row in range(0, len(model.cells), 7):
        line = []
        for cell in model.cells[row : row + 7]:
            mark = "*" if cell.is_selected else ("." if cell.is_today else " ")
            line.append(f"{cell.label:>3}{mark}")
        print(" ".join(line))

    if model.show_slots:
        print("\nSlots:")
        for i, slot in enumerate(model.slots, 1):
            flags = " (taken)" if not slot.available else ""
            flags += " <" if slot.is_selected else ""
            print(f"  {i:>2}. {slot.label}{flags}")

    if model.confirmation_visible and model.confirmation_prompt:
        print(f"\n[Confirm Booking] {model.confirmation_prompt}  (confirm / cancel)")
    if model.error_message:
        print(f"\n! {model.error_message}")
    if model.booking_id:
        print(f"\nBooked: {model.booking_id}")
    print("-" * 60)


async def _drive(today: date | None, taken: list[datetime]) -> None:
    tz = get_timezone()
    clock = FixedClock(datetime.combine(today, time(9), tzinfo=tz)) if today else None
    submission = MockBookingSubmission(booked=[t.replace(tzinfo=tz) for t in taken]) if taken else None
    controller = get_booking_controller(submission=submission, clock=clock)
    presenter = get_presenter()

    print("\nLocal Booking Harness")
    print(HELP)
    _print_screen(presenter.present(controller))

    while not controller.phase.is_terminal:
        try:
            raw = (await asyncio.to_thread(input, "\n> ")).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return
        if not raw:
            continue

        cmd, _, arg = raw.lower().partition(" ")
        try:
            if cmd in ("quit", "exit"):
                controller.abandon()
                print("Bye!")
                return
            if cmd == "help":
                print(HELP)
                continue
            if cmd == "next":
                controller.navigate_month(1)
            elif cmd == "prev":
                controller.navigate_month(-1)
            elif cmd == "date":
                month = controller.selection.reference_month
                controller.pick_date(date(month.year, month.month, int(arg)))
            elif cmd == "slot":
                controller.pick_slot(controller.slots()[int(arg) - 1])
            elif cmd == "confirm":
                await controller.confirm()
            elif cmd == "cancel":
                controller.cancel()
            elif cmd == "retry":
                controller.retry()
            else:
                print(f"Unknown command: {cmd}")
                continue
        except (BookingError, ValueError, IndexError) as e:
            print(f"ERROR: {e}")
            continue

        _print_screen(presenter.present(controller))


async def run(today: date | None, taken: list[datetime]) -> None:
    try:
        await _drive(today, taken)
    finally:
        await close_submission()


def main() -> None:
    parser = argparse.ArgumentParser(description="Drive one swim-lesson booking flow in the terminal.")
    parser.add_argument("--today", type=date.fromisoformat, default=None, help="Pretend today is YYYY-MM-DD")
    parser.add_argument(
        "--taken",
        type=datetime.fromisoformat,
        action="append",
        default=[],
        help="Slot start already booked by someone else (repeatable)",
    )
    args = parser.parse_args()

    configure_logging()
    asyncio.run(run(args.today, args.taken))


if __name__ == "__main__":
    main()
