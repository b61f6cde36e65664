from __future__ import annotations

import logging
from datetime import date, datetime

import httpx

from swimmg.application.dto.booking_response import BookingResponseDTO
from swimmg.application.exceptions import (
    NetworkUnavailable,
    SlotNoLongerAvailable,
    Unauthorized,
    UnknownSubmissionError,
)
from swimmg.application.ports.booking_submission import BookingSubmissionPort
from swimmg.core.config import settings

UNAVAILABLE_STATUSES = {502, 503, 504}


class HttpBookingSubmission(BookingSubmissionPort):
    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL or "").rstrip("/")
        if not self._base_url:
            raise ValueError("BOOKING_API_BASE_URL is required for HTTP booking submission")

        self._api_key = api_key or settings.BOOKING_API_KEY
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds or settings.BOOKING_API_TIMEOUT_SECONDS
        )
        self._logger = logging.getLogger(__name__)

    async def submit(self, lesson_date: date, slot_start: datetime) -> str:
        url = f"{self._base_url}/bookings"
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        payload = {"date": lesson_date.isoformat(), "slot_start": slot_start.isoformat()}

        try:
            response = await self._client.post(url, json=payload, headers=headers)
        except httpx.TransportError as e:
            self._logger.error("Booking service unreachable", extra={"error": str(e)})
            raise NetworkUnavailable(str(e)) from e

        status = response.status_code
        if status == 409:
            raise SlotNoLongerAvailable(f"Slot {slot_start.isoformat()} was taken")
        if status in (401, 403):
            raise Unauthorized(f"Booking service rejected credentials (HTTP {status})")
        if status in UNAVAILABLE_STATUSES:
            raise NetworkUnavailable(f"Booking service unavailable (HTTP {status})")
        if response.is_error:
            self._logger.error("Booking service error", extra={"reason": status, "error": response.text})
            raise UnknownSubmissionError(f"Booking service returned HTTP {status}")

        try:
            data = BookingResponseDTO.model_validate(response.json())
        except ValueError as e:
            raise UnknownSubmissionError("Booking service returned an unreadable response") from e

        booking_id = data.resolved_id()
        if not booking_id:
            raise UnknownSubmissionError("No booking ID returned from booking service")

        self._logger.info("Booking submitted", extra={"booking_id": booking_id, "slot": slot_start.isoformat()})
        return booking_id

    async def aclose(self) -> None:
        await self._client.aclose()
