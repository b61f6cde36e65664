from __future__ import annotations

import json
from datetime import date, datetime

import httpx
import pytest

from swimmg.application.exceptions import (
    NetworkUnavailable,
    SlotNoLongerAvailable,
    Unauthorized,
    UnknownSubmissionError,
)
from swimmg.core.config import settings
from swimmg.infrastructure.booking.http_submission import HttpBookingSubmission
from swimmg.infrastructure.booking.mock_submission import MockBookingSubmission

LESSON_DAY = date(2025, 5, 10)
TEN_AM = datetime(2025, 5, 10, 10, 0)


def _http_submission(handler) -> HttpBookingSubmission:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpBookingSubmission(base_url="https://booking.test/api/", api_key="secret", client=client)


@pytest.mark.asyncio
async def test_mock_books_each_slot_once():
    submission = MockBookingSubmission()

    assert await submission.submit(LESSON_DAY, TEN_AM) == "mock_booking_1"
    with pytest.raises(SlotNoLongerAvailable):
        await submission.submit(LESSON_DAY, TEN_AM)
    assert await submission.submit(LESSON_DAY, datetime(2025, 5, 10, 11, 0)) == "mock_booking_2"
    assert submission.bookings == {
        "mock_booking_1": TEN_AM,
        "mock_booking_2": datetime(2025, 5, 10, 11, 0),
    }
    assert len(submission.calls) == 3


@pytest.mark.asyncio
async def test_mock_fail_next_is_one_shot():
    submission = MockBookingSubmission()
    submission.fail_next(Unauthorized("expired"))

    with pytest.raises(Unauthorized):
        await submission.submit(LESSON_DAY, TEN_AM)
    assert await submission.submit(LESSON_DAY, TEN_AM) == "mock_booking_1"


@pytest.mark.asyncio
async def test_mock_rejects_slot_on_other_date():
    with pytest.raises(UnknownSubmissionError):
        await MockBookingSubmission().submit(date(2025, 5, 11), TEN_AM)


@pytest.mark.asyncio
async def test_http_submit_success():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": 42, "status": "booked"})

    submission = _http_submission(handler)
    assert await submission.submit(LESSON_DAY, TEN_AM) == "42"
    await submission.aclose()

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://booking.test/api/bookings"
    assert request.headers["Authorization"] == "Bearer secret"
    assert json.loads(request.content) == {"date": "2025-05-10", "slot_start": "2025-05-10T10:00:00"}


@pytest.mark.asyncio
async def test_http_prefers_booking_id_field():
    submission = _http_submission(lambda request: httpx.Response(200, json={"id": 1, "booking_id": "bk_9"}))
    assert await submission.submit(LESSON_DAY, TEN_AM) == "bk_9"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,error",
    [
        (409, SlotNoLongerAvailable),
        (401, Unauthorized),
        (403, Unauthorized),
        (503, NetworkUnavailable),
        (500, UnknownSubmissionError),
        (422, UnknownSubmissionError),
    ],
)
async def test_http_status_mapping(status, error):
    submission = _http_submission(lambda request: httpx.Response(status, json={"detail": "nope"}))
    with pytest.raises(error):
        await submission.submit(LESSON_DAY, TEN_AM)


@pytest.mark.asyncio
async def test_http_connection_error_is_network_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkUnavailable):
        await _http_submission(handler).submit(LESSON_DAY, TEN_AM)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={}),
        httpx.Response(200, json={"id": ""}),
        httpx.Response(200, content=b"not json"),
    ],
)
async def test_http_unreadable_response(response):
    submission = _http_submission(lambda request: response)
    with pytest.raises(UnknownSubmissionError):
        await submission.submit(LESSON_DAY, TEN_AM)


def test_http_requires_base_url(monkeypatch):
    monkeypatch.setattr(settings, "BOOKING_API_BASE_URL", None)
    with pytest.raises(ValueError):
        HttpBookingSubmission()
