from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BookingResponseDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | int | None = None
    booking_id: str | int | None = None
    status: str | None = None

    def resolved_id(self) -> str | None:
        value = self.booking_id if self.booking_id is not None else self.id
        if value is None or str(value).strip() == "":
            return None
        return str(value)
