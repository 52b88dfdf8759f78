"""Envelope returned by every ApiService call."""

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Decoded HTTP response.

    ``data`` is the JSON body as sent by the server, normally
    ``{"success": bool, "message": str, "data": ...}``.
    """

    status_code: int
    data: Any = None

    @property
    def success(self) -> bool:
        return isinstance(self.data, dict) and self.data.get("success") is True

    @property
    def message(self) -> str | None:
        if isinstance(self.data, dict):
            return self.data.get("message")
        return None

    @property
    def payload(self) -> Any:
        if isinstance(self.data, dict):
            return self.data.get("data")
        return None
