from __future__ import annotations

from typing import Dict


class TravelCalcError(Exception):
    """Base for failures that map onto a JSON ``{"error": ...}`` response."""

    http_status = 500

    def __init__(self, message: str, http_status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> Dict[str, str]:
        return {"error": self.message}


class InvalidParameterError(TravelCalcError):
    http_status = 400


class AssetNotFoundError(TravelCalcError):
    http_status = 404
