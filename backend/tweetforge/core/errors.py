"""Application exceptions mapped onto the JSON error envelope."""
from __future__ import annotations

from typing import Optional

from fastapi import status


class TweetForgeError(Exception):
    """Base error. ``public_message`` goes to the client, ``detail`` only to the log."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "An unexpected error occurred. Please try again."

    def __init__(self, detail: Optional[str] = None, *, public_message: Optional[str] = None) -> None:
        if public_message is not None:
            self.public_message = public_message
        self.detail = detail or self.public_message
        super().__init__(self.detail)


class ConfigurationError(TweetForgeError):
    public_message = "Server configuration error. Please contact support."


class UpstreamError(TweetForgeError):
    public_message = "Failed to generate tweet. Please try again."


class TweetNotFoundError(TweetForgeError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Tweet not found."


class ServiceError(TweetForgeError):
    """Unexpected failure caught at an endpoint boundary."""
