"""Exceptions raised by the API client and its models."""

from __future__ import annotations

from typing import Any


class HeliumError(Exception):
    """Base class for every error raised by this package."""


class RequestError(HeliumError):
    """An HTTP request failed or returned an error status."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("request error")
        self.cause = cause


class UnexpectedValueError(HeliumError):
    """A response held a value of an unexpected shape."""

    def __init__(self, value: Any) -> None:
        super().__init__("unexpected value")
        self.value = value


class DecimalsError(HeliumError):
    """A decimal string had too many fractional digits or was malformed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid decimals in {text}, only 8 allowed")
        self.text = text


class NumberError(HeliumError):
    """A number was unexpected or invalid."""

    def __init__(self, text: str) -> None:
        super().__init__(f"unexpected or invalid number {text}")
        self.text = text