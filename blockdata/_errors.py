# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from .config import settings

__all__ = (
    "BlockDataError",
    "OutOfBoundsError",
)


class BlockDataError(Exception):
    """Base for every error raised by blockdata."""

    default_message: ClassVar[str] = "BlockData error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class OutOfBoundsError(BlockDataError, IndexError):
    """Raised when an index or cursor does not reference a present slot."""

    default_message = "Index out of bounds"

    @property
    def index(self) -> Any:
        """The offending index, as recorded by `from_index`."""
        return self.details.get("index")

    @property
    def count(self) -> int | None:
        """Number of items in the collection when the error was raised."""
        return self.details.get("count")

    @classmethod
    def from_index(
        cls,
        index: Any,
        count: int,
        *,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        """Create an OutOfBoundsError for `index` in `count` items."""
        shown = index
        if not isinstance(index, int):
            shown = str(index)
            if len(shown) > settings.ERROR_VALUE_MAX_LEN:
                shown = f"{shown[: settings.ERROR_VALUE_MAX_LEN]}..."
        details = {"index": shown, "count": count}
        message = message or f"Index {shown} does not exist in the collection"
        return cls(message=message, details=details, cause=cause)
