"""AssetTrack — Common response envelope: Result and PaginatedResult.

Every service returns one of these instead of raising. A failed result never
carries data; use ``unwrap()`` to reach the payload of a successful one.
"""
import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "OK"
DEFAULT_FAILURE_MESSAGE = "Operation failed"


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ResultError(Exception):
    """Raised by ``Result.unwrap()`` on a failed result."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _as_error_list(error: str | list[str]) -> list[str]:
    if isinstance(error, str):
        return [error]
    return list(error)


class Result(BaseModel, Generic[T]):
    """Standard envelope: {success, message, data, errors}."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    success: bool
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: T | None = None
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _failure_has_no_data(self) -> "Result[T]":
        if not self.success and self.data is not None:
            raise ValueError("a failed result cannot carry data")
        return self

    @classmethod
    def ok(cls, data: Any = None, message: str = DEFAULT_SUCCESS_MESSAGE) -> "Result[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, errors: list[str] | None = None) -> "Result[T]":
        return cls(success=False, message=message, errors=errors or [])

    @classmethod
    def failure(
        cls,
        error: str | list[str],
        message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> "Result[T]":
        """Failure whose detail goes into ``errors`` under a summary message."""
        return cls(success=False, message=message, errors=_as_error_list(error))

    def unwrap(self) -> T:
        if not self.success:
            raise ResultError(self.message, self.errors)
        return self.data


class PaginatedResult(Result[list[T]], Generic[T]):
    """Result over one page of a sequence, with page-window metadata.

    ``page``, ``page_size`` and ``total_count`` are set on success only;
    ``total_count`` is the size of the whole (filtered) set, not of ``data``.
    """

    page: int | None = Field(default=None, ge=1)
    page_size: int | None = Field(default=None, gt=0)
    total_count: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _window_fits_page(self) -> "PaginatedResult[T]":
        if self.success:
            if self.page is None or self.page_size is None or self.total_count is None:
                raise ValueError("page, page_size and total_count are required on success")
            if self.data is not None and len(self.data) > self.page_size:
                raise ValueError("data holds more items than page_size")
        return self

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int | None:
        if self.total_count is None or not self.page_size:
            return None
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPrevious")
    @property
    def has_previous(self) -> bool | None:
        if self.page is None:
            return None
        return self.page > 1

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool | None:
        if self.page is None or self.total_pages is None:
            return None
        return self.page < self.total_pages

    @classmethod
    def ok(
        cls,
        data: Any,
        total_count: int,
        page: int,
        page_size: int,
        message: str = DEFAULT_SUCCESS_MESSAGE,
    ) -> "PaginatedResult[T]":
        return cls(
            success=True,
            message=message,
            data=list(data),
            total_count=total_count,
            page=page,
            page_size=page_size,
        )
