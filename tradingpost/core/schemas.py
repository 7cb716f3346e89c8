from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, TypeVar

from .errors import ValidationError


T = TypeVar("T")

MAX_PAGE_SIZE = 200


@dataclass(frozen=True)
class PaginationParams:
    page: int = 0
    page_size: int = MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 0 or self.page_size < 0:
            raise ValidationError(
                f"page and page_size must be non-negative, got page={self.page} page_size={self.page_size}",
                context={"page": self.page, "page_size": self.page_size},
            )

    def next(self) -> "PaginationParams":
        return PaginationParams(page=self.page + 1, page_size=self.page_size)

    def to_query(self) -> str:
        return f"page={self.page}&page_size={self.page_size}"


@dataclass(frozen=True)
class PaginationMetadata:
    """Server-reported truncation state of a single response."""

    page_size: int
    page_total: int
    result_count: int
    result_total: int


@dataclass
class Paginated(Generic[T]):
    data: List[T]
    metadata: PaginationMetadata
