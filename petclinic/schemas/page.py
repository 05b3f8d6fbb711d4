"""Pagination result model."""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    One page of query results plus the counts needed for pagination controls.

    `number` is zero-based; the HTTP layer exposes one-based page numbers.
    """
    content: List[T] = Field(default_factory=list)
    number: int = Field(default=0, ge=0)
    size: int = Field(default=5, ge=1)
    total_elements: int = Field(default=0, ge=0)

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def is_empty(self) -> bool:
        return not self.content
