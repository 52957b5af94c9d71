"""Pagination metadata for paged list results."""

from __future__ import annotations

import math
from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaginationMetadata(BaseModel):
    """Counters describing one page of a list result.

    Serialized in camelCase into the `X-Pagination` response header.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_count: int = Field(..., ge=0)
    page_size: int = Field(..., ge=1)
    current_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)

    @classmethod
    def for_page(cls, total_count: int, page_size: int, current_page: int) -> Self:
        """Build metadata, deriving the page count from the total."""
        return cls(
            total_count=total_count,
            page_size=page_size,
            current_page=current_page,
            total_pages=math.ceil(total_count / page_size),
        )

    def to_header(self) -> str:
        """JSON-encode the metadata for a response header."""
        return self.model_dump_json(by_alias=True)
