from __future__ import annotations

from dataclasses import dataclass

from handset_pricing.domain.errors import ValidationError

MAX_PAGE_SIZE = 200


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_SIZE}")
