"""Domain value objects for threadtree."""

import re

import pydantic
from pydantic import Field, field_validator

from threadtree.domain.error import ValidationError
from threadtree.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Public username of a user.

    1-64 characters: letters, digits, dots, underscores and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username_format(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9._-]{1,64}$", v):
            raise ValueError(
                "Username must be 1-64 characters of letters, digits, '.', '_' or '-'"
            )
        return v


class PageWindow(ValueObject):
    """Pagination window over an ordered query.

    Page numbers start at 1. A page size of 0 is allowed and yields an
    empty page.
    """

    page_number: int = Field(ge=1)
    page_size: int = Field(ge=0)

    @property
    def skip(self) -> int:
        """Number of rows before the first row of this page."""
        return (self.page_number - 1) * self.page_size

    @classmethod
    def of(cls, page_number: int, page_size: int) -> "PageWindow":
        """Build a window, raising the domain ValidationError on bad input."""
        try:
            return cls(page_number=page_number, page_size=page_size)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid page window ({page_number}, {page_size}): "
                f"page_number must be >= 1 and page_size >= 0"
            ) from e
