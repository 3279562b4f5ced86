"""Base Pydantic models shared by the scoring packages."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model with strict validation for records this project produces.

    Every result record inherits from this class:
    - No type coercion (strict=True)
    - Immutable after creation (frozen=True)
    - Fail on unknown fields (extra="forbid")
    - Fields populated by name, serialized by their camelCase alias
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )

    def to_record(self) -> dict[str, Any]:
        """Dump as a JSON-shaped dict using the public (aliased) field names."""
        return self.model_dump(mode="json", by_alias=True)


class ProfileModel(BaseModel):
    """Base model for externally supplied records (scraped profiles, brand input).

    Scraper payloads carry many fields we do not use and loosely typed
    numbers, so unknown fields are ignored and values are coerced.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
    )
