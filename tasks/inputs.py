"""Run input document (actor input shape)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from compat_scoring import BrandProfile
from compat_utils import ProfileModel
from pydantic import Field, SecretStr, ValidationError, model_validator

from tasks.errors import RunInputError

BRAND_EXAMPLE = '{ "category": "technology", "name": "Acme Corp" }'


class RunInput(ProfileModel):
    """Input for one scoring run."""

    brand: BrandProfile = Field(default_factory=BrandProfile)
    tiktok_usernames: list[str] = Field(default_factory=list, alias="tiktokUsernames")
    profiles: list[dict[str, Any] | None] = Field(
        default_factory=list,
        description="Pre-fetched raw creator profiles",
    )
    fetch_profiles: bool = Field(default=True, alias="fetchProfiles")
    rank_mode: bool = Field(default=False, alias="rankMode")
    api_token: SecretStr | None = Field(default=None, alias="apiToken")

    @model_validator(mode="after")
    def _require_brand_identity(self) -> RunInput:
        if not self.brand.category and not self.brand.name:
            msg = f"Brand must have at least a category or name. Example: {BRAND_EXAMPLE}"
            raise ValueError(msg)
        return self


def load_run_input(path: Path) -> RunInput:
    """Read and validate a run input JSON file.

    Raises:
        RunInputError: If the file is unreadable, not JSON, or invalid.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RunInputError(f"Cannot read run input {path}: {e}") from e

    return parse_run_input(data)


def parse_run_input(data: object) -> RunInput:
    """Validate an already decoded run input document.

    Raises:
        RunInputError: If the document violates the input contract.
    """
    try:
        return RunInput.model_validate(data)
    except ValidationError as e:
        raise RunInputError(f"Invalid run input: {e}") from e
