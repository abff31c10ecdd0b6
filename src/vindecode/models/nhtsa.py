from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DecodeVinValuesResponse(BaseModel):
    """Envelope returned by the vPIC ``DecodeVinValues`` endpoint.

    Each entry in ``results`` is a flat mapping of variable name
    (``Make``, ``MakeID``, ``FuelTypePrimary`` …) to a string value.  vPIC
    reports attributes it could not decode as empty strings.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    count: int = Field(default=0, alias="Count")
    message: str | None = Field(default=None, alias="Message")
    search_criteria: str | None = Field(default=None, alias="SearchCriteria")
    results: list[dict[str, Any]] = Field(default_factory=list, alias="Results")

    def first_result(self) -> dict[str, Any]:
        """Return the first result with empty values dropped, or ``{}``."""
        if not self.results:
            return {}
        return {
            key: value
            for key, value in self.results[0].items()
            if value is not None and value != ""
        }
