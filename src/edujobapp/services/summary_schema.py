from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SummaryCounts(BaseModel):
    """Description: Dashboard totals.
    Layer: L5
    Input: snapshot size + companion counts
    Output: applications / documents / companies (aliases match the dashboard payload)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    applications: int = Field(default=0, ge=0, alias="applicationsCount")
    documents: int = Field(default=0, ge=0, alias="documentsCount")
    companies: int = Field(default=0, ge=0, alias="companiesCount")
