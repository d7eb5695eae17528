from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from edujobapp.domain.models import ApplicationType
from edujobapp.services.aggregation_schema import CountryPyramid, StatusBreakdown, TimelineBucket
from edujobapp.services.summary_schema import SummaryCounts
from edujobapp.services.triage_schema import TriageReport


class DashboardReport(BaseModel):
    """
    Description: Everything the dashboard renders, computed from one snapshot.
    Layer: L5
    Input: Unfiltered snapshot + companion counts + now
    Output: Summary, aggregates and triage buckets
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    summary: SummaryCounts
    types: Dict[ApplicationType, int] = Field(default_factory=dict)
    statuses: StatusBreakdown = Field(default_factory=StatusBreakdown)
    countries: CountryPyramid
    timeline: Tuple[TimelineBucket, ...] = Field(default_factory=tuple)
    triage: TriageReport
