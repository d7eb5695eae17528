from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Tuple

from edujobapp.config import Settings, get_settings
from edujobapp.core.clock import local_date
from edujobapp.domain.models import ApplicationStatus, ApplicationType
from edujobapp.domain.snapshot import coerce_snapshot
from edujobapp.services.aggregation_schema import (
    CountryGroup,
    CountryPyramid,
    StatusBreakdown,
    StatusBucket,
    TimelineBucket,
)

log = logging.getLogger("aggregation")

_STATUS_BUCKETS: Dict[ApplicationStatus, StatusBucket] = {
    ApplicationStatus.ACCEPTED: StatusBucket.ACCEPTED,
    ApplicationStatus.REJECTED: StatusBucket.REJECTED,
    ApplicationStatus.DRAFT: StatusBucket.UNKNOWN,
    ApplicationStatus.SUBMITTED: StatusBucket.UNKNOWN,
    ApplicationStatus.UNDER_REVIEW: StatusBucket.UNKNOWN,
}


class AggregationService:
    """
    Description: Dashboard aggregates over the unfiltered application snapshot.
    Layer: L3
    Input: Full snapshot (list-view filters never apply here)
    Output: Type / status / country / timeline breakdowns
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def aggregate_types(self, applications: Iterable[Any]) -> Dict[ApplicationType, int]:
        """
        Description: Count applications per type; absent types are omitted.
        Layer: L3
        Input: applications
        Output: dict[ApplicationType, int] in first-seen order
        """
        snapshot = coerce_snapshot(applications)
        counts: Dict[ApplicationType, int] = {}
        for a in snapshot:
            counts[a.application_type] = counts.get(a.application_type, 0) + 1
        log.debug("aggregate_types: %d records -> %d types", len(snapshot), len(counts))
        return counts

    def aggregate_statuses(self, applications: Iterable[Any]) -> StatusBreakdown:
        """
        Description: Collapse statuses into Accepted / Rejected / Unknown.
        Layer: L3
        Input: applications
        Output: StatusBreakdown
        """
        snapshot = coerce_snapshot(applications)
        counts = Counter(_STATUS_BUCKETS[a.app_status] for a in snapshot)
        return StatusBreakdown(
            accepted=counts[StatusBucket.ACCEPTED],
            rejected=counts[StatusBucket.REJECTED],
            unknown=counts[StatusBucket.UNKNOWN],
        )

    def country_code(self, country: Optional[str]) -> str:
        """
        Description: Truncated, upper-cased country key (not an ISO lookup).
        Layer: L3
        Input: free-text country or None
        Output: e.g. "Luxembourg" -> "LU", None -> "UN"
        """
        label = country or self.settings.unknown_country_label
        return label[: self.settings.country_code_length].upper()

    def build_country_pyramid(self, applications: Iterable[Any]) -> CountryPyramid:
        """
        Description: Group by country code and derive mirrored pyramid values.
        Layer: L3
        Input: applications
        Output: CountryPyramid (gap shared by every group, groups sorted by job desc)
        """
        snapshot = coerce_snapshot(applications)

        tallies: Dict[str, List[int]] = {}
        for a in snapshot:
            row = tallies.setdefault(self.country_code(a.company_country), [0, 0])
            row[0 if a.is_job else 1] += 1

        # stable: equal job counts keep first-seen order
        ordered: List[Tuple[str, List[int]]] = sorted(tallies.items(), key=lambda kv: kv[1][0], reverse=True)

        peak = max((max(job, edu) for _, (job, edu) in ordered), default=0)
        gap = self.settings.pyramid_gap_ratio * max(peak, 1)

        groups = tuple(
            CountryGroup(code=code, job=job, edu=edu, job_value=job + gap, edu_value=-(edu + gap))
            for code, (job, edu) in ordered
        )
        log.debug("build_country_pyramid: %d records -> %d groups (gap=%s)", len(snapshot), len(groups), gap)
        return CountryPyramid(gap=gap, groups=groups)

    def aggregate_countries(self, applications: Iterable[Any]) -> Tuple[CountryGroup, ...]:
        return self.build_country_pyramid(applications).groups

    def aggregate_timeline(self, applications: Iterable[Any]) -> Tuple[TimelineBucket, ...]:
        """
        Description: Sparse per-day creation series split into job / edu.
        Layer: L3
        Input: applications
        Output: tuple[TimelineBucket, ...] sorted by local date ascending
        """
        snapshot = coerce_snapshot(applications)
        days: Dict[Any, List[int]] = {}
        for a in snapshot:
            row = days.setdefault(local_date(a.creation_date), [0, 0])
            row[0 if a.is_job else 1] += 1
        return tuple(TimelineBucket(date=day, job=job, edu=edu) for day, (job, edu) in sorted(days.items()))
