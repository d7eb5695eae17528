from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Optional

from edujobapp.config import Settings, get_settings
from edujobapp.core.clock import resolve_now
from edujobapp.domain.snapshot import coerce_snapshot
from edujobapp.services.aggregation_service import AggregationService
from edujobapp.services.report_schema import DashboardReport
from edujobapp.services.summary_service import SummaryService
from edujobapp.services.triage_service import TriageService

log = logging.getLogger("report")


class AnalyticsReportService:
    """
    Description: Bundles summary counts, aggregates and triage into one dashboard artifact.
    Layer: L5
    Input: Snapshot + companion counts + optional now
    Output: DashboardReport
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Description: Initialize the report service and its component engines.
        Layer: L0
        Input: Optional Settings
        Output: AnalyticsReportService
        """
        self.settings = settings or get_settings()
        self.aggregation = AggregationService(self.settings)
        self.triage = TriageService(self.settings)
        self.summary = SummaryService()

    def build_report(
        self,
        applications: Iterable[Any],
        document_count: Any = 0,
        company_count: Any = 0,
        now: Optional[datetime] = None,
    ) -> DashboardReport:
        """
        Description: Compute every dashboard aggregate over the unfiltered snapshot.
        Layer: L5
        Input: applications + document_count + company_count + now
        Output: DashboardReport
        """
        # freeze once so every component sees the same records
        snapshot = coerce_snapshot(applications)
        instant = resolve_now(now)

        report = DashboardReport(
            summary=self.summary.summarize(snapshot, document_count, company_count),
            types=self.aggregation.aggregate_types(snapshot),
            statuses=self.aggregation.aggregate_statuses(snapshot),
            countries=self.aggregation.build_country_pyramid(snapshot),
            timeline=self.aggregation.aggregate_timeline(snapshot),
            triage=self.triage.build_triage(snapshot, instant),
        )
        log.info(
            "Dashboard report built: %d applications, %d drafts expiring, %d responses due",
            report.summary.applications,
            len(report.triage.drafts_expiring),
            len(report.triage.responses_due),
        )
        return report
