from edujobapp.services.aggregation_service import AggregationService
from edujobapp.services.list_view_service import ListViewService
from edujobapp.services.report_service import AnalyticsReportService
from edujobapp.services.summary_service import SummaryService
from edujobapp.services.triage_service import TriageService

__all__ = [
    "AggregationService",
    "AnalyticsReportService",
    "ListViewService",
    "SummaryService",
    "TriageService",
]
