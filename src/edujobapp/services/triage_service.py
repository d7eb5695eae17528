from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Iterable, Optional, Tuple

from edujobapp.config import Settings, get_settings
from edujobapp.core.clock import as_local, end_of_day, resolve_now
from edujobapp.domain.models import AWAITING_RESPONSE_STATUSES, Application, ApplicationStatus
from edujobapp.domain.snapshot import coerce_snapshot
from edujobapp.services.triage_schema import TriageReport

log = logging.getLogger("triage")


class TriageService:
    """
    Description: Deadline triage over the full snapshot.
    Layer: L4
    Input: applications + now (defaults to current local time)
    Output: Matching Application subsets in snapshot order
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    @property
    def draft_window(self) -> timedelta:
        return timedelta(days=self.settings.draft_warning_days)

    def triage_drafts(self, applications: Iterable[Any], now: Optional[datetime] = None) -> Tuple[Application, ...]:
        """
        Description: DRAFTs whose submit deadline is within the warning window or already past.
        Layer: L4
        Input: applications + now
        Output: tuple[Application, ...]
        """
        snapshot = coerce_snapshot(applications)
        cutoff = resolve_now(now) + self.draft_window
        out = tuple(
            a
            for a in snapshot
            if a.app_status is ApplicationStatus.DRAFT
            and a.submit_deadline is not None
            and as_local(a.submit_deadline) <= cutoff
        )
        log.debug("triage_drafts: %d of %d records at risk (cutoff=%s)", len(out), len(snapshot), cutoff.isoformat())
        return out

    def triage_responses(self, applications: Iterable[Any], now: Optional[datetime] = None) -> Tuple[Application, ...]:
        """
        Description: SUBMITTED / UNDER_REVIEW records whose response is due by end of today.
        Layer: L4
        Input: applications + now
        Output: tuple[Application, ...]
        """
        snapshot = coerce_snapshot(applications)
        cutoff = end_of_day(resolve_now(now))
        out = tuple(
            a
            for a in snapshot
            if a.app_status in AWAITING_RESPONSE_STATUSES
            and a.response_deadline is not None
            and as_local(a.response_deadline) <= cutoff
        )
        log.debug("triage_responses: %d of %d records due (cutoff=%s)", len(out), len(snapshot), cutoff.isoformat())
        return out

    def build_triage(self, applications: Iterable[Any], now: Optional[datetime] = None) -> TriageReport:
        snapshot = coerce_snapshot(applications)
        instant = resolve_now(now)
        return TriageReport(
            evaluated_at=instant,
            drafts_expiring=self.triage_drafts(snapshot, instant),
            responses_due=self.triage_responses(snapshot, instant),
        )
