from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

import pytest

from edujobapp.config import Settings
from edujobapp.domain.models import Application, ApplicationStatus, ApplicationType, Company

# Naive timestamps are read as local time, so these tests do not depend on the host timezone.
NOW = datetime(2026, 6, 10, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_app() -> Callable[..., Application]:
    counter = {"n": 0}

    def _make(
        *,
        app_type: ApplicationType = ApplicationType.JOB,
        status: ApplicationStatus = ApplicationStatus.DRAFT,
        title: str = "",
        company: Optional[str] = None,
        country: Optional[str] = None,
        created: datetime = NOW,
        **extra: Any,
    ) -> Application:
        counter["n"] += 1
        n = counter["n"]
        comp = None
        if company is not None or country is not None:
            comp = Company(id=f"c{n}", name=company or "", country=country)
        return Application(
            id=f"a{n}",
            title=title or f"Application {n}",
            application_type=app_type,
            app_status=status,
            creation_date=created,
            company=comp,
            **extra,
        )

    return _make
