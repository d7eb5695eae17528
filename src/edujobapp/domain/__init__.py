from edujobapp.domain.models import (
    Application,
    ApplicationStatus,
    ApplicationType,
    Company,
    CompanyType,
    Document,
    DocumentStatus,
)
from edujobapp.domain.snapshot import coerce_snapshot

__all__ = [
    "Application",
    "ApplicationStatus",
    "ApplicationType",
    "Company",
    "CompanyType",
    "Document",
    "DocumentStatus",
    "coerce_snapshot",
]
