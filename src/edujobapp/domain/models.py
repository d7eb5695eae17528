from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApplicationType(str, Enum):
    JOB = "JOB"
    UNIVERSITY = "UNIVERSITY"
    LYCEE = "LYCEE"
    COURSE = "COURSE"


class ApplicationStatus(str, Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class CompanyType(str, Enum):
    EMPLOYER = "EMPLOYER"
    UNIVERSITY = "UNIVERSITY"
    LYCEE = "LYCEE"
    COURSE = "COURSE"


class DocumentStatus(str, Enum):
    PENDING = "PENDING"
    READY = "READY"


AWAITING_RESPONSE_STATUSES = frozenset({ApplicationStatus.SUBMITTED, ApplicationStatus.UNDER_REVIEW})


class _Record(BaseModel):
    """Description: Shared config for snapshot records.
    Layer: L1
    Input: camelCase payloads from the API or snake_case kwargs
    Output: Immutable record
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class Company(_Record):
    """
    Description: Organisation an application is addressed to.
    Layer: L1
    Input: Company row from the persistence layer
    Output: Non-owning reference held by Application.company
    """

    id: str
    name: str = ""
    type: CompanyType = CompanyType.EMPLOYER
    country: Optional[str] = None

    address: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class Document(_Record):
    """
    Description: Uploaded file referenced by one or more applications.
    Layer: L1
    Input: Document row from the persistence layer
    Output: Non-owning reference held by Application.documents
    """

    id: str
    file_name: str = ""
    doc_status: DocumentStatus = DocumentStatus.PENDING
    upload_date: Optional[datetime] = None
    content_type: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.doc_status is DocumentStatus.READY


class Application(_Record):
    """
    Description: Tracked job or education application.
    Layer: L1
    Input: Application row with company/documents already resolved
    Output: Immutable record consumed by every engine component
    """

    id: str
    title: str = ""
    description: Optional[str] = None
    application_type: ApplicationType = ApplicationType.JOB
    app_status: ApplicationStatus = ApplicationStatus.DRAFT

    creation_date: datetime
    submit_date: Optional[datetime] = None
    submit_deadline: Optional[datetime] = None
    response_deadline: Optional[datetime] = None

    result_notes: Optional[str] = None
    company: Optional[Company] = None
    documents: Tuple[Document, ...] = Field(default_factory=tuple)

    @property
    def is_job(self) -> bool:
        return self.application_type is ApplicationType.JOB

    @property
    def company_name(self) -> str:
        if self.company is None:
            return ""
        return self.company.name or ""

    @property
    def company_country(self) -> Optional[str]:
        if self.company is None:
            return None
        return self.company.country
