from datetime import date, datetime, timedelta, timezone

from edujobapp.config import Settings
from edujobapp.domain.models import ApplicationStatus, ApplicationType
from edujobapp.services.aggregation_schema import StatusBucket
from edujobapp.services.aggregation_service import AggregationService


def test_type_breakdown_omits_absent_types_and_conserves_total(settings, make_app) -> None:
    apps = [
        make_app(app_type=ApplicationType.JOB),
        make_app(app_type=ApplicationType.COURSE),
        make_app(app_type=ApplicationType.JOB),
    ]
    types = AggregationService(settings).aggregate_types(apps)
    assert types == {ApplicationType.JOB: 2, ApplicationType.COURSE: 1}
    assert ApplicationType.UNIVERSITY not in types
    assert sum(types.values()) == len(apps)


def test_status_breakdown_always_emits_three_buckets(settings, make_app) -> None:
    svc = AggregationService(settings)
    empty = svc.aggregate_statuses([])
    assert (empty.accepted, empty.rejected, empty.unknown) == (0, 0, 0)

    apps = [make_app(status=s) for s in ApplicationStatus]
    out = svc.aggregate_statuses(apps)
    assert (out.accepted, out.rejected, out.unknown) == (1, 1, 3)
    assert out.accepted + out.rejected + out.unknown == len(apps)
    assert out.total == len(apps)
    assert sum(out.model_dump().values()) == len(apps)
    assert set(out.model_dump()) == {"accepted", "rejected", "unknown"}
    assert out.as_buckets() == {StatusBucket.ACCEPTED: 1, StatusBucket.REJECTED: 1, StatusBucket.UNKNOWN: 3}


def test_country_code_truncates_and_falls_back_to_unknown(settings) -> None:
    svc = AggregationService(settings)
    assert svc.country_code("Luxembourg") == "LU"
    assert svc.country_code("germany") == "GE"
    assert svc.country_code(None) == "UN"
    assert svc.country_code("") == "UN"
    assert svc.country_code("F") == "F"


def test_country_pyramid_sorted_by_job_with_shared_gap(settings, make_app) -> None:
    apps = [
        make_app(app_type=ApplicationType.UNIVERSITY, country="Germany"),
        make_app(app_type=ApplicationType.JOB, country="Luxembourg"),
        make_app(app_type=ApplicationType.JOB, country="Luxemburg-adjacent-region"),
        make_app(app_type=ApplicationType.LYCEE, country="Germany"),
        make_app(app_type=ApplicationType.JOB, country="France"),
        make_app(app_type=ApplicationType.COURSE),
    ]
    pyramid = AggregationService(settings).build_country_pyramid(apps)

    assert [(g.code, g.job, g.edu) for g in pyramid.groups] == [
        ("LU", 2, 0),
        ("FR", 1, 0),
        ("GE", 0, 2),
        ("UN", 0, 1),
    ]
    assert pyramid.gap == 0.5
    for g in pyramid.groups:
        assert g.job_value - pyramid.gap == g.job
        assert g.edu_value + pyramid.gap == -g.edu


def test_country_pyramid_gap_has_a_floor_of_one_unit(settings) -> None:
    pyramid = AggregationService(settings).build_country_pyramid([])
    assert pyramid.groups == ()
    assert pyramid.gap == 0.25


def test_country_pyramid_uses_configured_ratio(make_app) -> None:
    custom = Settings(_env_file=None, pyramid_gap_ratio=0.5, unknown_country_label="N/A")
    groups = AggregationService(custom).aggregate_countries([make_app(app_type=ApplicationType.JOB)] * 4)
    assert len(groups) == 1
    assert groups[0].code == "N/"
    assert groups[0].job_value == 6.0
    assert groups[0].edu_value == -2.0


def test_timeline_is_sparse_sorted_and_split(settings, make_app) -> None:
    d1 = datetime(2026, 3, 1, 9, 0)
    d3 = datetime(2026, 3, 3, 18, 45)
    apps = [
        make_app(app_type=ApplicationType.JOB, created=d3),
        make_app(app_type=ApplicationType.UNIVERSITY, created=d1),
        make_app(app_type=ApplicationType.JOB, created=d1 + timedelta(hours=5)),
        make_app(app_type=ApplicationType.COURSE, created=d3),
    ]
    timeline = AggregationService(settings).aggregate_timeline(apps)
    assert [(b.date, b.job, b.edu) for b in timeline] == [
        (date(2026, 3, 1), 1, 1),
        (date(2026, 3, 3), 1, 1),
    ]


def test_timeline_buckets_aware_timestamps_by_local_date(settings, make_app) -> None:
    aware = datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc)
    naive = datetime(2026, 3, 5, 8, 0)
    timeline = AggregationService(settings).aggregate_timeline([make_app(created=aware), make_app(created=naive)])
    assert [b.date for b in timeline] == sorted({aware.astimezone().date(), naive.date()})


def test_aggregates_are_deterministic(settings, make_app) -> None:
    apps = [
        make_app(app_type=ApplicationType.JOB, status=ApplicationStatus.ACCEPTED, country="Spain"),
        make_app(app_type=ApplicationType.COURSE, status=ApplicationStatus.SUBMITTED, country="Italy"),
    ]
    svc = AggregationService(settings)
    assert svc.aggregate_types(apps) == svc.aggregate_types(apps)
    assert svc.aggregate_statuses(apps) == svc.aggregate_statuses(apps)
    assert svc.build_country_pyramid(apps) == svc.build_country_pyramid(apps)
    assert svc.aggregate_timeline(apps) == svc.aggregate_timeline(apps)


def test_country_group_serializes_chart_values_in_camel_case(settings, make_app) -> None:
    groups = AggregationService(settings).aggregate_countries([make_app(app_type=ApplicationType.JOB, country="Spain")])
    assert groups[0].model_dump(by_alias=True) == {
        "code": "SP",
        "job": 1,
        "edu": 0,
        "jobValue": 1.25,
        "eduValue": -0.25,
    }
    assert groups[0].model_dump()["job_value"] == 1.25
