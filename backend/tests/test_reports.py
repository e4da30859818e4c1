"""
Report aggregate tests
"""
from datetime import datetime, timedelta

from recruitment.core.timeutils import time_ago, utcnow
from recruitment.models import CandidateJob, CandidateStatus, InterviewStatus
from recruitment.reports.service import ReportsService, percentage

from conftest import CandidateFactory, InterviewFactory, JobFactory


def _apply(db, candidate, job, applied_date=None, source="Company Website"):
    db.add(CandidateJob(
        candidate_id=candidate.id,
        job_id=job.id,
        applied_date=applied_date or utcnow(),
        source=source,
    ))
    db.commit()


class TestOverview:

    def test_rates_and_time_to_hire(self, db):
        job = JobFactory(title="Analyst")
        hired, interviewed, waiting, _ = (CandidateFactory() for _ in range(4))
        now = utcnow()

        _apply(db, hired, job, applied_date=now - timedelta(days=10))
        _apply(db, interviewed, job, source="LinkedIn")
        _apply(db, waiting, job, source="LinkedIn")
        InterviewFactory(
            candidate=hired, job=job, status=InterviewStatus.SELECTED.value, completed_at=now - timedelta(days=4)
        )
        InterviewFactory(candidate=interviewed, job=job)

        overview = ReportsService(db).overview()

        assert overview.total_applications == 3
        assert overview.interview_rate == 66.7
        assert overview.hire_rate == 33.3
        assert overview.time_to_hire == 6.0
        assert [(s.source, s.count, s.percentage) for s in overview.source_analysis] == [
            ("LinkedIn", 2, 66.7),
            ("Company Website", 1, 33.3),
        ]

    def test_empty_database(self, db):
        overview = ReportsService(db).overview()

        assert overview.total_applications == 0
        assert overview.interview_rate == 0.0
        assert overview.hire_rate == 0.0
        assert overview.time_to_hire == 0.0
        assert overview.source_analysis == []
        assert overview.recent_activity == []

    def test_recent_activity_newest_first(self, db):
        job = JobFactory(title="Designer")
        candidate = CandidateFactory(user__full_name="Sam Shortlisted")
        _apply(db, candidate, job, applied_date=utcnow() - timedelta(hours=3))
        candidate.status = CandidateStatus.SHORTLISTED.value
        candidate.updated_at = utcnow() - timedelta(minutes=5)
        db.commit()

        activity = ReportsService(db).overview().recent_activity

        assert [a.type for a in activity] == ["shortlist", "application"]
        assert activity[0].description == "Candidate Sam Shortlisted shortlisted"
        assert activity[1].description == "New application received for Designer position"
        assert activity[1].time_ago == "3 hours ago"

    def test_overview_endpoint(self, client, hr, auth_headers):
        response = client.get("/api/reports/overview", headers=auth_headers(hr))

        assert response.status_code == 200
        assert set(response.json()) >= {"totalApplications", "interviewRate", "hireRate", "timeToHire"}


class TestBreakdowns:

    def test_candidates_by_status(self, client, db, hr, auth_headers):
        CandidateFactory(status=CandidateStatus.SHORTLISTED.value)
        CandidateFactory()
        CandidateFactory()

        response = client.get("/api/reports/candidates-by-status", headers=auth_headers(hr))

        assert response.json() == [
            {"status": "Applied", "count": 2, "percentage": 66.7},
            {"status": "Shortlisted", "count": 1, "percentage": 33.3},
        ]

    def test_jobs_by_department(self, db):
        JobFactory(department="Sales")
        JobFactory(department="Engineering")
        JobFactory(department="Engineering")

        rows = ReportsService(db).jobs_by_department()

        assert [(r.department, r.count) for r in rows] == [("Engineering", 2), ("Sales", 1)]

    def test_interview_trends_by_month(self, db):
        InterviewFactory(scheduled_date=datetime(2025, 11, 3, 10))
        InterviewFactory(scheduled_date=datetime(2026, 1, 5, 10))
        InterviewFactory(scheduled_date=datetime(2026, 1, 20, 15))

        trends = ReportsService(db).interview_trends()

        assert [(t.month, t.year, t.count) for t in trends] == [
            ("Nov 2025", 2025, 1),
            ("Jan 2026", 2026, 2),
        ]


class TestHelpers:

    def test_percentage(self):
        assert percentage(1, 3) == 33.3
        assert percentage(0, 0) == 0.0

    def test_time_ago(self):
        now = datetime(2026, 3, 10, 12, 0)
        assert time_ago(datetime(2026, 3, 10, 11, 59), now) == "1 minute ago"
        assert time_ago(datetime(2026, 3, 8, 12, 0), now) == "2 days ago"
        assert time_ago(now, now) == "just now"
