"""
Reports service - recruitment funnel aggregates
"""
from collections import Counter
from datetime import date
from typing import Dict, List, Tuple
from sqlalchemy import distinct, func, select
from sqlalchemy.orm import Session, joinedload

from recruitment.core.config import settings
from recruitment.core.timeutils import time_ago
from recruitment.models.candidate import Candidate, CandidateJob, CandidateStatus
from recruitment.models.interview import Interview, InterviewStatus
from recruitment.models.job import Job
from recruitment.reports.schemas import (
    CandidateStatusCount,
    InterviewTrend,
    JobDepartmentCount,
    RecentActivity,
    ReportsOverview,
    SourceAnalysis,
)

SECONDS_PER_DAY = 86400


def percentage(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def _ranked(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """Largest group first, ties by name"""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


class ReportsService:
    def __init__(self, db: Session):
        self.db = db

    def overview(self) -> ReportsOverview:
        total_applications = self.db.query(CandidateJob).count()

        applicants = select(CandidateJob.candidate_id).distinct()
        applicant_count = self.db.query(func.count(distinct(CandidateJob.candidate_id))).scalar() or 0

        interviewed = (
            self.db.query(func.count(distinct(Interview.candidate_id)))
            .filter(Interview.candidate_id.in_(applicants))
            .scalar()
        )
        hired = (
            self.db.query(func.count(distinct(Interview.candidate_id)))
            .filter(
                Interview.candidate_id.in_(applicants),
                Interview.status == InterviewStatus.SELECTED.value,
            )
            .scalar()
        )

        return ReportsOverview(
            total_applications=total_applications,
            interview_rate=percentage(interviewed or 0, applicant_count),
            hire_rate=percentage(hired or 0, applicant_count),
            time_to_hire=self._time_to_hire(),
            source_analysis=self._source_analysis(total_applications),
            recent_activity=self._recent_activity(),
        )

    def _time_to_hire(self) -> float:
        """Mean days between applying and the Selected interview for the same job"""
        rows = (
            self.db.query(CandidateJob.applied_date, Interview.completed_at)
            .join(
                Interview,
                (Interview.candidate_id == CandidateJob.candidate_id)
                & (Interview.job_id == CandidateJob.job_id),
            )
            .filter(
                Interview.status == InterviewStatus.SELECTED.value,
                Interview.completed_at.isnot(None),
            )
            .all()
        )
        if not rows:
            return 0.0
        days = [
            max((completed - applied).total_seconds(), 0) / SECONDS_PER_DAY
            for applied, completed in rows
        ]
        return round(sum(days) / len(days), 1)

    def _source_analysis(self, total: int) -> List[SourceAnalysis]:
        counts = dict(
            self.db.query(CandidateJob.source, func.count(CandidateJob.id))
            .group_by(CandidateJob.source)
            .all()
        )
        return [
            SourceAnalysis(source=source, count=count, percentage=percentage(count, total))
            for source, count in _ranked(counts)
        ]

    def _recent_activity(self) -> List[RecentActivity]:
        limit = settings.DASHBOARD_LIST_SIZE
        events = []

        applications = (
            self.db.query(CandidateJob)
            .options(joinedload(CandidateJob.job))
            .order_by(CandidateJob.applied_date.desc())
            .limit(limit)
            .all()
        )
        for application in applications:
            events.append((
                application.applied_date,
                "application",
                f"New application received for {application.job.title} position",
            ))

        interviews = (
            self.db.query(Interview)
            .options(joinedload(Interview.candidate).joinedload(Candidate.user))
            .order_by(Interview.created_at.desc())
            .limit(limit)
            .all()
        )
        for interview in interviews:
            events.append((
                interview.created_at,
                "interview",
                f"Interview scheduled with {interview.candidate.user.full_name}",
            ))

        shortlisted = (
            self.db.query(Candidate)
            .options(joinedload(Candidate.user))
            .filter(
                Candidate.status == CandidateStatus.SHORTLISTED.value,
                Candidate.updated_at.isnot(None),
            )
            .order_by(Candidate.updated_at.desc())
            .limit(limit)
            .all()
        )
        for candidate in shortlisted:
            events.append((
                candidate.updated_at,
                "shortlist",
                f"Candidate {candidate.user.full_name} shortlisted",
            ))

        events.sort(key=lambda event: event[0], reverse=True)
        return [
            RecentActivity(type=kind, description=description, time_ago=time_ago(moment))
            for moment, kind, description in events[:limit]
        ]

    def candidates_by_status(self) -> List[CandidateStatusCount]:
        counts = dict(
            self.db.query(Candidate.status, func.count(Candidate.id))
            .group_by(Candidate.status)
            .all()
        )
        total = sum(counts.values())
        return [
            CandidateStatusCount(status=status or "Unknown", count=count, percentage=percentage(count, total))
            for status, count in _ranked(counts)
        ]

    def jobs_by_department(self) -> List[JobDepartmentCount]:
        counts = dict(
            self.db.query(Job.department, func.count(Job.id))
            .group_by(Job.department)
            .all()
        )
        total = sum(counts.values())
        return [
            JobDepartmentCount(
                department=department or "Unknown", count=count, percentage=percentage(count, total)
            )
            for department, count in _ranked(counts)
        ]

    def interview_trends(self) -> List[InterviewTrend]:
        """Interviews per calendar month of their scheduled date, oldest month first"""
        months = Counter(
            (scheduled.year, scheduled.month)
            for (scheduled,) in self.db.query(Interview.scheduled_date).all()
        )
        return [
            InterviewTrend(month=date(year, month, 1).strftime("%b %Y"), year=year, count=count)
            for (year, month), count in sorted(months.items())
        ]
