"""
Dashboard aggregator - read-only counts and lists per role
"""
from datetime import timedelta
from typing import Dict, List, Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from recruitment.auth.principal import Principal
from recruitment.candidates.repository import CandidateRepository
from recruitment.candidates.service import CandidateService, to_candidate_response
from recruitment.core.config import settings
from recruitment.core.timeutils import utcnow
from recruitment.dashboard.schemas import (
    AdminDashboard,
    AppliedJob,
    CandidateDashboard,
    CandidateInterview,
    CandidateOffer,
    CandidateSummary,
    CandidateUser,
    DashboardStats,
    HRDashboard,
    InterviewerDashboard,
    OthersDashboard,
    PendingTask,
    RecentJob,
    ReviewerDashboard,
    UpcomingInterview,
)
from recruitment.models.candidate import Candidate, CandidateJob, CandidateStatus
from recruitment.models.interview import (
    TERMINAL_INTERVIEW_STATUSES,
    Interview,
    Interviewer,
    InterviewStatus,
)
from recruitment.models.job import Job, JobStatus
from recruitment.models.offer import Offer, OfferStatus
from recruitment.models.user import RoleName, User, UserStatus
from recruitment.notifications.schemas import NotificationResponse
from recruitment.notifications.service import NotificationService

# Interviews this close (or already overdue) become tasks
INTERVIEW_TASK_WINDOW = timedelta(days=1)
# Pending accounts should be handled within a week of registering
APPROVAL_TASK_DUE = timedelta(days=7)


def _interviewer_names(interview: Interview) -> List[str]:
    return [link.user.full_name for link in interview.interviewers if link.user]


def _candidate_name(interview: Interview) -> str:
    candidate = interview.candidate
    return candidate.user.full_name if candidate and candidate.user else "Unknown"


class DashboardService:
    """Nothing here writes, except the lazy candidate row of the candidate view"""

    def __init__(self, db: Session):
        self.db = db
        self.list_size = settings.DASHBOARD_LIST_SIZE

    def _count_by(self, column) -> Dict[str, int]:
        rows = self.db.query(column, func.count()).group_by(column).all()
        return {value: count for value, count in rows}

    def stats(self) -> DashboardStats:
        jobs = self._count_by(Job.status)
        candidates = self._count_by(Candidate.status)
        interviews = self._count_by(Interview.status)
        offers = self._count_by(Offer.status)

        pending_interviews = (
            self.db.query(Interview)
            .filter(
                Interview.status == InterviewStatus.SCHEDULED.value,
                Interview.scheduled_date > utcnow(),
            )
            .count()
        )

        return DashboardStats(
            total_jobs=sum(jobs.values()),
            open_jobs=jobs.get(JobStatus.OPEN.value, 0),
            on_hold_jobs=jobs.get(JobStatus.ON_HOLD.value, 0),
            closed_jobs=jobs.get(JobStatus.CLOSED.value, 0),
            total_candidates=sum(candidates.values()),
            applied_candidates=candidates.get(CandidateStatus.APPLIED.value, 0),
            shortlisted_candidates=candidates.get(CandidateStatus.SHORTLISTED.value, 0),
            interview_candidates=candidates.get(CandidateStatus.INTERVIEW.value, 0),
            selected_candidates=candidates.get(CandidateStatus.SELECTED.value, 0),
            rejected_candidates=candidates.get(CandidateStatus.REJECTED.value, 0),
            on_hold_candidates=candidates.get(CandidateStatus.ON_HOLD.value, 0),
            total_interviews=sum(interviews.values()),
            scheduled_interviews=interviews.get(InterviewStatus.SCHEDULED.value, 0),
            completed_interviews=sum(interviews.get(s, 0) for s in TERMINAL_INTERVIEW_STATUSES),
            pending_interviews=pending_interviews,
            total_offers=sum(offers.values()),
            pending_offers=offers.get(OfferStatus.OFFERED.value, 0),
            accepted_offers=offers.get(OfferStatus.ACCEPTED.value, 0),
            rejected_offers=offers.get(OfferStatus.REJECTED.value, 0),
        )

    def recent_jobs(self, count: Optional[int] = None) -> List[RecentJob]:
        applied_count = (
            select(func.count(CandidateJob.id))
            .where(CandidateJob.job_id == Job.id)
            .correlate(Job)
            .scalar_subquery()
        )
        rows = (
            self.db.query(Job, applied_count)
            .options(joinedload(Job.created_by_user))
            .order_by(Job.created_at.desc(), Job.id.desc())
            .limit(count or self.list_size)
            .all()
        )
        return [
            RecentJob(
                id=job.id,
                title=job.title,
                location=job.location,
                min_experience=job.min_experience,
                status=job.status,
                created_at=job.created_at,
                created_by=job.created_by_user.full_name if job.created_by_user else "",
                applied_count=applied,
            )
            for job, applied in rows
        ]

    def recent_candidates(self, count: Optional[int] = None):
        candidates = CandidateRepository(self.db).list_all(limit=count or self.list_size)
        return [to_candidate_response(candidate) for candidate in candidates]

    def _scheduled_interviews(self, user_id: Optional[int] = None):
        query = self.db.query(Interview).options(
            joinedload(Interview.candidate).joinedload(Candidate.user),
            joinedload(Interview.job),
        ).filter(Interview.status == InterviewStatus.SCHEDULED.value)
        if user_id is not None:
            query = query.filter(Interview.interviewers.any(Interviewer.user_id == user_id))
        return query

    def upcoming_interviews(
        self, user_id: Optional[int] = None, count: Optional[int] = None
    ) -> List[UpcomingInterview]:
        """Scheduled interviews still ahead, soonest first. Scoped to one panel member when user_id is given"""
        interviews = (
            self._scheduled_interviews(user_id)
            .filter(Interview.scheduled_date > utcnow())
            .order_by(Interview.scheduled_date.asc(), Interview.id.asc())
            .limit(count or self.list_size)
            .all()
        )
        return [
            UpcomingInterview(
                id=interview.id,
                candidate_name=_candidate_name(interview),
                job_title=interview.job.title if interview.job else "Unknown",
                interview_type=interview.interview_type,
                round_no=interview.round_no,
                scheduled_date=interview.scheduled_date,
                interviewers=_interviewer_names(interview),
            )
            for interview in interviews
        ]

    def _interview_tasks(self, user_id: Optional[int] = None) -> List[PendingTask]:
        now = utcnow()
        interviews = (
            self._scheduled_interviews(user_id)
            .filter(Interview.scheduled_date <= now + INTERVIEW_TASK_WINDOW)
            .all()
        )
        return [
            PendingTask(
                id=interview.id,
                type="Interview",
                title=f"Interview with {_candidate_name(interview)}",
                description=(
                    f"{interview.interview_type} Round {interview.round_no} for "
                    f"{interview.job.title if interview.job else 'Unknown Job'}"
                ),
                due_date=interview.scheduled_date,
                priority="High" if interview.scheduled_date <= now else "Medium",
                assigned_to="You" if user_id is not None else "Interviewer",
            )
            for interview in interviews
        ]

    def _approval_tasks(self) -> List[PendingTask]:
        users = self.db.query(User).filter(User.status == UserStatus.PENDING_APPROVAL.value).all()
        return [
            PendingTask(
                id=user.id,
                type="Approval",
                title=f"Approve user: {user.full_name}",
                description=f"User {user.full_name} is waiting for approval",
                due_date=user.created_at + APPROVAL_TASK_DUE,
                priority="Medium",
                assigned_to="Admin",
            )
            for user in users
        ]

    def pending_tasks(self, user_id: Optional[int] = None) -> List[PendingTask]:
        """Earliest due first. With a user_id only that user's interviews count"""
        tasks = self._interview_tasks(user_id)
        if user_id is None:
            tasks += self._approval_tasks()
        tasks.sort(key=lambda task: task.due_date)
        return tasks[: self.list_size]

    def notifications(self, user_id: int) -> List[NotificationResponse]:
        return [
            NotificationResponse.model_validate(n)
            for n in NotificationService(self.db).list_for_user(user_id, self.list_size)
        ]

    # Role views

    def admin_view(self, principal: Principal) -> AdminDashboard:
        return AdminDashboard(
            stats=self.stats(),
            recent_jobs=self.recent_jobs(),
            recent_candidates=self.recent_candidates(),
            upcoming_interviews=self.upcoming_interviews(),
            pending_tasks=self.pending_tasks(),
            notifications=self.notifications(principal.user_id),
        )

    def recruiter_view(self, principal: Principal) -> AdminDashboard:
        return self.admin_view(principal)

    def hr_view(self, principal: Principal) -> HRDashboard:
        return HRDashboard(
            stats=self.stats(),
            recent_candidates=self.recent_candidates(),
            upcoming_interviews=self.upcoming_interviews(),
            pending_tasks=self.pending_tasks(),
            notifications=self.notifications(principal.user_id),
        )

    def interviewer_view(self, principal: Principal) -> InterviewerDashboard:
        return InterviewerDashboard(
            stats=self.stats(),
            upcoming_interviews=self.upcoming_interviews(user_id=principal.user_id),
            pending_tasks=self.pending_tasks(user_id=principal.user_id),
            notifications=self.notifications(principal.user_id),
        )

    def reviewer_view(self, principal: Principal) -> ReviewerDashboard:
        return ReviewerDashboard(
            stats=self.stats(),
            recent_candidates=self.recent_candidates(),
            pending_tasks=self.pending_tasks(user_id=principal.user_id),
            notifications=self.notifications(principal.user_id),
        )

    def others_view(self, principal: Principal) -> OthersDashboard:
        return OthersDashboard(
            stats=self.stats(),
            recent_jobs=self.recent_jobs() if principal.has_role(RoleName.RECRUITER) else None,
            recent_candidates=self.recent_candidates(),
            upcoming_interviews=self.upcoming_interviews(),
            pending_tasks=self.pending_tasks(),
            notifications=self.notifications(principal.user_id),
        )

    def candidate_view(self, principal: Principal) -> CandidateDashboard:
        candidate = CandidateService(self.db).get_or_create_for_user(principal.user_id)

        applications = (
            self.db.query(CandidateJob)
            .options(joinedload(CandidateJob.job))
            .filter(CandidateJob.candidate_id == candidate.id)
            .order_by(CandidateJob.applied_date.desc(), CandidateJob.id.desc())
            .limit(self.list_size)
            .all()
        )

        interviews = (
            self.db.query(Interview)
            .options(joinedload(Interview.job))
            .filter(
                Interview.candidate_id == candidate.id,
                Interview.status != InterviewStatus.SELECTED.value,
            )
            .order_by(Interview.scheduled_date.desc(), Interview.id.desc())
            .limit(self.list_size)
            .all()
        )

        return CandidateDashboard(
            candidate=CandidateSummary(
                id=candidate.id,
                status=candidate.status,
                experience_years=candidate.experience_years,
                created_at=candidate.created_at,
                updated_at=candidate.updated_at,
                user=CandidateUser(full_name=candidate.user.full_name, email=candidate.user.email),
            ),
            applied_jobs=[
                AppliedJob(
                    id=application.id,
                    job_id=application.job_id,
                    job_title=application.job.title,
                    job_location=application.job.location,
                    applied_date=application.applied_date,
                    status=candidate.status,
                )
                for application in applications
            ],
            interviews=[
                CandidateInterview(
                    id=interview.id,
                    job_title=interview.job.title if interview.job else "Unknown",
                    interview_type=interview.interview_type,
                    round_no=interview.round_no,
                    scheduled_date=interview.scheduled_date,
                    status=interview.status,
                    interviewers=_interviewer_names(interview),
                )
                for interview in interviews
            ],
            offers=self._candidate_offers(candidate.id),
            notifications=self.notifications(principal.user_id),
        )

    def _candidate_offers(self, candidate_id: int) -> List[CandidateOffer]:
        """Real offers followed by one synthetic offer per Selected interview"""
        limit = settings.DASHBOARD_OFFER_LIST_SIZE

        offers = (
            self.db.query(Offer)
            .options(joinedload(Offer.job))
            .filter(Offer.candidate_id == candidate_id)
            .order_by(Offer.offer_date.desc(), Offer.id.desc())
            .limit(limit)
            .all()
        )
        selected = (
            self.db.query(Interview)
            .options(joinedload(Interview.job))
            .filter(
                Interview.candidate_id == candidate_id,
                Interview.status == InterviewStatus.SELECTED.value,
            )
            .order_by(Interview.completed_at.desc(), Interview.id.desc())
            .limit(limit)
            .all()
        )

        result = [
            CandidateOffer(
                id=offer.id,
                job_title=offer.job.title if offer.job else "Unknown",
                offer_date=offer.offer_date,
                joining_date=offer.joining_date,
                status=offer.status,
            )
            for offer in offers
        ]
        result += [
            CandidateOffer(
                id=interview.id,
                job_title=interview.job.title if interview.job else "Unknown",
                offer_date=interview.completed_at or interview.scheduled_date,
                joining_date=None,
                status=InterviewStatus.SELECTED.value,
            )
            for interview in selected
        ]
        return result
