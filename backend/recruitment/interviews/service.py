"""
Interview service - scheduling, status lifecycle and feedback
"""
from typing import List
from sqlalchemy.orm import Session
import structlog

from recruitment.auth.repository import UserRepository
from recruitment.candidates.repository import CandidateRepository
from recruitment.core.exceptions import InvalidStatusError, NotFoundError, ValidationError
from recruitment.core.timeutils import as_naive_utc, utcnow
from recruitment.interviews.repository import InterviewRepository
from recruitment.interviews.schemas import (
    FeedbackRequest,
    FeedbackResponse,
    InterviewerResponse,
    InterviewResponse,
    ScheduleInterviewRequest,
)
from recruitment.jobs.repository import JobRepository
from recruitment.models.interview import (
    TERMINAL_INTERVIEW_STATUSES,
    Feedback,
    Interview,
    Interviewer,
    InterviewStatus,
)
from recruitment.notifications.service import NotificationService

logger = structlog.get_logger()

MIN_RATING = 1
MAX_RATING = 5


def to_feedback_response(feedback: Feedback) -> FeedbackResponse:
    return FeedbackResponse(
        id=feedback.id,
        interview_id=feedback.interview_id,
        interviewer_id=feedback.interviewer_id,
        interviewer_name=feedback.interviewer.full_name if feedback.interviewer else "Unknown",
        rating=feedback.rating,
        comments=feedback.comments or "",
        created_at=feedback.created_at,
    )


def to_interview_response(interview: Interview) -> InterviewResponse:
    candidate = interview.candidate
    return InterviewResponse(
        id=interview.id,
        candidate_id=interview.candidate_id,
        candidate_name=candidate.user.full_name if candidate and candidate.user else "Unknown",
        job_id=interview.job_id,
        job_title=interview.job.title if interview.job else "Unknown",
        scheduled_date=interview.scheduled_date,
        interview_type=interview.interview_type,
        round_no=interview.round_no,
        status=interview.status,
        completed_at=interview.completed_at,
        interviewers=[
            InterviewerResponse(
                id=link.id,
                user_id=link.user_id,
                user_name=link.user.username if link.user else "Unknown",
                full_name=link.user.full_name if link.user else "Unknown",
            )
            for link in interview.interviewers
        ],
        feedbacks=[to_feedback_response(feedback) for feedback in interview.feedbacks],
    )


class InterviewService:
    """Interview lifecycle"""

    def __init__(self, db: Session):
        self.db = db
        self.interviews = InterviewRepository(db)

    def _get(self, interview_id: int) -> Interview:
        interview = self.interviews.get_by_id(interview_id)
        if not interview:
            raise NotFoundError("Interview", str(interview_id))
        return interview

    def get_interview(self, interview_id: int) -> InterviewResponse:
        return to_interview_response(self._get(interview_id))

    def list_interviews(self) -> List[InterviewResponse]:
        return [to_interview_response(i) for i in self.interviews.get_all()]

    def list_by_candidate(self, candidate_id: int) -> List[InterviewResponse]:
        return [to_interview_response(i) for i in self.interviews.get_by_candidate_id(candidate_id)]

    def list_by_job(self, job_id: int) -> List[InterviewResponse]:
        return [to_interview_response(i) for i in self.interviews.get_by_job_id(job_id)]

    def list_by_interviewer(self, user_id: int) -> List[InterviewResponse]:
        return [to_interview_response(i) for i in self.interviews.get_by_interviewer_id(user_id)]

    def schedule_interview(self, payload: ScheduleInterviewRequest) -> InterviewResponse:
        """Create the interview and its panel in one commit"""
        if not CandidateRepository(self.db).get_by_id(payload.candidate_id):
            raise NotFoundError("Candidate", str(payload.candidate_id))
        if not JobRepository(self.db).get_by_id(payload.job_id):
            raise NotFoundError("Job", str(payload.job_id))

        interviewer_ids = list(dict.fromkeys(payload.interviewer_ids))
        users = UserRepository(self.db)
        missing = [user_id for user_id in interviewer_ids if not users.get_by_id(user_id)]
        if missing:
            raise ValidationError("Unknown interviewer ids", details={"interviewer_ids": missing})

        interview = Interview(
            candidate_id=payload.candidate_id,
            job_id=payload.job_id,
            scheduled_date=as_naive_utc(payload.scheduled_date),
            interview_type=payload.interview_type,
            round_no=payload.round_no,
            status=InterviewStatus.SCHEDULED.value,
            created_at=utcnow(),
        )
        interview.interviewers = [Interviewer(user_id=user_id) for user_id in interviewer_ids]
        interview = self.interviews.create(interview)

        logger.info(
            "interview_scheduled",
            interview_id=interview.id,
            candidate_id=interview.candidate_id,
            job_id=interview.job_id,
            round_no=interview.round_no,
            interviewer_count=len(interviewer_ids),
        )
        return to_interview_response(interview)

    def update_status(self, interview_id: int, new_status: str) -> InterviewResponse:
        """
        Move an interview to any status.

        The status change is committed first; the candidate notification is a
        separate best-effort step afterwards. Re-posting the current status
        changes nothing and sends nothing.
        """
        try:
            status = InterviewStatus(new_status)
        except ValueError:
            raise InvalidStatusError("interview", new_status, [s.value for s in InterviewStatus])

        interview = self._get(interview_id)
        previous = interview.status
        if previous == status.value:
            return to_interview_response(interview)

        interview.status = status.value
        if status.value in TERMINAL_INTERVIEW_STATUSES:
            interview.completed_at = utcnow()
        self.interviews.save(interview)

        logger.info(
            "interview_status_updated",
            interview_id=interview_id,
            old_status=previous,
            new_status=status.value,
        )

        NotificationService(self.db).notify_interview_status_change(interview_id, status.value)

        return self.get_interview(interview_id)

    def add_feedback(self, interview_id: int, payload: FeedbackRequest) -> FeedbackResponse:
        if not MIN_RATING <= payload.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}",
                details={"rating": payload.rating},
            )

        self._get(interview_id)
        if not UserRepository(self.db).get_by_id(payload.interviewer_id):
            raise NotFoundError("User", str(payload.interviewer_id))

        feedback = self.interviews.add_feedback(
            Feedback(
                interview_id=interview_id,
                interviewer_id=payload.interviewer_id,
                rating=payload.rating,
                comments=payload.comments,
                created_at=utcnow(),
            )
        )
        logger.info(
            "interview_feedback_added",
            interview_id=interview_id,
            feedback_id=feedback.id,
            interviewer_id=payload.interviewer_id,
            rating=payload.rating,
        )
        return to_feedback_response(feedback)

    def get_feedbacks(self, interview_id: int) -> List[FeedbackResponse]:
        self._get(interview_id)
        return [to_feedback_response(f) for f in self.interviews.get_feedbacks(interview_id)]

    def delete_interview(self, interview_id: int) -> None:
        """Hard delete; panel and feedback rows go with it"""
        interview = self._get(interview_id)
        self.interviews.delete(interview)
        logger.info("interview_deleted", interview_id=interview_id)
