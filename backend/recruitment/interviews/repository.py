"""
Interview data access
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from recruitment.models.candidate import Candidate
from recruitment.models.interview import Feedback, Interview, Interviewer


class InterviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Interview).options(
            joinedload(Interview.candidate).joinedload(Candidate.user),
            joinedload(Interview.job),
        )

    def _ordered(self, query) -> List[Interview]:
        return query.order_by(Interview.scheduled_date.desc(), Interview.id.desc()).all()

    def get_by_id(self, interview_id: int) -> Optional[Interview]:
        return self._query().filter(Interview.id == interview_id).first()

    def get_all(self) -> List[Interview]:
        return self._ordered(self._query())

    def get_by_candidate_id(self, candidate_id: int) -> List[Interview]:
        return self._ordered(self._query().filter(Interview.candidate_id == candidate_id))

    def get_by_job_id(self, job_id: int) -> List[Interview]:
        return self._ordered(self._query().filter(Interview.job_id == job_id))

    def get_by_interviewer_id(self, user_id: int) -> List[Interview]:
        return self._ordered(
            self._query().filter(Interview.interviewers.any(Interviewer.user_id == user_id))
        )

    def create(self, interview: Interview) -> Interview:
        self.db.add(interview)
        self.db.commit()
        self.db.refresh(interview)
        return interview

    def save(self, interview: Interview) -> Interview:
        self.db.commit()
        self.db.refresh(interview)
        return interview

    def delete(self, interview: Interview) -> None:
        self.db.delete(interview)
        self.db.commit()

    def add_feedback(self, feedback: Feedback) -> Feedback:
        self.db.add(feedback)
        self.db.commit()
        self.db.refresh(feedback)
        return feedback

    def get_feedbacks(self, interview_id: int) -> List[Feedback]:
        return (
            self.db.query(Feedback)
            .filter(Feedback.interview_id == interview_id)
            .order_by(Feedback.created_at.desc(), Feedback.id.desc())
            .all()
        )
