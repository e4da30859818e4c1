"""
Database models
"""
from recruitment.models.user import User, UserRole, RoleName, UserStatus
from recruitment.models.job import Job, JobSkill, JobStatus, Skill
from recruitment.models.candidate import (
    Candidate,
    CandidateJob,
    CandidateSkill,
    CandidateStatus,
    Document,
)
from recruitment.models.interview import Feedback, Interview, InterviewStatus, Interviewer
from recruitment.models.offer import Offer, OfferStatus
from recruitment.models.notification import Notification

__all__ = [
    "User",
    "UserRole",
    "RoleName",
    "UserStatus",
    "Job",
    "JobSkill",
    "JobStatus",
    "Skill",
    "Candidate",
    "CandidateJob",
    "CandidateSkill",
    "CandidateStatus",
    "Document",
    "Interview",
    "Interviewer",
    "Feedback",
    "InterviewStatus",
    "Offer",
    "OfferStatus",
    "Notification",
]
