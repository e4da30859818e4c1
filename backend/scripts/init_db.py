"""
Initialize database with demo users, skills, jobs and one candidate
"""
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from recruitment.core.database import SessionLocal, init_db
from recruitment.core.timeutils import utcnow
from recruitment.auth.service import get_password_hash
from recruitment.models import (
    Candidate,
    CandidateJob,
    CandidateSkill,
    Interview,
    Interviewer,
    Job,
    JobSkill,
    JobStatus,
    Notification,
    RoleName,
    Skill,
    User,
    UserStatus,
)
import structlog

logger = structlog.get_logger()

DEMO_USERS = [
    ("admin", "admin123", "System Administrator", "admin@recruitmentsystem.com", RoleName.ADMIN),
    ("hr", "hr123", "HR Manager", "hr@recruitment.com", RoleName.HR),
    ("recruiter", "recruiter123", "Senior Recruiter", "recruiter@recruitment.com", RoleName.RECRUITER),
    ("interviewer", "interviewer123", "Technical Interviewer", "interviewer@recruitment.com", RoleName.INTERVIEWER),
    ("reviewer", "reviewer123", "CV Reviewer", "reviewer@recruitment.com", RoleName.REVIEWER),
    ("candidate", "candidate123", "John Doe", "candidate@recruitment.com", RoleName.CANDIDATE),
]

DEMO_SKILLS = [
    "C#", "JavaScript", "React", "Node.js", "SQL",
    "Azure", "Docker", "Git", "Agile", "Communication",
]

DEMO_JOBS = [
    {
        "title": "Senior Software Engineer",
        "department": "Engineering",
        "description": "We are looking for a senior software engineer with 5+ years of experience in C# and React.",
        "min_experience": "5 years",
        "location": "New York, NY",
        "status": JobStatus.OPEN,
        "age_days": 10,
        "skills": ["C#", "React", "SQL"],
    },
    {
        "title": "Full Stack Developer",
        "department": "Engineering",
        "description": "Full stack developer position with experience in JavaScript, Node.js, and React.",
        "min_experience": "3 years",
        "location": "San Francisco, CA",
        "status": JobStatus.OPEN,
        "age_days": 5,
        "skills": ["JavaScript", "React", "Node.js"],
    },
    {
        "title": "DevOps Engineer",
        "department": "Operations",
        "description": "DevOps engineer with experience in Azure, Docker, and CI/CD pipelines.",
        "min_experience": "4 years",
        "location": "Seattle, WA",
        "status": JobStatus.ON_HOLD,
        "age_days": 3,
        "skills": ["Azure", "Docker"],
    },
]

CANDIDATE_SKILLS = ["C#", "JavaScript", "React", "SQL", "Git"]


def create_demo_users(db: Session) -> dict:
    """Create one Active account per role, keyed by username"""
    users = {}
    for username, password, full_name, email, role in DEMO_USERS:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            logger.info("demo_user_exists", username=username)
            users[username] = existing
            continue

        user = User(
            full_name=full_name,
            email=email,
            username=username,
            hashed_password=get_password_hash(password),  # Change in production!
            status=UserStatus.ACTIVE.value,
        )
        user.set_roles([role])
        db.add(user)
        users[username] = user
        logger.info("demo_user_created", username=username, role=role.value)

    db.commit()
    return users


def create_skills(db: Session) -> dict:
    """Create the skill catalogue, keyed by name"""
    skills = {}
    for name in DEMO_SKILLS:
        skill = db.query(Skill).filter(Skill.name == name).first()
        if not skill:
            skill = Skill(name=name)
            db.add(skill)
        skills[name] = skill

    db.commit()
    logger.info("skills_seeded", count=len(skills))
    return skills


def create_jobs(db: Session, recruiter: User, skills: dict) -> list:
    """Create demo postings with their required skills"""
    now = utcnow()
    jobs = []
    for spec in DEMO_JOBS:
        job = db.query(Job).filter(Job.title == spec["title"]).first()
        if not job:
            job = Job(
                title=spec["title"],
                department=spec["department"],
                description=spec["description"],
                min_experience=spec["min_experience"],
                location=spec["location"],
                status=spec["status"].value,
                created_by=recruiter.id,
                created_at=now - timedelta(days=spec["age_days"]),
            )
            job.job_skills = [JobSkill(skill=skills[name]) for name in spec["skills"]]
            db.add(job)
            logger.info("demo_job_created", title=spec["title"])
        jobs.append(job)

    db.commit()
    return jobs


def create_demo_candidate(db: Session, users: dict, skills: dict, jobs: list) -> None:
    """Profile, applications and two upcoming interviews for the demo candidate"""
    candidate_user = users["candidate"]
    if db.query(Candidate).filter(Candidate.user_id == candidate_user.id).first():
        logger.info("demo_candidate_exists", user_id=candidate_user.id)
        return

    now = utcnow()
    candidate = Candidate(
        user_id=candidate_user.id,
        experience_years=4,
        created_at=now - timedelta(days=2),
    )
    candidate.candidate_skills = [CandidateSkill(skill=skills[name]) for name in CANDIDATE_SKILLS]
    db.add(candidate)
    db.flush()

    for job in jobs[:2]:
        db.add(CandidateJob(candidate_id=candidate.id, job_id=job.id, applied_date=now - timedelta(days=1)))

    panels = [
        (jobs[0], "Technical", 2, users["interviewer"]),
        (jobs[1], "HR", 3, users["hr"]),
    ]
    for job, interview_type, in_days, panel_user in panels:
        interview = Interview(
            candidate_id=candidate.id,
            job_id=job.id,
            scheduled_date=now + timedelta(days=in_days),
            interview_type=interview_type,
            round_no=1,
        )
        interview.interviewers = [Interviewer(user_id=panel_user.id)]
        db.add(interview)

    db.add_all([
        Notification(
            user_id=users["admin"].id,
            message="New user registration pending approval",
            created_at=now - timedelta(hours=2),
        ),
        Notification(
            user_id=users["hr"].id,
            message="New candidate applied for Senior Software Engineer position",
            created_at=now - timedelta(hours=1),
        ),
        Notification(
            user_id=users["interviewer"].id,
            message="Interview scheduled for tomorrow at 2:00 PM",
            created_at=now - timedelta(minutes=30),
        ),
    ])

    db.commit()
    logger.info("demo_candidate_created", candidate_id=candidate.id)


def main():
    """Main initialization function"""
    logger.info("initializing_database")

    # Initialize database tables
    init_db()

    db: Session = SessionLocal()
    try:
        users = create_demo_users(db)
        skills = create_skills(db)
        jobs = create_jobs(db, users["recruiter"], skills)
        create_demo_candidate(db, users, skills, jobs)

        logger.info("database_initialization_complete")
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
