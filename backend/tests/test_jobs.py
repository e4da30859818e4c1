"""
Job posting tests
"""
from recruitment.jobs.schemas import JobUpdate
from recruitment.jobs.service import JobService
from recruitment.models import JobSkill, JobStatus, RoleName
from recruitment.models.job import MAX_EXPERIENCE_YEARS, parse_min_experience

from conftest import JobFactory, SkillFactory, UserFactory


def _job_payload(skill_ids, **overrides):
    payload = {
        "title": "Backend Engineer",
        "department": "Engineering",
        "description": "APIs and data",
        "minExperience": "3-5 years",
        "location": "Berlin",
        "skills": [{"skillId": skill_id} for skill_id in skill_ids],
    }
    payload.update(overrides)
    return payload


def _update_payload(skill_ids, **overrides):
    payload = {
        "title": "Backend Engineer",
        "department": "Engineering",
        "description": "APIs and data",
        "minExperience": "3 years",
        "location": "Berlin",
        "skillIds": skill_ids,
        "status": "Open",
    }
    payload.update(overrides)
    return payload


class TestMinExperience:

    def test_first_number_wins(self):
        assert parse_min_experience("3-5 years") == 3
        assert parse_min_experience("5+ years") == 5

    def test_no_number_is_zero(self):
        assert parse_min_experience("Not specified") == 0
        assert parse_min_experience("") == 0
        assert parse_min_experience(None) == 0

    def test_oversized_number_is_capped(self):
        assert parse_min_experience("99999999999999999999") == MAX_EXPERIENCE_YEARS
        assert parse_min_experience("100+ years") == MAX_EXPERIENCE_YEARS

    def test_job_keeps_years_in_sync(self, db):
        job = JobFactory(min_experience="7 years")
        assert job.min_experience_years == 7

        job.min_experience = "Not specified"
        assert job.min_experience_years == 0


class TestCreateJob:

    def test_create_job_with_skills(self, client, recruiter, auth_headers):
        python, sql = SkillFactory(name="Python"), SkillFactory(name="SQL")

        response = client.post(
            "/api/jobs", json=_job_payload([python.id, sql.id]), headers=auth_headers(recruiter)
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == JobStatus.OPEN.value
        assert body["createdBy"] == recruiter.id
        assert body["createdByName"] == "Rita Recruiter"
        assert sorted(skill["name"] for skill in body["skills"]) == ["Python", "SQL"]

    def test_long_numeric_requirement_is_stored(self, client, db, recruiter, auth_headers):
        skill = SkillFactory()

        response = client.post(
            "/api/jobs",
            json=_job_payload([skill.id], minExperience="99999999999999999999"),
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 201
        assert response.json()["minExperience"] == "99999999999999999999"
        job = JobService(db).jobs.get_by_id(response.json()["id"])
        assert job.min_experience_years == MAX_EXPERIENCE_YEARS

    def test_at_least_one_skill_is_required(self, client, recruiter, auth_headers):
        response = client.post("/api/jobs", json=_job_payload([]), headers=auth_headers(recruiter))
        assert response.status_code == 400

    def test_unknown_skill_is_rejected(self, client, db, recruiter, auth_headers):
        response = client.post("/api/jobs", json=_job_payload([999]), headers=auth_headers(recruiter))

        assert response.status_code == 400
        assert response.json()["details"]["skill_ids"] == [999]
        assert client.get("/api/jobs", headers=auth_headers(recruiter)).json() == []

    def test_candidates_cannot_create_jobs(self, client, candidate, auth_headers):
        skill = SkillFactory()
        response = client.post("/api/jobs", json=_job_payload([skill.id]), headers=auth_headers(candidate.user))
        assert response.status_code == 403


class TestUpdateJob:

    def test_skills_are_patched_not_replaced(self, db):
        react, sql, go = SkillFactory(name="React"), SkillFactory(name="SQL"), SkillFactory(name="Go")
        job = JobFactory(job_skills=[JobSkill(skill=react), JobSkill(skill=sql)])
        kept_link_id = next(link.id for link in job.job_skills if link.skill_id == sql.id)

        payload = JobUpdate.model_validate(_update_payload([sql.id, go.id]))
        response = JobService(db).update_job(job.id, payload)

        assert sorted(skill.name for skill in response.skills) == ["Go", "SQL"]
        db.refresh(job)
        kept = next(link for link in job.job_skills if link.skill_id == sql.id)
        assert kept.id == kept_link_id

    def test_closing_requires_reason(self, client, db, recruiter, auth_headers):
        skill = SkillFactory()
        job = JobFactory()

        response = client.put(
            f"/api/jobs/{job.id}",
            json=_update_payload([skill.id], status="Closed"),
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 400
        db.refresh(job)
        assert job.status == JobStatus.OPEN.value

    def test_close_with_reason(self, client, db, recruiter, auth_headers):
        skill = SkillFactory()
        job = JobFactory()

        response = client.put(
            f"/api/jobs/{job.id}",
            json=_update_payload([skill.id], status="Closed", closedReason="Position filled"),
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == JobStatus.CLOSED.value
        assert body["closedReason"] == "Position filled"
        assert body["updatedAt"] is not None

    def test_update_missing_job(self, client, recruiter, auth_headers):
        response = client.put("/api/jobs/404", json=_update_payload([]), headers=auth_headers(recruiter))
        assert response.status_code == 404


class TestListAndDelete:

    def test_list_is_newest_first(self, client, db, recruiter, auth_headers):
        older = JobFactory(title="Older")
        newer = JobFactory(title="Newer")
        older.created_at = newer.created_at.replace(year=newer.created_at.year - 1)
        db.commit()

        response = client.get("/api/jobs", headers=auth_headers(recruiter))

        assert [job["title"] for job in response.json()] == ["Newer", "Older"]

    def test_delete_job(self, client, db, auth_headers):
        hr = UserFactory(role=RoleName.HR)
        job = JobFactory()

        response = client.delete(f"/api/jobs/{job.id}", headers=auth_headers(hr))

        assert response.status_code == 200
        assert response.json()["message"] == "Job deleted successfully"
        assert client.get(f"/api/jobs/{job.id}", headers=auth_headers(hr)).status_code == 404

    def test_skill_catalogue_is_alphabetical(self, client, recruiter, auth_headers):
        SkillFactory(name="SQL")
        SkillFactory(name="Docker")

        response = client.get("/api/jobs/skills", headers=auth_headers(recruiter))

        assert [skill["name"] for skill in response.json()] == ["Docker", "SQL"]
