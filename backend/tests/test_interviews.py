"""
Interview lifecycle tests: scheduling, status changes, notifications and feedback
"""
from datetime import timedelta

from recruitment.core.timeutils import utcnow
from recruitment.interviews.schemas import ScheduleInterviewRequest
from recruitment.interviews.service import InterviewService
from recruitment.models import Feedback, InterviewStatus, Interviewer, Notification
from recruitment.notifications.service import NotificationService, interview_status_message

from conftest import CandidateFactory, InterviewFactory, JobFactory


def _notifications_for(db, user_id):
    return db.query(Notification).filter(Notification.user_id == user_id).all()


class TestScheduleInterview:

    def test_schedule_with_panel(self, client, hr, interviewer, candidate, auth_headers):
        job = JobFactory(title="Platform Engineer")
        when = (utcnow() + timedelta(days=3)).replace(microsecond=0)

        response = client.post("/api/interview/schedule", json={
            "candidateId": candidate.id,
            "jobId": job.id,
            "scheduledDate": when.isoformat(),
            "interviewType": "Technical",
            "roundNo": 2,
            "interviewerIds": [interviewer.id, interviewer.id],
        }, headers=auth_headers(hr))

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == InterviewStatus.SCHEDULED.value
        assert body["candidateName"] == "Casey Candidate"
        assert body["jobTitle"] == "Platform Engineer"
        assert body["roundNo"] == 2
        assert body["completedAt"] is None
        assert [panel["userId"] for panel in body["interviewers"]] == [interviewer.id]

    def test_offset_datetimes_are_stored_as_utc(self, db, candidate):
        job = JobFactory()
        payload = ScheduleInterviewRequest.model_validate({
            "candidateId": candidate.id,
            "jobId": job.id,
            "scheduledDate": "2030-05-01T12:00:00+02:00",
            "interviewType": "HR",
        })

        response = InterviewService(db).schedule_interview(payload)

        assert response.scheduled_date.isoformat() == "2030-05-01T10:00:00"

    def test_unknown_candidate(self, client, hr, auth_headers):
        job = JobFactory()
        response = client.post("/api/interview/schedule", json={
            "candidateId": 999,
            "jobId": job.id,
            "scheduledDate": utcnow().isoformat(),
            "interviewType": "HR",
        }, headers=auth_headers(hr))

        assert response.status_code == 404

    def test_unknown_interviewer(self, client, hr, candidate, auth_headers):
        job = JobFactory()
        response = client.post("/api/interview/schedule", json={
            "candidateId": candidate.id,
            "jobId": job.id,
            "scheduledDate": utcnow().isoformat(),
            "interviewType": "HR",
            "interviewerIds": [424242],
        }, headers=auth_headers(hr))

        assert response.status_code == 400
        assert response.json()["details"]["interviewer_ids"] == [424242]

    def test_interviewers_cannot_schedule(self, client, interviewer, candidate, auth_headers):
        job = JobFactory()
        response = client.post("/api/interview/schedule", json={
            "candidateId": candidate.id,
            "jobId": job.id,
            "scheduledDate": utcnow().isoformat(),
            "interviewType": "HR",
        }, headers=auth_headers(interviewer))

        assert response.status_code == 403


class TestInterviewStatus:

    def test_selected_stamps_completion_and_notifies(self, client, db, interviewer, auth_headers):
        interview = InterviewFactory(job__title="Data Engineer")
        candidate_user_id = interview.candidate.user_id

        response = client.put(
            f"/api/interview/{interview.id}/status",
            json={"status": "Selected"},
            headers=auth_headers(interviewer),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "Selected"
        assert response.json()["completedAt"] is not None

        [notification] = _notifications_for(db, candidate_user_id)
        assert notification.message == "Your interview status for 'Data Engineer' has been updated to 'Selected'."
        assert notification.is_read is False

    def test_non_terminal_change_notifies_without_completion(self, db):
        interview = InterviewFactory()

        response = InterviewService(db).update_status(interview.id, "Other Interview")

        assert response.status == InterviewStatus.OTHER_INTERVIEW.value
        assert response.completed_at is None
        assert len(_notifications_for(db, interview.candidate.user_id)) == 1

    def test_same_status_is_a_no_op(self, db):
        interview = InterviewFactory()
        service = InterviewService(db)

        service.update_status(interview.id, "Rejected")
        first_completed_at = service.get_interview(interview.id).completed_at
        service.update_status(interview.id, "Rejected")

        assert service.get_interview(interview.id).completed_at == first_completed_at
        assert len(_notifications_for(db, interview.candidate.user_id)) == 1

    def test_invalid_status(self, client, interviewer, auth_headers):
        interview = InterviewFactory()

        response = client.put(
            f"/api/interview/{interview.id}/status",
            json={"status": "Hired"},
            headers=auth_headers(interviewer),
        )

        assert response.status_code == 400
        assert "Selected" in response.json()["details"]["allowed_statuses"]
        assert response.json()["type"] == "InvalidStatusError"

    def test_notification_failure_keeps_status(self, db, monkeypatch):
        interview = InterviewFactory()

        def broken_add(self, notification):
            raise RuntimeError("notification store down")

        monkeypatch.setattr("recruitment.notifications.repository.NotificationRepository.add", broken_add)

        response = InterviewService(db).update_status(interview.id, "Cancelled")

        assert response.status == InterviewStatus.CANCELLED.value
        db.expire_all()
        assert InterviewService(db).get_interview(interview.id).status == InterviewStatus.CANCELLED.value
        assert _notifications_for(db, interview.candidate.user_id) == []

    def test_message_for_missing_job_title(self):
        assert interview_status_message(None, "Cancelled") == (
            "Your interview status for 'Unknown Job' has been updated to 'Cancelled'."
        )

    def test_notify_unknown_interview_returns_none(self, db):
        assert NotificationService(db).notify_interview_status_change(999, "Selected") is None


class TestFeedback:

    def test_add_and_list_feedback(self, client, interviewer, auth_headers):
        interview = InterviewFactory()
        headers = auth_headers(interviewer)

        created = client.post(
            f"/api/interview/{interview.id}/feedback",
            json={"interviewerId": interviewer.id, "rating": 4, "comments": "Solid design skills"},
            headers=headers,
        )
        listed = client.get(f"/api/interview/{interview.id}/feedbacks", headers=headers)

        assert created.status_code == 200
        assert created.json()["interviewerName"] == "Ivan Interviewer"
        assert [f["rating"] for f in listed.json()] == [4]

    def test_rating_out_of_range(self, client, db, interviewer, auth_headers):
        interview = InterviewFactory()

        for rating in (0, 6):
            response = client.post(
                f"/api/interview/{interview.id}/feedback",
                json={"interviewerId": interviewer.id, "rating": rating},
                headers=auth_headers(interviewer),
            )
            assert response.status_code == 400

        assert db.query(Feedback).count() == 0

    def test_feedback_for_missing_interview(self, client, interviewer, auth_headers):
        response = client.post(
            "/api/interview/999/feedback",
            json={"interviewerId": interviewer.id, "rating": 3},
            headers=auth_headers(interviewer),
        )
        assert response.status_code == 404


class TestInterviewQueries:

    def test_lists_are_scoped(self, db, interviewer):
        mine = InterviewFactory()
        mine.interviewers = [Interviewer(user_id=interviewer.id)]
        db.commit()
        other = InterviewFactory()
        service = InterviewService(db)

        assert [i.id for i in service.list_by_interviewer(interviewer.id)] == [mine.id]
        assert [i.id for i in service.list_by_candidate(other.candidate_id)] == [other.id]
        assert [i.id for i in service.list_by_job(mine.job_id)] == [mine.id]
        assert len(service.list_interviews()) == 2

    def test_latest_round_first(self, db):
        candidate = CandidateFactory()
        first = InterviewFactory(candidate=candidate, scheduled_date=utcnow() + timedelta(days=1))
        second = InterviewFactory(candidate=candidate, scheduled_date=utcnow() + timedelta(days=5), round_no=2)

        listed = InterviewService(db).list_by_candidate(candidate.id)

        assert [i.id for i in listed] == [second.id, first.id]


class TestDeleteInterview:

    def test_admin_delete_cascades(self, client, db, admin, interviewer, auth_headers):
        interview = InterviewFactory()
        interview.interviewers = [Interviewer(user_id=interviewer.id)]
        db.add(Feedback(interview_id=interview.id, interviewer_id=interviewer.id, rating=5, created_at=utcnow()))
        db.commit()

        response = client.delete(f"/api/interview/{interview.id}", headers=auth_headers(admin))

        assert response.status_code == 204
        assert db.query(Feedback).count() == 0
        assert db.query(Interviewer).count() == 0
        assert client.get(f"/api/interview/{interview.id}", headers=auth_headers(admin)).status_code == 404

    def test_only_admin_deletes(self, client, hr, auth_headers):
        interview = InterviewFactory()
        assert client.delete(f"/api/interview/{interview.id}", headers=auth_headers(hr)).status_code == 403
