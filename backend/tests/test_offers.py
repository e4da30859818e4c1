"""
Offer tests
"""
from recruitment.models import OfferStatus

from conftest import CandidateFactory, JobFactory


class TestOffers:

    def test_create_and_list(self, client, hr, candidate, auth_headers):
        job = JobFactory(title="SRE")

        created = client.post(
            "/api/offers",
            json={"candidateId": candidate.id, "jobId": job.id, "joiningDate": "2030-01-15T09:00:00Z"},
            headers=auth_headers(hr),
        )

        assert created.status_code == 201
        body = created.json()
        assert body["status"] == OfferStatus.OFFERED.value
        assert body["candidateName"] == "Casey Candidate"
        assert body["jobTitle"] == "SRE"
        assert body["joiningDate"] == "2030-01-15T09:00:00"

        listed = client.get("/api/offers", params={"candidateId": candidate.id}, headers=auth_headers(hr))
        assert [offer["id"] for offer in listed.json()] == [body["id"]]

    def test_list_filters_by_candidate(self, client, hr, candidate, auth_headers):
        other = CandidateFactory()
        job = JobFactory()
        for who in (candidate, other):
            client.post("/api/offers", json={"candidateId": who.id, "jobId": job.id}, headers=auth_headers(hr))

        everything = client.get("/api/offers", headers=auth_headers(hr)).json()
        only_other = client.get("/api/offers", params={"candidateId": other.id}, headers=auth_headers(hr)).json()

        assert len(everything) == 2
        assert [offer["candidateId"] for offer in only_other] == [other.id]

    def test_status_update(self, client, hr, candidate, auth_headers):
        job = JobFactory()
        offer = client.post(
            "/api/offers", json={"candidateId": candidate.id, "jobId": job.id}, headers=auth_headers(hr)
        ).json()

        response = client.put(
            f"/api/offers/{offer['id']}/status", json={"status": "Accepted"}, headers=auth_headers(hr)
        )

        assert response.status_code == 200
        assert response.json()["status"] == OfferStatus.ACCEPTED.value
        assert response.json()["statusUpdatedAt"] is not None

    def test_unknown_job(self, client, hr, candidate, auth_headers):
        response = client.post(
            "/api/offers", json={"candidateId": candidate.id, "jobId": 999}, headers=auth_headers(hr)
        )
        assert response.status_code == 404

    def test_interviewers_cannot_make_offers(self, client, interviewer, candidate, auth_headers):
        job = JobFactory()
        response = client.post(
            "/api/offers", json={"candidateId": candidate.id, "jobId": job.id}, headers=auth_headers(interviewer)
        )
        assert response.status_code == 403
