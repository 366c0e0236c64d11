"""
Tests for JobStore and ApplicationStore over the in-memory repository.
"""

import pytest
from bson import ObjectId

from portal_service.services import (
    ENRICHMENT_FIELDS,
    InvalidDocumentId,
    enrich_applications,
    parse_object_id,
)

from fixtures.sample_jobs import (
    APPLICANT_EMAIL,
    OTHER_APPLICANT_EMAIL,
    SAMPLE_JOBS,
    all_sample_jobs,
    make_application,
)


MISSING_ID = "64b7f0c2a1b2c3d4e5f60718"


class TestParseObjectId:

    def test_valid_hex_string(self):
        assert parse_object_id(MISSING_ID) == ObjectId(MISSING_ID)

    @pytest.mark.parametrize("value", ["", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", None])
    def test_malformed_values_raise(self, value):
        with pytest.raises(InvalidDocumentId):
            parse_object_id(value)


class TestJobStore:

    def test_create_then_get_by_id_round_trips(self, job_store):
        submitted = dict(SAMPLE_JOBS["payments_architect"])
        result = job_store.create(dict(submitted))

        job = job_store.get_by_id(result.inserted_id)

        assert str(job["_id"]) == result.inserted_id
        for key, value in submitted.items():
            assert job[key] == value

    def test_get_by_id_absent_returns_none(self, job_store):
        assert job_store.get_by_id(MISSING_ID) is None

    def test_get_by_id_malformed_raises(self, job_store):
        with pytest.raises(InvalidDocumentId):
            job_store.get_by_id("nope")

    def test_list_all(self, job_store):
        for job in all_sample_jobs():
            job_store.create(job)

        assert len(job_store.list()) == len(SAMPLE_JOBS)

    def test_list_by_hr_email(self, job_store, job_repository):
        for job in all_sample_jobs():
            job_store.create(job)

        jobs = job_store.list(hr_email="talent@payflow.example")

        assert [job["title"] for job in jobs] == ["Payments Architect"]
        assert job_repository.find_calls[-1] == {"hr_email": "talent@payflow.example"}

    def test_list_empty_email_means_no_filter(self, job_store, job_repository):
        job_store.list(hr_email="")
        assert job_repository.find_calls[-1] == {}

    def test_get_many_skips_malformed_and_missing(self, job_store):
        job_id = job_store.create(dict(SAMPLE_JOBS["backend_engineer"])).inserted_id

        jobs = job_store.get_many([job_id, MISSING_ID, "garbage", None])

        assert list(jobs) == [job_id]

    def test_get_many_without_valid_ids_skips_query(self, job_store, job_repository):
        assert job_store.get_many(["garbage", None]) == {}
        assert job_repository.find_calls == []


class TestEnrichApplications:

    JOB_ID = "6ad678e93e6ce3755e96a711"

    def test_copies_display_fields(self):
        job = SAMPLE_JOBS["backend_engineer"]
        applications = [{"job_id": self.JOB_ID}]

        enrich_applications(applications, {self.JOB_ID: job})

        for field_name in ENRICHMENT_FIELDS:
            assert applications[0][field_name] == job[field_name]

    def test_does_not_copy_other_job_fields(self):
        applications = [{"job_id": self.JOB_ID}]
        enrich_applications(applications, {self.JOB_ID: SAMPLE_JOBS["backend_engineer"]})
        assert "hr_email" not in applications[0]

    def test_job_without_field_leaves_key_absent(self):
        """Fields the job lacks are not added as nulls."""
        applications = [{"job_id": self.JOB_ID}]
        enrich_applications(applications, {self.JOB_ID: {"title": "Only title"}})

        assert applications[0]["title"] == "Only title"
        assert "company" not in applications[0]
        assert "company_logo" not in applications[0]

    def test_uppercase_job_id_matches(self):
        """job_id hex case does not affect the join."""
        applications = [{"job_id": self.JOB_ID.upper()}]

        enrich_applications(applications, {self.JOB_ID: SAMPLE_JOBS["backend_engineer"]})

        assert applications[0]["title"] == "Senior Backend Engineer"

    def test_object_id_job_id_matches(self):
        applications = [{"job_id": ObjectId(self.JOB_ID)}]

        enrich_applications(applications, {self.JOB_ID: SAMPLE_JOBS["backend_engineer"]})

        assert applications[0]["company"] == "StreamCo"

    def test_malformed_job_id_untouched(self):
        original = {"job_id": "a", "applicant_email": APPLICANT_EMAIL}
        applications = [dict(original)]

        enrich_applications(applications, {"a": SAMPLE_JOBS["backend_engineer"]})

        assert applications == [original]

    def test_unmatched_application_untouched(self):
        original = {"job_id": MISSING_ID, "applicant_email": APPLICANT_EMAIL}
        applications = [dict(original)]

        enrich_applications(applications, {self.JOB_ID: SAMPLE_JOBS["backend_engineer"]})

        assert applications == [original]


class TestApplicationStore:

    def test_list_by_email_enriches_from_referenced_job(self, application_store, job_store):
        job_id = job_store.create(dict(SAMPLE_JOBS["backend_engineer"])).inserted_id
        application_store.create(make_application(job_id))

        applications = application_store.list_by_email(APPLICANT_EMAIL)

        assert len(applications) == 1
        assert applications[0]["title"] == "Senior Backend Engineer"
        assert applications[0]["company"] == "StreamCo"
        assert applications[0]["company_logo"] == "https://cdn.streamco.io/logo.png"

    def test_list_by_email_soft_misses_missing_job(self, application_store):
        application_store.create(make_application(MISSING_ID))

        application = application_store.list_by_email(APPLICANT_EMAIL)[0]

        assert not set(ENRICHMENT_FIELDS) & set(application)

    def test_list_by_email_soft_misses_malformed_job_id(self, application_store):
        application_store.create(make_application("not-an-id"))

        application = application_store.list_by_email(APPLICANT_EMAIL)[0]

        assert application["job_id"] == "not-an-id"
        assert "title" not in application

    def test_list_by_email_mixed_hits_and_misses(self, application_store, job_store):
        job_id = job_store.create(dict(SAMPLE_JOBS["platform_engineer"])).inserted_id
        application_store.create(make_application(job_id))
        application_store.create(make_application(MISSING_ID))

        applications = application_store.list_by_email(APPLICANT_EMAIL)

        assert applications[0]["title"] == "Platform Engineer"
        assert "title" not in applications[1]

    def test_list_by_email_batches_job_lookup(self, application_store, job_store, job_repository):
        """All referenced jobs are fetched with a single $in query."""
        ids = [job_store.create(job).inserted_id for job in all_sample_jobs()]
        for job_id in ids + ids:
            application_store.create(make_application(job_id))

        applications = application_store.list_by_email(APPLICANT_EMAIL)

        assert len(applications) == 2 * len(ids)
        assert all("title" in application for application in applications)
        assert len(job_repository.find_calls) == 1
        assert set(job_repository.find_calls[0]["_id"]["$in"]) == {ObjectId(i) for i in ids}

    def test_list_by_email_filters_on_applicant(self, application_store, application_repository):
        application_store.create(make_application(MISSING_ID, OTHER_APPLICANT_EMAIL))

        assert application_store.list_by_email(APPLICANT_EMAIL) == []
        assert application_repository.find_calls[-1] == {"applicant_email": APPLICANT_EMAIL}

    def test_list_by_email_no_applications_skips_job_lookup(self, application_store, job_repository):
        assert application_store.list_by_email(APPLICANT_EMAIL) == []
        assert job_repository.find_calls == []

    def test_delete_by_id(self, application_store):
        application_id = application_store.create(make_application(MISSING_ID)).inserted_id

        assert application_store.delete_by_id(application_id).deleted_count == 1
        assert application_store.list_by_email(APPLICANT_EMAIL) == []

    def test_delete_absent_id_returns_zero(self, application_store):
        result = application_store.delete_by_id(MISSING_ID)

        assert result.acknowledged is True
        assert result.deleted_count == 0

    def test_delete_malformed_id_raises(self, application_store):
        with pytest.raises(InvalidDocumentId):
            application_store.delete_by_id("123")

    def test_list_by_email_enriches_uppercase_job_id(self, application_store, job_store):
        """An uppercase-hex job_id resolves the same job get_by_id finds."""
        job_id = job_store.create(dict(SAMPLE_JOBS["backend_engineer"])).inserted_id
        application_store.create(make_application(job_id.upper()))

        application = application_store.list_by_email(APPLICANT_EMAIL)[0]

        assert job_store.get_by_id(job_id.upper()) is not None
        assert application["job_id"] == job_id.upper()
        assert application["title"] == "Senior Backend Engineer"
        assert application["company_logo"] == "https://cdn.streamco.io/logo.png"

    def test_list_by_email_omits_fields_job_lacks(self, application_store, job_store):
        job_id = job_store.create({"title": "Only title", "hr_email": "hr@acme.io"}).inserted_id
        application_store.create(make_application(job_id))

        application = application_store.list_by_email(APPLICANT_EMAIL)[0]

        assert application["title"] == "Only title"
        assert "company" not in application
        assert "company_logo" not in application
