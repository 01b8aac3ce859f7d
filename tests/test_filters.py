"""
Tests for the filter engine.

``now`` is pinned so the date-bucket checks are deterministic.
"""

from datetime import timedelta

import pytest

from job_board.filters import DATE_BUCKETS, facets, filter_jobs, matches
from job_board.schemas import FilterCriteria, JobType


@pytest.fixture
def jobs(make_job, now):
    return [
        make_job(id="fe", title="Frontend Developer", company="TechCorp", location="Bangalore, India",
                 experience="3-5 years", date_posted=now - timedelta(days=1)),
        make_job(id="in", title="Full Stack Intern", company="StartupXYZ", location="Delhi, India",
                 experience="0-1 years", job_type=JobType.INTERNSHIP, date_posted=now - timedelta(days=5),
                 description="Great learning opportunity."),
        make_job(id="pm", title="Product Manager", company="InnovateLabs", location="Pune, India",
                 experience="5-8 years", date_posted=now - timedelta(days=40)),
    ]


class TestMatches:
    def test_empty_criteria_matches_everything(self, jobs, now):
        assert all(matches(j, FilterCriteria(), now=now) for j in jobs)

    def test_location_is_case_sensitive_substring(self, jobs, now):
        assert [j.id for j in filter_jobs(jobs, FilterCriteria(location="Delhi"), now=now)] == ["in"]
        assert filter_jobs(jobs, FilterCriteria(location="delhi"), now=now) == []

    def test_job_type_exact(self, jobs, now):
        assert [j.id for j in filter_jobs(jobs, FilterCriteria(job_type="Internship"), now=now)] == ["in"]
        assert filter_jobs(jobs, FilterCriteria(job_type="internship"), now=now) == []

    def test_experience_exact(self, jobs, now):
        assert [j.id for j in filter_jobs(jobs, FilterCriteria(experience_level="5-8 years"), now=now)] == ["pm"]
        assert filter_jobs(jobs, FilterCriteria(experience_level="5-8"), now=now) == []

    @pytest.mark.parametrize("query,expected", [
        ("frontend", ["fe"]),
        ("STARTUPxyz", ["in"]),
        ("learning", ["in"]),
        ("developer", ["fe"]),
        ("nothing-like-this", []),
    ])
    def test_search_title_company_description(self, jobs, now, query, expected):
        assert [j.id for j in filter_jobs(jobs, FilterCriteria(search_query=query), now=now)] == expected

    def test_predicates_are_conjunctive(self, jobs, now):
        intern = jobs[1]
        true_only = FilterCriteria(job_type="Internship")
        both = FilterCriteria(job_type="Internship", location="Pune")

        assert matches(intern, true_only, now=now)
        assert not matches(intern, both, now=now)


class TestDateBuckets:
    def test_exactly_one_day_old_is_in_last_24_hours(self, make_job, now):
        job = make_job(date_posted=now - timedelta(days=1))

        assert matches(job, FilterCriteria(date_posted="Last 24 hours"), now=now)

    def test_two_days_old_is_not_in_last_24_hours(self, make_job, now):
        job = make_job(date_posted=now - timedelta(days=2))

        assert not matches(job, FilterCriteria(date_posted="Last 24 hours"), now=now)

    def test_partial_days_are_floored(self, make_job, now):
        job = make_job(date_posted=now - timedelta(days=1, hours=23))

        assert matches(job, FilterCriteria(date_posted="Last 24 hours"), now=now)

    @pytest.mark.parametrize("bucket,expected", [
        ("Last 3 days", ["fe"]),
        ("Last 7 days", ["fe", "in"]),
        ("Last 30 days", ["fe", "in"]),
    ])
    def test_buckets(self, jobs, now, bucket, expected):
        assert [j.id for j in filter_jobs(jobs, FilterCriteria(date_posted=bucket), now=now)] == expected

    def test_unknown_bucket_fails_open(self, jobs, now):
        assert len(filter_jobs(jobs, FilterCriteria(date_posted="Last century"), now=now)) == 3


def test_filter_preserves_input_order(jobs, now):
    reversed_jobs = list(reversed(jobs))

    assert filter_jobs(reversed_jobs, FilterCriteria(), now=now) == reversed_jobs


def test_facets(jobs):
    result = facets(jobs)

    assert result.locations == ["Bangalore, India", "Delhi, India", "Pune, India"]
    assert result.job_types == ["Full-time", "Internship"]
    assert result.experience_levels == ["0-1 years", "3-5 years", "5-8 years"]
    assert result.date_posted == list(DATE_BUCKETS)
