"""
Tests for merging an existing job collection with incoming records.
"""

from datetime import timedelta

from job_board.merge import merge_jobs


def _dump(jobs):
    return [j.model_dump() for j in jobs]


class TestMergeJobs:
    def test_incoming_wins_on_shared_id(self, make_job, now):
        old = make_job(id="x", title="Old", date_posted=now)
        new = make_job(id="x", title="New", date_posted=now - timedelta(days=10))

        merged = merge_jobs([old], [new])

        assert len(merged) == 1
        assert merged[0].title == "New"

    def test_union_of_distinct_ids(self, make_job, now):
        a = [make_job(id="1"), make_job(id="2")]
        b = [make_job(id="2", title="Updated"), make_job(id="3")]

        merged = merge_jobs(a, b)

        assert sorted(j.id for j in merged) == ["1", "2", "3"]
        by_id = {j.id: j for j in merged}
        assert by_id["2"] is b[0]
        assert by_id["1"] is a[0]

    def test_sorted_newest_first(self, make_job, now):
        jobs = [make_job(id=str(i), date_posted=now - timedelta(days=d)) for i, d in enumerate([3, 0, 7, 1])]

        merged = merge_jobs([], jobs)

        dates = [j.date_posted for j in merged]
        assert all(x >= y for x, y in zip(dates, dates[1:]))
        assert [j.id for j in merged] == ["1", "3", "0", "2"]

    def test_ties_keep_first_seen_order(self, make_job, now):
        merged = merge_jobs([make_job(id="b")], [make_job(id="a"), make_job(id="c")])

        assert [j.id for j in merged] == ["b", "a", "c"]

    def test_idempotent(self, make_job, now):
        a = [make_job(id="1", date_posted=now - timedelta(days=2)), make_job(id="2")]
        b = [make_job(id="2", title="Updated"), make_job(id="3", date_posted=now - timedelta(days=1))]

        once = merge_jobs(a, b)
        twice = merge_jobs(once, b)

        assert _dump(twice) == _dump(once)

    def test_inputs_are_not_modified(self, make_job):
        a = [make_job(id="1")]
        b = [make_job(id="2")]

        merge_jobs(a, b)

        assert [j.id for j in a] == ["1"]
        assert [j.id for j in b] == ["2"]

    def test_empty_inputs(self):
        assert merge_jobs([], []) == []
