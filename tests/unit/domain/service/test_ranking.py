"""Unit tests for feed ranking helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.service.ranking import age_in_hours, next_page, rank, total_pages

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestRank:
    """Tests for the rank formula."""

    def test_rank_of_scored_ten_hour_old_post(self):
        """score 5, 10h old: 6 / 11 ** 1.5."""
        value = rank(5, NOW - timedelta(hours=10), NOW)

        assert value == pytest.approx(6 / 11**1.5)
        assert value == pytest.approx(0.1645, abs=1e-4)

    def test_brand_new_zero_score_post_ranks_one(self):
        assert rank(0, NOW, NOW) == pytest.approx(1.0)

    def test_higher_score_ranks_higher_at_same_age(self):
        created = NOW - timedelta(hours=3)

        assert rank(10, created, NOW) > rank(2, created, NOW)

    def test_older_post_ranks_lower_at_same_score(self):
        assert rank(4, NOW - timedelta(hours=1), NOW) > rank(
            4, NOW - timedelta(hours=20), NOW
        )

    def test_negative_score_can_rank_below_zero(self):
        assert rank(-3, NOW - timedelta(hours=2), NOW) < 0

    def test_future_post_treated_as_new(self):
        """Clock skew never produces an age below zero."""
        assert rank(0, NOW + timedelta(hours=5), NOW) == pytest.approx(1.0)

    def test_gravity_and_offset_are_tunable(self):
        created = NOW - timedelta(hours=3)

        value = rank(1, created, NOW, gravity=2.0, time_offset=2.0)

        assert value == pytest.approx(2 / 25)

    def test_age_in_hours(self):
        assert age_in_hours(NOW - timedelta(minutes=90), NOW) == pytest.approx(1.5)


class TestPagination:
    """Tests for page arithmetic."""

    def test_total_pages_rounds_up(self):
        assert total_pages(15, 10) == 2
        assert total_pages(20, 10) == 2
        assert total_pages(0, 10) == 0

    def test_next_page_mid_feed(self):
        assert next_page(1, 10, 15) == 2

    def test_next_page_is_none_on_last_page(self):
        assert next_page(2, 10, 15) is None

    def test_next_page_is_none_past_the_end(self):
        assert next_page(5, 10, 15) is None

    def test_next_page_is_none_for_empty_feed(self):
        assert next_page(1, 10, 0) is None
