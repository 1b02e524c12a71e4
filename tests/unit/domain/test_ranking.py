"""Unit tests for tag-weighted post ranking."""

import pytest

from memora.domain.ranking import (
    FilterPolicy,
    ScorePolicy,
    rank_posts,
    tag_score,
    year_proximity,
)
from tests.conftest import make_post, new_tag_id

CARS = new_tag_id()
TRUCKS = new_tag_id()
BOATS = new_tag_id()


def ids(ranked):
    return [r.post.id for r in ranked]


class TestYearProximity:
    """Tests for year_proximity."""

    def test_exact_year_is_zero(self):
        assert year_proximity(1973, 1973) == 0

    def test_window_edge_is_inclusive(self):
        assert year_proximity(1975, 1973) == 2
        assert year_proximity(1971, 1973) == 2

    def test_outside_window(self):
        assert year_proximity(1970, 1973) is None

    def test_missing_year(self):
        assert year_proximity(None, 1973) is None

    def test_custom_window(self):
        assert year_proximity(1963, 1973, window=10) == 10
        assert year_proximity(1962, 1973, window=10) is None


class TestTagScore:
    """Tests for tag_score."""

    def test_max_takes_best_single_tag(self):
        weights = {CARS: 0.5, TRUCKS: 0.4}
        assert tag_score([CARS, TRUCKS], weights) == 0.5

    def test_sum_adds_matching_tags(self):
        weights = {CARS: 0.5, TRUCKS: 0.4}
        assert tag_score([CARS, TRUCKS], weights, ScorePolicy.SUM) == pytest.approx(0.9)

    def test_duplicate_tags_count_once(self):
        weights = {CARS: 0.5}
        assert tag_score([CARS, CARS], weights, ScorePolicy.SUM) == 0.5

    def test_unweighted_tags_are_zero(self):
        assert tag_score([BOATS], {CARS: 1.0}) == 0.0
        assert tag_score([], {CARS: 1.0}) == 0.0


class TestRankPostsScenarios:
    """Worked examples of the ranking rules."""

    def test_post_outside_year_window_is_excluded(self):
        """Years 1975 and 1970 against 1973: only the first is within 2 years."""
        post1 = make_post([CARS], year=1975)
        post2 = make_post([TRUCKS], year=1970)

        ranked = rank_posts([post1, post2], 1973, {CARS: 1.0, TRUCKS: 0.9})

        assert ids(ranked) == [post1.id]
        assert ranked[0].year_rank == 2

    def test_equal_year_rank_orders_by_score(self):
        post1 = make_post([CARS], year=1973)
        post2 = make_post([TRUCKS], year=1973)

        ranked = rank_posts([post1, post2], 1973, {CARS: 0.5, TRUCKS: 0.9})

        assert ids(ranked) == [post2.id, post1.id]
        assert [r.score for r in ranked] == [0.9, 0.5]

    def test_post_without_tag_overlap_is_excluded(self):
        post = make_post([], year=1973)

        assert rank_posts([post], 1973, {CARS: 1.0}) == []

    def test_post_without_year_is_excluded(self):
        post = make_post([CARS], year=None)

        assert rank_posts([post], 1973, {CARS: 1.0}) == []


class TestRankPostsProperties:
    """Ordering and filtering guarantees."""

    def test_max_not_sum(self):
        strong = make_post([CARS], year=1973)
        broad = make_post([TRUCKS, BOATS], year=1973)

        ranked = rank_posts(
            [broad, strong], 1973, {CARS: 0.9, TRUCKS: 0.5, BOATS: 0.4}
        )

        assert ids(ranked) == [strong.id, broad.id]
        assert ranked[1].score == 0.5

    def test_year_rank_beats_score(self):
        near = make_post([TRUCKS], year=1973)
        far = make_post([CARS], year=1974)

        ranked = rank_posts([far, near], 1973, {CARS: 1.0, TRUCKS: 0.1})

        assert ids(ranked) == [near.id, far.id]

    def test_every_result_has_a_weighted_tag_and_is_in_window(self):
        posts = [
            make_post([CARS], year=y) for y in range(1960, 1990)
        ] + [make_post([BOATS], year=1973)]

        ranked = rank_posts(posts, 1973, {CARS: 1.0})

        assert len(ranked) == 5
        assert all(CARS in r.post.tag_ids for r in ranked)
        assert all(abs(r.post.year - 1973) <= 2 for r in ranked)
        assert [r.year_rank for r in ranked] == sorted(r.year_rank for r in ranked)

    def test_zero_weight_still_matches(self):
        post = make_post([CARS], year=1973)

        ranked = rank_posts([post], 1973, {CARS: 0.0})

        assert ids(ranked) == [post.id]
        assert ranked[0].score == 0.0

    def test_ranking_twice_gives_same_sequence(self):
        posts = [
            make_post([CARS], year=1973),
            make_post([TRUCKS], year=1973),
            make_post([CARS, TRUCKS], year=1972),
            make_post([BOATS], year=1974),
            make_post([TRUCKS], year=1975),
        ]
        snapshot = list(posts)
        weights = {CARS: 0.6, TRUCKS: 0.6, BOATS: 0.2}

        first = rank_posts(posts, 1973, weights)
        second = rank_posts(posts, 1973, weights)

        assert ids(first) == ids(second)
        assert [(r.year_rank, r.score) for r in first] == [
            (r.year_rank, r.score) for r in second
        ]
        assert posts == snapshot

    def test_equal_keys_keep_input_order(self):
        first = make_post([CARS], year=1972)
        second = make_post([CARS], year=1974)

        ranked = rank_posts([first, second], 1973, {CARS: 0.7})

        assert ids(ranked) == [first.id, second.id]

    def test_empty_weights_return_nothing(self):
        assert rank_posts([make_post([CARS], year=1973)], 1973, {}) == []

    def test_dangling_tag_is_ignored(self):
        """A tag id no longer in the registry simply scores nothing."""
        post = make_post([new_tag_id(), CARS], year=1973)

        ranked = rank_posts([post], 1973, {CARS: 0.3})

        assert ranked[0].score == 0.3

    def test_inputs_are_not_mutated(self):
        posts = [make_post([TRUCKS], year=1973), make_post([CARS], year=1973)]
        weights = {CARS: 1.0, TRUCKS: 0.5}
        before = list(posts)

        rank_posts(posts, 1973, weights)

        assert posts == before
        assert weights == {CARS: 1.0, TRUCKS: 0.5}

    def test_year_window_requires_target_year(self):
        with pytest.raises(ValueError):
            rank_posts([make_post([CARS], year=1973)], None, {CARS: 1.0})


class TestRankPostsPolicies:
    """Alternative filter and score policies."""

    def test_unbounded_ignores_years(self):
        no_year = make_post([CARS], year=None)
        far = make_post([TRUCKS], year=1900)

        ranked = rank_posts(
            [no_year, far],
            None,
            {CARS: 0.2, TRUCKS: 0.8},
            filter_policy=FilterPolicy.UNBOUNDED,
        )

        assert ids(ranked) == [far.id, no_year.id]
        assert {r.year_rank for r in ranked} == {0}

    def test_sum_policy_rewards_overlap(self):
        strong = make_post([CARS], year=1973)
        broad = make_post([TRUCKS, BOATS], year=1973)

        ranked = rank_posts(
            [strong, broad],
            1973,
            {CARS: 0.8, TRUCKS: 0.5, BOATS: 0.4},
            score_policy=ScorePolicy.SUM,
        )

        assert ids(ranked) == [broad.id, strong.id]

    def test_wider_window(self):
        post = make_post([CARS], year=1963)

        assert rank_posts([post], 1973, {CARS: 1.0}) == []
        assert ids(rank_posts([post], 1973, {CARS: 1.0}, year_window=10)) == [post.id]
