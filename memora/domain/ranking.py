"""Tag-weighted post ranking.

Posts are matched against a weighted set of tags and ordered by how close
their year is to the searched year, then by how strongly their best tag
matches. The whole computation is a pure function over an in-memory list of
posts: it reads nothing, writes nothing and never mutates its inputs.

    ranked = rank_posts(posts, target_year=1973, weights={cars_id: 1.0})
    [r.post.id for r in ranked]
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Sequence

from memora.domain.model.post import Post
from memora.domain.value import TagId

DEFAULT_YEAR_WINDOW = 2


class FilterPolicy(str, Enum):
    """Which posts take part in ranking."""

    # Only posts with a year within the window around the target year
    YEAR_WINDOW = "year_window"
    # Every tag-matching post, years are ignored
    UNBOUNDED = "unbounded"


class ScorePolicy(str, Enum):
    """How a post's tag weights combine into one score."""

    # The single best-matching tag decides
    MAX = "max"
    # All matching tags add up
    SUM = "sum"


@dataclass(frozen=True)
class RankedPost:
    """A post that survived filtering, with its sort keys."""

    post: Post
    year_rank: int
    score: float


def year_proximity(
    year: Optional[int], target_year: int, window: int = DEFAULT_YEAR_WINDOW
) -> Optional[int]:
    """Distance in years between a post and the target, if within the window.

    Args:
        year: The post's year, None if it has none
        target_year: Year the search is centered on
        window: Largest accepted distance

    Returns:
        0 for an exact match up to ``window``, None when the post has no year
        or is further away
    """
    if year is None:
        return None
    distance = abs(year - target_year)
    if distance <= window:
        return distance
    return None


def tag_score(
    tag_ids: Iterable[TagId],
    weights: Mapping[TagId, float],
    policy: ScorePolicy = ScorePolicy.MAX,
) -> float:
    """Score a post's tags against a weight mapping.

    Tags without a weight count as 0. A tag listed twice on the same post
    counts once.

    Args:
        tag_ids: The post's tags
        weights: Weight per tag
        policy: How weights combine

    Returns:
        The combined score, 0.0 if nothing matches
    """
    values = [weights.get(tag_id, 0.0) for tag_id in dict.fromkeys(tag_ids)]
    if policy == ScorePolicy.SUM:
        return float(sum(values))
    return float(max(values, default=0.0))


def has_weighted_tag(tag_ids: Iterable[TagId], weights: Mapping[TagId, float]) -> bool:
    """Whether any of the tags appears in the weight mapping."""
    return any(tag_id in weights for tag_id in tag_ids)


def rank_posts(
    posts: Sequence[Post],
    target_year: Optional[int],
    weights: Mapping[TagId, float],
    *,
    filter_policy: FilterPolicy = FilterPolicy.YEAR_WINDOW,
    score_policy: ScorePolicy = ScorePolicy.MAX,
    year_window: int = DEFAULT_YEAR_WINDOW,
) -> list[RankedPost]:
    """Filter, score and order posts for a search.

    A post is kept when at least one of its tags is a key of ``weights`` and,
    under ``FilterPolicy.YEAR_WINDOW``, its year is at most ``year_window``
    away from ``target_year``. Kept posts are ordered by year distance
    ascending, then by tag score descending. Posts with equal keys keep
    their input order.

    Under ``FilterPolicy.UNBOUNDED`` every year rank is 0 and the order comes
    from the score alone.

    Args:
        posts: Candidate posts
        target_year: Year the search is centered on, may be None when unbounded
        weights: Weight per tag identifier
        filter_policy: Whether years bound the result
        score_policy: How tag weights combine
        year_window: Largest accepted year distance

    Returns:
        Ranked posts, best first

    Raises:
        ValueError: If a year-bounded search has no target year
    """
    if filter_policy == FilterPolicy.YEAR_WINDOW and target_year is None:
        raise ValueError("A year-bounded search needs a target year")

    if not weights:
        return []

    ranked: list[RankedPost] = []
    for post in posts:
        if not has_weighted_tag(post.tag_ids, weights):
            continue

        if filter_policy == FilterPolicy.YEAR_WINDOW:
            proximity = year_proximity(post.year, target_year, year_window)
            if proximity is None:
                continue
            year_rank = proximity
        else:
            year_rank = 0

        ranked.append(
            RankedPost(
                post=post,
                year_rank=year_rank,
                score=tag_score(post.tag_ids, weights, score_policy),
            )
        )

    ranked.sort(key=lambda r: (r.year_rank, -r.score))
    return ranked
