"""Search domain service."""

from typing import Mapping, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from memora.domain.error import NotFoundError, ValidationError
from memora.domain.model.common import DomainModel
from memora.domain.model.post import Post
from memora.domain.ranking import FilterPolicy, ScorePolicy, rank_posts
from memora.domain.value import MediaRef, TagKey, TagName, UserId, WeightedTag

from .base import Service
from .media_service import MediaService
from .post_service import PostService
from .tag_service import TagService


class TagSuggester:
    """Interface to the external service that turns content into weighted tags."""

    async def suggest_for_text(
        self, text: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        """Suggest weighted tags for a free-text query.

        Args:
            text: What the user is looking for
            known_tags: Names of every tag in the registry
            year: Year the user is searching around

        Returns:
            Suggested tags with weights in [0, 1]
        """
        raise NotImplementedError

    async def suggest_for_image(
        self, image_url: str, known_tags: list[str], year: Optional[int] = None
    ) -> list[WeightedTag]:
        """Suggest weighted tags for an image.

        Args:
            image_url: URL the service can fetch the image from
            known_tags: Names of every tag in the registry
            year: Year the user is searching around

        Returns:
            Suggested tags with weights in [0, 1]
        """
        raise NotImplementedError


class SearchHit(DomainModel):
    """A ranked post with its resolved media URL."""

    post: Post
    media_url: Optional[str] = None
    year_rank: int
    score: float


class SearchService(Service):
    """Domain service for ranked post retrieval."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        media_service: MediaService,
        tag_suggester: TagSuggester,
        filter_policy: FilterPolicy = FilterPolicy.YEAR_WINDOW,
        score_policy: ScorePolicy = ScorePolicy.MAX,
        year_window: int = 2,
    ) -> None:
        """Initialize search service.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            media_service: Media domain service
            tag_suggester: External tag suggestion client
            filter_policy: Whether years bound the result
            score_policy: How tag weights combine
            year_window: Largest accepted year distance
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.media_service = media_service
        self.tag_suggester = tag_suggester
        self.filter_policy = filter_policy
        self.score_policy = score_policy
        self.year_window = year_window

    async def search(
        self,
        query: str,
        target_year: Optional[int],
        weights: Mapping[TagKey, float],
        owner_id: Optional[UserId] = None,
    ) -> list[SearchHit]:
        """Rank posts against weighted tags and a target year.

        Steps:
        1. Resolve tag names to identifiers (unknown names are ignored)
        2. Scan all posts, or only the owner's when ``owner_id`` is given
        3. Filter, score and order them
        4. Resolve media URLs concurrently, keeping the ranked order

        Args:
            query: Raw text the weights were derived from (not used for ranking)
            target_year: Year the search is centered on
            weights: Weight per tag name or tag id
            owner_id: Restrict the search to this user's posts

        Returns:
            Ranked hits, best first

        Raises:
            ValidationError: If the search is year-bounded and has no target year
        """
        with logfire.span(
            "search_service.search",
            query=query,
            target_year=target_year,
            weighted_tags=len(weights),
            owner_id=str(owner_id) if owner_id else None,
        ):
            if self.filter_policy == FilterPolicy.YEAR_WINDOW and target_year is None:
                raise ValidationError("A target year is required to search")

            resolved = await self.tag_service.resolve_weights(weights)
            if not resolved:
                logfire.info("No known tags in search, nothing to rank")
                return []

            if owner_id is not None:
                posts = await self.post_service.list_by_owner(owner_id)
            else:
                posts = await self.post_service.list_all()

            ranked = rank_posts(
                posts,
                target_year,
                resolved,
                filter_policy=self.filter_policy,
                score_policy=self.score_policy,
                year_window=self.year_window,
            )

            urls = await self.media_service.resolve_urls(
                [r.post.media_ref for r in ranked]
            )

            hits = [
                SearchHit(
                    post=r.post, media_url=url, year_rank=r.year_rank, score=r.score
                )
                for r, url in zip(ranked, urls)
            ]
            logfire.info("Search ranked", scanned=len(posts), matched=len(hits))
            return hits

    async def suggest_weights(
        self,
        query: Optional[str] = None,
        image_url: Optional[str] = None,
        year: Optional[int] = None,
    ) -> dict[TagName, float]:
        """Ask the tag suggester for weighted tags.

        Exactly one of ``query`` or ``image_url`` must be given. Every known
        tag name is sent along so the suggester can prefer existing tags.

        Args:
            query: What the user is looking for
            image_url: URL the suggester can fetch an image from
            year: Year the user is searching around

        Returns:
            Weight per tag name

        Raises:
            ValidationError: If neither or both inputs are given
        """
        if (query is None) == (image_url is None):
            raise ValidationError("Give either a text query or an image URL")

        with logfire.span(
            "search_service.suggest_weights",
            query=query,
            image_url=image_url,
            year=year,
        ):
            known_tags = await self._known_tag_names()
            if query is not None:
                suggestions = await self.tag_suggester.suggest_for_text(
                    query, known_tags, year
                )
            else:
                suggestions = await self.tag_suggester.suggest_for_image(
                    image_url, known_tags, year
                )
            return self._to_weights(suggestions)

    async def suggest_weights_for_image(
        self, media_ref: MediaRef, year: Optional[int] = None
    ) -> dict[TagName, float]:
        """Suggest weighted tags for an image already in media storage.

        Args:
            media_ref: Stored image reference
            year: Year the user is searching around

        Returns:
            Weight per tag name

        Raises:
            NotFoundError: If the media reference has no stored object
        """
        image_url = await self.media_service.resolve_url(media_ref)
        if image_url is None:
            raise NotFoundError("Media", media_ref)
        return await self.suggest_weights(image_url=image_url, year=year)

    async def _known_tag_names(self) -> list[str]:
        tags = await self.tag_service.get_all_tags(limit=None)
        return [tag.name.root for tag in tags]

    @staticmethod
    def _to_weights(suggestions: list[WeightedTag]) -> dict[TagName, float]:
        """Collapse suggestions into a mapping, keeping the best weight per tag."""
        weights: dict[TagName, float] = {}
        for suggestion in suggestions:
            try:
                name = TagName(suggestion.tag)
            except PydanticValidationError:
                logfire.warn("Dropping invalid suggested tag", tag=suggestion.tag)
                continue
            weights[name] = max(suggestion.weight, weights.get(name, 0.0))
        logfire.info("Weights suggested", count=len(weights))
        return weights
