"""Search result representation."""

from pydantic import BaseModel, Field

from memora.application.usecase.post.view import PostView
from memora.domain.service import SearchHit, TagService


class SearchResultItem(PostView):
    """A ranked post."""

    year_rank: int
    score: float


class SearchResults(BaseModel):
    """Ranked posts, best first."""

    results: list[SearchResultItem]


async def build_results(hits: list[SearchHit], tag_service: TagService) -> SearchResults:
    """Decorate search hits with tag names for display.

    Args:
        hits: Ranked hits
        tag_service: Tag service used to look up display names

    Returns:
        Search results in hit order
    """
    tag_names = await tag_service.get_tag_names_by_ids(
        tag_id for hit in hits for tag_id in hit.post.tag_ids
    )
    return SearchResults(
        results=[
            SearchResultItem(
                **PostView.build(hit.post, tag_names, hit.media_url).model_dump(),
                year_rank=hit.year_rank,
                score=hit.score,
            )
            for hit in hits
        ]
    )


class WeightItem(BaseModel):
    """A suggested tag weight."""

    tag: str
    weight: float = Field(ge=0.0, le=1.0)
