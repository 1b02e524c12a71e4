"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from memora.domain.model import Post, Tag
from memora.domain.value import MediaKind, MediaRef, PostId, TagId, TagName, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": tag.id,
        "name": tag.name.root,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_post(row: Dict[str, Any], tag_ids: list[UUID]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_ids: The post's tag ids, in position order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        tag_ids=[TagId(_uuid(tag_id)) for tag_id in tag_ids],
        year=row.get("year"),
        owner_id=UserId(_uuid(row["owner_id"])),
        media_ref=MediaRef(row["media_ref"]) if row.get("media_ref") else None,
        media_kind=MediaKind(row["media_kind"]) if row.get("media_kind") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a posts table dict (tags excluded).

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "description": post.description,
        "year": post.year,
        "owner_id": post.owner_id,
        "media_ref": post.media_ref,
        "media_kind": post.media_kind.value if post.media_kind else None,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def post_tags_rows(post: Post) -> list[Dict[str, Any]]:
    """Build post_tags rows for a post, one per tag position.

    Args:
        post: Post domain model

    Returns:
        Rows for the junction table
    """
    return [
        {"post_id": post.id, "tag_id": tag_id, "position": position}
        for position, tag_id in enumerate(post.tag_ids)
    ]
