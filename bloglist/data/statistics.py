"""
Blog list statistics.

Pure aggregation helpers over an already-fetched sequence of blog records.
Records may be mappings (``{"author": ..., "likes": ...}``) or objects
exposing ``author`` and ``likes`` attributes, such as ``BlogDB`` rows or
``BlogResponse`` models. Nothing here performs I/O or mutates its input.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

type BlogRecord = Mapping[str, Any] | object


@dataclass(frozen=True)
class AuthorBlogs:
    """Author paired with the number of records they wrote."""

    author: str
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    """Author paired with the sum of likes across their records."""

    author: str
    likes: int


@dataclass(frozen=True)
class BlogStatistics:
    """All aggregation results for one list of records."""

    total_likes: int
    favorite_blog: BlogRecord | None
    most_blogs: AuthorBlogs | None
    most_likes: AuthorLikes | None


def _field(blog: BlogRecord, name: str) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: BlogRecord) -> int:
    # Records cleared by a full-replace update carry no likes.
    return _field(blog, "likes") or 0


def _first_to_reach_max(totals: Iterable[tuple[str, int]]) -> tuple[str, int] | None:
    """Return the first (key, value) whose running value strictly beats every earlier one."""
    best: tuple[str, int] | None = None
    for key, value in totals:
        if best is None or value > best[1]:
            best = (key, value)
    return best


def total_likes(blogs: Sequence[BlogRecord]) -> int:
    """
    Sum the likes of every record.

    Args:
        blogs: Blog records.

    Returns:
        int: Total likes, ``0`` for an empty sequence.
    """
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[BlogRecord]) -> BlogRecord | None:
    """
    Return the record with the strictly greatest likes.

    Earlier records win ties: a later record only replaces the current
    favorite when its likes exceed the running maximum.

    Args:
        blogs: Blog records.

    Returns:
        BlogRecord | None: The favorite record, ``None`` when no record has likes.
    """
    most_likes = 0
    favorite: BlogRecord | None = None

    for blog in blogs:
        likes = _likes(blog)
        if likes > most_likes:
            favorite = blog
            most_likes = likes

    return favorite


def most_blogs(blogs: Sequence[BlogRecord]) -> AuthorBlogs | None:
    """
    Find the author with the most records.

    Ties go to the author who reached the maximum count first in input order.

    Args:
        blogs: Blog records.

    Returns:
        AuthorBlogs | None: Author and count, ``None`` for an empty sequence.
    """
    counts: dict[str, int] = {}
    running: list[tuple[str, int]] = []

    for blog in blogs:
        author = _field(blog, "author")
        counts[author] = counts.get(author, 0) + 1
        running.append((author, counts[author]))

    best = _first_to_reach_max(running)
    if best is None:
        return None
    return AuthorBlogs(author=best[0], blogs=best[1])


def most_likes(blogs: Sequence[BlogRecord]) -> AuthorLikes | None:
    """
    Find the author whose records collected the most likes in total.

    Ties go to the author who reached the maximum total first in input order.

    Args:
        blogs: Blog records.

    Returns:
        AuthorLikes | None: Author and total likes, ``None`` for an empty sequence.
    """
    totals: dict[str, int] = {}
    running: list[tuple[str, int]] = []

    for blog in blogs:
        author = _field(blog, "author")
        totals[author] = totals.get(author, 0) + _likes(blog)
        running.append((author, totals[author]))

    best = _first_to_reach_max(running)
    if best is None:
        return None
    return AuthorLikes(author=best[0], likes=best[1])


def summarize(blogs: Sequence[BlogRecord]) -> BlogStatistics:
    """Compute every statistic for `blogs`."""
    return BlogStatistics(
        total_likes=total_likes(blogs),
        favorite_blog=favorite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
