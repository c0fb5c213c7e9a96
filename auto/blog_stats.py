#!/usr/bin/env python3
"""
Blog Statistics Script.

Loads every blog from the database and prints the aggregate statistics:
total likes, the favorite blog, the author with the most blogs and the
author with the most likes.

Usage:
    uv run python auto/blog_stats.py
    uv run python auto/blog_stats.py --database-url sqlite+aiosqlite:///./bloglist.db
    uv run python auto/blog_stats.py --json

Environment Variables:
    DATABASE_URL: Database to read from (default: value from settings)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path
from traceback import print_exc
from typing import Any

from orjson import OPT_INDENT_2, dumps

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from bloglist.configs import settings  # noqa: E402
from bloglist.data import BlogStatistics, summarize  # noqa: E402
from bloglist.db import Database  # noqa: E402
from bloglist.errors import DatabaseError  # noqa: E402
from bloglist.models import BlogDB  # noqa: E402
from bloglist.repositories import BlogRepository  # noqa: E402


def parse_args(argv: list[str] | None = None) -> Namespace:
    """
    Parse command-line arguments.

    Returns
    -------
    Namespace
        Parsed arguments.
    """
    parser = ArgumentParser(
        description="Print aggregate statistics over every stored blog.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="SQLAlchemy async URL of the database to read",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the statistics as JSON",
    )
    return parser.parse_args(argv)


async def load_blogs(database: Database) -> list[BlogDB]:
    """
    Fetch every blog from `database`.

    Parameters
    ----------
    database : Database
        Open storage handle.

    Returns
    -------
    list[BlogDB]
        All blogs, oldest first.
    """
    async with database.transaction() as session:
        return await BlogRepository(session).get_all()


def _blog_summary(blog: BlogDB | None) -> dict[str, Any] | None:
    if blog is None:
        return None
    return {"title": blog.title, "author": blog.author, "likes": blog.likes}


def statistics_to_dict(stats: BlogStatistics) -> dict[str, Any]:
    """Convert statistics to plain data for printing."""
    return {
        "totalLikes": stats.total_likes,
        "favoriteBlog": _blog_summary(stats.favorite_blog),  # type: ignore[arg-type]
        "mostBlogs": (
            {"author": stats.most_blogs.author, "blogs": stats.most_blogs.blogs}
            if stats.most_blogs
            else None
        ),
        "mostLikes": (
            {"author": stats.most_likes.author, "likes": stats.most_likes.likes}
            if stats.most_likes
            else None
        ),
    }


def render(stats: BlogStatistics) -> str:
    """
    Format statistics for the terminal.

    Parameters
    ----------
    stats : BlogStatistics
        Aggregation results.

    Returns
    -------
    str
        Human readable report.
    """
    data = statistics_to_dict(stats)
    lines = ["=" * 60, "Blog Statistics", "=" * 60]
    lines.append(f"Total likes:   {data['totalLikes']}")

    favorite = data["favoriteBlog"]
    if favorite:
        lines.append(
            f"Favorite blog: {favorite['title']} by {favorite['author']} "
            f"({favorite['likes']} likes)",
        )
    else:
        lines.append("Favorite blog: (none)")

    most_blogs = data["mostBlogs"]
    lines.append(
        f"Most blogs:    {most_blogs['author']} ({most_blogs['blogs']} blogs)"
        if most_blogs
        else "Most blogs:    (none)",
    )

    most_likes = data["mostLikes"]
    lines.append(
        f"Most likes:    {most_likes['author']} ({most_likes['likes']} likes)"
        if most_likes
        else "Most likes:    (none)",
    )
    lines.append("-" * 60)
    return "\n".join(lines)


async def run_report(database_url: str, *, as_json: bool = False) -> str:
    """
    Load blogs from `database_url` and build the report.

    The database is only read; a URL without a `blogs` table is an error
    rather than a fresh empty store.

    Parameters
    ----------
    database_url : str
        SQLAlchemy async database URL.
    as_json : bool
        Whether to produce JSON instead of text.

    Returns
    -------
    str
        The formatted report.

    Raises
    ------
    DatabaseError
        If the database has no `blogs` table.
    """
    database = Database(settings.model_copy(update={"DATABASE_URL": database_url}))
    try:
        if not await database.has_table(BlogDB.__tablename__):
            msg = f"no blogs table in {database_url}"
            raise DatabaseError(msg)
        stats = summarize(await load_blogs(database))
    finally:
        await database.close()

    if as_json:
        return dumps(statistics_to_dict(stats), option=OPT_INDENT_2).decode()
    return render(stats)


def main() -> None:
    args = parse_args()
    try:
        print(asyncio_run(run_report(args.database_url, as_json=args.json)))
    except Exception as e:  # noqa: BLE001
        print(f"\n❌ Failed to compute statistics: {e}")
        print_exc()
        sys_exit(1)


if __name__ == "__main__":
    main()
