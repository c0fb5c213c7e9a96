from bloglist.data.statistics import (
    AuthorBlogs,
    AuthorLikes,
    BlogStatistics,
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)

__all__ = [
    "AuthorBlogs",
    "AuthorLikes",
    "BlogStatistics",
    "favorite_blog",
    "most_blogs",
    "most_likes",
    "summarize",
    "total_likes",
]
