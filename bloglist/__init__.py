"""Blog List backend: a blog listing REST API with token authentication."""

__version__ = "1.0.0"
