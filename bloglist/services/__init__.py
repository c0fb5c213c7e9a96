from bloglist.services.auth import AuthService

__all__ = ["AuthService"]
