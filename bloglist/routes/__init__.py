from bloglist.routes.blog import router as blogs_router
from bloglist.routes.login import router as login_router
from bloglist.routes.user import router as users_router

__all__ = ["blogs_router", "login_router", "users_router"]
