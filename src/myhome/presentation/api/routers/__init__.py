from myhome.presentation.api.routers.auth import router as auth_router
from myhome.presentation.api.routers.communities import router as communities_router
from myhome.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "communities_router",
    "users_router",
]
