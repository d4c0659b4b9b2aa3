from .auth import LoginView
from .manage import UserViewSet
from .me import MeView

__all__ = [
    "LoginView",
    "MeView",
    "UserViewSet",
]
