"""
Member dashboard client.

MemberApp is the client context: build it once with a MemberAPI and two
stores, then hand it to whatever drives the UI.
"""
from .api import MemberAPI, APIError
from .app import MemberApp, DashboardView, AnnouncementView, LoginRequired, PasswordFormError
from .storage import JSONFileStore, MemoryStore
from .theme import Theme, ThemeController, ThemeView

__all__ = [
    'MemberAPI',
    'APIError',
    'MemberApp',
    'DashboardView',
    'AnnouncementView',
    'LoginRequired',
    'PasswordFormError',
    'JSONFileStore',
    'MemoryStore',
    'Theme',
    'ThemeController',
    'ThemeView',
]
