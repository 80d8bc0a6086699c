"""
Member dashboard client context.
"""
import logging
from dataclasses import dataclass
from datetime import date

from apps.membership.status import compute_status
from .api import APIError
from .theme import ThemeController

logger = logging.getLogger(__name__)

FIRST_LOGIN_KEY = 'isFirstLogin'
MIN_PASSWORD_LENGTH = 4
MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

ANNOUNCEMENT_ICONS = {
    'info': 'ℹ️',
    'important': '⚠️',
    'offer': '🏷️',
    'event': '🎉',
    'maintenance': '🔧',
}
DEFAULT_ANNOUNCEMENT_ICON = ANNOUNCEMENT_ICONS['info']


class LoginRequired(Exception):
    """No member token; the caller should show the login screen"""


class PasswordFormError(Exception):
    """Password form input rejected before reaching the server"""


@dataclass(frozen=True)
class DashboardView:
    name: str
    member_id: str
    plan: str
    photo: str
    days_remaining: int
    expiry_label: str
    status_text: str
    status_class: str
    show_password_prompt: bool

    @property
    def badge_class(self):
        return f'status-badge status-{self.status_class}'

    @property
    def card_class(self):
        return f'status-card card-{self.status_class}'


@dataclass(frozen=True)
class AnnouncementView:
    type: str
    icon: str
    title: str
    message: str


def format_expiry(value):
    """'2026-10-19' -> '19 Oct 2026'"""
    day = date.fromisoformat(str(value)[:10])
    return f'{day.day} {MONTH_NAMES[day.month - 1]} {day.year}'


class MemberApp:
    """
    Client context for the member dashboard.

    local_store holds the token and theme across runs; session_store holds
    the first-login flag for the current session only.
    """

    def __init__(self, api, local_store, session_store):
        self.api = api
        self.local_store = local_store
        self.session_store = session_store
        self.theme = ThemeController(local_store)
        self.member_profile = None

    @property
    def is_logged_in(self):
        return bool(self.api.token)

    def login(self, member_id, password):
        body = self.api.login(member_id, password)
        data = body['data']
        self.api.set_token(data['token'])
        self.session_store.set(FIRST_LOGIN_KEY, bool(data['isFirstLogin']))
        self.member_profile = data['customer']
        return data

    def load_dashboard(self, today=None):
        if not self.is_logged_in:
            raise LoginRequired()

        self.member_profile = self.api.get_profile()['data']['customer']
        profile = self.member_profile
        validity = date.fromisoformat(str(profile['validity'])[:10])
        status = compute_status(validity, today or date.today())

        return DashboardView(
            name=profile['name'],
            member_id=profile['memberId'],
            plan=profile['plan'],
            photo=profile.get('photo') or '',
            days_remaining=status.days_remaining,
            expiry_label=format_expiry(validity),
            status_text=status.text,
            status_class=status.status_class.value,
            show_password_prompt=self.session_store.get(FIRST_LOGIN_KEY) is True,
        )

    def load_announcements(self):
        """Active announcements for the banner; empty when they cannot be loaded"""
        try:
            announcements = self.api.get_active_announcements()['data'] or []
        except APIError as e:
            logger.error(f"Failed to load announcements: {e.message}")
            return []

        return [
            AnnouncementView(
                type=item.get('type', 'info'),
                icon=ANNOUNCEMENT_ICONS.get(item.get('type'), DEFAULT_ANNOUNCEMENT_ICON),
                title=item['title'],
                message=item['message'],
            )
            for item in announcements
        ]

    def change_password(self, current_password, new_password, confirm_password):
        if new_password != confirm_password:
            raise PasswordFormError('Passwords do not match!')
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise PasswordFormError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')

        body = self.api.change_password(current_password, new_password)
        self.api.set_token(body['data']['token'])
        self.session_store.remove(FIRST_LOGIN_KEY)

    def toggle_theme(self):
        return self.theme.toggle()

    def logout(self):
        self.api.clear_token()
        self.session_store.clear()
        self.member_profile = None
