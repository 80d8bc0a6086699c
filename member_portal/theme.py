"""
Dashboard theme preference.
"""
from dataclasses import dataclass
from enum import Enum

THEME_KEY = 'theme'


class Theme(str, Enum):
    LIGHT = 'light'
    DARK = 'dark'

    @property
    def opposite(self):
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


@dataclass(frozen=True)
class ThemeView:
    """Everything the page shows for a theme"""
    body_class: str
    icon: str
    menu_label: str


def render_theme(theme):
    """The single mapping from theme to what the page and menu display"""
    if theme is Theme.DARK:
        return ThemeView(body_class='dark-mode', icon='☀️', menu_label='Light Mode')
    return ThemeView(body_class='', icon='🌙', menu_label='Dark Mode')


class ThemeController:
    """
    Owns the theme preference. apply() is the only code path that changes
    the theme: it persists the choice and returns the view to render.
    """

    def __init__(self, local_store):
        self.local_store = local_store
        self.current = self._saved()

    def _saved(self):
        try:
            return Theme(self.local_store.get(THEME_KEY, Theme.LIGHT.value))
        except ValueError:
            return Theme.LIGHT

    def apply(self, theme):
        theme = Theme(theme)
        self.current = theme
        self.local_store.set(THEME_KEY, theme.value)
        return render_theme(theme)

    def toggle(self):
        return self.apply(self.current.opposite)

    @property
    def view(self):
        return render_theme(self.current)
