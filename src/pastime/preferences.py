"""User preferences kept in the persistence store."""

import logging
from dataclasses import dataclass

from .ports.persistence import PersistenceStore

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "system")
SOUNDS = ("default", "chime", "bell", "none")

THEME_KEY = "theme"
SOUND_KEY = "notificationSound"
NOTIFICATIONS_KEY = "notificationsEnabled"


@dataclass(frozen=True)
class Preferences:
    theme: str = "light"
    notification_sound: str = "default"
    notifications_enabled: bool = True


def validate_preferences(prefs: Preferences) -> None:
    """Raise ValueError if any field holds a value outside its allowed set."""
    if prefs.theme not in THEMES:
        raise ValueError(f"Unknown theme {prefs.theme!r}. Choose from: {', '.join(THEMES)}")
    if prefs.notification_sound not in SOUNDS:
        raise ValueError(
            f"Unknown notification sound {prefs.notification_sound!r}. Choose from: {', '.join(SOUNDS)}"
        )


def load_preferences(store: PersistenceStore) -> Preferences:
    """Read preferences, using the default for anything missing or invalid."""
    defaults = Preferences()

    theme = store.get(THEME_KEY)
    if theme not in THEMES:
        if theme is not None:
            logger.warning(f"Ignoring stored theme {theme!r}")
        theme = defaults.theme

    sound = store.get(SOUND_KEY)
    if sound not in SOUNDS:
        if sound is not None:
            logger.warning(f"Ignoring stored notification sound {sound!r}")
        sound = defaults.notification_sound

    enabled = store.get(NOTIFICATIONS_KEY)
    if enabled in ("true", "false"):
        notifications_enabled = enabled == "true"
    else:
        notifications_enabled = defaults.notifications_enabled

    return Preferences(theme=theme, notification_sound=sound, notifications_enabled=notifications_enabled)


def save_preferences(store: PersistenceStore, prefs: Preferences) -> None:
    validate_preferences(prefs)
    store.set_many(
        {
            THEME_KEY: prefs.theme,
            SOUND_KEY: prefs.notification_sound,
            NOTIFICATIONS_KEY: "true" if prefs.notifications_enabled else "false",
        }
    )
