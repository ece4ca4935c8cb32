"""Domain model for user preferences."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserPreferences:
    """Display preferences and onboarding state."""

    user_name: str = ""
    theme_color_name: str = "Blue"
    has_completed_onboarding: bool = False
    currency_symbol: str = "£"
    locale: str = "en_GB"


__all__ = ["UserPreferences"]
