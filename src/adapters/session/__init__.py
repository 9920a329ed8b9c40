"""Session adapters - Sinks for the authenticated session."""

from .http import CookieTokenStorage, RecordingUserSink, RedirectNavigator

__all__ = ["CookieTokenStorage", "RecordingUserSink", "RedirectNavigator"]
