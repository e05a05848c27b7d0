from __future__ import annotations


class LwApiError(Exception):
    """Base class for errors raised by lwapi itself.

    Transport and decode errors (httpx, pydantic) are not wrapped and reach the
    caller unchanged.
    """


class WindowConfigError(LwApiError, ValueError):
    """The search window is larger than the history the backend retains."""


class MalformedCursorError(LwApiError, ValueError):
    """A next-page locator could not be turned into a request path."""


class AuthError(LwApiError):
    """No access token could be obtained."""
