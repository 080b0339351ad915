"""Custom exception hierarchy for musicmap.

All application exceptions inherit from :class:`MusicMapError`, which
carries an optional ``provider_name`` so error handlers can identify which
external service (e.g. "music_map") caused the failure.

The hierarchy is organized by pipeline stage:

    MusicMapError  (base -- catch-all for any musicmap error)
    +-- KnownArtistsLoadError  (input: the known-artist list file)
    +-- ConfigurationError     (startup / invalid settings)
    +-- PageFetchError         (Fetcher: one artist page could not be retrieved)
    +-- PipelineError          (orchestration / stage completion)

Only the first two abort a run.  ``PageFetchError`` is raised inside the
page source and absorbed there, so a failed artist becomes an empty page
instead of a failed run.
"""


class MusicMapError(Exception):
    """Base exception for all musicmap errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which external service triggered the
    error.  ``__str__`` prefixes the provider name in brackets, e.g.
    ``[music_map] HTTP 404``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Input / configuration errors (fatal)
# ---------------------------------------------------------------------------

class KnownArtistsLoadError(MusicMapError):
    """Raised when the known-artist list file is missing, unreadable, or not UTF-8."""

    def __init__(
        self,
        message: str = "Could not load the known artist list",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(MusicMapError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Per-item and orchestration errors
# ---------------------------------------------------------------------------

class PageFetchError(MusicMapError):
    """Raised when a single artist page cannot be retrieved.

    Carries the HTTP ``status_code`` when the server answered, or ``None``
    for timeouts and transport failures.
    """

    def __init__(
        self,
        message: str = "Artist page download failed",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code


class PipelineError(MusicMapError):
    """Raised when pipeline orchestration fails (a stage did not drain, etc.)."""

    def __init__(
        self,
        message: str = "Pipeline orchestration failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
