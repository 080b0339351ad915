"""Utility modules for musicmap.

- **errors** -- Exception hierarchy rooted at MusicMapError.
- **concurrency** -- Semaphore-throttled gather for the download stage.
- **logging** -- structlog setup with a dual-renderer pattern, writing to stderr.
- **text_normalizer** -- Artist-name folding, display cleanup and URL paths.
"""

from musicmap.utils.concurrency import build_download_semaphore, throttled_gather
from musicmap.utils.errors import (
    ConfigurationError,
    KnownArtistsLoadError,
    MusicMapError,
    PageFetchError,
    PipelineError,
)
from musicmap.utils.logging import configure_logging, get_logger
from musicmap.utils.text_normalizer import (
    artist_page_path,
    clean_display_name,
    fold_artist_name,
)

__all__ = [
    "ConfigurationError",
    "KnownArtistsLoadError",
    "MusicMapError",
    "PageFetchError",
    "PipelineError",
    "artist_page_path",
    "build_download_semaphore",
    "clean_display_name",
    "configure_logging",
    "fold_artist_name",
    "get_logger",
    "throttled_gather",
]
