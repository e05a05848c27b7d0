"""lwapi package: app/core/infra/shared.

Expose the library-friendly API client at the package level.
"""

from .version import __version__
from .app.api import AppConfig, LwApiClient

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "LwApiClient",
    "AppConfig",
    "__version__",
]
