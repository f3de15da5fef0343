"""Cartographer - storage core for chapter and permission management.

By default, Cartographer's internal logging is disabled when used as a library.
Library users can enable logging by calling cartographer.enable_logging().
"""

from cartographer.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
