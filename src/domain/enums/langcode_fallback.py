"""Langcode fallback policy for requests without an explicit langcode."""

from enum import Enum


class LangcodeFallback(str, Enum):
    """Which language to use when the caller does not name one.

    SITE_DEFAULT is deterministic and cache friendly. CURRENT follows the
    negotiated content language, so responses must vary on it.
    """

    SITE_DEFAULT = "site_default"
    CURRENT = "current"
