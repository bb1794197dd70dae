"""Execution identity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Identity:
    """Who the current code runs as.

    Attributes:
        subject: Account identifier ("anonymous" for the anonymous user).
        is_anonymous: Whether this is the anonymous user.
    """

    subject: str
    is_anonymous: bool = False


ANONYMOUS = Identity(subject="anonymous", is_anonymous=True)
