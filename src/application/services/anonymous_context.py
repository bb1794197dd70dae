"""Scoped run-as-anonymous guard."""

from collections.abc import Iterator
from contextlib import contextmanager

from src.domain.protocols import AccountSwitcher


@contextmanager
def run_as_anonymous(switcher: AccountSwitcher) -> Iterator[None]:
    """Run the enclosed block as the anonymous user.

    The previous identity is restored on every exit path, including
    exceptions and early returns.

    Usage:
        with run_as_anonymous(switcher):
            visible = await access.can_view_entity(entity)
    """
    switcher.switch_to_anonymous()
    try:
        yield
    finally:
        switcher.switch_back()
