"""AccountSwitcher protocol for the ambient execution identity."""

from typing import Protocol

from src.domain.entities import Identity


class AccountSwitcher(Protocol):
    """Execution identity protocol (port).

    Every switch_to_anonymous() must be paired with exactly one
    switch_back(), which restores the identity active before the switch.
    """

    def switch_to_anonymous(self) -> None:
        """Run subsequent work as the anonymous user."""
        ...

    def switch_back(self) -> None:
        """Restore the identity that was active before the last switch."""
        ...

    def current_identity(self) -> Identity:
        """Identity the current code runs as."""
        ...
