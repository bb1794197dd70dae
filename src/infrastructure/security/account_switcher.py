"""Context-variable account switcher.

Keeps the execution identity in a ContextVar holding a stack, so each
asyncio task (and each request) sees its own identity and nested switches
unwind in order.
"""

from contextvars import ContextVar

from src.domain.entities import ANONYMOUS, Identity

_identity_stack: ContextVar[tuple[Identity, ...]] = ContextVar(
    "identity_stack", default=()
)


class ContextVarAccountSwitcher:
    """AccountSwitcher backed by a ContextVar.

    Args:
        default_identity: Identity reported when nothing has been switched
            in. The service has no login, so requests run as anonymous.
    """

    def __init__(self, default_identity: Identity = ANONYMOUS) -> None:
        self._default_identity = default_identity

    def switch_to(self, identity: Identity) -> None:
        """Push an identity; undo with switch_back()."""
        _identity_stack.set((*_identity_stack.get(), identity))

    def switch_to_anonymous(self) -> None:
        self.switch_to(ANONYMOUS)

    def switch_back(self) -> None:
        """Pop the last switched identity.

        Raises:
            RuntimeError: If there is no switch to undo.
        """
        stack = _identity_stack.get()
        if not stack:
            raise RuntimeError("switch_back() called without a matching switch")
        _identity_stack.set(stack[:-1])

    def current_identity(self) -> Identity:
        stack = _identity_stack.get()
        return stack[-1] if stack else self._default_identity
