"""Security infrastructure adapters.

- ContextVarAccountSwitcher: ambient execution identity
"""

from src.infrastructure.security.account_switcher import ContextVarAccountSwitcher

__all__ = ["ContextVarAccountSwitcher"]
