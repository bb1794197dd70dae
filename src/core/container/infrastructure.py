"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Configuration snapshot (FrontendConfig)
- Secrets (env)
- Logging (console)
- Execution identity (ContextVar account switcher)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.account_switcher import AccountSwitcher
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.secrets_protocol import SecretsProtocol
    from src.domain.value_objects import FrontendConfig


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_frontend_config() -> "FrontendConfig":
    """Get the configuration snapshot (app-scoped).

    Handlers receive this immutable snapshot instead of reading settings.
    Tests override it via app.dependency_overrides.

    Returns:
        FrontendConfig built from settings.
    """
    return settings.frontend_config()


@lru_cache()
def get_secrets() -> "SecretsProtocol":
    """Get secrets manager singleton (app-scoped).

    Container owns factory logic - decides which adapter based on
    settings.secrets_backend.

    Returns:
        Secrets manager implementing SecretsProtocol.

    Raises:
        ValueError: If the configured backend is unsupported.

    Usage:
        # Presentation Layer (FastAPI Depends)
        secrets: SecretsProtocol = Depends(get_secrets)
    """
    backend = settings.secrets_backend.strip().lower()

    if backend == "env":
        from src.infrastructure.secrets.env_adapter import EnvAdapter

        return EnvAdapter()

    raise ValueError(f"Unsupported SECRETS_BACKEND: {backend}. Supported: 'env'")


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - testing/ci: ConsoleAdapter (JSON)
    - development/production: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    env = settings.environment.value
    use_json = env in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_account_switcher() -> "AccountSwitcher":
    """Get the execution identity switcher (app-scoped).

    The switcher is stateless; identities live in a ContextVar, so one
    instance serves every request.
    """
    from src.infrastructure.security.account_switcher import ContextVarAccountSwitcher

    return ContextVarAccountSwitcher()
