"""Routes feed access check.

The feed is build tooling, guarded by a shared secret sent in the
X-Routes-Secret header. Outcomes are kept distinct:

    feed disabled          -> NOT_FOUND
    no secret configured   -> CONFIGURATION_ERROR
    wrong or missing header -> FORBIDDEN
"""

import hmac

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.constants import ROUTES_SECRET_PATH
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, SecretsProtocol
from src.domain.value_objects import FrontendConfig


class RoutesFeedAccess:
    """Verify a routes feed request.

    Dependencies (injected via constructor):
        - FrontendConfig: routes_enabled flag
        - SecretsProtocol: Source of the shared secret
        - LoggerProtocol: Denials and misconfiguration (never the secret)
    """

    def __init__(
        self,
        config: FrontendConfig,
        secrets: SecretsProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._config = config
        self._secrets = secrets
        self._logger = logger

    def verify(self, provided_secret: str | None) -> Result[None, ApplicationError]:
        """Check the feed is enabled and the provided secret matches.

        Args:
            provided_secret: Value of the X-Routes-Secret header.

        Returns:
            Success(None) when access is granted.
            Failure(ApplicationError) with NOT_FOUND, CONFIGURATION_ERROR
            or FORBIDDEN otherwise.
        """
        if not self._config.routes_enabled:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="Routes feed is disabled",
                )
            )

        match self._secrets.get_secret(ROUTES_SECRET_PATH):
            case Failure(error=secrets_error):
                self._logger.warning(
                    "Routes feed secret not configured",
                    error_code=secrets_error.code.value,
                )
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.CONFIGURATION_ERROR,
                        message="Routes feed secret is not configured",
                        domain_error=secrets_error,
                    )
                )
            case Success(value=expected):
                pass

        provided = (provided_secret or "").encode("utf-8")
        if not hmac.compare_digest(provided, expected.encode("utf-8")):
            self._logger.warning(
                "Routes feed access denied",
                secret_present=bool(provided_secret),
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Invalid routes feed secret",
                )
            )

        return Success(value=None)
