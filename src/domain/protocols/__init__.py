"""Domain protocols (ports).

Every external collaborator of the resolver and the routes feed is
described here as a typing.Protocol. Infrastructure provides adapters.
"""

from src.domain.protocols.access_checker import AccessChecker
from src.domain.protocols.account_switcher import AccountSwitcher
from src.domain.protocols.alias_repository import AliasRepository
from src.domain.protocols.entity_repository import EntityRepository
from src.domain.protocols.language_manager import LanguageManager
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.redirect_lookup import RedirectLookup
from src.domain.protocols.resolver_extension import ResolverExtension
from src.domain.protocols.route_table import RouteTable
from src.domain.protocols.secrets_protocol import SecretsProtocol
from src.domain.protocols.view_registry import ViewRegistry

__all__ = [
    "AccessChecker",
    "AccountSwitcher",
    "AliasRepository",
    "EntityRepository",
    "LanguageManager",
    "LoggerProtocol",
    "RedirectLookup",
    "ResolverExtension",
    "RouteTable",
    "SecretsProtocol",
    "ViewRegistry",
]
