"""ResolvePath query handler (resolver orchestrator).

Resolution steps, each of which may end in the not-found shape:

    normalize -> redirect check -> alias translate -> route match
        -> classify -> access check -> assemble

Architecture:
- Application layer handler (orchestrates domain collaborators)
- Returns ResolverResult directly: not-found is a regular outcome, and
  every failure collapses to it so hidden content is indistinguishable
  from missing content
- Redirect lookup failures are absorbed by RedirectService; errors from
  the alias, route and entity collaborators propagate
"""

from src.application.queries.routing_queries import ResolvePath
from src.application.services.api_urls import (
    entity_resource_url,
    external_url,
    view_data_url,
)
from src.application.services.content_policy import ContentPolicy
from src.application.services.langcode_selector import LangcodeSelector
from src.application.services.redirect_service import RedirectService
from src.application.services.route_classifier import RouteClassifier
from src.domain.entities import ContentEntity, RouteMatch
from src.domain.path_normalizer import normalize_path, split_path_and_query
from src.domain.protocols import (
    AliasRepository,
    ResolverExtension,
    RouteTable,
    ViewRegistry,
)
from src.domain.value_objects import (
    EntityRef,
    FrontendConfig,
    ResolverResult,
    ViewRouteKey,
)


class ResolvePathHandler:
    """Handler for ResolvePath query.

    Dependencies (injected via constructor):
        - FrontendConfig: Configuration snapshot
        - AliasRepository: Alias <-> internal path translation
        - RouteTable: Internal path routing
        - RouteClassifier: View/entity classification
        - ContentPolicy: Access checks and headless eligibility
        - LangcodeSelector: Effective langcode
        - RedirectService: First-pass redirect lookup
        - ViewRegistry | None: Views support, None when not installed
        - ResolverExtension list: Consulted for unclassified routes

    Returns:
        ResolverResult: Resolved shape or ResolverResult.not_found()
    """

    def __init__(
        self,
        config: FrontendConfig,
        aliases: AliasRepository,
        routes: RouteTable,
        classifier: RouteClassifier,
        policy: ContentPolicy,
        langcodes: LangcodeSelector,
        redirects: RedirectService,
        views: ViewRegistry | None = None,
        extensions: list[ResolverExtension] | None = None,
    ) -> None:
        self._config = config
        self._aliases = aliases
        self._routes = routes
        self._classifier = classifier
        self._policy = policy
        self._langcodes = langcodes
        self._redirects = redirects
        self._views = views
        self._extensions = list(extensions or [])

    async def handle(self, query: ResolvePath) -> ResolverResult:
        """Handle ResolvePath query.

        Args:
            query: ResolvePath query.

        Returns:
            ResolverResult for the requested path.
        """
        raw_path, query_params = split_path_and_query(query.path)
        path = normalize_path(raw_path)
        if path == "":
            return ResolverResult.not_found()

        langcode = self._langcodes.effective(query.langcode)

        redirect = await self._redirects.try_redirect(path, query_params, langcode)
        if redirect is not None:
            return ResolverResult.for_redirect(
                canonical=path, to=redirect.to, status=redirect.status
            )

        internal = await self._aliases.get_path_by_alias(path, langcode)
        match = await self._routes.match(internal)
        if match is None:
            return ResolverResult.not_found()

        target = await self._classifier.classify(match)
        if isinstance(target, ViewRouteKey):
            return await self._resolve_view(target, path, query.request_origin)
        if isinstance(target, ContentEntity):
            return await self._resolve_entity(
                target, internal, path, langcode, query.request_origin
            )

        return await self._resolve_extension(match, path, langcode)

    async def _resolve_view(
        self, key: ViewRouteKey, path: str, request_origin: str | None
    ) -> ResolverResult:
        if self._views is None:
            return ResolverResult.not_found()

        view = await self._views.load(key.view_id)
        if view is None or view.get_display(key.display_id) is None:
            return ResolverResult.not_found()
        if not await self._policy.can_view_display(view, key.display_id):
            return ResolverResult.not_found()

        headless = self._policy.is_view_headless(key.view_id, key.display_id)
        return ResolverResult.for_view(
            canonical=path,
            data_url=view_data_url(self._config.jsonapi_base_path, key),
            headless=headless,
            external_url=(
                None
                if headless
                else external_url(self._config.origin_base_url, request_origin, path)
            ),
        )

    async def _resolve_entity(
        self,
        entity: ContentEntity,
        internal: str,
        path: str,
        langcode: str,
        request_origin: str | None,
    ) -> ResolverResult:
        if not await self._policy.can_view_entity(entity):
            return ResolverResult.not_found()

        alias = await self._aliases.get_alias_by_path(internal, langcode)
        canonical = alias or path

        headless = self._policy.is_headless(entity.entity_type_id, entity.bundle)
        return ResolverResult.for_entity(
            canonical=canonical,
            entity=EntityRef(
                resource_type=entity.resource_type,
                id=entity.uuid,
                langcode=langcode,
            ),
            jsonapi_url=entity_resource_url(self._config.jsonapi_base_path, entity),
            headless=headless,
            external_url=(
                None
                if headless
                else external_url(
                    self._config.origin_base_url, request_origin, canonical
                )
            ),
        )

    async def _resolve_extension(
        self, match: RouteMatch, path: str, langcode: str
    ) -> ResolverResult:
        for extension in self._extensions:
            result = await extension.classify(match, path, langcode)
            if result is not None and result.resolved:
                return result
        return ResolverResult.not_found()
