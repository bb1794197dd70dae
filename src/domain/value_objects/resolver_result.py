"""Path resolution result.

The resolver always answers with one of these shapes. Every failure,
including access denial, collapses to the single not-found shape so a
caller cannot tell "does not exist" from "exists but hidden".

Usage:
    from src.domain.value_objects import ResolverResult

    result = ResolverResult.not_found()
    assert result.resolved is False
"""

from dataclasses import dataclass
from typing import Self

from src.domain.enums.resolution_kind import ResolutionKind


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityRef:
    """Reference to the API resource of a resolved entity.

    Attributes:
        resource_type: "{entity_type}--{bundle}".
        id: Entity UUID.
        langcode: Effective language of the resolution.
    """

    resource_type: str
    id: str
    langcode: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RedirectTarget:
    """Redirect destination.

    Attributes:
        to: Absolute URL or path with a leading slash.
        status: HTTP status in 300-399.
    """

    to: str
    status: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolverResult:
    """Outcome of resolving one path.

    Invariants:
        - entity is set only for kind=entity, redirect only for kind=redirect.
        - jsonapi_url is set iff kind=entity; data_url iff kind=view.
        - headless=False on a resolved entity/view/route implies external_url.

    Attributes:
        resolved: Whether the path resolved.
        kind: Resolution kind, None when not resolved.
        canonical: Preferred path for the resource.
        entity: Entity resource reference.
        redirect: Redirect destination.
        jsonapi_url: API URL of the entity resource.
        data_url: API URL of the view data.
        headless: Frontend renders this resource itself.
        external_url: URL on the CMS origin for non-headless resources.
    """

    resolved: bool
    kind: ResolutionKind | None = None
    canonical: str | None = None
    entity: EntityRef | None = None
    redirect: RedirectTarget | None = None
    jsonapi_url: str | None = None
    data_url: str | None = None
    headless: bool = False
    external_url: str | None = None

    @classmethod
    def not_found(cls) -> Self:
        """The single not-found shape: unresolved, every field empty."""
        return cls(resolved=False)

    @classmethod
    def for_redirect(cls, *, canonical: str, to: str, status: int) -> Self:
        """Redirect result; headless is False and no API URLs are set."""
        return cls(
            resolved=True,
            kind=ResolutionKind.REDIRECT,
            canonical=canonical,
            redirect=RedirectTarget(to=to, status=status),
        )

    @classmethod
    def for_entity(
        cls,
        *,
        canonical: str,
        entity: EntityRef,
        jsonapi_url: str,
        headless: bool,
        external_url: str | None,
    ) -> Self:
        return cls(
            resolved=True,
            kind=ResolutionKind.ENTITY,
            canonical=canonical,
            entity=entity,
            jsonapi_url=jsonapi_url,
            headless=headless,
            external_url=None if headless else external_url,
        )

    @classmethod
    def for_view(
        cls,
        *,
        canonical: str,
        data_url: str,
        headless: bool,
        external_url: str | None,
    ) -> Self:
        return cls(
            resolved=True,
            kind=ResolutionKind.VIEW,
            canonical=canonical,
            data_url=data_url,
            headless=headless,
            external_url=None if headless else external_url,
        )

    @classmethod
    def for_route(cls, *, canonical: str, external_url: str | None) -> Self:
        """CMS route with no API resource; the frontend proxies it."""
        return cls(
            resolved=True,
            kind=ResolutionKind.ROUTE,
            canonical=canonical,
            headless=False,
            external_url=external_url,
        )
