"""Resolver and routes feed response schemas.

Pydantic schemas for the two frontend endpoints. Includes:
- Response schemas (API -> client)
- Result/DTO-to-schema conversion methods

Keys are snake_case on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import RouteItem, RoutesPage
from src.domain.value_objects import ResolverResult


# =============================================================================
# Resolver
# =============================================================================


class EntityRefResponse(BaseModel):
    """Resolved entity reference.

    Attributes:
        type: JSON:API resource type ("{entity_type}--{bundle}").
        id: Entity UUID.
        langcode: Effective language of the resolution.
    """

    type: str = Field(..., description="Resource type", examples=["node--page"])
    id: str = Field(..., description="Entity UUID")
    langcode: str = Field(..., description="Effective langcode", examples=["en"])


class RedirectResponse(BaseModel):
    """Redirect destination."""

    to: str = Field(..., description="Absolute URL or rooted path")
    status: int = Field(..., ge=300, le=399, description="Redirect status code")


class ResolverResponse(BaseModel):
    """Resolution of one frontend path.

    Unresolved paths, including paths the caller may not see, all share
    one shape: resolved=false with every other field null or false.
    """

    resolved: bool = Field(..., description="Whether the path resolved")
    kind: str | None = Field(
        None, description="entity, view, redirect or route", examples=["entity"]
    )
    canonical: str | None = Field(None, description="Preferred path for the resource")
    entity: EntityRefResponse | None = Field(None, description="Entity reference")
    redirect: RedirectResponse | None = Field(None, description="Redirect target")
    jsonapi_url: str | None = Field(None, description="Entity resource URL")
    data_url: str | None = Field(None, description="View data URL")
    headless: bool = Field(False, description="Rendered by the frontend")
    external_url: str | None = Field(
        None, description="CMS origin URL for non-headless resources"
    )

    @classmethod
    def from_result(cls, result: ResolverResult) -> "ResolverResponse":
        """Convert a resolver result to the response schema.

        Args:
            result: ResolverResult from handler.

        Returns:
            ResolverResponse for API response.
        """
        return cls(
            resolved=result.resolved,
            kind=result.kind.value if result.kind is not None else None,
            canonical=result.canonical,
            entity=(
                EntityRefResponse(
                    type=result.entity.resource_type,
                    id=result.entity.id,
                    langcode=result.entity.langcode,
                )
                if result.entity is not None
                else None
            ),
            redirect=(
                RedirectResponse(to=result.redirect.to, status=result.redirect.status)
                if result.redirect is not None
                else None
            ),
            jsonapi_url=result.jsonapi_url,
            data_url=result.data_url,
            headless=result.headless,
            external_url=result.external_url,
        )


# =============================================================================
# Routes feed
# =============================================================================


class RouteItemResponse(BaseModel):
    """One enumerable route."""

    path: str = Field(..., description="Canonical path", examples=["/about-us"])
    kind: str = Field(..., description="entity or view")
    jsonapi_url: str | None = Field(None, description="Entity resource URL")
    data_url: str | None = Field(None, description="View data URL")

    @classmethod
    def from_dto(cls, dto: RouteItem) -> "RouteItemResponse":
        return cls(
            path=dto.path,
            kind=dto.kind.value,
            jsonapi_url=dto.jsonapi_url,
            data_url=dto.data_url,
        )


class RoutesFeedLinks(BaseModel):
    """Pagination links; next is null on the last page."""

    model_config = ConfigDict(populate_by_name=True)

    self_link: str = Field(..., alias="self", description="This page")
    next: str | None = Field(None, description="Next page")


class RoutesFeedPageMeta(BaseModel):
    limit: int = Field(..., ge=1, le=200, description="Clamped page size")
    cursor: str | None = Field(None, description="Cursor of this page")


class RoutesFeedMeta(BaseModel):
    langcode: str = Field(..., description="Effective langcode")
    page: RoutesFeedPageMeta


class RoutesFeedResponse(BaseModel):
    """One page of the routes feed.

    Attributes:
        data: Routes on this page.
        links: self and next page links.
        meta: Effective langcode and page parameters.
    """

    data: list[RouteItemResponse]
    links: RoutesFeedLinks
    meta: RoutesFeedMeta

    @classmethod
    def from_dto(
        cls,
        dto: RoutesPage,
        *,
        cursor: str | None,
        self_link: str,
        next_link: str | None,
    ) -> "RoutesFeedResponse":
        """Convert a routes page to the response schema.

        Args:
            dto: RoutesPage from handler.
            cursor: Cursor the page was requested with.
            self_link: Link to this page.
            next_link: Link to the next page, None on the last page.

        Returns:
            RoutesFeedResponse for API response.
        """
        return cls(
            data=[RouteItemResponse.from_dto(item) for item in dto.items],
            links=RoutesFeedLinks(self_link=self_link, next=next_link),
            meta=RoutesFeedMeta(
                langcode=dto.langcode,
                page=RoutesFeedPageMeta(limit=dto.limit, cursor=cursor),
            ),
        )
