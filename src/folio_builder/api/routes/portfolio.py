"""Portfolio editing, publishing and rendering routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Path, status
from fastapi.responses import HTMLResponse

from folio_builder.api.dependencies import CurrentUser, ServiceDep
from folio_builder.api.schemas.portfolio import SampleRequest, ThemeInfoResponse, list_theme_info
from folio_builder.errors import NotFoundError
from folio_builder.models.portfolio import Portfolio
from folio_builder.services.sample_data import apply_sample_portfolio

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=Portfolio, summary="Get the current user's portfolio")
def get_portfolio(user: CurrentUser, service: ServiceDep) -> Portfolio:
    return service.get_portfolio(user.id)


@router.patch(
    "",
    response_model=Portfolio,
    summary="Update portfolio fields",
    description=(
        "Merge the supplied fields into the stored portfolio. Omitted fields are "
        "left unchanged; list fields are replaced wholesale. `updatedAt` is set "
        "by the server."
    ),
)
def update_portfolio(
    user: CurrentUser,
    service: ServiceDep,
    changes: Annotated[dict[str, Any], Body()],
) -> Portfolio:
    return service.update_portfolio(user.id, changes)


@router.get("/themes", response_model=list[ThemeInfoResponse], summary="List available themes")
def list_themes() -> list[ThemeInfoResponse]:
    return list_theme_info()


@router.put("/theme/{theme}", response_model=Portfolio, summary="Select a theme")
def set_theme(
    theme: Annotated[str, Path(description="Theme identifier")],
    user: CurrentUser,
    service: ServiceDep,
) -> Portfolio:
    return service.set_theme(user.id, theme)


@router.post("/publish", response_model=Portfolio, summary="Publish the portfolio")
def publish(user: CurrentUser, service: ServiceDep) -> Portfolio:
    return service.publish(user.id)


@router.post("/unpublish", response_model=Portfolio, summary="Unpublish the portfolio")
def unpublish(user: CurrentUser, service: ServiceDep) -> Portfolio:
    return service.unpublish(user.id)


@router.post(
    "/sample",
    response_model=Portfolio,
    summary="Fill with sample content",
    description="Overwrite the portfolio with one of the canned sample profiles.",
)
def apply_sample(
    user: CurrentUser,
    service: ServiceDep,
    request: Annotated[SampleRequest | None, Body()] = None,
) -> Portfolio:
    request = request or SampleRequest()
    return apply_sample_portfolio(service, user.id, request.profile, request.theme)


@router.get("/preview", response_class=HTMLResponse, summary="Render the themed preview")
def preview(user: CurrentUser, service: ServiceDep) -> HTMLResponse:
    return HTMLResponse(service.render_preview(service.get_portfolio(user.id)))


@router.get("/print", response_class=HTMLResponse, summary="Render the printable page")
def print_view(user: CurrentUser, service: ServiceDep) -> HTMLResponse:
    return HTMLResponse(service.render_print(service.get_portfolio(user.id)))


@router.get(
    "/public/{username}",
    response_class=HTMLResponse,
    summary="View a published portfolio",
    description="No authentication required. Unpublished portfolios are reported as missing.",
)
def public_view(
    username: Annotated[str, Path(description="Owner of the portfolio")],
    service: ServiceDep,
) -> HTMLResponse:
    try:
        owner = service.get_user_by_username(username)
        portfolio = service.get_portfolio(owner.id)
    except NotFoundError:
        portfolio = None

    if portfolio is None or not portfolio.is_published:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No published portfolio for '{username}'",
        )
    return HTMLResponse(service.render_preview(portfolio))
