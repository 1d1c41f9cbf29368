"""Wizard navigation routes.

A fresh :class:`PortfolioWizard` is built for every request from the
stored portfolio and the saved wizard position, so the server keeps no
per-client session. Form values for the current step travel in the body
of ``POST /wizard/next``.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from folio_builder.api.dependencies import CurrentUser, ServiceDep
from folio_builder.api.schemas.wizard import WizardStateResponse
from folio_builder.services.wizard import PortfolioWizard

router = APIRouter(prefix="/wizard", tags=["wizard"])


@router.get("", response_model=WizardStateResponse, summary="Get the wizard position")
def get_state(user: CurrentUser, service: ServiceDep) -> WizardStateResponse:
    return WizardStateResponse.from_wizard(PortfolioWizard(service, user.id))


@router.post(
    "/next",
    response_model=WizardStateResponse,
    summary="Commit the current step and advance",
    description=(
        "Validates the current step's data (merged with the optional body) and "
        "stores it. On failure nothing is stored and the step does not change."
    ),
)
def next_step(
    user: CurrentUser,
    service: ServiceDep,
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> WizardStateResponse:
    wizard = PortfolioWizard(service, user.id)
    portfolio = wizard.next(payload)
    return WizardStateResponse.from_wizard(wizard, portfolio)


@router.post("/back", response_model=WizardStateResponse, summary="Go to the previous step")
def previous_step(user: CurrentUser, service: ServiceDep) -> WizardStateResponse:
    wizard = PortfolioWizard(service, user.id)
    wizard.back()
    return WizardStateResponse.from_wizard(wizard)


@router.post(
    "/goto/{step}",
    response_model=WizardStateResponse,
    summary="Jump to an earlier step",
)
def go_to_step(
    step: Annotated[str, Path(description="Step number (1-5) or name")],
    user: CurrentUser,
    service: ServiceDep,
) -> WizardStateResponse:
    wizard = PortfolioWizard(service, user.id)
    wizard.go_to(step)
    return WizardStateResponse.from_wizard(wizard)


@router.post(
    "/restart",
    response_model=WizardStateResponse,
    summary="Return to the first step",
    description="Used by the Edit action on the preview. Committed data is kept.",
)
def restart(user: CurrentUser, service: ServiceDep) -> WizardStateResponse:
    wizard = PortfolioWizard(service, user.id)
    wizard.restart()
    return WizardStateResponse.from_wizard(wizard)
