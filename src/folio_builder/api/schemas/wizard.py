"""Pydantic schemas for wizard endpoints."""

from __future__ import annotations

from folio_builder.models.portfolio import CamelModel, Portfolio
from folio_builder.services.wizard import PortfolioWizard, WizardStep


class WizardStepInfo(CamelModel):
    """One entry of the step indicator."""

    number: int
    label: str
    completed: bool


class WizardStateResponse(CamelModel):
    """Wizard position plus, after a commit, the stored portfolio."""

    current_step: int
    current_label: str
    furthest_step: int
    is_complete: bool
    steps: list[WizardStepInfo]
    portfolio: Portfolio | None = None

    @classmethod
    def from_wizard(
        cls, wizard: PortfolioWizard, portfolio: Portfolio | None = None
    ) -> WizardStateResponse:
        return cls(
            current_step=int(wizard.current_step),
            current_label=wizard.current_step.label,
            furthest_step=int(wizard.furthest_step),
            is_complete=wizard.is_complete,
            steps=[
                WizardStepInfo(
                    number=int(step),
                    label=step.label,
                    completed=step < wizard.furthest_step,
                )
                for step in WizardStep
            ],
            portfolio=portfolio,
        )
