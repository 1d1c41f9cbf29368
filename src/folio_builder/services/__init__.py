"""Services"""

from folio_builder.services.portfolio import PortfolioService
from folio_builder.services.sample_data import SAMPLE_PROFILES, apply_sample_portfolio
from folio_builder.services.wizard import PortfolioWizard, WizardState, WizardStep

__all__ = [
    "PortfolioService",
    "PortfolioWizard",
    "WizardState",
    "WizardStep",
    "SAMPLE_PROFILES",
    "apply_sample_portfolio",
]
