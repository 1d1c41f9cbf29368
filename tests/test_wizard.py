"""Tests for the portfolio builder wizard."""

from __future__ import annotations

import pytest

from folio_builder.errors import (
    InvalidThemeError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from folio_builder.models.portfolio import Portfolio, User
from folio_builder.services.portfolio import PortfolioService
from folio_builder.services.wizard import PortfolioWizard, WizardState, WizardStep

DETAILS = {
    "firstName": "Alice",
    "lastName": "Doe",
    "title": "Engineer",
    "bio": "Ten+ characters of bio text.",
}

EXPERIENCE = {
    "company": "Acme",
    "position": "Engineer",
    "startDate": "2020-01",
    "isCurrent": True,
    "description": "Built the widget pipeline.",
}

PROJECT = {
    "title": "Widget",
    "description": "A tool for building widgets.",
    "technologies": "Python, FastAPI",
}


@pytest.fixture
def wizard(service: PortfolioService, alice: tuple[User, Portfolio]) -> PortfolioWizard:
    user, _ = alice
    return PortfolioWizard(service, user.id)


class TestInitialState:
    def test_starts_on_theme(self, wizard: PortfolioWizard) -> None:
        assert wizard.current_step == WizardStep.THEME
        assert wizard.furthest_step == WizardStep.THEME
        assert not wizard.is_complete

    def test_draft_seeded_from_record(self, wizard: PortfolioWizard) -> None:
        assert wizard.draft.theme == "minimal"
        assert wizard.draft.skills == []

    def test_unknown_user(self, service: PortfolioService) -> None:
        with pytest.raises(NotFoundError):
            PortfolioWizard(service, 404)

    def test_step_labels(self) -> None:
        assert [step.label for step in WizardStep] == [
            "Theme",
            "Details",
            "Experience",
            "Projects",
            "Preview",
        ]


class TestNext:
    def test_theme_step_commits_theme(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.select_theme("creative")

        portfolio = wizard.next()

        assert portfolio.theme == "creative"
        assert service.get_portfolio(wizard.user_id).theme == "creative"
        assert wizard.current_step == WizardStep.DETAILS

    def test_invalid_details_do_not_advance(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        before = service.get_portfolio(wizard.user_id)

        with pytest.raises(ValidationError) as exc_info:
            wizard.next({**DETAILS, "bio": "short"})

        assert exc_info.value.fields == ["bio"]
        assert wizard.current_step == WizardStep.DETAILS
        assert service.get_portfolio(wizard.user_id) == before

    def test_details_commit(self, wizard: PortfolioWizard, service: PortfolioService) -> None:
        wizard.next()
        wizard.update_details(DETAILS)
        wizard.add_skill("Go")

        wizard.next()

        stored = service.get_portfolio(wizard.user_id)
        assert stored.full_name == "Alice Doe"
        assert stored.skills == ["Go"]
        assert wizard.current_step == WizardStep.EXPERIENCE

    def test_full_walk_reaches_preview(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next({"theme": "tech"})
        wizard.next(DETAILS)
        wizard.add_experience(EXPERIENCE)
        wizard.next()
        wizard.add_project(PROJECT)
        wizard.next()

        assert wizard.is_complete
        stored = service.get_portfolio(wizard.user_id)
        assert stored.theme == "tech"
        assert stored.experiences[0].company == "Acme"
        assert stored.projects[0].technologies == ["Python", "FastAPI"]

    def test_next_on_preview_rejected(self, wizard: PortfolioWizard) -> None:
        wizard.next()
        wizard.next(DETAILS)
        wizard.next()
        wizard.next()

        with pytest.raises(InvalidTransitionError):
            wizard.next()

    def test_unknown_theme_rejected_on_select(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(InvalidThemeError):
            wizard.select_theme("neon")
        assert wizard.draft.theme == "minimal"

    def test_skills_as_string_rejected(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        before = service.get_portfolio(wizard.user_id)

        with pytest.raises(ValidationError) as exc_info:
            wizard.next({**DETAILS, "skills": "Python"})

        assert exc_info.value.fields == ["skills"]
        assert wizard.current_step == WizardStep.DETAILS
        assert wizard.draft.skills == []
        assert wizard.draft.details["first_name"] == ""
        assert service.get_portfolio(wizard.user_id) == before

    @pytest.mark.parametrize("skills", [[1], ["Go", None], {"Go": True}])
    def test_non_text_skills_rejected(self, wizard: PortfolioWizard, skills: object) -> None:
        wizard.next()

        with pytest.raises(ValidationError) as exc_info:
            wizard.next({**DETAILS, "skills": skills})

        assert exc_info.value.fields == ["skills"]

    @pytest.mark.parametrize("entries", ["oops", ["oops"], [1, EXPERIENCE]])
    def test_malformed_experience_entries_rejected(
        self, wizard: PortfolioWizard, service: PortfolioService, entries: object
    ) -> None:
        wizard.next()
        wizard.next(DETAILS)
        before = service.get_portfolio(wizard.user_id)

        with pytest.raises(ValidationError) as exc_info:
            wizard.next({"experiences": entries})

        assert exc_info.value.fields == ["experiences"]
        assert wizard.current_step == WizardStep.EXPERIENCE
        assert service.get_portfolio(wizard.user_id) == before

    def test_malformed_project_entries_rejected(self, wizard: PortfolioWizard) -> None:
        wizard.next()
        wizard.next(DETAILS)
        wizard.next()

        with pytest.raises(ValidationError) as exc_info:
            wizard.next({"projects": [["Widget"]]})

        assert exc_info.value.fields == ["projects"]

    def test_non_text_technologies_rejected(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(ValidationError) as exc_info:
            wizard.add_project({**PROJECT, "technologies": 5})

        assert exc_info.value.fields == ["technologies"]
        assert wizard.draft.projects == []

    def test_experience_payload_replaces_list(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        wizard.next(DETAILS)

        wizard.next({"experiences": [{**EXPERIENCE, "id": "exp1"}]})

        assert [e.id for e in service.get_portfolio(wizard.user_id).experiences] == ["exp1"]


class TestDraftEditing:
    def test_skills_deduplicated(self, wizard: PortfolioWizard) -> None:
        assert wizard.add_skill("Go") is True
        assert wizard.add_skill("Go") is False
        assert wizard.add_skill("  ") is False

        assert wizard.draft.skills == ["Go"]

    def test_non_text_skill_not_added(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(ValidationError):
            wizard.add_skill(1)  # type: ignore[arg-type]

        assert wizard.draft.skills == []

    def test_remove_skill(self, wizard: PortfolioWizard) -> None:
        wizard.add_skill("Go")

        assert wizard.remove_skill("Go") is True
        assert wizard.remove_skill("Go") is False

    def test_skills_key_in_details_deduplicates(self, wizard: PortfolioWizard) -> None:
        wizard.update_details({"skills": ["Go", "Go", "Rust"]})
        assert wizard.draft.skills == ["Go", "Rust"]

    def test_invalid_experience_not_added(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(ValidationError):
            wizard.add_experience({**EXPERIENCE, "description": "short"})
        assert wizard.draft.experiences == []

    def test_update_and_remove_experience(self, wizard: PortfolioWizard) -> None:
        entry = wizard.add_experience(EXPERIENCE)

        updated = wizard.update_experience(entry.id, {**EXPERIENCE, "company": "Globex"})

        assert updated.id == entry.id
        assert wizard.draft.experiences[0].company == "Globex"

        wizard.remove_experience(entry.id)
        assert wizard.draft.experiences == []

    def test_update_missing_project(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(NotFoundError):
            wizard.update_project("missing", PROJECT)

    def test_remove_project(self, wizard: PortfolioWizard) -> None:
        entry = wizard.add_project(PROJECT)
        wizard.remove_project(entry.id)
        assert wizard.draft.projects == []


class TestNavigation:
    def test_back_on_theme_rejected(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(InvalidTransitionError):
            wizard.back()

    def test_back_discards_uncommitted_edits(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        wizard.update_details({"firstName": "Draft"})

        assert wizard.back() == WizardStep.THEME

        assert wizard.draft.details["first_name"] == ""
        assert service.get_portfolio(wizard.user_id).first_name == ""

    def test_back_keeps_committed_data(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next({"theme": "nature"})
        wizard.next(DETAILS)

        wizard.back()
        wizard.back()

        assert service.get_portfolio(wizard.user_id).first_name == "Alice"
        assert wizard.draft.theme == "nature"

    def test_go_to_earlier_step(self, wizard: PortfolioWizard) -> None:
        wizard.next()
        wizard.next(DETAILS)

        assert wizard.go_to(1) == WizardStep.THEME
        assert wizard.furthest_step == WizardStep.EXPERIENCE

    def test_go_to_later_step_rejected(self, wizard: PortfolioWizard) -> None:
        with pytest.raises(InvalidTransitionError):
            wizard.go_to(WizardStep.PREVIEW)

    def test_go_to_by_name(self, wizard: PortfolioWizard) -> None:
        wizard.next()
        assert wizard.go_to("theme") == WizardStep.THEME

    @pytest.mark.parametrize("step", [0, 6, "bogus"])
    def test_go_to_unknown_step(self, wizard: PortfolioWizard, step: object) -> None:
        with pytest.raises(InvalidTransitionError):
            wizard.go_to(step)

    def test_restart_from_preview(self, wizard: PortfolioWizard) -> None:
        wizard.next()
        wizard.next(DETAILS)
        wizard.next()
        wizard.next()

        assert wizard.edit() == WizardStep.THEME
        assert wizard.current_step == WizardStep.THEME
        assert wizard.furthest_step == WizardStep.PREVIEW


class TestPersistence:
    def test_resumes_saved_position(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        wizard.next(DETAILS)

        resumed = PortfolioWizard(service, wizard.user_id)

        assert resumed.current_step == WizardStep.EXPERIENCE
        assert resumed.draft.details["first_name"] == "Alice"

    def test_failed_step_not_persisted(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()
        with pytest.raises(ValidationError):
            wizard.next({"firstName": ""})

        assert service.get_wizard_state(wizard.user_id) == {"current_step": 2, "furthest_step": 2}

    def test_state_from_bad_data_falls_back(self) -> None:
        assert WizardState.from_dict({"current_step": 9}) == WizardState()

    def test_state_current_never_past_furthest(self) -> None:
        state = WizardState.from_dict({"current_step": 4, "furthest_step": 2})
        assert state.current_step == WizardStep.DETAILS
        assert state.furthest_step == WizardStep.DETAILS

    def test_wizard_from_dict(
        self, wizard: PortfolioWizard, service: PortfolioService
    ) -> None:
        wizard.next()

        rebuilt = PortfolioWizard.from_dict(service, wizard.user_id, wizard.to_dict())

        assert rebuilt.current_step == WizardStep.DETAILS
        assert rebuilt.to_dict() == {"current_step": 2, "furthest_step": 2}

    def test_state_round_trip(self) -> None:
        state = WizardState(WizardStep.DETAILS, WizardStep.PROJECTS)
        assert WizardState.from_dict(state.to_dict()) == state
