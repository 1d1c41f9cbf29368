"""Portfolio builder wizard.

The wizard walks a user through five ordered steps::

    Theme -> Details -> Experience -> Projects -> Preview

Each step edits a draft of one part of the portfolio. ``next()`` validates
that draft and commits it through :meth:`PortfolioService.update_portfolio`
before advancing; if either fails, the wizard stays where it is. Going
back or jumping to an earlier step discards uncommitted edits but never
touches committed data.

The position (current and furthest step) is saved through the service
after every transition, so a wizard rebuilt for the same user resumes
where the previous one stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from folio_builder.errors import InvalidTransitionError, NotFoundError
from folio_builder.models.portfolio import Experience, Portfolio, Project
from folio_builder.services.validation import (
    add_skill,
    validate_details,
    validate_entries,
    validate_experience,
    validate_project,
    validate_skills,
    validate_theme,
)

if TYPE_CHECKING:
    from folio_builder.services.portfolio import PortfolioService

logger = logging.getLogger(__name__)

__all__ = ["PortfolioWizard", "WizardDraft", "WizardState", "WizardStep"]

# Draft keys edited on the Details step (skills are tracked separately).
_DETAIL_FIELDS = (
    "first_name",
    "last_name",
    "title",
    "bio",
    "contact_email",
    "contact_phone",
    "contact_location",
    "profile_photo_url",
    "social_links",
)

_CAMEL_TO_SNAKE = {
    "firstName": "first_name",
    "lastName": "last_name",
    "contactEmail": "contact_email",
    "contactPhone": "contact_phone",
    "contactLocation": "contact_location",
    "profilePhotoUrl": "profile_photo_url",
    "socialLinks": "social_links",
}


class WizardStep(IntEnum):
    """Ordered wizard steps, 1-indexed."""

    THEME = 1
    DETAILS = 2
    EXPERIENCE = 3
    PROJECTS = 4
    PREVIEW = 5

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, value: int | str) -> WizardStep:
        """Accept a step number or a case-insensitive step name."""
        if isinstance(value, str) and not value.isdigit():
            try:
                return cls[value.upper()]
            except KeyError:
                raise InvalidTransitionError(f"Unknown wizard step {value!r}") from None
        try:
            return cls(int(value))
        except ValueError:
            raise InvalidTransitionError(f"Unknown wizard step {value!r}") from None


@dataclass
class WizardState:
    """Serializable wizard position."""

    current_step: WizardStep = WizardStep.THEME
    furthest_step: WizardStep = WizardStep.THEME

    def to_dict(self) -> dict[str, int]:
        return {
            "current_step": int(self.current_step),
            "furthest_step": int(self.furthest_step),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WizardState:
        """Rebuild a state, falling back to the first step on bad data."""
        if not data:
            return cls()
        try:
            current = WizardStep(int(data.get("current_step", WizardStep.THEME)))
            furthest = WizardStep(int(data.get("furthest_step", current)))
        except (TypeError, ValueError):
            logger.warning("Discarding unreadable wizard state %r", data)
            return cls()
        return cls(current_step=min(current, furthest), furthest_step=furthest)


@dataclass
class WizardDraft:
    """Uncommitted edits for the steps that carry form data."""

    theme: str
    details: dict[str, Any] = field(default_factory=dict)
    skills: list[str] = field(default_factory=list)
    experiences: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio) -> WizardDraft:
        return cls(
            theme=portfolio.theme,
            details={name: getattr(portfolio, name) for name in _DETAIL_FIELDS},
            skills=list(portfolio.skills),
            experiences=[entry.model_copy() for entry in portfolio.experiences],
            projects=[entry.model_copy() for entry in portfolio.projects],
        )


def _find(entries: list[Any], entry_id: str) -> int:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            return index
    raise NotFoundError(f"Entry {entry_id!r} not found")


class PortfolioWizard:
    """Step-by-step editor for one user's portfolio."""

    def __init__(
        self,
        service: PortfolioService,
        user_id: int,
        state: WizardState | None = None,
    ) -> None:
        self._service = service
        self._user_id = user_id
        portfolio = service.get_portfolio(user_id)
        if state is None:
            state = WizardState.from_dict(service.get_wizard_state(user_id))
        self._state = state
        self._draft = WizardDraft.from_portfolio(portfolio)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def state(self) -> WizardState:
        return WizardState(self._state.current_step, self._state.furthest_step)

    @property
    def current_step(self) -> WizardStep:
        return self._state.current_step

    @property
    def furthest_step(self) -> WizardStep:
        return self._state.furthest_step

    @property
    def draft(self) -> WizardDraft:
        return self._draft

    @property
    def is_complete(self) -> bool:
        """True once the Preview step has been reached."""
        return self._state.current_step == WizardStep.PREVIEW

    def to_dict(self) -> dict[str, int]:
        return self._state.to_dict()

    @classmethod
    def from_dict(
        cls, service: PortfolioService, user_id: int, data: Mapping[str, Any] | None
    ) -> PortfolioWizard:
        """Rebuild a wizard at the position described by *data*."""
        return cls(service, user_id, WizardState.from_dict(data))

    # ------------------------------------------------------------------
    # Draft editing
    # ------------------------------------------------------------------

    def select_theme(self, theme: str) -> None:
        self._draft.theme = validate_theme(theme).value

    def update_details(self, values: Mapping[str, Any]) -> None:
        """Merge form values into the Details draft.

        Keys may be snake_case or camelCase. A ``skills`` key replaces the
        draft skill list, dropping duplicates.

        Raises:
            ValidationError: If ``skills`` is not a list of strings. The draft
                is left unchanged.
        """
        details: dict[str, Any] = {}
        skills: list[str] | None = None
        for key, value in values.items():
            name = _CAMEL_TO_SNAKE.get(key, key)
            if name == "skills":
                skills = validate_skills(value)
            elif name in _DETAIL_FIELDS:
                details[name] = value

        self._draft.details.update(details)
        if skills is not None:
            self._draft.skills = skills

    def add_skill(self, skill: str) -> bool:
        """Append *skill* unless it is blank or already listed."""
        updated = add_skill(self._draft.skills, skill)
        added = len(updated) != len(self._draft.skills)
        self._draft.skills = updated
        return added

    def remove_skill(self, skill: str) -> bool:
        if skill not in self._draft.skills:
            return False
        self._draft.skills = [s for s in self._draft.skills if s != skill]
        return True

    def add_experience(self, values: Mapping[str, Any]) -> Experience:
        entry = validate_experience(values)
        self._draft.experiences.append(entry)
        return entry

    def update_experience(self, entry_id: str, values: Mapping[str, Any]) -> Experience:
        index = _find(self._draft.experiences, entry_id)
        entry = validate_experience(values, entry_id)
        self._draft.experiences[index] = entry
        return entry

    def remove_experience(self, entry_id: str) -> None:
        del self._draft.experiences[_find(self._draft.experiences, entry_id)]

    def add_project(self, values: Mapping[str, Any]) -> Project:
        entry = validate_project(values)
        self._draft.projects.append(entry)
        return entry

    def update_project(self, entry_id: str, values: Mapping[str, Any]) -> Project:
        index = _find(self._draft.projects, entry_id)
        entry = validate_project(values, entry_id)
        self._draft.projects[index] = entry
        return entry

    def remove_project(self, entry_id: str) -> None:
        del self._draft.projects[_find(self._draft.projects, entry_id)]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def next(self, payload: Mapping[str, Any] | None = None) -> Portfolio:
        """Validate and commit the current step, then advance.

        Args:
            payload: Optional form values for the current step, applied to
                the draft before validation.

        Returns:
            The portfolio as stored after the commit.

        Raises:
            InvalidTransitionError: If called on the Preview step.
            ValidationError: If the step's data is invalid. Nothing is stored.
            NotFoundError: If the portfolio disappeared.
        """
        step = self._state.current_step
        if step == WizardStep.PREVIEW:
            raise InvalidTransitionError("Preview is the last step")

        if payload:
            self._apply_payload(step, payload)
        changes = self._step_changes(step)
        portfolio = self._service.update_portfolio(self._user_id, changes)

        following = WizardStep(step + 1)
        self._move_to(following, max(self._state.furthest_step, following))
        self._draft = WizardDraft.from_portfolio(portfolio)
        logger.info("User %s advanced to %s", self._user_id, following.label)
        return portfolio

    def back(self) -> WizardStep:
        """Return to the previous step, discarding uncommitted edits."""
        step = self._state.current_step
        if step == WizardStep.THEME:
            raise InvalidTransitionError("Theme is the first step")
        self._reset_draft()
        self._move_to(WizardStep(step - 1), self._state.furthest_step)
        return self._state.current_step

    def go_to(self, step: int | str) -> WizardStep:
        """Jump to *step*, which must not be after the current step."""
        target = WizardStep.parse(step)
        if target > self._state.current_step:
            raise InvalidTransitionError(
                f"Cannot skip ahead to {target.label} from {self._state.current_step.label}"
            )
        self._reset_draft()
        self._move_to(target, self._state.furthest_step)
        return target

    def restart(self) -> WizardStep:
        """Return to the Theme step, keeping everything already committed."""
        self._reset_draft()
        self._move_to(WizardStep.THEME, self._state.furthest_step)
        return WizardStep.THEME

    edit = restart

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _move_to(self, current: WizardStep, furthest: WizardStep) -> None:
        self._state = WizardState(current_step=current, furthest_step=furthest)
        self._service.save_wizard_state(self._user_id, self._state.to_dict())

    def _reset_draft(self) -> None:
        self._draft = WizardDraft.from_portfolio(self._service.get_portfolio(self._user_id))

    def _apply_payload(self, step: WizardStep, payload: Mapping[str, Any]) -> None:
        if step == WizardStep.THEME:
            self.select_theme(payload.get("theme", self._draft.theme))
        elif step == WizardStep.DETAILS:
            self.update_details(payload)
        elif step == WizardStep.EXPERIENCE and "experiences" in payload:
            self._draft.experiences = [
                validate_experience(values, values.get("id"))
                for values in validate_entries(payload["experiences"], "experiences")
            ]
        elif step == WizardStep.PROJECTS and "projects" in payload:
            self._draft.projects = [
                validate_project(values, values.get("id"))
                for values in validate_entries(payload["projects"], "projects")
            ]

    def _step_changes(self, step: WizardStep) -> dict[str, Any]:
        """Validate the draft for *step* and return the fields to commit."""
        if step == WizardStep.THEME:
            return {"theme": validate_theme(self._draft.theme).value}

        if step == WizardStep.DETAILS:
            form = validate_details({**self._draft.details, "skills": self._draft.skills})
            return form.model_dump(include={*_DETAIL_FIELDS, "skills"})

        if step == WizardStep.EXPERIENCE:
            return {"experiences": [entry.model_dump() for entry in self._draft.experiences]}

        return {"projects": [entry.model_dump() for entry in self._draft.projects]}
