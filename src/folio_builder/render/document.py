"""Intermediate document tree for portfolio rendering.

:func:`build_document` maps a :class:`~folio_builder.models.Portfolio` to
a :class:`PortfolioDocument`: plain strings and tuples, no markup. Every
optional field is resolved here so templates never see ``None``. Templates
serialize the tree and are responsible for escaping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from urllib.parse import urlsplit

from folio_builder.models.portfolio import Experience, Portfolio, Project

__all__ = [
    "SECTION_ORDER",
    "ContactItem",
    "ExperienceItem",
    "HeaderBlock",
    "LinkItem",
    "PortfolioDocument",
    "ProjectCard",
    "Section",
    "SectionKind",
    "build_document",
    "format_date_range",
    "safe_url",
]

_SAFE_SCHEMES = {"", "http", "https", "mailto", "tel"}

_SOCIAL_ICONS = {
    "linkedin": "fab fa-linkedin",
    "github": "fab fa-github",
    "twitter": "fab fa-twitter",
    "website": "fas fa-globe",
}


class SectionKind(StrEnum):
    ABOUT = "about"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    CONTACT = "contact"


@dataclass(frozen=True, slots=True)
class Section:
    kind: SectionKind
    title: str


SECTION_ORDER: tuple[Section, ...] = (
    Section(SectionKind.ABOUT, "About Me"),
    Section(SectionKind.SKILLS, "Skills"),
    Section(SectionKind.EXPERIENCE, "Experience"),
    Section(SectionKind.PROJECTS, "Projects"),
    Section(SectionKind.CONTACT, "Contact"),
)


@dataclass(frozen=True, slots=True)
class LinkItem:
    label: str
    href: str
    icon: str


@dataclass(frozen=True, slots=True)
class HeaderBlock:
    name: str
    title: str
    photo_url: str = ""


@dataclass(frozen=True, slots=True)
class ExperienceItem:
    position: str
    company: str
    dates: str
    description: str


@dataclass(frozen=True, slots=True)
class ProjectCard:
    title: str
    technologies: str
    description: str
    dates: str = ""
    image: str = ""
    links: tuple[LinkItem, ...] = ()


@dataclass(frozen=True, slots=True)
class ContactItem:
    """One populated contact line; ``href`` is empty for plain text."""

    label: str
    icon: str
    text: str
    href: str = ""


@dataclass(frozen=True, slots=True)
class PortfolioDocument:
    """Everything a template needs, in display order."""

    page_title: str
    header: HeaderBlock
    bio: str
    skills: tuple[str, ...] = ()
    experiences: tuple[ExperienceItem, ...] = ()
    projects: tuple[ProjectCard, ...] = ()
    contacts: tuple[ContactItem, ...] = ()
    sections: tuple[Section, ...] = field(default=SECTION_ORDER)


def safe_url(value: str | None) -> str:
    """Return *value* if it uses a scheme safe to place in ``href``/``src``, else ``""``."""
    if not value:
        return ""
    candidate = value.strip()
    try:
        scheme = urlsplit(candidate).scheme.lower()
    except ValueError:
        return ""
    return candidate if scheme in _SAFE_SCHEMES else ""


def format_date_range(start: str | None, end: str | None) -> str:
    """Join free-text date labels as ``start - end``, dropping missing parts."""
    start = (start or "").strip()
    end = (end or "").strip()
    if start and end:
        return f"{start} - {end}"
    return start or end


def _experience_item(entry: Experience) -> ExperienceItem:
    return ExperienceItem(
        position=entry.position,
        company=entry.company,
        dates=format_date_range(entry.start_date, entry.display_end),
        description=entry.description,
    )


def _project_card(entry: Project) -> ProjectCard:
    links: list[LinkItem] = []
    demo = safe_url(entry.demo_link)
    if demo:
        links.append(LinkItem("Demo", demo, "fas fa-link"))
    source = safe_url(entry.github_link)
    if source:
        links.append(LinkItem("GitHub", source, "fab fa-github"))

    return ProjectCard(
        title=entry.title,
        technologies=", ".join(entry.technologies),
        description=entry.description,
        dates=format_date_range(entry.start_date, entry.display_end),
        image=safe_url(entry.image),
        links=tuple(links),
    )


def _contacts(portfolio: Portfolio) -> tuple[ContactItem, ...]:
    items: list[ContactItem] = []
    if portfolio.contact_email:
        items.append(
            ContactItem(
                "Email",
                "fas fa-envelope",
                portfolio.contact_email,
                safe_url(f"mailto:{portfolio.contact_email}"),
            )
        )
    if portfolio.contact_phone:
        items.append(ContactItem("Phone", "fas fa-phone", portfolio.contact_phone))
    if portfolio.contact_location:
        items.append(ContactItem("Location", "fas fa-map-marker-alt", portfolio.contact_location))

    for platform, url in portfolio.social_links.items():
        href = safe_url(url)
        if not href:
            continue
        icon = _SOCIAL_ICONS.get(platform.lower(), "fas fa-link")
        items.append(ContactItem(platform.title(), icon, url, href))
    return tuple(items)


def build_document(portfolio: Portfolio) -> PortfolioDocument:
    """Map *portfolio* to its document tree."""
    name = portfolio.full_name
    return PortfolioDocument(
        page_title=f"{name} - Portfolio" if name else "Portfolio",
        header=HeaderBlock(
            name=name,
            title=portfolio.title,
            photo_url=safe_url(portfolio.profile_photo_url),
        ),
        bio=portfolio.bio,
        skills=tuple(portfolio.skills),
        experiences=tuple(_experience_item(entry) for entry in portfolio.experiences),
        projects=tuple(_project_card(entry) for entry in portfolio.projects),
        contacts=_contacts(portfolio),
    )
