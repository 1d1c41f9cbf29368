"""Canned portfolio content for trying out themes.

Each profile is a partial update in the same camelCase shape clients
send, applied through :meth:`PortfolioService.update_portfolio` so it is
validated like any other edit.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from folio_builder.errors import ValidationError
from folio_builder.services.validation import validate_theme

if TYPE_CHECKING:
    from folio_builder.models.portfolio import Portfolio
    from folio_builder.services.portfolio import PortfolioService

__all__ = ["SAMPLE_PROFILES", "apply_sample_portfolio", "sample_profile"]

_GENERAL: dict[str, Any] = {
    "firstName": "Alex",
    "lastName": "Johnson",
    "title": "Frontend Developer",
    "bio": (
        "Passionate frontend developer with over 5 years of experience building modern "
        "web applications. Specialized in React, TypeScript, and responsive design."
    ),
    "contactEmail": "alex.johnson@example.com",
    "contactLocation": "San Francisco, CA",
    "skills": ["React", "TypeScript", "JavaScript", "HTML5", "CSS3", "Node.js", "Git"],
    "experiences": [
        {
            "id": "exp1",
            "company": "Tech Innovations Inc.",
            "position": "Senior Frontend Developer",
            "startDate": "2020-03",
            "isCurrent": True,
            "description": (
                "Led the development of the company's flagship product, resulting in a "
                "40% increase in user engagement."
            ),
        },
        {
            "id": "exp2",
            "company": "Digital Solutions Ltd.",
            "position": "Web Developer",
            "startDate": "2017-06",
            "endDate": "2020-02",
            "description": "Developed and maintained client websites with responsive layouts.",
        },
    ],
    "projects": [
        {
            "id": "proj1",
            "title": "E-commerce Platform",
            "description": (
                "A full-stack e-commerce solution with authentication, product catalog, "
                "shopping cart, and payment integration."
            ),
            "technologies": ["React", "Node.js", "Express", "MongoDB"],
            "githubLink": "https://github.com/username/ecommerce-project",
            "demoLink": "https://ecommerce-demo.example.com",
        },
        {
            "id": "proj2",
            "title": "Weather Dashboard",
            "description": "Current conditions and forecasts with saved locations.",
            "technologies": ["React", "OpenWeather API", "CSS3"],
            "githubLink": "https://github.com/username/weather-app",
        },
    ],
    "socialLinks": {
        "github": "https://github.com/username",
        "linkedin": "https://linkedin.com/in/username",
        "website": "https://username.dev",
    },
}

_DEVELOPER: dict[str, Any] = {
    "firstName": "Taylor",
    "lastName": "Smith",
    "title": "Full Stack Developer",
    "bio": (
        "Full stack developer with expertise in building scalable web applications. "
        "Passionate about clean code and performance optimization."
    ),
    "contactEmail": "taylor.smith@example.com",
    "contactLocation": "Austin, TX",
    "skills": ["TypeScript", "React", "Node.js", "PostgreSQL", "GraphQL", "Docker", "AWS"],
    "experiences": [
        {
            "id": "exp1",
            "company": "TechForward",
            "position": "Senior Developer",
            "startDate": "2019-07",
            "isCurrent": True,
            "description": (
                "Lead developer for the company's SaaS platform. Implemented a microservices "
                "architecture and improved system performance by 60%."
            ),
        },
        {
            "id": "exp2",
            "company": "WebSolutions Inc.",
            "position": "Software Engineer",
            "startDate": "2016-03",
            "endDate": "2019-06",
            "description": "Built client web applications and automated CI/CD pipelines.",
        },
    ],
    "projects": [
        {
            "id": "proj1",
            "title": "Real-time Collaboration Tool",
            "description": "Real-time editing, commenting, and task management.",
            "technologies": ["React", "Socket.io", "MongoDB", "Node.js"],
            "githubLink": "https://github.com/username/collab-tool",
        },
    ],
    "socialLinks": {
        "github": "https://github.com/taylorsmith",
        "linkedin": "https://linkedin.com/in/taylorsmith",
    },
}

_DESIGNER: dict[str, Any] = {
    "firstName": "Jordan",
    "lastName": "Rivera",
    "title": "UI/UX Designer",
    "bio": (
        "Creative UI/UX designer with a background in psychology, focused on intuitive, "
        "accessible, and beautiful digital experiences."
    ),
    "contactEmail": "jordan.rivera@example.com",
    "contactLocation": "Portland, OR",
    "skills": ["UI Design", "UX Research", "Prototyping", "Figma", "Accessibility"],
    "experiences": [
        {
            "id": "exp1",
            "company": "Design Lab",
            "position": "Senior UI/UX Designer",
            "startDate": "2018-05",
            "isCurrent": True,
            "description": "Lead designer for client projects across various industries.",
        },
    ],
    "projects": [
        {
            "id": "proj1",
            "title": "Healthcare Patient Portal",
            "description": "Redesigned patient portal improving user satisfaction by 45%.",
            "technologies": ["Figma", "Sketch", "User Testing"],
            "demoLink": "https://behance.net/username/patient-portal",
        },
    ],
    "socialLinks": {
        "linkedin": "https://linkedin.com/in/jordanrivera",
        "website": "https://jordanrivera.design",
    },
}

SAMPLE_PROFILES: dict[str, dict[str, Any]] = {
    "general": _GENERAL,
    "developer": _DEVELOPER,
    "designer": _DESIGNER,
}


def sample_profile(profile: str) -> dict[str, Any]:
    """Return a fresh copy of the named sample payload.

    Raises:
        ValidationError: If *profile* is not a known sample.
    """
    try:
        return copy.deepcopy(SAMPLE_PROFILES[profile])
    except KeyError:
        available = ", ".join(sorted(SAMPLE_PROFILES))
        raise ValidationError(
            f"Unknown sample profile {profile!r}. Available: {available}", ["profile"]
        ) from None


def apply_sample_portfolio(
    service: PortfolioService,
    user_id: int,
    profile: str = "general",
    theme: str | None = None,
) -> Portfolio:
    """Fill the user's portfolio with sample content, optionally switching theme."""
    payload = sample_profile(profile)
    if theme is not None:
        payload["theme"] = validate_theme(theme).value
    return service.update_portfolio(user_id, payload)
