"""Abstract base class and shared markup for portfolio HTML templates.

Both output modes share one page layout (``page.html``) so the mapping
from document fields to markup is identical; they differ only in the
style bundle and in the print-specific options passed to the layout.
``page.html`` is autoescaped; ``styles.css`` is not, because its only
inputs are the static values in :mod:`folio_builder.constants.themes`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cache
from typing import TYPE_CHECKING, Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape
from markupsafe import Markup

from folio_builder.constants.themes import FONT_AWESOME_URL

if TYPE_CHECKING:
    from folio_builder.constants.themes import ThemeStyle
    from folio_builder.render.document import PortfolioDocument

__all__ = ["PortfolioTemplate"]

# ---------------------------------------------------------------------------
# Template sources
# ---------------------------------------------------------------------------

_STYLES_CSS = """\
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
  font-family: {{ s.font_family }};
  line-height: 1.5;
  color: {{ s.text_color }};
  background-color: {{ s.background_color }};
}
.container { max-width: 1000px; margin: 0 auto; padding: 2rem; }
.header {
  text-align: center;
  margin-bottom: 3rem;
  padding: {{ s.header_padding }};
  color: {{ s.header_text_color }};
  background-color: {{ s.header_background }};
  border-bottom: {{ s.header_border }};
}
.header h1 { font-size: 2.5rem; margin-bottom: 0.5rem; }
.header h2 { font-size: 1.5rem; font-weight: 400; color: {{ s.subtitle_color }}; }
.profile-photo {
  width: 150px;
  height: 150px;
  margin: 0 auto 1.5rem;
  border-radius: 50%;
  overflow: hidden;
  border: 4px solid {{ s.photo_border_color }};
}
.profile-photo img { width: 100%; height: 100%; object-fit: cover; object-position: center; }
.section {
  margin-bottom: 3rem;
  background-color: {{ s.section_background }};
  padding: 2rem;
  border-radius: {{ s.corner_radius }};
  box-shadow: {{ s.shadow }};
}
.section-title {
  font-size: 1.5rem;
  margin-bottom: 1.5rem;
  padding-bottom: 0.5rem;
  border-bottom: 2px solid {{ s.title_border_color }};
  color: {{ s.heading_color }};
}
.bio { font-size: 1.125rem; color: {{ s.body_color }}; }
.skills { display: flex; flex-wrap: wrap; gap: 0.5rem; }
.skill {
  background-color: {{ s.skill_background }};
  color: {{ s.skill_color }};
  padding: 0.5rem 1rem;
  border-radius: 0.25rem;
  font-size: 0.875rem;
}
.experience-item, .project-item { margin-bottom: 2rem; }
.experience-item h3, .project-item h3 {
  font-size: 1.25rem;
  margin-bottom: 0.25rem;
  color: {{ s.heading_color }};
}
.experience-item .company, .project-item .tech {
  font-size: 1rem;
  color: {{ s.accent_color }};
  margin-bottom: 0.25rem;
}
.experience-item .date, .project-item .date {
  font-size: 0.875rem;
  color: {{ s.muted_color }};
  margin-bottom: 0.5rem;
}
.experience-item p, .project-item p { font-size: 1rem; color: {{ s.body_color }}; }
.project-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
  gap: 2rem;
}
.project-item img { width: 100%; border-radius: {{ s.corner_radius }}; margin-bottom: 0.75rem; }
.project-links { display: flex; gap: 1rem; margin-top: 1rem; }
.project-links a {
  color: {{ s.accent_color }};
  text-decoration: none;
  font-size: 0.875rem;
  display: flex;
  align-items: center;
}
.project-links a i { margin-right: 0.25rem; }
.contact {
  display: flex;
  justify-content: center;
  flex-wrap: wrap;
  gap: 1.5rem;
  margin-top: 1rem;
  color: {{ s.body_color }};
}
.contact-item { display: flex; align-items: center; }
.contact-item a { color: inherit; text-decoration: none; }
.contact-item i { margin-right: 0.5rem; color: {{ s.accent_color }}; }
.page-break { page-break-after: always; break-after: page; }
@media print {
  body { padding: 0; }
  .no-print { display: none; }
}
"""

_PAGE_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ doc.page_title }}</title>
{% for href in stylesheets %}
  <link href="{{ href }}" rel="stylesheet">
{% endfor %}
  <style>
{{ css }}
  </style>
</head>
<body class="mode-{{ mode }}">
  <div class="container">
    <header class="header">
{% if doc.header.photo_url %}
      <div class="profile-photo"><img src="{{ doc.header.photo_url }}" alt="{{ doc.header.name }}"></div>
{% endif %}
      <h1>{{ doc.header.name }}</h1>
      <h2>{{ doc.header.title }}</h2>
    </header>
{% for section in doc.sections %}
{% if section.kind == page_break_before %}
    <div class="page-break"></div>
{% endif %}
    <section class="section" id="{{ section.kind }}">
      <h2 class="section-title">{{ section.title }}</h2>
{% if section.kind == "about" %}
      <p class="bio">{{ doc.bio }}</p>
{% elif section.kind == "skills" %}
      <div class="skills">
{% for skill in doc.skills %}
        <div class="skill">{{ skill }}</div>
{% endfor %}
      </div>
{% elif section.kind == "experience" %}
{% for item in doc.experiences %}
      <div class="experience-item">
        <h3>{{ item.position }}</h3>
        <div class="company">{{ item.company }}</div>
{% if item.dates %}
        <div class="date">{{ item.dates }}</div>
{% endif %}
        <p>{{ item.description }}</p>
      </div>
{% endfor %}
{% elif section.kind == "projects" %}
      <div class="project-grid">
{% for card in doc.projects %}
        <div class="project-item">
{% if card.image %}
          <img src="{{ card.image }}" alt="{{ card.title }}">
{% endif %}
          <h3>{{ card.title }}</h3>
{% if card.technologies %}
          <div class="tech">{{ card.technologies }}</div>
{% endif %}
{% if card.dates %}
          <div class="date">{{ card.dates }}</div>
{% endif %}
          <p>{{ card.description }}</p>
{% if card.links %}
          <div class="project-links">
{% for link in card.links %}
            <a href="{{ link.href }}" target="_blank" rel="noopener noreferrer"><i class="{{ link.icon }}"></i> {{ link.label }}</a>
{% endfor %}
          </div>
{% endif %}
        </div>
{% endfor %}
      </div>
{% elif section.kind == "contact" %}
      <div class="contact">
{% for item in doc.contacts %}
        <div class="contact-item"><i class="{{ item.icon }}" title="{{ item.label }}"></i> {% if item.href %}<a href="{{ item.href }}">{{ item.text }}</a>{% else %}{{ item.text }}{% endif %}</div>
{% endfor %}
      </div>
{% endif %}
    </section>
{% endfor %}
{% if print_notice %}
    <div class="no-print">
      <p style="text-align: center; margin-top: 2rem;">{{ print_notice }}</p>
    </div>
{% endif %}
  </div>
{% if auto_print %}
  <script>
    setTimeout(function () {
      window.print();
      setTimeout(function () { window.close(); }, 500);
    }, 1000);
  </script>
{% endif %}
</body>
</html>
"""


@cache
def _environment() -> Environment:
    return Environment(
        loader=DictLoader({"page.html": _PAGE_HTML, "styles.css": _STYLES_CSS}),
        autoescape=select_autoescape(enabled_extensions=("html",), default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class PortfolioTemplate(ABC):
    """Interface that every portfolio output mode must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the output mode."""

    @abstractmethod
    def style_for(self, theme: str | None) -> ThemeStyle:
        """Return the style bundle used for a record with *theme*."""

    @abstractmethod
    def page_options(self) -> dict[str, Any]:
        """Mode-specific layout switches passed to ``page.html``."""

    def build(self, document: PortfolioDocument, theme: str | None) -> str:
        """Serialize *document* into a self-contained HTML page."""
        env = _environment()
        style = self.style_for(theme)
        css = env.get_template("styles.css").render(s=style)
        stylesheets = [style.font_url, FONT_AWESOME_URL]

        context: dict[str, Any] = {
            "mode": self.name,
            "page_break_before": "",
            "print_notice": "",
            "auto_print": False,
        }
        context.update(self.page_options())
        return env.get_template("page.html").render(
            doc=document,
            css=Markup(css),
            stylesheets=stylesheets,
            **context,
        )
