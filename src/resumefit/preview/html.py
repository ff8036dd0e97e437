"""HTML rendering of the resume preview.

The page markup mirrors the on-screen preview: a ``#resume-page`` card at A4
width whose child sizes are expressed in ``em`` so that changing the root font
size rescales the whole layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined

from resumefit.preview.resume import ResumeData, format_url

A4_WIDTH_PX = 794  # 210mm at 96dpi
A4_HEIGHT_PX = 1123  # 297mm at 96dpi
BASE_FONT_PX = 14

_STYLES = """
body { margin: 0; background: #eef0f3; font-family: Helvetica, Arial, sans-serif; }
#resume-page {
  box-sizing: border-box; width: {{ page_width }}px;
  margin: 24px auto; padding: 30px; background: #fff; color: #111;
  border: 1px solid #d0d4da; border-radius: 6px; box-shadow: 0 4px 16px rgba(0,0,0,.12);
  font-size: {{ base_font }}px; line-height: 1.35;
}
#resume-page h1 { font-size: 2em; margin: 0 0 .2em; }
#resume-page h2, #resume-page h3 { font-size: 1.15em; margin: .9em 0 .35em; }
#resume-page .section-title { border-bottom: 1px solid #333; letter-spacing: .04em; }
#resume-page p { margin: .25em 0; }
#resume-page a { color: #1a4fa0; text-decoration: none; }
.center-text { text-align: center; }
.skill-row { display: flex; gap: .6em; margin: .15em 0; }
.skill-category { font-weight: bold; min-width: 11em; }
.exp-header, .exp-subheader, .education-header, .education-details {
  display: flex; justify-content: space-between;
}
.experience-block { margin-bottom: .6em; }
.exp-points, .education-list, .projects-list, .certifications-list { margin: .2em 0; padding-left: 1.3em; }
.education-item, .project-item, .certification-item { margin-bottom: .25em; }
"""

_PAGE = """<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>{% include "styles.css" %}</style>
</head>
<body>
<div id="resume-page">
{% if data.name %}<h1 class="center-text">{{ data.name }}</h1>{% endif %}
{% if data.has_contact %}
<p class="center-text">{{ data.email }}
{%- if data.phone %} | {{ data.phone }}{% endif %}
{%- if data.linkedin %} | <a href="{{ linkedin_url }}" target="_blank" rel="noreferrer">LinkedIn</a>{% endif %}
{%- if data.github %} | <a href="{{ github_url }}" target="_blank" rel="noreferrer">GitHub</a>{% endif %}</p>
{% endif %}
{% if data.summary %}
<h3>Professional Summary</h3>
<p>{{ data.summary }}</p>
{% endif %}
{% if data.skills %}
<h3>Core Competences</h3>
{% for s in data.skills %}
<div class="skill-row"><div class="skill-category">{{ s.category }}</div><div class="skill-values">{{ s.skills }}</div></div>
{% endfor %}
{% endif %}
{% if data.experience %}
<h2 class="section-title">PROFESSIONAL EXPERIENCE</h2>
{% for exp in data.experience %}
<div class="experience-block">
<div class="exp-header"><strong>{{ exp.company }}</strong><span>{{ exp.location }}</span></div>
<div class="exp-subheader"><i>{{ exp.role }}</i><i>{{ exp.duration }}</i></div>
{% if exp.bullet_points %}
<ul class="exp-points">
{% for point in exp.bullet_points %}<li>{{ point }}</li>
{% endfor %}</ul>
{% endif %}
</div>
{% endfor %}
{% endif %}
{% if data.education %}
<h3>Education</h3>
<ul class="education-list">
{% for e in data.education %}
<li class="education-item">
<div class="education-header"><strong>{{ e.institution }}</strong><span class="education-location">{{ e.location }}</span></div>
<div class="education-details"><i>{{ e.degree }}</i><span class="education-year">{{ e.year }}</span></div>
{% if e.performance %}<div class="education-performance"><i>{{ e.performance }}</i></div>{% endif %}
</li>
{% endfor %}
</ul>
{% endif %}
{% if data.projects %}
<h3>Key Technical Projects</h3>
<ul class="projects-list">
{% for p in data.projects %}
<li class="project-item"><strong>{{ p.title }}</strong>
{%- if p.subtitle %}<span class="project-subtitle"> ({{ p.subtitle }})</span>{% endif -%}
<span class="project-text">: {{ p.description }}</span></li>
{% endfor %}
</ul>
{% endif %}
{% if data.certifications %}
<h3>Certifications &amp; Awards</h3>
<ul class="certifications-list">
{% for c in data.certifications %}
<li class="certification-item"><strong>{{ c.title }}:</strong> {{ c.description }}</li>
{% endfor %}
</ul>
{% endif %}
</div>
</body>
</html>
"""


@dataclass(frozen=True)
class PreviewTemplates:
    env: Environment

    def render_page(self, context: dict[str, Any]) -> str:
        tpl = self.env.get_template("page.html")
        return str(tpl.render(**context))


def create_environment() -> PreviewTemplates:
    loader = DictLoader({"page.html": _PAGE, "styles.css": _STYLES})
    env = Environment(loader=loader, undefined=StrictUndefined, autoescape=True)
    return PreviewTemplates(env=env)


def render_preview_html(data: ResumeData, *, base_font: float = BASE_FONT_PX) -> str:
    templates = create_environment()
    return templates.render_page(
        {
            "data": data,
            "title": data.name or "Resume",
            "linkedin_url": format_url(data.linkedin),
            "github_url": format_url(data.github),
            "page_width": A4_WIDTH_PX,
            "base_font": f"{base_font:g}",
        }
    )


def write_preview_html(data: ResumeData, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_preview_html(data), encoding="utf-8")
    return path


__all__ = [
    "A4_HEIGHT_PX",
    "A4_WIDTH_PX",
    "PreviewTemplates",
    "create_environment",
    "render_preview_html",
    "write_preview_html",
]
