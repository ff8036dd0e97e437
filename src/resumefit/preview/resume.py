"""Structured resume content as supplied by the editing front-end."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def format_url(url: str | None) -> str:
    """Return an absolute URL, defaulting to https when no scheme is given."""
    if not url:
        return ""
    if not url.startswith("http"):
        return "https://" + url
    return url


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ("" if value is None else str(value))


def _items(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    raw = data.get(key)
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


@dataclass(frozen=True)
class SkillGroup:
    category: str
    skills: str


@dataclass(frozen=True)
class Experience:
    company: str = ""
    location: str = ""
    role: str = ""
    duration: str = ""
    points: str = ""

    @property
    def bullet_points(self) -> list[str]:
        """Comma-separated points, trimmed, empty entries dropped."""
        if not self.points.strip():
            return []
        return [p.strip() for p in self.points.split(",") if p.strip()]


@dataclass(frozen=True)
class Education:
    institution: str = ""
    location: str = ""
    degree: str = ""
    year: str = ""
    performance: str = ""


@dataclass(frozen=True)
class Project:
    title: str = ""
    subtitle: str = ""
    description: str = ""


@dataclass(frozen=True)
class Certification:
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class ResumeData:
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""
    skills: list[SkillGroup] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    certifications: list[Certification] = field(default_factory=list)

    @property
    def has_contact(self) -> bool:
        return bool(self.email or self.phone or self.linkedin or self.github)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResumeData:
        """Build from the front-end's JSON shape; unknown keys are ignored."""
        return cls(
            name=_str(data.get("name")),
            email=_str(data.get("email")),
            phone=_str(data.get("phone")),
            location=_str(data.get("location")),
            linkedin=_str(data.get("linkedin")),
            github=_str(data.get("github")),
            summary=_str(data.get("summary")),
            skills=[
                SkillGroup(category=_str(s.get("category")), skills=_str(s.get("skills")))
                for s in _items(data, "skills")
            ],
            experience=[
                Experience(
                    company=_str(e.get("company")),
                    location=_str(e.get("location")),
                    role=_str(e.get("role")),
                    duration=_str(e.get("duration")),
                    points=_str(e.get("points")),
                )
                for e in _items(data, "experience")
            ],
            education=[
                Education(
                    institution=_str(e.get("institution")),
                    location=_str(e.get("location")),
                    degree=_str(e.get("degree")),
                    year=_str(e.get("year")),
                    performance=_str(e.get("performance")),
                )
                for e in _items(data, "education")
            ],
            projects=[
                Project(
                    title=_str(p.get("title")),
                    subtitle=_str(p.get("subtitle")),
                    description=_str(p.get("description")),
                )
                for p in _items(data, "projects")
            ],
            certifications=[
                Certification(title=_str(c.get("title")), description=_str(c.get("description")))
                for c in _items(data, "certifications")
            ],
        )


def load_resume(path: Path) -> ResumeData:
    """Load resume content from a JSON file.

    Raises:
        ValueError: If the file is not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid resume JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Resume JSON in {path} must be an object, got {type(data).__name__}")
    return ResumeData.from_dict(data)


__all__ = [
    "Certification",
    "Education",
    "Experience",
    "Project",
    "ResumeData",
    "SkillGroup",
    "format_url",
    "load_resume",
]
