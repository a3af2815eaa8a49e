"""
Résumé record types.

A `ResumeRecord` is created once from an aggregated profile and then
edited by the user.  The dataclasses are frozen: every edit goes
through one of the helpers below and returns a new record, leaving the
previous version untouched.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonalInfo:
    name: str
    location: str
    website: str
    contact: str


@dataclass(frozen=True)
class WorkExperience:
    title: str
    company: str
    period: str
    description: str


@dataclass(frozen=True)
class Education:
    school: str
    degree: str
    period: str


@dataclass(frozen=True)
class ResumeRecord:
    personal_info: PersonalInfo
    summary: str
    work_experience: Tuple[WorkExperience, ...] = ()
    skills: Tuple[str, ...] = ()
    education: Tuple[Education, ...] = ()
    languages: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        for key in ("work_experience", "skills", "education", "languages"):
            data[key] = list(data[key])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "ResumeRecord":
        info = data.get("personal_info", {}) or {}
        return cls(
            personal_info=PersonalInfo(
                name=str(info.get("name", "")),
                location=str(info.get("location", "")),
                website=str(info.get("website", "")),
                contact=str(info.get("contact", "")),
            ),
            summary=str(data.get("summary", "")),
            work_experience=tuple(WorkExperience(**entry) for entry in data.get("work_experience", []) or []),
            skills=tuple(data.get("skills", []) or []),
            education=tuple(Education(**entry) for entry in data.get("education", []) or []),
            languages=tuple(data.get("languages", []) or []),
        )


def update_resume(resume: ResumeRecord, **changes: object) -> ResumeRecord:
    """Return a copy of `resume` with top‑level fields replaced.

    List‑valued fields may be passed as any iterable; they are stored
    as tuples.
    """
    for key in ("work_experience", "skills", "education", "languages"):
        if key in changes:
            changes[key] = tuple(changes[key])  # type: ignore[arg-type]
    return replace(resume, **changes)


def update_personal_info(resume: ResumeRecord, **changes: str) -> ResumeRecord:
    """Return a copy of `resume` with personal info fields replaced."""
    return replace(resume, personal_info=replace(resume.personal_info, **changes))


def update_work_experience(resume: ResumeRecord, index: int, **changes: str) -> ResumeRecord:
    """Return a copy of `resume` with one work entry edited."""
    entries = list(resume.work_experience)
    entries[index] = replace(entries[index], **changes)
    return replace(resume, work_experience=tuple(entries))


def add_work_experience(resume: ResumeRecord, entry: WorkExperience) -> ResumeRecord:
    return replace(resume, work_experience=resume.work_experience + (entry,))


def remove_work_experience(resume: ResumeRecord, index: int) -> ResumeRecord:
    entries = list(resume.work_experience)
    del entries[index]
    return replace(resume, work_experience=tuple(entries))


def update_education(resume: ResumeRecord, index: int, **changes: str) -> ResumeRecord:
    """Return a copy of `resume` with one education entry edited."""
    entries = list(resume.education)
    entries[index] = replace(entries[index], **changes)
    return replace(resume, education=tuple(entries))


def add_education(resume: ResumeRecord, entry: Education) -> ResumeRecord:
    return replace(resume, education=resume.education + (entry,))


def remove_education(resume: ResumeRecord, index: int) -> ResumeRecord:
    entries = list(resume.education)
    del entries[index]
    return replace(resume, education=tuple(entries))


def save_resume_json(resume: ResumeRecord, out_path: str) -> None:
    """Serialize a `ResumeRecord` to JSON.

    Args:
        resume: The résumé to save.
        out_path: Path where the JSON file will be written.
    """
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(resume.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Wrote résumé JSON to %s", out_path)


def load_resume_json(path: str) -> ResumeRecord:
    with open(path, "r", encoding="utf-8") as f:
        return ResumeRecord.from_dict(json.load(f))
