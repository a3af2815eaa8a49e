"""
Plain-text résumé rendering.

Used by the `show` command to print a résumé to the terminal.  The
layout mirrors the section order of the exported document.
"""

from __future__ import annotations

from typing import List

from .schema import ResumeRecord


def format_resume(resume: ResumeRecord) -> str:
    info = resume.personal_info
    lines: List[str] = [
        info.name,
        f"Location: {info.location}",
        f"Website: {info.website}",
        f"Contact: {info.contact}",
        "",
        "Summary",
        f"  {resume.summary}",
        "",
        "Work experience",
    ]
    for job in resume.work_experience:
        lines.append(f"  {job.title} – {job.company} ({job.period})")
        if job.description:
            lines.append(f"    {job.description}")
    lines += ["", "Skills", f"  {', '.join(resume.skills)}", "", "Education"]
    for edu in resume.education:
        lines.append(f"  {edu.school}, {edu.degree} ({edu.period})")
    lines += ["", "Languages", f"  {', '.join(resume.languages)}"]
    return "\n".join(lines)
