"""
Profile to résumé mapping.

The mapping is deliberately simple: an X profile carries no work
history, education or e‑mail address, so those sections are seeded
with a single placeholder entry that the user is expected to correct.
"""

from __future__ import annotations

from ..normalize.schema import MAX_SKILLS, ProfileRecord
from .schema import Education, PersonalInfo, ResumeRecord, WorkExperience

NOT_SET = "not set"
PLACEHOLDER_CONTACT = "example@email.com"
PLACEHOLDER_SKILLS = ("Skill 1", "Skill 2", "Skill 3")
DEFAULT_LANGUAGES = ("Japanese",)


def build_summary(profile: ProfileRecord) -> str:
    return (
        f"{profile.display_name} is {profile.bio or 'a professional'}. "
        f"They have {profile.followers_count} followers and have been on X since "
        f"{profile.join_date or 'an unknown date'}."
    )


def profile_to_resume(profile: ProfileRecord) -> ResumeRecord:
    """Build the initial `ResumeRecord` for `profile`."""
    skills = tuple(profile.skills[:MAX_SKILLS]) or PLACEHOLDER_SKILLS
    return ResumeRecord(
        personal_info=PersonalInfo(
            name=profile.display_name,
            location=profile.location or NOT_SET,
            website=profile.website or NOT_SET,
            contact=PLACEHOLDER_CONTACT,
        ),
        summary=build_summary(profile),
        work_experience=(
            WorkExperience(
                title="Estimated job title",
                company="Estimated company",
                period="Estimated period",
                description=(
                    "Generated from the profile and recent posts. "
                    "Edit this entry to match your actual experience."
                ),
            ),
        ),
        skills=skills,
        education=(
            Education(
                school="Estimated school",
                degree="Estimated degree",
                period="Estimated period",
            ),
        ),
        languages=DEFAULT_LANGUAGES,
    )
