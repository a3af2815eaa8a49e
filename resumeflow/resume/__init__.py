"""
Résumé synthesis and editing.

This package maps an aggregated profile into an editable
`ResumeRecord`, provides immutable edit helpers and exports the
result as JSON or plain text.
"""

from .schema import (  # noqa: F401
    Education,
    PersonalInfo,
    ResumeRecord,
    WorkExperience,
    add_education,
    add_work_experience,
    load_resume_json,
    remove_education,
    remove_work_experience,
    save_resume_json,
    update_education,
    update_personal_info,
    update_resume,
    update_work_experience,
)
from .synthesize import profile_to_resume  # noqa: F401
from .report import format_resume  # noqa: F401
