"""
Merge a confirmed import result into the live resume document.

The live document keeps its identity; imported content replaces the
section lists (live projects stay when the import has none), while the
profile is merged field by field so that fields the import missed keep
their current values.
"""
import logging
import time

from extraction.schema_models import PartialResumeResult, Profile, Resume

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ('full_name', 'email', 'phone', 'link')


def merge_partial_resume(current: Resume, partial: PartialResumeResult) -> Resume:
    """Return a new Resume with the partial result applied on top of current."""
    profile_updates = {
        name: getattr(partial.profile, name)
        for name in PROFILE_FIELDS
        if getattr(partial.profile, name)
    }
    profile = Profile(**{**current.profile.model_dump(), **profile_updates})

    updates = {
        'updated_at': int(time.time() * 1000),
        'title': partial.title,
        'language': partial.language,
        'profile': profile,
        'educations': [e.model_copy() for e in partial.educations],
        'experiences': [e.model_copy() for e in partial.experiences],
        'skills': partial.skills.model_copy(),
        'custom_sections': [s.model_copy() for s in partial.custom_sections],
    }
    # Imports that render projects as a custom section carry no project entries
    if partial.projects:
        updates['projects'] = [p.model_copy() for p in partial.projects]

    merged = current.model_copy(deep=True, update=updates)

    logger.info(
        f"Merged import {partial.id} into resume {current.id} "
        f"(profile fields updated: {', '.join(profile_updates) or 'none'})"
    )
    return merged
