"""
Pydantic models for the resume import output contract.

This module provides:
1. The entities produced by one import call (profile, education, experience,
   projects, skills, custom sections)
2. PartialResumeResult, the fully formed but best-effort import result
3. Resume, the live document shape the merge step writes into

Models dump camelCase keys (by_alias) for the UI layer and accept either
field names or aliases on input.
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from core.utils import generate_id


class ImportModel(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ============================================================================
# PROFILE & ENTITIES
# ============================================================================

class ParsedProfile(ImportModel):
    """Single-value contact fields; None means 'not extracted'."""

    full_name: Optional[str] = Field(default=None, description="Person's name")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number as written")
    link: Optional[str] = Field(default=None, description="Homepage, GitHub or LinkedIn URL")


class Education(ImportModel):
    """A single education entry."""

    id: str = Field(default_factory=generate_id)
    school: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = Field(default="", description="HTML content")


class Experience(ImportModel):
    """A single work experience entry."""

    id: str = Field(default_factory=generate_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = Field(default="", description="HTML content")


class Project(ImportModel):
    """A single project entry."""

    id: str = Field(default_factory=generate_id)
    name: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = Field(default="", description="HTML content")


class SkillSection(ImportModel):
    content: str = Field(default="", description="HTML content")


class CustomSection(ImportModel):
    """Free-form section for content outside the fixed taxonomy."""

    id: str = Field(default_factory=generate_id)
    title: str = ""
    content: str = Field(default="", description="HTML content")


# ============================================================================
# RESULTS
# ============================================================================

class PartialResumeResult(ImportModel):
    """
    Output of one import call.

    Fully formed (absent values are empty, never missing) and frozen: it is
    reviewed by the user and consumed once by the merge step.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    updated_at: int = Field(description="Creation time, epoch milliseconds")
    title: str
    language: Literal["zh", "en"] = Field(description="Detected content language")
    profile: ParsedProfile = Field(default_factory=ParsedProfile)
    educations: List[Education] = Field(default_factory=list)
    experiences: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    skills: SkillSection = Field(default_factory=SkillSection)
    custom_sections: List[CustomSection] = Field(default_factory=list)


class Profile(ImportModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    link: str = ""
    summary: str = ""


class Resume(ImportModel):
    """The live, persisted resume document."""

    id: str = Field(default_factory=generate_id)
    updated_at: int = 0
    title: str = ""
    language: Literal["zh", "en"] = "en"
    profile: Profile = Field(default_factory=Profile)
    educations: List[Education] = Field(default_factory=list)
    experiences: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    skills: SkillSection = Field(default_factory=SkillSection)
    custom_sections: List[CustomSection] = Field(default_factory=list)
