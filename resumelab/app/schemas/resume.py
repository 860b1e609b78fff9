"""
Resume Pydantic schemas - generated resume (LLM output) and resume document (render input)
"""
from typing import List

from pydantic import BaseModel, Field


# --- Nested schemas ---
class ExperienceEntry(BaseModel):
    company: str = ""
    role: str = ""
    startDate: str = ""
    endDate: str = ""
    bullets: List[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class ProjectEntry(BaseModel):
    name: str = ""
    description: str = ""


class ResumeDocument(BaseModel):
    """Resume content rendered into PDF/DOCX downloads."""
    name: str = ""
    contactInfo: str = ""
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class GeneratedResume(BaseModel):
    """Resume written by the LLM from free-text career details."""
    name: str = ""
    contactInfo: str = ""
    summary: str = ""
    experienceBullets: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    resumeMarkdown: str = ""

    model_config = {"extra": "ignore"}
