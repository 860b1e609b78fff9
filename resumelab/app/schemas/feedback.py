"""
Resume feedback Pydantic schemas - the guaranteed shape returned by POST /api/resume/feedback
"""
from typing import List, Literal, Union

from pydantic import BaseModel, Field

Score = Union[int, float]


class FeedbackCategory(BaseModel):
    name: str = "Uncategorized"
    score: Score = 5
    feedback: str = "No specific feedback provided"


class KeywordInsight(BaseModel):
    keyword: str
    count: Score = 0
    importance: Literal["high", "medium", "low"] = "medium"
    recommendation: str = "Consider adding this keyword"


class ResumeFeedback(BaseModel):
    """Sanitized analysis. Every field is always present."""
    overallScore: Score
    categories: List[FeedbackCategory] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    jobTitleMatch: str = "Professional"
    keywordAnalysis: List[KeywordInsight] = Field(default_factory=list)
    atsScore: Score


class FeedbackMetadata(BaseModel):
    processedLength: int
    analyzedDate: str
    model: str


class FeedbackResponse(BaseModel):
    success: bool = True
    data: ResumeFeedback
    metadata: FeedbackMetadata
