"""
Data models for code complexity analysis.

Pydantic models shared by the analyzer, the session and the HTTP layer.
Field names use the camelCase keys the model is asked to return.
"""

from typing import Literal, Optional, get_args

from pydantic import BaseModel, Field


Language = Literal["javascript", "python", "java", "c++", "typescript"]

SUPPORTED_LANGUAGES: tuple[str, ...] = get_args(Language)
DEFAULT_LANGUAGE: Language = "java"

# Placeholders
NOT_ANALYZED = "Not analyzed yet"
NO_SUGGESTIONS_YET = "No suggestions yet"
ANALYZING = "Analyzing..."
COULD_NOT_DETERMINE = "Could not determine"
NO_SUGGESTIONS = "No suggestions provided"
ANALYSIS_FAILED = "Analysis failed"
COULD_NOT_ANALYZE = "Could not analyze code"
UNKNOWN_ERROR = "Unknown analysis error"


class AnalysisRequest(BaseModel):
    """Code and language submitted for analysis."""

    code: str = Field(default="", description="Source code to analyze")
    language: Language = Field(default=DEFAULT_LANGUAGE, description="Programming language")

    @property
    def is_blank(self) -> bool:
        return not self.code.strip()


class AnalysisResult(BaseModel):
    """
    Complexity analysis result as rendered by the results panel.

    Every text field always holds a real value or a placeholder.
    correctedCode is empty only before the first analysis completes.
    """

    timeComplexity: str = Field(description="Big O time complexity")
    spaceComplexity: str = Field(description="Big O space complexity")
    suggestions: str = Field(description="Brief optimization suggestions")
    correctedCode: str = Field(description="Fixed code, or the original if correct")
    error: Optional[str] = Field(default=None, description="Error message, if any")

    @classmethod
    def initial(cls) -> "AnalysisResult":
        return cls(
            timeComplexity=NOT_ANALYZED,
            spaceComplexity=NOT_ANALYZED,
            suggestions=NO_SUGGESTIONS_YET,
            correctedCode="",
        )

    @classmethod
    def pending(cls) -> "AnalysisResult":
        return cls(
            timeComplexity=ANALYZING,
            spaceComplexity=ANALYZING,
            suggestions=ANALYZING,
            correctedCode="",
        )

    @classmethod
    def failure(cls, code: str, message: Optional[str] = None) -> "AnalysisResult":
        """Result shown when an analysis fails for any reason."""
        return cls(
            timeComplexity=ANALYSIS_FAILED,
            spaceComplexity=ANALYSIS_FAILED,
            suggestions=COULD_NOT_ANALYZE,
            correctedCode=code,
            error=message or UNKNOWN_ERROR,
        )

    def with_error(self, message: str) -> "AnalysisResult":
        return self.model_copy(update={"error": message})
