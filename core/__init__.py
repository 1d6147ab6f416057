"""Core module for code complexity analysis."""

from .models import AnalysisRequest, AnalysisResult, SUPPORTED_LANGUAGES
from .analyzer import CodeComplexityAnalyzer
from .interpreter import interpret_response
from .session import AnalysisSession

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "SUPPORTED_LANGUAGES",
    "CodeComplexityAnalyzer",
    "AnalysisSession",
    "interpret_response",
]
