"""
Display state for a single analysis widget.
"""

from typing import Optional

from .analyzer import CodeComplexityAnalyzer
from .models import DEFAULT_LANGUAGE, AnalysisRequest, AnalysisResult, Language


class AnalysisSession:
    """
    Holds the input code, selected language, loading flag and the result
    on display.

    Each call to analyze() gets a sequence number. A completion is shown
    only if no newer analysis started in the meantime, so overlapping calls
    cannot overwrite a newer result with an older one.
    """

    def __init__(
        self,
        analyzer: CodeComplexityAnalyzer,
        code: str = "",
        language: Language = DEFAULT_LANGUAGE,
    ):
        self.analyzer = analyzer
        self.code = code
        self.language: Language = language
        self.loading = False
        self.result = AnalysisResult.initial()
        self._sequence = 0

    @property
    def sequence(self) -> int:
        return self._sequence

    def is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    async def analyze(self, code: Optional[str] = None) -> AnalysisResult:
        """Analyze the current code and return this call's own result."""
        if code is not None:
            self.code = code
        request = AnalysisRequest(code=self.code, language=self.language)

        # Blank input makes no call, so it must not supersede one in flight
        if request.is_blank:
            self.result = await self.analyzer.analyze(request, previous=self.result)
            return self.result

        self._sequence += 1
        sequence = self._sequence
        self.loading = True
        self.result = AnalysisResult.pending()

        try:
            result = await self.analyzer.analyze(request, previous=self.result)
        finally:
            if self.is_current(sequence):
                self.loading = False

        if self.is_current(sequence):
            self.result = result
        return result
