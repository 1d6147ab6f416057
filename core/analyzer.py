"""
Core Code Complexity Analyzer.

Builds the prompt, calls the LLM and turns every outcome into an
AnalysisResult. Nothing raised by the provider or the interpreter
escapes analyze().
"""

from typing import Optional, Protocol

from .config import logger
from .errors import AnalysisError, InputValidationError
from .interpreter import interpret_response
from .models import AnalysisRequest, AnalysisResult
from .prompts import build_analysis_prompt


class CompletionProvider(Protocol):
    async def complete(self, prompt: str) -> str: ...

    async def close(self) -> None: ...


class CodeComplexityAnalyzer:
    """
    Code complexity analyzer using LLM.

    Takes code and a language, returns a request-scoped AnalysisResult.
    """

    def __init__(self, provider: Optional[CompletionProvider] = None):
        """Initialize analyzer, optionally with a ready provider."""
        self._provider = provider
        self._in_flight = 0

    @property
    def busy(self) -> bool:
        """True while at least one analysis is waiting on the LLM."""
        return self._in_flight > 0

    async def _get_provider(self) -> CompletionProvider:
        """Get or create Groq provider."""
        if self._provider is None:
            from providers.groq_provider import GroqProvider

            self._provider = GroqProvider()
        return self._provider

    async def close(self) -> None:
        """Close provider connection."""
        if self._provider:
            await self._provider.close()
            self._provider = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def analyze(
        self,
        request: AnalysisRequest,
        previous: Optional[AnalysisResult] = None,
    ) -> AnalysisResult:
        """
        Analyze code complexity.

        Args:
            request: Code and language to analyze
            previous: Result currently on display, kept when the input is blank

        Returns:
            AnalysisResult; failures are reported through its error field
        """
        if request.is_blank:
            error = InputValidationError()
            return (previous or AnalysisResult.initial()).with_error(error.message)

        self._in_flight += 1
        try:
            provider = await self._get_provider()
            prompt = build_analysis_prompt(request.code, request.language)
            content = await provider.complete(prompt)
            return interpret_response(content, request.code)
        except AnalysisError as e:
            logger.error("Analysis failed: %s", e.message)
            return AnalysisResult.failure(request.code, e.message)
        except Exception as e:
            logger.error("Unexpected analysis error: %s: %s", type(e).__name__, e)
            return AnalysisResult.failure(request.code, str(e))
        finally:
            self._in_flight -= 1
