"""
Response interpreter.

Turns raw model output into an AnalysisResult. The output is nominally JSON
but comes from a generative model, so parsing runs through an ordered chain
of strategies and each field is defaulted on its own.
"""
from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .config import logger
from .errors import ResponseParseError
from .models import COULD_NOT_DETERMINE, NO_SUGGESTIONS, AnalysisResult


BRACED_REGION = re.compile(r"\{[\s\S]*\}")

NOT_JSON = "Response was not in JSON format"
UNPARSEABLE = "Could not parse analysis response"


@dataclass
class ParseOutcome:
    """Result of a single parse strategy."""

    ok: bool
    data: dict[str, Any] = field(default_factory=dict)
    reason: Optional[str] = None

    @classmethod
    def success(cls, data: dict[str, Any]) -> "ParseOutcome":
        return cls(ok=True, data=data)

    @classmethod
    def failed(cls, reason: str) -> "ParseOutcome":
        return cls(ok=False, reason=reason)


def _decode_object(text: str) -> ParseOutcome:
    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as e:
        return ParseOutcome.failed(f"invalid JSON: {e}")
    if not isinstance(value, dict):
        return ParseOutcome.failed(f"expected a JSON object, got {type(value).__name__}")
    return ParseOutcome.success(value)


def parse_whole_text(text: str) -> ParseOutcome:
    """Parse the full response as JSON."""
    return _decode_object(text)


def parse_braced_region(text: str) -> ParseOutcome:
    """Parse the region from the first '{' through the last '}'."""
    match = BRACED_REGION.search(text)
    if match is None:
        return ParseOutcome.failed("no braced region")
    return _decode_object(match.group(0))


PARSE_STRATEGIES: tuple[Callable[[str], ParseOutcome], ...] = (
    parse_whole_text,
    parse_braced_region,
)


def parse_response(text: str) -> dict[str, Any]:
    """
    Run the parse strategies in order and return the first parsed object.

    Raises:
        ResponseParseError: If no strategy succeeds
    """
    for strategy in PARSE_STRATEGIES:
        outcome = strategy(text)
        if outcome.ok:
            return outcome.data
        logger.debug("%s failed: %s", strategy.__name__, outcome.reason)

    if BRACED_REGION.search(text) is None:
        raise ResponseParseError(NOT_JSON)
    raise ResponseParseError(UNPARSEABLE)


def _as_text(value: Any) -> Optional[str]:
    # Falsy values count as missing
    if not value:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "\n".join(str(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def validate_fields(data: dict[str, Any], code: str) -> AnalysisResult:
    """Fill each missing or empty field with its default."""
    return AnalysisResult(
        timeComplexity=_as_text(data.get("timeComplexity")) or COULD_NOT_DETERMINE,
        spaceComplexity=_as_text(data.get("spaceComplexity")) or COULD_NOT_DETERMINE,
        suggestions=_as_text(data.get("suggestions")) or NO_SUGGESTIONS,
        correctedCode=_as_text(data.get("correctedCode")) or code,
    )


def interpret_response(text: str, code: str) -> AnalysisResult:
    """
    Interpret raw model output.

    Args:
        text: Raw text returned by the model
        code: The code that was analyzed, used as the correctedCode default

    Returns:
        AnalysisResult with no error set

    Raises:
        ResponseParseError: If the text holds no parseable JSON object
    """
    return validate_fields(parse_response(text), code)
