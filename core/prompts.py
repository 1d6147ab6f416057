"""
Prompt templates for code complexity analysis.
"""


RESPONSE_SCHEMA = """{
  "timeComplexity": "Big O time complexity (e.g., O(n))",
  "spaceComplexity": "Big O space complexity (e.g., O(1))",
  "suggestions": "Brief optimization suggestions",
  "correctedCode": "Fixed code if errors exist or original if correct"
}"""


def build_analysis_prompt(code: str, language: str) -> str:
    """
    Build the analysis prompt for the LLM.

    Args:
        code: Source code to analyze
        language: Language tag used for the fenced code block

    Returns:
        Formatted prompt string
    """
    return f"""Analyze this {language} code and provide ONLY a JSON response with these exact fields:
{RESPONSE_SCHEMA}

Code to analyze:
```{language}
{code}
```"""
