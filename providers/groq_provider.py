"""
Groq LLM Provider for code complexity analysis.

Sends a single chat-completions request with JSON mode requested.
"""

from typing import Optional, Any

import httpx

from core.config import settings, logger
from core.errors import EmptyResponseError, TransportError


class GroqProvider:
    """
    Groq LLM provider with JSON mode support.

    No retries: a failed call is reported to the caller as is.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Groq provider.

        Raises:
            TransportError: If GROQ_API_KEY not set
        """
        self.api_key = api_key if api_key is not None else settings.GROQ_API_KEY
        if not self.api_key:
            raise TransportError(
                "GROQ_API_KEY environment variable not set. "
                "Get your key from https://console.groq.com"
            )

        self.model = model or settings.GROQ_MODEL
        self.temperature = settings.TEMPERATURE if temperature is None else temperature
        self.url = f"{(base_url or settings.GROQ_BASE_URL).rstrip('/')}/chat/completions"
        self._client: Optional[httpx.AsyncClient] = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(settings.REQUEST_TIMEOUT_SECONDS),
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self):
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

    async def _make_request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Make API request to Groq.

        Args:
            payload: Chat-completions request body

        Returns:
            API response dict
        """
        client = await self._get_client()

        try:
            response = await client.post(
                self.url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if response.status_code != 200:
            error_detail = response.text
            try:
                error_json = response.json()
                error_detail = error_json.get("error", {}).get("message") or error_detail
            except (ValueError, AttributeError):
                pass
            raise TransportError(
                f"API error ({response.status_code}): {error_detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"API returned a non-JSON body: {e}") from e

    async def complete(self, prompt: str) -> str:
        """
        Get a completion from Groq.

        Args:
            prompt: User prompt

        Returns:
            Raw message content

        Raises:
            TransportError: If the call fails
            EmptyResponseError: If the response carries no content
        """
        response = await self._make_request(self.build_payload(prompt))

        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None

        if not content:
            raise EmptyResponseError()

        logger.debug("Raw Groq response: %s", content[:500])
        return content
