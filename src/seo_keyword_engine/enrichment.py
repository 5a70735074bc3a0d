"""
Entity and keyword enrichment from an external NLP provider.

This module wraps a TextRazor-compatible HTTP API. Enrichment is optional:
callers treat any failure as "unavailable" and continue with local
analysis.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from .config import DEFAULT_ENRICHMENT_URL, EngineConfig

logger = logging.getLogger(__name__)


class EnrichmentError(Exception):
    """Raised when the enrichment provider cannot be used."""
    pass


@dataclass
class EnrichmentResult:
    """Keywords and entities returned by the provider."""
    keywords: list[str] = field(default_factory=list)
    entities: list[dict] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)


class TextRazorClient:
    """
    Client for a TextRazor-compatible entity extraction API.

    Every request has a bounded timeout. Transport errors, non-success
    statuses and malformed bodies all raise EnrichmentError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = DEFAULT_ENRICHMENT_URL,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the enrichment client.

        Args:
            api_key: Provider API key. Without one the client is unavailable.
            api_url: Base URL of the provider.
            timeout: Overall request timeout in seconds.
            connect_timeout: Connection timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.api_key = api_key
        self.api_url = api_url.rstrip("/") + "/"
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: EngineConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "TextRazorClient":
        return cls(
            api_key=config.enrichment_api_key,
            api_url=config.enrichment_api_url,
            timeout=config.enrichment_timeout,
            connect_timeout=config.enrichment_connect_timeout,
            transport=transport,
        )

    @property
    def is_available(self) -> bool:
        """Check if the client is configured with an API key."""
        return bool(self.api_key)

    def extract(self, text: str) -> EnrichmentResult:
        """
        Extract keywords and entities from text.

        Args:
            text: Content to send to the provider.

        Returns:
            EnrichmentResult with keyword texts, entity annotations and the
            raw response body.

        Raises:
            EnrichmentError: If the provider is unconfigured, unreachable,
                returns a non-success status or a malformed body.
        """
        if not self.is_available:
            raise EnrichmentError("Enrichment provider is not configured")

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(
                    self.api_url,
                    headers={"X-TextRazor-Key": self.api_key},
                    data={
                        "text": text,
                        "extractors": "entities,keywords,topics",
                        "classifiers": "textrazor_moodbar",
                    },
                )
        except httpx.HTTPError as e:
            raise EnrichmentError(f"Enrichment request failed: {e}")

        if not response.is_success:
            raise EnrichmentError(
                f"Enrichment provider returned HTTP {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise EnrichmentError(f"Enrichment response is not valid JSON: {e}")

        if not isinstance(body, dict):
            raise EnrichmentError("Enrichment response is not a JSON object")

        return parse_enrichment_response(body)


def parse_enrichment_response(body: dict[str, Any]) -> EnrichmentResult:
    """
    Pull keyword texts and entities out of a provider response body.

    Items without a non-empty ``text`` are ignored.

    Args:
        body: Decoded JSON response.

    Returns:
        EnrichmentResult.

    Raises:
        EnrichmentError: If ``response`` is present but not an object, or
            its ``keywords`` or ``entities`` are not lists.
    """
    payload = body.get("response") or {}
    if not isinstance(payload, dict):
        raise EnrichmentError("Enrichment response has an unexpected shape")

    raw_keywords = payload.get("keywords") or []
    raw_entities = payload.get("entities") or []
    if not isinstance(raw_keywords, list) or not isinstance(raw_entities, list):
        raise EnrichmentError("Enrichment keywords or entities are not lists")

    keywords = []
    for item in raw_keywords:
        if isinstance(item, dict):
            text = item.get("text")
            if isinstance(text, str) and text.strip():
                keywords.append(text.strip())

    entities = [e for e in raw_entities if isinstance(e, dict)]

    logger.debug(f"Enrichment returned {len(keywords)} keywords, {len(entities)} entities")
    return EnrichmentResult(keywords=keywords, entities=entities, raw=body)
