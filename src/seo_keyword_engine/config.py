# -*- coding: utf-8 -*-
"""
Centralized configuration for the SEO Keyword Engine.

This module provides a single configuration dataclass that controls the
optional enrichment provider, fallback behavior and suggestion limits.
"""

import os
from dataclasses import dataclass
from typing import Literal, Optional


# Type alias for the enrichment fallback profile
# - "local": Full local analysis when enrichment is unavailable (default).
# - "reduced": Word-count-scaled estimate with extractor-only suggestions.
FallbackProfile = Literal["local", "reduced"]

DEFAULT_ENRICHMENT_URL = "https://api.textrazor.com"


@dataclass
class EngineConfig:
    """
    Central configuration for analysis behavior.

    Attributes:
        enrichment_api_key: API key for the enrichment provider. None disables
            enrichment entirely and analysis runs on local heuristics only.
        enrichment_api_url: Base URL of the TextRazor-compatible provider.
        enrichment_timeout: Seconds to wait for the provider before treating
            it as unavailable.
        enrichment_connect_timeout: Seconds allowed to establish a connection.
        enrichment_keyword_limit: Maximum provider keywords merged into the
            suggestion list.

        fallback_profile: What to return when enrichment is configured but
            fails:
            - "local": complete local analysis plus one informational tip.
            - "reduced": word-count-scaled scores, extractor-only suggestions
              and a single informational tip.

        metrics_seed: Seed for the synthetic volume/difficulty placeholders.
            None gives non-deterministic values.
    """

    # Enrichment provider
    enrichment_api_key: Optional[str] = None
    enrichment_api_url: str = DEFAULT_ENRICHMENT_URL
    enrichment_timeout: float = 10.0
    enrichment_connect_timeout: float = 5.0
    enrichment_keyword_limit: int = 8

    # Degraded behavior
    fallback_profile: FallbackProfile = "local"

    # Suggestion metadata
    metrics_seed: Optional[int] = None

    @property
    def has_enrichment(self) -> bool:
        """Check if an enrichment provider is configured."""
        return bool(self.enrichment_api_key)

    @property
    def uses_reduced_fallback(self) -> bool:
        """Check if enrichment failures switch to the reduced profile."""
        return self.fallback_profile == "reduced"

    def __post_init__(self):
        """Validate configuration values."""
        if self.fallback_profile not in ("local", "reduced"):
            raise ValueError(
                f"fallback_profile must be 'local' or 'reduced', "
                f"got '{self.fallback_profile}'"
            )
        if self.enrichment_timeout <= 0:
            raise ValueError(
                f"enrichment_timeout must be > 0, got {self.enrichment_timeout}"
            )
        if self.enrichment_connect_timeout <= 0:
            raise ValueError(
                f"enrichment_connect_timeout must be > 0, "
                f"got {self.enrichment_connect_timeout}"
            )
        if self.enrichment_keyword_limit < 0:
            raise ValueError(
                f"enrichment_keyword_limit must be >= 0, "
                f"got {self.enrichment_keyword_limit}"
            )

    @classmethod
    def local_only(cls, **overrides) -> "EngineConfig":
        """Create config with enrichment disabled.

        Args:
            **overrides: Override any config values (e.g., metrics_seed=7)

        Returns:
            EngineConfig that never calls the enrichment provider
        """
        defaults = {"enrichment_api_key": None}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def from_env(cls, **overrides) -> "EngineConfig":
        """Create config from environment variables.

        Reads TEXTRAZOR_API_KEY (or SEO_API_KEY), SEO_ENRICHMENT_URL,
        SEO_ENRICHMENT_TIMEOUT and SEO_FALLBACK_PROFILE. Explicit overrides
        win over the environment.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        values: dict = {
            "enrichment_api_key": (
                os.environ.get("TEXTRAZOR_API_KEY") or os.environ.get("SEO_API_KEY")
            ),
        }

        url = os.environ.get("SEO_ENRICHMENT_URL")
        if url:
            values["enrichment_api_url"] = url

        timeout = os.environ.get("SEO_ENRICHMENT_TIMEOUT")
        if timeout:
            try:
                values["enrichment_timeout"] = float(timeout)
            except ValueError:
                raise ValueError(
                    f"SEO_ENRICHMENT_TIMEOUT must be a number, got '{timeout}'"
                )

        profile = os.environ.get("SEO_FALLBACK_PROFILE")
        if profile:
            values["fallback_profile"] = profile.strip().lower()

        values.update(overrides)
        return cls(**values)
