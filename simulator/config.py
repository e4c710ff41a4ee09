"""Scanner configuration (pure data, no business logic)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from . import constants


@dataclass(frozen=True)
class ModelCandidate:
    """One backend model to try, e.g. ``ModelCandidate("claude", "claude-sonnet-4-20250514")``."""

    provider: str
    model: str

    @classmethod
    def parse(cls, spec: str) -> ModelCandidate:
        """Parse ``provider:model``."""
        provider, sep, model = spec.strip().partition(":")
        if not sep or not provider or not model:
            raise ValueError(f"Expected 'provider:model', got {spec!r}")
        return cls(provider=provider, model=model)

    def __str__(self) -> str:
        return f"{self.provider}:{self.model}"


DEFAULT_SCAN_CANDIDATES: tuple[ModelCandidate, ...] = (
    ModelCandidate(constants.PROVIDER_CLAUDE, "claude-sonnet-4-20250514"),
    ModelCandidate(constants.PROVIDER_CLAUDE, "claude-3-5-haiku-20241022"),
    ModelCandidate(constants.PROVIDER_OPENAI, "gpt-4o"),
)


@dataclass(frozen=True)
class ScanConfig:
    """Groups image-to-code scanner configuration.

    ``candidates`` is tried in order; the first model that answers wins.
    """

    candidates: tuple[ModelCandidate, ...] = field(
        default_factory=lambda: DEFAULT_SCAN_CANDIDATES
    )
    max_tokens: int = 4096

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ScanConfig:
        """Build a config, honouring ``SNIPPET_SIM_SCAN_MODELS`` when set."""
        env = os.environ if environ is None else environ
        raw = env.get(constants.SCAN_MODELS_ENV, "").strip()
        if not raw:
            return cls()
        candidates = tuple(
            ModelCandidate.parse(part) for part in raw.split(",") if part.strip()
        )
        return cls(candidates=candidates)
