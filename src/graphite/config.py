"""Centralized configuration for graphite."""

from __future__ import annotations

from dataclasses import dataclass

LANGUAGES: tuple[str, ...] = ("graphene", "adot")


@dataclass
class CompileConfig:
    """Configuration for one compile."""

    language: str = "graphene"
    log_level: str = "WARNING"

    def validate(self) -> CompileConfig:
        if self.language not in LANGUAGES:
            raise ValueError(f"Unknown language '{self.language}'; use {' or '.join(LANGUAGES)}")
        return self
