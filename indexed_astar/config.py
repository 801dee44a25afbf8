"""Validated configuration model for search runs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchSettings(BaseModel):
    """Tunables applied to a single search invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_expansions: int | None = Field(default=None, ge=1)
    check_heap_invariants: bool = Field(default=False)
    stable_ties: bool = Field(default=False)

    @classmethod
    def default(cls) -> SearchSettings:
        """Return settings with every tunable at its default."""

        return cls()

    @property
    def bounded(self) -> bool:
        """Whether the search stops after a fixed number of expansions."""

        return self.max_expansions is not None


__all__ = ["SearchSettings"]
