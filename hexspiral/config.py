"""Validated configuration for a spiral search run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .tiles import LookupStrategy


class ExhaustionPolicy(str, Enum):
    """What to do when a bounded map runs out before the target is reached."""

    EXTEND = "extend"
    FAIL = "fail"


class SearchConfig(BaseModel):
    """Compiled-in search parameters; the command line accepts none."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_count: int = Field(default=2000, ge=1)
    strategy: LookupStrategy = Field(default=LookupStrategy.FORMULA)
    ring_bound: int = Field(default=400, ge=1)
    on_exhaustion: ExhaustionPolicy = Field(default=ExhaustionPolicy.EXTEND)
    growth_factor: int = Field(default=2, ge=2)
    pause: bool = Field(default=True)

    @property
    def bounded(self) -> bool:
        """Whether the configured lookup only covers a finite prefix."""

        return self.strategy is LookupStrategy.MAP
