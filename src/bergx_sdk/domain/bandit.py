"""Request and response models for the bandit cohort endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field

from .base import WireModel


class ArmDefinition(WireModel):
    """One arm of a cohort together with its running tallies."""

    name: Annotated[str, Field(min_length=1)]
    wins: Annotated[int, Field(ge=0)] = 0
    tries: Annotated[int, Field(ge=0)] = 0
    last_reset: int | None = Field(default=None, alias="lastReset")


class CohortDefinition(WireModel):
    cohort_id: str | None = Field(default=None, alias="cohortId")
    app_id: Annotated[str, Field(min_length=1)] = Field(alias="appId")
    name: Annotated[str, Field(min_length=1)]
    total_tries: Annotated[int, Field(ge=0)] = Field(default=0, alias="totalTries")
    total_wins: Annotated[int, Field(ge=0)] = Field(default=0, alias="totalWins")
    random_selections: Annotated[int, Field(ge=0)] = Field(default=0, alias="randomSelections")
    epsilon: Annotated[float, Field(ge=0.0, le=1.0)] = 0.1
    reset_frequency: int | None = Field(default=None, alias="resetFrequency")
    arms: tuple[ArmDefinition, ...] = ()


class TryResponse(WireModel):
    """Arm picked by the service for a single trial."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    arm_name: Annotated[str, Field(min_length=1)] = Field(alias="armName")


__all__ = ["ArmDefinition", "CohortDefinition", "TryResponse"]
