"""Project input models for the Maliyet cost estimation engine."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from maliyet.models.enums import (
    BuildingType,
    FacadeType,
    FoundationType,
    HvacSystem,
    QualityLevel,
    StructuralSystem,
)


class Location(BaseModel):
    """Project location; the city drives the regional multiplier."""

    model_config = ConfigDict(frozen=True)

    city: str
    district: str = ""


class ProjectBasics(BaseModel):
    """General project parameters entered on the first form step."""

    model_config = ConfigDict(frozen=True)

    location: Location
    area: float = Field(gt=0)
    building_type: BuildingType
    quality_level: QualityLevel
    start_date: date | None = None
    completion_date: date | None = None
    special_requirements: str = ""

    @model_validator(mode="after")
    def completion_not_before_start(self) -> ProjectBasics:
        if (
            self.start_date is not None
            and self.completion_date is not None
            and self.completion_date < self.start_date
        ):
            msg = (
                f"completion_date {self.completion_date} is before "
                f"start_date {self.start_date}"
            )
            raise ValueError(msg)
        return self


class TechnicalSpecs(BaseModel):
    """Technical parameters entered on the second form step.

    Only ``floors`` and ``structural_system`` feed the cost formula; the
    remaining fields are carried along for display.
    """

    model_config = ConfigDict(frozen=True)

    floors: int = Field(ge=1, le=50)
    foundation_type: FoundationType = FoundationType.SHALLOW
    structural_system: StructuralSystem
    facade_type: FacadeType = FacadeType.BRICK
    hvac_system: HvacSystem = HvacSystem.CENTRAL
    special_installations: list[str] = Field(default_factory=list)
