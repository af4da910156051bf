"""Pydantic models for intake records and classified animals."""

import struct
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Characteristic reported by animals without a species-specific rule.
# The report omits it instead of printing it.
GENERIC_CHARACTERISTIC = "No special characteristic"


class IntakeRecord(BaseModel):
    """One parsed line of the arrivals file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Animal name")
    age: int = Field(..., description="Age in years")
    species: str = Field(..., description="Species exactly as written in the input")


class Animal(BaseModel):
    """Fields shared by every animal variant."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Variant tag")
    name: str = Field(..., description="Animal name")
    age: int = Field(..., description="Age in years")
    species: str = Field(..., description="Species name used for grouping")

    def evolve(self, **changes: Any) -> "Animal":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **changes})


class Hyena(Animal):
    kind: Literal["hyena"] = "hyena"
    species: str = "Hyena"
    is_laughing: bool = Field(True, description="Whether the hyena is laughing")


class Lion(Animal):
    """A lion. Only males carry a mane."""

    kind: Literal["lion"] = "lion"
    species: str = "Lion"
    is_male: bool = Field(False, description="Male lions have a mane")
    mane_length: float = Field(0.0, description="Mane length in inches")

    @field_validator("mane_length")
    @classmethod
    def _normalize_mane_length(cls, value: float, info: ValidationInfo) -> float:
        if not info.data.get("is_male"):
            return 0.0
        # Stored at single precision
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError as exc:
            raise ValueError("mane length out of range") from exc


class Tiger(Animal):
    kind: Literal["tiger"] = "tiger"
    species: str = "Tiger"
    stripe_count: int = Field(100, description="Approximate number of stripes")


class Bear(Animal):
    kind: Literal["bear"] = "bear"
    species: str = "Bear"
    bear_type: str = Field("Grizzly", description="e.g. Grizzly, Polar, Black")
    is_hibernating: bool = Field(False, description="Whether the bear is hibernating")


class GenericAnimal(Animal):
    """Any animal whose species has no dedicated variant."""

    kind: Literal["generic"] = "generic"


AnimalRecord = Annotated[
    Hyena | Lion | Tiger | Bear | GenericAnimal,
    Field(discriminator="kind"),
]


class SpeciesGroup(BaseModel):
    """All animals sharing one species string, in arrival order."""

    species: str = Field(..., description="Species name")
    animals: list[AnimalRecord] = Field(default_factory=list, description="Animals in arrival order")

    @property
    def count(self) -> int:
        return len(self.animals)
