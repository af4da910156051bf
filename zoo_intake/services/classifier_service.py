"""Business logic for turning intake records into typed animals."""

import logging
from collections.abc import Iterable

from zoo_intake.models.animal import (
    GENERIC_CHARACTERISTIC,
    AnimalRecord,
    Bear,
    GenericAnimal,
    Hyena,
    IntakeRecord,
    Lion,
    Tiger,
)

logger = logging.getLogger(__name__)

# Exact, case-sensitive species names with a dedicated variant
SPECIES_VARIANTS: dict[str, type[Hyena | Lion | Tiger | Bear]] = {
    "Hyena": Hyena,
    "Lion": Lion,
    "Tiger": Tiger,
    "Bear": Bear,
}


def create_animal(species: str, name: str, age: int) -> AnimalRecord:
    """Build the variant matching ``species`` with default attributes.

    Unknown species (including misspelled or differently-cased known ones)
    become a GenericAnimal carrying the species string unchanged.
    """
    variant = SPECIES_VARIANTS.get(species)
    if variant is None:
        return GenericAnimal(name=name, age=age, species=species)
    return variant(name=name, age=age)


def classify_records(records: Iterable[IntakeRecord]) -> list[AnimalRecord]:
    """Classify intake records, keeping arrival order."""
    animals = [create_animal(r.species, r.name, r.age) for r in records]
    logger.debug("Classified %d animals", len(animals))
    return animals


def sound(animal: AnimalRecord) -> str:
    """Return the sound the animal makes."""
    if animal.kind == "hyena":
        return "Hee-hee-hee!"
    if animal.kind == "lion":
        return "ROAR!"
    if animal.kind == "tiger":
        return "Growl!"
    if animal.kind == "bear":
        return "Zzzzz..." if animal.is_hibernating else "GROWL!"
    if animal.kind == "generic":
        return "Generic animal sound"
    raise ValueError(f"unknown animal kind: {animal.kind}")


def special_characteristic(animal: AnimalRecord) -> str:
    """Describe what sets this animal apart, or the generic sentinel."""
    if animal.kind == "hyena":
        return "Laughing hyena" if animal.is_laughing else "Not currently laughing"
    if animal.kind == "lion":
        if animal.is_male:
            return f"Male lion with {animal.mane_length:f} inch mane"
        return "Female lion (huntress)"
    if animal.kind == "tiger":
        return f"Has approximately {animal.stripe_count} stripes"
    if animal.kind == "bear":
        suffix = " (hibernating)" if animal.is_hibernating else ""
        return f"{animal.bear_type} bear{suffix}"
    if animal.kind == "generic":
        return GENERIC_CHARACTERISTIC
    raise ValueError(f"unknown animal kind: {animal.kind}")
