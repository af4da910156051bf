"""Grouping of classified animals and rendering of the intake report."""

import logging
from collections.abc import Sequence

from zoo_intake.models.animal import GENERIC_CHARACTERISTIC, AnimalRecord, SpeciesGroup
from zoo_intake.services.classifier_service import special_characteristic

logger = logging.getLogger(__name__)

REPORT_TITLE = "Zoo Animal Intake Report"
TITLE_RULE = "=" * len(REPORT_TITLE)
SECTION_RULE = "------"


def count_by_species(animals: Sequence[AnimalRecord]) -> dict[str, int]:
    """Return the number of animals per species string."""
    counts: dict[str, int] = {}
    for animal in animals:
        counts[animal.species] = counts.get(animal.species, 0) + 1
    return counts


def group_by_species(animals: Sequence[AnimalRecord]) -> list[SpeciesGroup]:
    """Group animals by exact species string.

    Groups are sorted by species; animals inside a group keep arrival order.
    A generic animal whose species matches a known name shares that group.
    """
    by_species: dict[str, list[AnimalRecord]] = {}
    for animal in animals:
        by_species.setdefault(animal.species, []).append(animal)
    return [
        SpeciesGroup(species=species, animals=by_species[species])
        for species in sorted(by_species)
    ]


def format_animal_line(animal: AnimalRecord) -> str:
    """Render ``Name, Age years old`` plus the characteristic when it has one."""
    line = f"{animal.name}, {animal.age} years old"
    characteristic = special_characteristic(animal)
    if characteristic != GENERIC_CHARACTERISTIC:
        line += f" - {characteristic}"
    return line


def render_report(animals: Sequence[AnimalRecord]) -> str:
    """Render the full report text, one section per species."""
    groups = group_by_species(animals)
    counts = count_by_species(animals)
    lines = [REPORT_TITLE, TITLE_RULE, ""]
    for group in groups:
        lines.append(f"{group.species}s:")
        lines.append(SECTION_RULE)
        lines.extend(format_animal_line(animal) for animal in group.animals)
        lines.append(f"Total {group.species}s: {counts[group.species]}")
        lines.append("")
    lines.append(f"Total animals: {len(animals)}")
    logger.debug("Rendered %d species groups", len(groups))
    return "\n".join(lines) + "\n"
