"""The creature record stored in the catalogue."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Creature:
    """A mythical creature, keyed by its creature ID."""

    creature_id: str = "dummy"
    name: str = "dummy"
    category: str = "dummy"
    history: str = "dummy"
    habitat: str = "dummy"
    description: str = "dummy"
    relevant_year: int = 0

    def vertical(self) -> str:
        """Return the creature as one labelled field per line."""
        return (
            f"Creature ID: {self.creature_id}\n"
            f"Name: {self.name}\n"
            f"Category: {self.category}\n"
            f"History: {self.history}\n"
            f"Habitat: {self.habitat}\n"
            f"Description: {self.description}\n"
            f"Year: {self.relevant_year}\n"
        )