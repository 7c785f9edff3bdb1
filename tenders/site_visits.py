"""Outils pour l'encodage du champ `site_visits` d'un appel d'offres.

La colonne stocke les visites dans une seule chaîne, entrées séparées par
`;`. Une entrée commençant par `✓` est une visite effectuée :

    "15/01/2025; ✓10/01/2025 matin"

Ces fonctions convertissent cette chaîne en liste de `SiteVisit` et inversement.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

COMPLETED_MARKER = "✓"
SEPARATOR = ";"


@dataclass(frozen=True)
class SiteVisit:
    text: str
    completed: bool = False

    def encode(self) -> str:
        return f"{COMPLETED_MARKER}{self.text}" if self.completed else self.text

    def toggled(self) -> "SiteVisit":
        return SiteVisit(text=self.text, completed=not self.completed)


def parse_entry(entry: str) -> SiteVisit:
    entry = entry.strip()
    if entry.startswith(COMPLETED_MARKER):
        return SiteVisit(text=entry[len(COMPLETED_MARKER):].strip(), completed=True)
    return SiteVisit(text=entry)


def parse_site_visits(value: Optional[str]) -> List[SiteVisit]:
    """Découpe une valeur `site_visits` stockée, sans les entrées vides."""
    if not value:
        return []
    return [parse_entry(entry) for entry in value.split(SEPARATOR) if entry.strip()]


def format_site_visits(visits: Iterable[SiteVisit]) -> str:
    return "; ".join(visit.encode() for visit in visits if visit.text.strip())


def toggle_site_visit(value: Optional[str], index: int) -> str:
    """Inverse le marqueur de la visite à la position `index`.

    Raises:
        IndexError: si `index` ne désigne aucune visite existante.
    """
    visits = parse_site_visits(value)
    if not 0 <= index < len(visits):
        raise IndexError(f"No site visit at position {index}")
    visits[index] = visits[index].toggled()
    return format_site_visits(visits)
