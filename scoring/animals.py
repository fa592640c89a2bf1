"""Animal penalty totals, weighted by each hole's turbo multiplier."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from pydantic import BaseModel, Field

from models import AnimalScore, AnimalType, Player, TurboValues


def _empty_species() -> Dict[AnimalType, int]:
    return {animal: 0 for animal in AnimalType}


class AnimalTotals(BaseModel):
    player_id: str
    player_name: Optional[str] = None
    front9: Dict[int, int] = Field(default_factory=dict)
    back9: Dict[int, int] = Field(default_factory=dict)
    total_front9: int = 0
    total_back9: int = 0
    grand_total: int = 0
    animal_totals: Dict[AnimalType, int] = Field(default_factory=_empty_species)


def calculate_animal_scores(
    animal_scores: Iterable[AnimalScore],
    players: Iterable[Player],
    turbo: Optional[TurboValues] = None,
) -> Dict[str, AnimalTotals]:
    """
    Aggregate penalty points per player.

    Each record contributes count x turbo[hole] to its nine, its species and
    the grand total. Records for unknown players are ignored.
    """
    turbo = turbo or TurboValues()
    result = {
        player.id: AnimalTotals(player_id=player.id, player_name=player.name)
        for player in players
    }

    for score in animal_scores:
        totals = result.get(score.player_id)
        if totals is None or score.count == 0:
            continue

        points = score.count * turbo.get(score.hole_number)
        if score.hole_number <= 9:
            totals.front9[score.hole_number] = totals.front9.get(score.hole_number, 0) + points
            totals.total_front9 += points
        else:
            totals.back9[score.hole_number] = totals.back9.get(score.hole_number, 0) + points
            totals.total_back9 += points
        totals.grand_total += points
        totals.animal_totals[score.animal_type] += points

    return result


def animal_summary_for_hole(
    animal_scores: Iterable[AnimalScore],
    hole_number: int,
    players: Iterable[Player],
) -> Dict[str, Dict[AnimalType, int]]:
    """Raw counts by player and species for one hole, zero-filled."""
    summary = {player.id: _empty_species() for player in players}
    for score in animal_scores:
        if score.hole_number == hole_number and score.player_id in summary:
            summary[score.player_id][score.animal_type] = score.count
    return summary


def total_animal_counts(
    animal_scores: Iterable[AnimalScore],
    players: Iterable[Player],
) -> Dict[str, Dict[AnimalType, int]]:
    """Raw counts per player and species across the round, without turbo."""
    totals = {player.id: _empty_species() for player in players}
    for score in animal_scores:
        if score.player_id in totals:
            totals[score.player_id][score.animal_type] += score.count
    return totals
