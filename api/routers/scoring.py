"""Stateless scoring endpoints: compute derived views from a posted snapshot."""

from fastapi import APIRouter, HTTPException
from typing import Dict

from api.schemas import AllocationRequest, AnimalRequest, FocusRequest
from scoring import (
    AnimalTotals,
    H2HMatch,
    Scoreboard,
    StrokeAllocation,
    build_scoreboard,
    calculate_animal_scores,
    calculate_h2h_for_player,
    calculate_stroke_allocation,
)

router = APIRouter()


def _require_focus_player(req: FocusRequest) -> None:
    if req.snapshot.get_player(req.player_id) is None:
        raise HTTPException(404, f"Player {req.player_id} is not in this game")


@router.post("/allocation", response_model=StrokeAllocation)
async def stroke_allocation(req: AllocationRequest):
    return calculate_stroke_allocation(req.players, req.course, req.turbo, req.overrides)


@router.post("/h2h", response_model=Dict[str, H2HMatch])
async def h2h(req: FocusRequest):
    _require_focus_player(req)
    return calculate_h2h_for_player(req.snapshot, req.player_id)


@router.post("/animals", response_model=Dict[str, AnimalTotals])
async def animals(req: AnimalRequest):
    return calculate_animal_scores(req.animal_scores, req.players, req.turbo)


@router.post("/scoreboard", response_model=Scoreboard)
async def scoreboard(req: FocusRequest):
    _require_focus_player(req)
    return build_scoreboard(req.snapshot, req.player_id)
