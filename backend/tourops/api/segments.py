"""Segments of a route, their stops and the participants taking part in each day."""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import (
    MessageResponse,
    ParticipantResponse,
    SegmentCreate,
    SegmentParticipantAdd,
    SegmentReorder,
    SegmentResponse,
    SegmentUpdate,
    StopCreate,
    StopReorder,
    StopResponse,
)
from tourops.services import SegmentStore, StopList, ParticipantRoster

router = APIRouter()


@router.get("/{route_id}/segments", response_model=List[SegmentResponse])
async def list_segments(route_id: str, db: Session = Depends(get_db)):
    return SegmentStore(db).list_segments(route_id)


@router.post("/{route_id}/segments", response_model=SegmentResponse, status_code=201)
async def create_segment(route_id: str, segment: SegmentCreate, db: Session = Depends(get_db)):
    return SegmentStore(db).create_segment(route_id, segment)


# Declared before /{segment_id} so "reorder" is not taken for an id
@router.put("/{route_id}/segments/reorder", response_model=MessageResponse)
async def reorder_segments(route_id: str, body: SegmentReorder, db: Session = Depends(get_db)):
    count = SegmentStore(db).reorder_segments(route_id, body.segment_orders)
    return MessageResponse(message=f"Reordered {count} segment(s)")


@router.put("/{route_id}/segments/{segment_id}", response_model=SegmentResponse)
async def update_segment(
    route_id: str,
    segment_id: str,
    segment: SegmentUpdate,
    db: Session = Depends(get_db)
):
    return SegmentStore(db).update_segment(route_id, segment_id, segment)


@router.delete("/{route_id}/segments/{segment_id}", response_model=MessageResponse)
async def delete_segment(route_id: str, segment_id: str, db: Session = Depends(get_db)):
    SegmentStore(db).delete_segment(route_id, segment_id)
    return MessageResponse(message="Segment deleted")


@router.get("/{route_id}/segments/{segment_id}/stops", response_model=List[StopResponse])
async def list_stops(route_id: str, segment_id: str, db: Session = Depends(get_db)):
    return StopList(db).list_stops(route_id, segment_id)


@router.post("/{route_id}/segments/{segment_id}/stops", response_model=StopResponse, status_code=201)
async def create_stop(route_id: str, segment_id: str, stop: StopCreate, db: Session = Depends(get_db)):
    return StopList(db).create_stop(route_id, segment_id, stop)


@router.put("/{route_id}/segments/{segment_id}/stops/reorder", response_model=MessageResponse)
async def reorder_stops(route_id: str, segment_id: str, body: StopReorder, db: Session = Depends(get_db)):
    count = StopList(db).reorder_stops(route_id, segment_id, body.stop_orders)
    return MessageResponse(message=f"Reordered {count} stop(s)")


@router.delete("/{route_id}/segments/{segment_id}/stops/{stop_id}", response_model=MessageResponse)
async def delete_stop(route_id: str, segment_id: str, stop_id: str, db: Session = Depends(get_db)):
    StopList(db).delete_stop(route_id, segment_id, stop_id)
    return MessageResponse(message="Stop deleted")


@router.get("/{route_id}/segments/{segment_id}/participants", response_model=List[ParticipantResponse])
async def list_segment_participants(route_id: str, segment_id: str, db: Session = Depends(get_db)):
    return ParticipantRoster(db).list_segment_participants(route_id, segment_id)


@router.post(
    "/{route_id}/segments/{segment_id}/participants",
    response_model=ParticipantResponse,
    status_code=201,
)
async def add_participant_to_segment(
    route_id: str,
    segment_id: str,
    body: SegmentParticipantAdd,
    db: Session = Depends(get_db)
):
    return ParticipantRoster(db).add_participant_to_segment(route_id, segment_id, body.participant_id)


@router.delete(
    "/{route_id}/segments/{segment_id}/participants/{participant_id}",
    response_model=MessageResponse,
)
async def remove_participant_from_segment(
    route_id: str,
    segment_id: str,
    participant_id: str,
    db: Session = Depends(get_db)
):
    ParticipantRoster(db).remove_participant_from_segment(route_id, segment_id, participant_id)
    return MessageResponse(message="Participant removed from segment")
