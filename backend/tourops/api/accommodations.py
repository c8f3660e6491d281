from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import (
    AccommodationCreate,
    AccommodationResponse,
    MessageResponse,
    RoomCreate,
    RoomResponse,
    RoomUpdate,
)
from tourops.services import AccommodationPlanner

router = APIRouter()

BASE = "/{route_id}/segments/{segment_id}/accommodations"


@router.get(BASE, response_model=List[AccommodationResponse])
async def list_accommodations(route_id: str, segment_id: str, db: Session = Depends(get_db)):
    return AccommodationPlanner(db).list_accommodations(route_id, segment_id)


@router.post(BASE, response_model=AccommodationResponse, status_code=201)
async def create_accommodation(
    route_id: str,
    segment_id: str,
    accommodation: AccommodationCreate,
    db: Session = Depends(get_db)
):
    return AccommodationPlanner(db).create_accommodation(route_id, segment_id, accommodation)


@router.delete(BASE + "/{accommodation_id}", response_model=MessageResponse)
async def delete_accommodation(
    route_id: str,
    segment_id: str,
    accommodation_id: str,
    db: Session = Depends(get_db)
):
    AccommodationPlanner(db).delete_accommodation(route_id, segment_id, accommodation_id)
    return MessageResponse(message="Accommodation deleted")


@router.post(BASE + "/{accommodation_id}/rooms", response_model=RoomResponse, status_code=201)
async def create_room(
    route_id: str,
    segment_id: str,
    accommodation_id: str,
    room: RoomCreate,
    db: Session = Depends(get_db)
):
    return AccommodationPlanner(db).create_room(route_id, segment_id, accommodation_id, room)


@router.put(BASE + "/{accommodation_id}/rooms/{room_id}", response_model=RoomResponse)
async def update_room(
    route_id: str,
    segment_id: str,
    accommodation_id: str,
    room_id: str,
    room: RoomUpdate,
    db: Session = Depends(get_db)
):
    """Replaces the room, occupants included."""
    return AccommodationPlanner(db).update_room(route_id, segment_id, accommodation_id, room_id, room)


@router.delete(BASE + "/{accommodation_id}/rooms/{room_id}", response_model=MessageResponse)
async def delete_room(
    route_id: str,
    segment_id: str,
    accommodation_id: str,
    room_id: str,
    db: Session = Depends(get_db)
):
    AccommodationPlanner(db).delete_room(route_id, segment_id, accommodation_id, room_id)
    return MessageResponse(message="Room deleted")
