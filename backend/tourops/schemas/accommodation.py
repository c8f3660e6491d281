from datetime import datetime
from typing import Optional

from pydantic import Field

from tourops.models.accommodation import ClientType, RoomType
from tourops.schemas.base import CamelModel


class AccommodationCreate(CamelModel):
    hotel_id: Optional[str] = None
    client_type: Optional[ClientType] = None
    notes: Optional[str] = None


class RoomOccupant(CamelModel):
    participant_id: str
    is_couple: bool = False


class RoomCreate(CamelModel):
    room_type: Optional[RoomType] = None
    room_number: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    cost_per_night: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    participants: Optional[list[RoomOccupant]] = None


class RoomUpdate(RoomCreate):
    pass


class RoomParticipantResponse(CamelModel):
    id: str
    room_id: str
    participant_id: str
    is_couple: bool = False
    participant_name: Optional[str] = None
    participant_role: Optional[str] = None
    created_at: Optional[datetime] = None


class RoomResponse(CamelModel):
    id: str
    accommodation_id: str
    room_type: str
    room_number: Optional[str] = None
    capacity: Optional[int] = None
    cost_per_night: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    participants: list[RoomParticipantResponse] = []


class AccommodationResponse(CamelModel):
    id: str
    segment_id: str
    hotel_id: str
    hotel_name: Optional[str] = None
    client_type: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    rooms: list[RoomResponse] = []
