"""Hotel bookings of a segment, their rooms and who sleeps in them."""
from typing import Optional
import logging

from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import Accommodation, Room, RoomParticipant
from tourops.schemas.accommodation import (
    AccommodationCreate,
    AccommodationResponse,
    RoomCreate,
    RoomUpdate,
    RoomOccupant,
    RoomResponse,
)
from tourops.services.errors import ValidationError
from tourops.services.lookups import (
    require_segment,
    require_accommodation,
    require_room,
    missing_route_participants,
)

logger = logging.getLogger(__name__)


def _unique_occupants(occupants: Optional[list[RoomOccupant]]) -> list[RoomOccupant]:
    """Keep the first entry for each participant id."""
    seen = set()
    unique = []
    for occupant in occupants or []:
        if occupant.participant_id in seen:
            continue
        seen.add(occupant.participant_id)
        unique.append(occupant)
    return unique


class AccommodationPlanner:

    def __init__(self, db: Session):
        self.db = db

    def list_accommodations(self, route_id: str, segment_id: str) -> list[AccommodationResponse]:
        require_segment(self.db, route_id, segment_id)
        accommodations = self.db.query(Accommodation).filter(
            Accommodation.segment_id == segment_id
        ).order_by(Accommodation.created_at).all()
        return [AccommodationResponse.model_validate(a) for a in accommodations]

    def create_accommodation(self, route_id: str, segment_id: str, data: AccommodationCreate) -> AccommodationResponse:
        if not data.hotel_id or not data.client_type:
            raise ValidationError("Hotel and client type are required")

        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            accommodation = Accommodation(
                segment_id=segment_id,
                hotel_id=data.hotel_id,
                client_type=data.client_type,
                notes=data.notes,
            )
            self.db.add(accommodation)

        logger.info(f"Segment {segment_id}: booked hotel {data.hotel_id} for {data.client_type}")
        return AccommodationResponse.model_validate(accommodation)

    def delete_accommodation(self, route_id: str, segment_id: str, accommodation_id: str) -> None:
        with atomic(self.db):
            accommodation = require_accommodation(self.db, route_id, segment_id, accommodation_id)
            self.db.delete(accommodation)

        logger.info(f"Segment {segment_id}: deleted accommodation {accommodation_id}")

    def create_room(self, route_id: str, segment_id: str, accommodation_id: str, data: RoomCreate) -> RoomResponse:
        if not data.room_type:
            raise ValidationError("Room type is required")

        occupants = _unique_occupants(data.participants)
        with atomic(self.db):
            require_accommodation(self.db, route_id, segment_id, accommodation_id)
            self._check_occupants(route_id, occupants)

            room = Room(accommodation_id=accommodation_id)
            self._apply_room_fields(room, data)
            room.participants = [
                RoomParticipant(participant_id=o.participant_id, is_couple=o.is_couple)
                for o in occupants
            ]
            self.db.add(room)

        logger.info(f"Accommodation {accommodation_id}: created {room.room_type} room {room.id} with {len(occupants)} occupant(s)")
        return RoomResponse.model_validate(room)

    def update_room(
        self,
        route_id: str,
        segment_id: str,
        accommodation_id: str,
        room_id: str,
        data: RoomUpdate,
    ) -> RoomResponse:
        """Full replacement of the room, occupants included."""
        if not data.room_type:
            raise ValidationError("Room type is required")

        occupants = _unique_occupants(data.participants)
        with atomic(self.db):
            require_accommodation(self.db, route_id, segment_id, accommodation_id)
            room = require_room(self.db, accommodation_id, room_id)
            self._check_occupants(route_id, occupants)

            self._apply_room_fields(room, data)
            room.participants.clear()
            self.db.flush()
            for o in occupants:
                room.participants.append(
                    RoomParticipant(participant_id=o.participant_id, is_couple=o.is_couple)
                )

        logger.info(f"Accommodation {accommodation_id}: updated room {room_id}, {len(occupants)} occupant(s)")
        return RoomResponse.model_validate(room)

    def delete_room(self, route_id: str, segment_id: str, accommodation_id: str, room_id: str) -> None:
        with atomic(self.db):
            require_accommodation(self.db, route_id, segment_id, accommodation_id)
            room = require_room(self.db, accommodation_id, room_id)
            self.db.delete(room)

        logger.info(f"Accommodation {accommodation_id}: deleted room {room_id}")

    def _check_occupants(self, route_id: str, occupants: list[RoomOccupant]) -> None:
        missing = missing_route_participants(self.db, route_id, [o.participant_id for o in occupants])
        if missing:
            raise ValidationError(f"Participants not on this route: {', '.join(missing)}")

    @staticmethod
    def _apply_room_fields(room: Room, data: RoomCreate) -> None:
        room.room_type = data.room_type
        room.room_number = data.room_number
        room.capacity = data.capacity
        room.cost_per_night = data.cost_per_night or 0
        room.notes = data.notes
