"""Parent-scoped existence checks shared by the planner services.

Each helper returns the row only when it belongs to the given parent,
otherwise raises NotFoundError, so a mutation never touches a row that
was addressed through the wrong route or segment.
"""
from sqlalchemy.orm import Session

from tourops.models import Route, Segment, Accommodation, Room, Participant, Transfer
from tourops.services.errors import NotFoundError


def require_route(db: Session, route_id: str) -> Route:
    route = db.query(Route).filter(Route.id == route_id).first()
    if not route:
        raise NotFoundError("Route not found")
    return route


def require_segment(db: Session, route_id: str, segment_id: str) -> Segment:
    segment = db.query(Segment).filter(
        Segment.id == segment_id,
        Segment.route_id == route_id,
    ).first()
    if not segment:
        raise NotFoundError("Segment not found")
    return segment


def require_accommodation(db: Session, route_id: str, segment_id: str, accommodation_id: str) -> Accommodation:
    require_segment(db, route_id, segment_id)
    accommodation = db.query(Accommodation).filter(
        Accommodation.id == accommodation_id,
        Accommodation.segment_id == segment_id,
    ).first()
    if not accommodation:
        raise NotFoundError("Accommodation not found")
    return accommodation


def require_room(db: Session, accommodation_id: str, room_id: str) -> Room:
    room = db.query(Room).filter(
        Room.id == room_id,
        Room.accommodation_id == accommodation_id,
    ).first()
    if not room:
        raise NotFoundError("Room not found")
    return room


def require_participant(db: Session, route_id: str, participant_id: str) -> Participant:
    participant = db.query(Participant).filter(
        Participant.id == participant_id,
        Participant.route_id == route_id,
    ).first()
    if not participant:
        raise NotFoundError("Participant not found")
    return participant


def require_transfer(db: Session, route_id: str, transfer_id: str) -> Transfer:
    transfer = db.query(Transfer).filter(
        Transfer.id == transfer_id,
        Transfer.route_id == route_id,
    ).first()
    if not transfer:
        raise NotFoundError("Transfer not found")
    return transfer


def missing_route_participants(db: Session, route_id: str, participant_ids) -> list[str]:
    """Ids from participant_ids that are not on the route's roster."""
    wanted = set(participant_ids)
    if not wanted:
        return []
    found = {
        pid for (pid,) in db.query(Participant.id).filter(
            Participant.route_id == route_id,
            Participant.id.in_(list(wanted)),
        ).all()
    }
    return sorted(wanted - found)
