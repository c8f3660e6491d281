"""Route roster and which segments each participant takes part in."""
import logging

from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import Participant, ParticipantRole, Segment, SegmentParticipant
from tourops.schemas.participant import ParticipantCreate, ParticipantResponse
from tourops.services.errors import ValidationError, NotFoundError, ConflictError
from tourops.services.lookups import require_route, require_segment, require_participant

logger = logging.getLogger(__name__)


def validate_participant(data: ParticipantCreate) -> None:
    if not data.client_id and not data.guide_id:
        raise ValidationError("Client or Staff is required")
    if data.client_id and data.guide_id:
        raise ValidationError("Cannot assign both client and staff to the same participant")


def default_role(data: ParticipantCreate) -> str:
    if data.role:
        return data.role
    return ParticipantRole.CLIENT.value if data.client_id else ParticipantRole.STAFF.value


class ParticipantRoster:

    def __init__(self, db: Session):
        self.db = db

    def list_participants(self, route_id: str) -> list[ParticipantResponse]:
        require_route(self.db, route_id)
        participants = self.db.query(Participant).filter(
            Participant.route_id == route_id
        ).order_by(Participant.created_at).all()
        return [ParticipantResponse.model_validate(p) for p in participants]

    def create_participant(self, route_id: str, data: ParticipantCreate) -> ParticipantResponse:
        validate_participant(data)

        with atomic(self.db):
            require_route(self.db, route_id)
            participant = Participant(route_id=route_id)
            self._apply(participant, data)
            self.db.add(participant)

        logger.info(f"Route {route_id}: added {participant.role} participant {participant.id}")
        return ParticipantResponse.model_validate(participant)

    def update_participant(self, route_id: str, participant_id: str, data: ParticipantCreate) -> ParticipantResponse:
        validate_participant(data)

        with atomic(self.db):
            participant = require_participant(self.db, route_id, participant_id)
            self._apply(participant, data)

        logger.info(f"Route {route_id}: updated participant {participant_id}")
        return ParticipantResponse.model_validate(participant)

    def delete_participant(self, route_id: str, participant_id: str) -> None:
        """Segment, room and transfer assignments go with the participant."""
        with atomic(self.db):
            participant = require_participant(self.db, route_id, participant_id)
            self.db.delete(participant)

        logger.info(f"Route {route_id}: deleted participant {participant_id}")

    def set_participant_segments(self, route_id: str, participant_id: str, segment_ids: list[str]) -> list[str]:
        """
        Replace the participant's segment membership with segment_ids.

        Every segment must belong to the route, otherwise nothing changes.
        Duplicate ids are collapsed. Returns the resulting segment ids.
        """
        wanted = list(dict.fromkeys(segment_ids))

        with atomic(self.db):
            participant = require_participant(self.db, route_id, participant_id)
            if wanted:
                found = {
                    sid for (sid,) in self.db.query(Segment.id).filter(
                        Segment.route_id == route_id,
                        Segment.id.in_(wanted),
                    ).all()
                }
                missing = [sid for sid in wanted if sid not in found]
                if missing:
                    raise NotFoundError(f"Segment not found: {', '.join(missing)}")

            participant.segment_links.clear()
            self.db.flush()
            for segment_id in wanted:
                participant.segment_links.append(SegmentParticipant(segment_id=segment_id))

        logger.info(f"Route {route_id}: participant {participant_id} now in {len(wanted)} segment(s)")
        return wanted

    def attach_to_segment(self, segment_id: str, participant_id: str) -> bool:
        """Link the pair unless it already exists. Returns True when a row was added."""
        exists = self.db.query(SegmentParticipant).filter(
            SegmentParticipant.segment_id == segment_id,
            SegmentParticipant.participant_id == participant_id,
        ).first()
        if exists:
            return False
        self.db.add(SegmentParticipant(segment_id=segment_id, participant_id=participant_id))
        self.db.flush()
        return True

    def add_participant_to_segment(self, route_id: str, segment_id: str, participant_id: str) -> ParticipantResponse:
        if not participant_id:
            raise ValidationError("participantId is required")

        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            participant = require_participant(self.db, route_id, participant_id)
            if not self.attach_to_segment(segment_id, participant_id):
                raise ConflictError("Participant already in segment")

        logger.info(f"Segment {segment_id}: added participant {participant_id}")
        return ParticipantResponse.model_validate(participant)

    def list_segment_participants(self, route_id: str, segment_id: str) -> list[ParticipantResponse]:
        require_segment(self.db, route_id, segment_id)
        participants = self.db.query(Participant).join(
            SegmentParticipant, SegmentParticipant.participant_id == Participant.id
        ).filter(
            SegmentParticipant.segment_id == segment_id
        ).order_by(Participant.created_at).all()
        return [ParticipantResponse.model_validate(p) for p in participants]

    def remove_participant_from_segment(self, route_id: str, segment_id: str, participant_id: str) -> None:
        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            link = self.db.query(SegmentParticipant).filter(
                SegmentParticipant.segment_id == segment_id,
                SegmentParticipant.participant_id == participant_id,
            ).first()
            if not link:
                raise NotFoundError("Participant not found in segment")
            self.db.delete(link)

        logger.info(f"Segment {segment_id}: removed participant {participant_id}")

    @staticmethod
    def _apply(participant: Participant, data: ParticipantCreate) -> None:
        participant.client_id = data.client_id or None
        participant.guide_id = data.guide_id or None
        participant.role = default_role(data)
        participant.is_optional = data.is_optional
        participant.notes = data.notes
