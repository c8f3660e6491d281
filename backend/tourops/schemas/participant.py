from datetime import datetime
from typing import Optional

from tourops.models.participant import ParticipantRole
from tourops.schemas.base import CamelModel


class ParticipantCreate(CamelModel):
    client_id: Optional[str] = None
    guide_id: Optional[str] = None
    role: Optional[ParticipantRole] = None
    is_optional: bool = False
    notes: Optional[str] = None


class ParticipantUpdate(ParticipantCreate):
    pass


class ParticipantSegments(CamelModel):
    segment_ids: list[str]


class SegmentParticipantAdd(CamelModel):
    participant_id: Optional[str] = None


class ParticipantResponse(CamelModel):
    id: str
    route_id: str
    client_id: Optional[str] = None
    guide_id: Optional[str] = None
    client_name: Optional[str] = None
    guide_name: Optional[str] = None
    role: str
    is_optional: bool = False
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
