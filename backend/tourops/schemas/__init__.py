from tourops.schemas.base import CamelModel, MessageResponse
from tourops.schemas.route import RouteCreate, RouteUpdate, RouteDuplicate, RouteResponse
from tourops.schemas.segment import (
    SegmentCreate, SegmentUpdate, SegmentReorder, SegmentResponse,
    StopCreate, StopReorder, StopResponse,
)
from tourops.schemas.accommodation import (
    AccommodationCreate, AccommodationResponse, RoomCreate, RoomUpdate, RoomResponse, RoomOccupant,
)
from tourops.schemas.logistics import LogisticsCreate, LogisticsUpdate, LogisticsResponse
from tourops.schemas.participant import (
    ParticipantCreate, ParticipantUpdate, ParticipantResponse, ParticipantSegments, SegmentParticipantAdd,
)
from tourops.schemas.transfer import (
    TransferCreate, TransferUpdate, TransferResponse, TransferVehicleCreate, TransferVehicleResponse,
    TransferParticipantAdd, TransferParticipantResponse,
)
from tourops.schemas.transaction import TransactionCreate, TransactionResponse
from tourops.schemas.aggregate import RouteAggregateResponse

__all__ = [
    "CamelModel", "MessageResponse",
    "RouteCreate", "RouteUpdate", "RouteDuplicate", "RouteResponse", "RouteAggregateResponse",
    "SegmentCreate", "SegmentUpdate", "SegmentReorder", "SegmentResponse",
    "StopCreate", "StopReorder", "StopResponse",
    "AccommodationCreate", "AccommodationResponse", "RoomCreate", "RoomUpdate", "RoomResponse", "RoomOccupant",
    "LogisticsCreate", "LogisticsUpdate", "LogisticsResponse",
    "ParticipantCreate", "ParticipantUpdate", "ParticipantResponse", "ParticipantSegments", "SegmentParticipantAdd",
    "TransferCreate", "TransferUpdate", "TransferResponse", "TransferVehicleCreate", "TransferVehicleResponse",
    "TransferParticipantAdd", "TransferParticipantResponse",
    "TransactionCreate", "TransactionResponse",
]
