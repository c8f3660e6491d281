# SQLAlchemy models
from tourops.models.directory import Client, Staff, Hotel, Location, ThirdParty, Vehicle, Account, VehicleOwner
from tourops.models.route import Route, RouteStatus
from tourops.models.segment import Segment, SegmentStop, SegmentParticipant
from tourops.models.accommodation import Accommodation, Room, RoomParticipant, ClientType, RoomType
from tourops.models.logistics import Logistics, LogisticsType, EntityType, VehicleType, ITEM_ONLY_TYPES
from tourops.models.participant import Participant, ParticipantRole
from tourops.models.transfer import Transfer, TransferVehicle, TransferParticipant
from tourops.models.transaction import RouteTransaction, TransactionType

__all__ = [
    # Reference directory (read-only here)
    "Client",
    "Staff",
    "Hotel",
    "Location",
    "ThirdParty",
    "Vehicle",
    "Account",
    # Route aggregate
    "Route",
    "Segment",
    "SegmentStop",
    "SegmentParticipant",
    "Accommodation",
    "Room",
    "RoomParticipant",
    "Logistics",
    "Participant",
    "Transfer",
    "TransferVehicle",
    "TransferParticipant",
    "RouteTransaction",
    # Enums
    "VehicleOwner",
    "RouteStatus",
    "ClientType",
    "RoomType",
    "LogisticsType",
    "EntityType",
    "VehicleType",
    "ParticipantRole",
    "TransactionType",
    "ITEM_ONLY_TYPES",
]
