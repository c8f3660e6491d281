from tourops.services.errors import PlannerError, ValidationError, NotFoundError, ConflictError
from tourops.services.entity_resolver import EntityRef, EntityResolver
from tourops.services.segment_store import SegmentStore
from tourops.services.stop_list import StopList
from tourops.services.accommodation_planner import AccommodationPlanner
from tourops.services.logistics_ledger import LogisticsLedger
from tourops.services.participant_roster import ParticipantRoster
from tourops.services.transfer_planner import TransferPlanner
from tourops.services.transaction_ledger import TransactionLedger
from tourops.services.route_assembler import RouteAssembler

__all__ = [
    "PlannerError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "EntityRef",
    "EntityResolver",
    "SegmentStore",
    "StopList",
    "AccommodationPlanner",
    "LogisticsLedger",
    "ParticipantRoster",
    "TransferPlanner",
    "TransactionLedger",
    "RouteAssembler",
]
