from tourops.schemas.route import RouteResponse
from tourops.schemas.segment import SegmentResponse
from tourops.schemas.logistics import LogisticsResponse
from tourops.schemas.participant import ParticipantResponse
from tourops.schemas.transaction import TransactionResponse


class RouteAggregateResponse(RouteResponse):
    """A route with everything the planner screen shows in one read."""
    segments: list[SegmentResponse] = []
    logistics: list[LogisticsResponse] = []
    participants: list[ParticipantResponse] = []
    transactions: list[TransactionResponse] = []
