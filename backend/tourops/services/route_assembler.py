"""
Route CRUD and the one-read route aggregate.

The aggregate is a route plus its segments (with stops), logistics
(with resolved entity names), participants and transactions, assembled
from the per-component services so every list keeps its own ordering.
"""
from datetime import date
from typing import Optional
import logging

from sqlalchemy.orm import Session

from tourops.config import get_settings
from tourops.database import atomic
from tourops.models import Logistics, Route, RouteStatus, Segment
from tourops.schemas.aggregate import RouteAggregateResponse
from tourops.schemas.route import RouteCreate, RouteResponse
from tourops.services.errors import ValidationError
from tourops.services.lookups import require_route
from tourops.services.logistics_ledger import LogisticsLedger
from tourops.services.participant_roster import ParticipantRoster
from tourops.services.route_totals import recalculate_segment_dates, refresh_segment_totals, refresh_logistics_totals
from tourops.services.segment_store import SegmentStore
from tourops.services.transaction_ledger import TransactionLedger

logger = logging.getLogger(__name__)

# Scalar columns carried over by duplicate_route
COPIED_FIELDS = (
    "description",
    "start_date",
    "end_date",
    "duration",
    "status",
    "total_distance",
    "estimated_cost",
    "actual_cost",
    "currency",
    "notes",
)


def validate_route(data: RouteCreate) -> None:
    if not data.name or not data.name.strip():
        raise ValidationError("Route name is required")
    status = data.status or RouteStatus.DRAFT.value
    if status != RouteStatus.DRAFT.value and not data.start_date:
        raise ValidationError("Start date is required unless the route is a draft")


class RouteAssembler:

    def __init__(self, db: Session):
        self.db = db

    def list_routes(
        self,
        status: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[RouteResponse]:
        query = self.db.query(Route)
        if status:
            query = query.filter(Route.status == status)
        if start_date:
            query = query.filter(Route.start_date >= start_date)
        if end_date:
            query = query.filter(Route.end_date <= end_date)

        routes = query.order_by(Route.created_at.desc()).all()
        return [RouteResponse.model_validate(r) for r in routes]

    def create_route(self, data: RouteCreate) -> RouteResponse:
        validate_route(data)

        with atomic(self.db):
            route = Route()
            self._apply(route, data)
            self.db.add(route)

        logger.info(f"Created route {route.id}: {route.name} ({route.status})")
        return RouteResponse.model_validate(route)

    def get_route(self, route_id: str) -> RouteAggregateResponse:
        route = require_route(self.db, route_id)
        base = RouteResponse.model_validate(route).model_dump()
        return RouteAggregateResponse(
            **base,
            segments=SegmentStore(self.db).list_segments(route_id),
            logistics=LogisticsLedger(self.db).list_logistics(route_id),
            participants=ParticipantRoster(self.db).list_participants(route_id),
            transactions=TransactionLedger(self.db).list_transactions(route_id),
        )

    def update_route(self, route_id: str, data: RouteCreate) -> RouteResponse:
        """
        Full replacement. A draft whose start date moves drags its segment dates
        along; totals derived from existing segments or logistics are recomputed.
        """
        validate_route(data)

        with atomic(self.db):
            route = require_route(self.db, route_id)
            previous_start = route.start_date
            self._apply(route, data)

            if route.start_date != previous_start:
                recalculate_segment_dates(self.db, route)

            # Totals backed by child rows win over whatever the payload carried
            if self.db.query(Segment.id).filter(Segment.route_id == route_id).first():
                refresh_segment_totals(self.db, route)
            if self.db.query(Logistics.id).filter(Logistics.route_id == route_id).first():
                refresh_logistics_totals(self.db, route)

        logger.info(f"Updated route {route_id}")
        return RouteResponse.model_validate(route)

    def delete_route(self, route_id: str) -> None:
        with atomic(self.db):
            route = require_route(self.db, route_id)
            self.db.delete(route)

        logger.info(f"Deleted route {route_id} and everything it owns")

    def duplicate_route(self, route_id: str, name: Optional[str] = None) -> RouteResponse:
        """
        Copy the route's own columns into a new route.

        Segments, logistics, participants, transfers and transactions are
        not copied.
        """
        with atomic(self.db):
            original = require_route(self.db, route_id)
            copy = Route(name=name or f"{original.name} (Copy)")
            for field in COPIED_FIELDS:
                setattr(copy, field, getattr(original, field))
            self.db.add(copy)

        logger.info(f"Duplicated route {route_id} as {copy.id}")
        return RouteResponse.model_validate(copy)

    @staticmethod
    def _apply(route: Route, data: RouteCreate) -> None:
        route.name = data.name.strip()
        route.description = data.description
        route.start_date = data.start_date
        route.end_date = data.end_date
        route.duration = data.duration
        route.status = data.status or RouteStatus.DRAFT.value
        route.total_distance = data.total_distance or 0
        route.estimated_cost = data.estimated_cost or 0
        route.actual_cost = data.actual_cost or 0
        route.currency = data.currency or get_settings().default_currency
        route.notes = data.notes
