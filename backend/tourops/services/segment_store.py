"""Ordered day segments of a route."""
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import Segment
from tourops.schemas.segment import SegmentCreate, SegmentUpdate, SegmentOrderItem, SegmentResponse
from tourops.services.errors import NotFoundError
from tourops.services.lookups import require_route, require_segment
from tourops.services.route_totals import segment_date_for, refresh_segment_totals, refresh_logistics_totals

logger = logging.getLogger(__name__)


class SegmentStore:

    def __init__(self, db: Session):
        self.db = db

    def list_segments(self, route_id: str) -> list[SegmentResponse]:
        require_route(self.db, route_id)
        segments = self.db.query(Segment).filter(
            Segment.route_id == route_id
        ).order_by(Segment.segment_order, Segment.day_number).all()
        return [SegmentResponse.model_validate(s) for s in segments]

    def max_day_number(self, route_id: str) -> int:
        return self.db.query(
            func.coalesce(func.max(Segment.day_number), 0)
        ).filter(Segment.route_id == route_id).scalar()

    def create_segment(self, route_id: str, data: SegmentCreate) -> SegmentResponse:
        """
        Append a day to the route.

        day_number defaults to the next free day. segment_order defaults to
        the current highest day number (not the highest order), so the first
        segment gets order 0, the second order 1, and so on.
        """
        with atomic(self.db):
            route = require_route(self.db, route_id)

            max_day = self.max_day_number(route_id)
            day_number = data.day_number or max_day + 1
            segment_order = data.segment_order if data.segment_order is not None else max_day

            segment = Segment(
                route_id=route_id,
                day_number=day_number,
                segment_date=segment_date_for(route.start_date, day_number),
                from_location_id=data.from_location_id or None,
                to_location_id=data.to_location_id or None,
                distance=data.distance or 0,
                segment_order=segment_order,
                notes=data.notes,
            )
            self.db.add(segment)
            refresh_segment_totals(self.db, route)

        logger.info(f"Route {route_id}: created segment {segment.id} (day {day_number}, order {segment_order})")
        return SegmentResponse.model_validate(segment)

    def update_segment(self, route_id: str, segment_id: str, data: SegmentUpdate) -> SegmentResponse:
        with atomic(self.db):
            route = require_route(self.db, route_id)
            segment = require_segment(self.db, route_id, segment_id)

            day_number = data.day_number or 1
            segment.day_number = day_number
            if route.start_date is not None:
                segment.segment_date = segment_date_for(route.start_date, day_number)
            else:
                segment.segment_date = data.segment_date
            segment.from_location_id = data.from_location_id or None
            segment.to_location_id = data.to_location_id or None
            segment.distance = data.distance or 0
            segment.segment_order = data.segment_order if data.segment_order is not None else 1
            segment.notes = data.notes

            refresh_segment_totals(self.db, route)

        logger.info(f"Route {route_id}: updated segment {segment_id}")
        return SegmentResponse.model_validate(segment)

    def delete_segment(self, route_id: str, segment_id: str) -> None:
        with atomic(self.db):
            route = require_route(self.db, route_id)
            segment = require_segment(self.db, route_id, segment_id)
            self.db.delete(segment)
            refresh_segment_totals(self.db, route)
            # logistics scoped to the segment went with it
            refresh_logistics_totals(self.db, route)

        logger.info(f"Route {route_id}: deleted segment {segment_id}")

    def reorder_segments(self, route_id: str, orders: list[SegmentOrderItem]) -> int:
        """Apply every (id, segment_order) pair or none of them."""
        with atomic(self.db):
            require_route(self.db, route_id)
            wanted = {item.id for item in orders}
            segments = {
                s.id: s for s in self.db.query(Segment).filter(
                    Segment.route_id == route_id,
                    Segment.id.in_(list(wanted)),
                ).all()
            } if wanted else {}

            missing = sorted(wanted - segments.keys())
            if missing:
                raise NotFoundError(f"Segment not found: {', '.join(missing)}")

            for item in orders:
                segments[item.id].segment_order = item.segment_order

        logger.info(f"Route {route_id}: reordered {len(orders)} segment(s)")
        return len(orders)
