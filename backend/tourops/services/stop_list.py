"""Ordered waypoints inside a segment."""
import logging

from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import SegmentStop
from tourops.schemas.segment import StopCreate, StopOrderItem, StopResponse
from tourops.services.errors import ValidationError, NotFoundError
from tourops.services.lookups import require_segment

logger = logging.getLogger(__name__)


class StopList:

    def __init__(self, db: Session):
        self.db = db

    def list_stops(self, route_id: str, segment_id: str) -> list[StopResponse]:
        require_segment(self.db, route_id, segment_id)
        stops = self.db.query(SegmentStop).filter(
            SegmentStop.segment_id == segment_id
        ).order_by(SegmentStop.stop_order).all()
        return [StopResponse.model_validate(s) for s in stops]

    def create_stop(self, route_id: str, segment_id: str, data: StopCreate) -> StopResponse:
        if not data.location_id:
            raise ValidationError("Location ID is required")

        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            stop = SegmentStop(
                segment_id=segment_id,
                location_id=data.location_id,
                stop_order=data.stop_order if data.stop_order is not None else 1,
                notes=data.notes,
            )
            self.db.add(stop)

        logger.info(f"Segment {segment_id}: added stop {stop.id} at order {stop.stop_order}")
        return StopResponse.model_validate(stop)

    def reorder_stops(self, route_id: str, segment_id: str, orders: list[StopOrderItem]) -> int:
        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            wanted = {item.id for item in orders}
            stops = {
                s.id: s for s in self.db.query(SegmentStop).filter(
                    SegmentStop.segment_id == segment_id,
                    SegmentStop.id.in_(list(wanted)),
                ).all()
            } if wanted else {}

            missing = sorted(wanted - stops.keys())
            if missing:
                raise NotFoundError(f"Stop not found: {', '.join(missing)}")

            for item in orders:
                stops[item.id].stop_order = item.stop_order

        logger.info(f"Segment {segment_id}: reordered {len(orders)} stop(s)")
        return len(orders)

    def delete_stop(self, route_id: str, segment_id: str, stop_id: str) -> None:
        with atomic(self.db):
            require_segment(self.db, route_id, segment_id)
            stop = self.db.query(SegmentStop).filter(
                SegmentStop.id == stop_id,
                SegmentStop.segment_id == segment_id,
            ).first()
            if not stop:
                raise NotFoundError("Stop not found")
            self.db.delete(stop)

        logger.info(f"Segment {segment_id}: deleted stop {stop_id}")
