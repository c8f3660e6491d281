"""Cost and resource line items of a route."""
import logging

from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import Logistics, ITEM_ONLY_TYPES
from tourops.schemas.logistics import LogisticsCreate, LogisticsResponse
from tourops.services.entity_resolver import EntityRef, EntityResolver
from tourops.services.errors import ValidationError, NotFoundError
from tourops.services.lookups import require_route, require_segment
from tourops.services.route_totals import refresh_logistics_totals

logger = logging.getLogger(__name__)


def validate_logistics(data: LogisticsCreate) -> None:
    """Item-only types name a free-form item; every other type points at an entity."""
    if not data.logistics_type or not data.entity_type:
        raise ValidationError("logisticsType and entityType are required")

    if data.logistics_type in ITEM_ONLY_TYPES:
        if not data.item_name:
            raise ValidationError("itemName is required for this type")
    elif not data.entity_id:
        raise ValidationError("entityId is required")


class LogisticsLedger:

    def __init__(self, db: Session, resolver: EntityResolver = None):
        self.db = db
        self.resolver = resolver or EntityResolver(db)

    def to_response(self, item: Logistics) -> LogisticsResponse:
        response = LogisticsResponse.model_validate(item)
        response.entity_name = self.resolver.resolve(EntityRef(item.entity_type, item.entity_id))
        return response

    def list_logistics(self, route_id: str) -> list[LogisticsResponse]:
        require_route(self.db, route_id)
        items = self.db.query(Logistics).filter(
            Logistics.route_id == route_id
        ).order_by(Logistics.date, Logistics.created_at).all()
        return [self.to_response(item) for item in items]

    def create_logistics(self, route_id: str, data: LogisticsCreate) -> LogisticsResponse:
        validate_logistics(data)

        with atomic(self.db):
            route = require_route(self.db, route_id)
            if data.segment_id:
                require_segment(self.db, route_id, data.segment_id)

            item = Logistics(route_id=route_id)
            self._apply(item, data)
            self.db.add(item)
            refresh_logistics_totals(self.db, route)

        logger.info(f"Route {route_id}: added {item.logistics_type} logistics {item.id}")
        return self.to_response(item)

    def update_logistics(self, route_id: str, logistics_id: str, data: LogisticsCreate) -> LogisticsResponse:
        validate_logistics(data)

        with atomic(self.db):
            route = require_route(self.db, route_id)
            item = self._require(route_id, logistics_id)
            if data.segment_id:
                require_segment(self.db, route_id, data.segment_id)

            self._apply(item, data)
            refresh_logistics_totals(self.db, route)

        logger.info(f"Route {route_id}: updated logistics {logistics_id}")
        return self.to_response(item)

    def delete_logistics(self, route_id: str, logistics_id: str) -> None:
        with atomic(self.db):
            route = require_route(self.db, route_id)
            item = self._require(route_id, logistics_id)
            self.db.delete(item)
            refresh_logistics_totals(self.db, route)

        logger.info(f"Route {route_id}: deleted logistics {logistics_id}")

    def _require(self, route_id: str, logistics_id: str) -> Logistics:
        item = self.db.query(Logistics).filter(
            Logistics.id == logistics_id,
            Logistics.route_id == route_id,
        ).first()
        if not item:
            raise NotFoundError("Logistics not found")
        return item

    @staticmethod
    def _apply(item: Logistics, data: LogisticsCreate) -> None:
        item.segment_id = data.segment_id or None
        item.logistics_type = data.logistics_type
        item.entity_type = data.entity_type
        item.entity_id = data.entity_id or None
        item.item_name = data.item_name
        item.quantity = data.quantity if data.quantity is not None else 1
        item.cost = data.cost or 0
        item.date = data.date
        item.driver_pilot_name = data.driver_pilot_name
        item.is_own_vehicle = data.is_own_vehicle
        item.vehicle_type = data.vehicle_type
        item.notes = data.notes
