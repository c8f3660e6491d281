"""Route fields derived from its segments and logistics."""
from datetime import date, timedelta
from typing import Optional
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from tourops.models import Route, RouteStatus, Segment, Logistics

logger = logging.getLogger(__name__)


def segment_date_for(start_date: Optional[date], day_number: int) -> Optional[date]:
    """Day 1 falls on the route's start date."""
    if start_date is None:
        return None
    return start_date + timedelta(days=day_number - 1)


def refresh_segment_totals(db: Session, route: Route) -> None:
    """Recompute total_distance, end_date and duration from the segments."""
    db.flush()
    total_distance, max_day = db.query(
        func.coalesce(func.sum(Segment.distance), 0),
        func.coalesce(func.max(Segment.day_number), 0),
    ).filter(Segment.route_id == route.id).one()

    route.total_distance = float(total_distance)
    # Without a start date the schedule is whatever the caller last set
    if route.start_date is None:
        return
    if max_day > 0:
        route.duration = max_day
        route.end_date = segment_date_for(route.start_date, max_day)
    else:
        route.duration = None
        route.end_date = None


def refresh_logistics_totals(db: Session, route: Route) -> None:
    """estimated_cost is Σ cost × quantity over the route's logistics."""
    db.flush()
    estimated = db.query(
        func.coalesce(func.sum(Logistics.cost * Logistics.quantity), 0)
    ).filter(Logistics.route_id == route.id).scalar()
    route.estimated_cost = float(estimated)


def recalculate_segment_dates(db: Session, route: Route) -> int:
    """Re-derive every segment date of a draft route; returns rows changed."""
    if route.start_date is None or route.status != RouteStatus.DRAFT.value:
        return 0

    changed = 0
    for segment in db.query(Segment).filter(Segment.route_id == route.id).all():
        wanted = segment_date_for(route.start_date, segment.day_number)
        if segment.segment_date != wanted:
            segment.segment_date = wanted
            changed += 1

    if changed:
        logger.info(f"Route {route.id}: moved {changed} segment date(s) to follow start date {route.start_date}")
    return changed
