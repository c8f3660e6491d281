"""
Display names for polymorphic {type, id} references.

Logistics rows point at a vehicle, hotel, third party or location through
an (entity_type, entity_id) pair. Instead of joining every candidate table,
the reference is resolved through one lookup per type.
"""
from dataclasses import dataclass
from typing import Callable, Optional
import logging

from sqlalchemy.orm import Session

from tourops.models import Client, Staff, Hotel, Location, ThirdParty, Vehicle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityRef:
    type: str
    id: Optional[str]


class EntityResolver:
    """Resolves EntityRefs to names; results are memoised per instance."""

    def __init__(self, db: Session):
        self.db = db
        self._cache: dict[tuple[str, str], Optional[str]] = {}
        self._lookups: dict[str, Callable[[str], Optional[str]]] = {
            "client": self._named(Client),
            "staff": self._named(Staff),
            "hotel": self._named(Hotel),
            "location": self._named(Location),
            "third-party": self._named(ThirdParty),
            "vehicle": self._vehicle_name,
        }

    def resolve(self, ref: Optional[EntityRef]) -> Optional[str]:
        if ref is None or not ref.id:
            return None

        key = (ref.type, ref.id)
        if key in self._cache:
            return self._cache[key]

        lookup = self._lookups.get(ref.type)
        if lookup is None:
            logger.debug(f"No resolver for entity type {ref.type!r}")
            name = None
        else:
            name = lookup(ref.id)

        self._cache[key] = name
        return name

    def _named(self, model) -> Callable[[str], Optional[str]]:
        def lookup(entity_id: str) -> Optional[str]:
            row = self.db.get(model, entity_id)
            return row.name if row else None
        return lookup

    def _vehicle_name(self, vehicle_id: str) -> Optional[str]:
        vehicle = self.db.get(Vehicle, vehicle_id)
        return vehicle.display_name if vehicle else None
