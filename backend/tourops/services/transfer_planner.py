"""Transfers between locations, the vehicles that run them and their riders."""
from typing import Optional
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from tourops.database import atomic
from tourops.models import Transfer, TransferVehicle, TransferParticipant
from tourops.schemas.transfer import (
    TransferCreate,
    TransferResponse,
    TransferVehicleCreate,
    TransferVehicleResponse,
    TransferParticipantResponse,
)
from tourops.services.errors import ValidationError, NotFoundError, ConflictError
from tourops.services.lookups import require_route, require_transfer, missing_route_participants

logger = logging.getLogger(__name__)


def validate_transfer(data: TransferCreate) -> None:
    if not data.transfer_date or not data.from_location_id or not data.to_location_id:
        raise ValidationError("transferDate, fromLocationId, and toLocationId are required")
    if data.from_location_id == data.to_location_id:
        raise ValidationError("fromLocationId and toLocationId must be different")


def _vehicle_row(data: TransferVehicleCreate) -> TransferVehicle:
    return TransferVehicle(
        vehicle_id=data.vehicle_id,
        driver_pilot_name=data.driver_pilot_name,
        quantity=data.quantity if data.quantity is not None else 1,
        cost=data.cost or 0,
        is_own_vehicle=data.is_own_vehicle,
        notes=data.notes,
    )


def _rider_ids(participants: Optional[list[Optional[str]]]) -> list[str]:
    """Drop empty ids and repeats, keeping first-seen order."""
    return list(dict.fromkeys(pid for pid in participants or [] if pid))


class TransferPlanner:

    def __init__(self, db: Session):
        self.db = db

    def list_transfers(self, route_id: str) -> list[TransferResponse]:
        require_route(self.db, route_id)
        transfers = self.db.query(Transfer).filter(
            Transfer.route_id == route_id
        ).order_by(Transfer.transfer_date, Transfer.created_at).all()
        return [TransferResponse.model_validate(t) for t in transfers]

    def get_transfer(self, route_id: str, transfer_id: str) -> TransferResponse:
        return TransferResponse.model_validate(require_transfer(self.db, route_id, transfer_id))

    def create_transfer(self, route_id: str, data: TransferCreate) -> TransferResponse:
        validate_transfer(data)
        vehicles = [v for v in data.vehicles or [] if v.vehicle_id]
        riders = _rider_ids(data.participants)

        with atomic(self.db):
            require_route(self.db, route_id)
            self._check_riders(route_id, riders)

            transfer = Transfer(route_id=route_id)
            self._apply(transfer, data)
            transfer.vehicles = [_vehicle_row(v) for v in vehicles]
            transfer.participants = [TransferParticipant(participant_id=pid) for pid in riders]
            self.db.add(transfer)
            self._recompute_total(transfer)

        logger.info(
            f"Route {route_id}: created transfer {transfer.id} "
            f"({len(vehicles)} vehicle(s), {len(riders)} rider(s))"
        )
        return TransferResponse.model_validate(transfer)

    def update_transfer(self, route_id: str, transfer_id: str, data: TransferCreate) -> TransferResponse:
        """Full replacement, vehicles and riders included."""
        validate_transfer(data)
        vehicles = [v for v in data.vehicles or [] if v.vehicle_id]
        riders = _rider_ids(data.participants)

        with atomic(self.db):
            transfer = require_transfer(self.db, route_id, transfer_id)
            self._check_riders(route_id, riders)

            self._apply(transfer, data)
            transfer.vehicles.clear()
            transfer.participants.clear()
            self.db.flush()
            transfer.vehicles.extend(_vehicle_row(v) for v in vehicles)
            transfer.participants.extend(TransferParticipant(participant_id=pid) for pid in riders)
            self._recompute_total(transfer)

        logger.info(
            f"Route {route_id}: replaced transfer {transfer_id} "
            f"({len(vehicles)} vehicle(s), {len(riders)} rider(s))"
        )
        return TransferResponse.model_validate(transfer)

    def delete_transfer(self, route_id: str, transfer_id: str) -> None:
        with atomic(self.db):
            transfer = require_transfer(self.db, route_id, transfer_id)
            self.db.delete(transfer)

        logger.info(f"Route {route_id}: deleted transfer {transfer_id}")

    def add_vehicle(self, route_id: str, transfer_id: str, data: TransferVehicleCreate) -> TransferVehicleResponse:
        if not data.vehicle_id:
            raise ValidationError("vehicleId is required")

        with atomic(self.db):
            transfer = require_transfer(self.db, route_id, transfer_id)
            vehicle = _vehicle_row(data)
            transfer.vehicles.append(vehicle)
            self._recompute_total(transfer)

        logger.info(f"Transfer {transfer_id}: added vehicle {data.vehicle_id}, total now {transfer.total_cost}")
        return TransferVehicleResponse.model_validate(vehicle)

    def remove_vehicle(self, route_id: str, transfer_id: str, transfer_vehicle_id: str) -> None:
        with atomic(self.db):
            transfer = require_transfer(self.db, route_id, transfer_id)
            vehicle = self.db.query(TransferVehicle).filter(
                TransferVehicle.id == transfer_vehicle_id,
                TransferVehicle.transfer_id == transfer_id,
            ).first()
            if not vehicle:
                raise NotFoundError("Vehicle not found in transfer")
            transfer.vehicles.remove(vehicle)
            self._recompute_total(transfer)

        logger.info(f"Transfer {transfer_id}: removed vehicle {transfer_vehicle_id}")

    def add_participant(self, route_id: str, transfer_id: str, participant_id: Optional[str]) -> TransferParticipantResponse:
        if not participant_id:
            raise ValidationError("participantId is required")

        with atomic(self.db):
            require_transfer(self.db, route_id, transfer_id)
            if missing_route_participants(self.db, route_id, [participant_id]):
                raise NotFoundError("Participant not found in route")

            exists = self.db.query(TransferParticipant).filter(
                TransferParticipant.transfer_id == transfer_id,
                TransferParticipant.participant_id == participant_id,
            ).first()
            if exists:
                raise ConflictError("Participant already in transfer")

            rider = TransferParticipant(transfer_id=transfer_id, participant_id=participant_id)
            self.db.add(rider)

        logger.info(f"Transfer {transfer_id}: added rider {participant_id}")
        return TransferParticipantResponse.model_validate(rider)

    def remove_participant(self, route_id: str, transfer_id: str, transfer_participant_id: str) -> None:
        """Removes the rider row addressed by its own id."""
        with atomic(self.db):
            require_transfer(self.db, route_id, transfer_id)
            rider = self.db.query(TransferParticipant).filter(
                TransferParticipant.id == transfer_participant_id,
                TransferParticipant.transfer_id == transfer_id,
            ).first()
            if not rider:
                raise NotFoundError("Participant not found in transfer")
            self.db.delete(rider)

        logger.info(f"Transfer {transfer_id}: removed rider {transfer_participant_id}")

    def _check_riders(self, route_id: str, rider_ids: list[str]) -> None:
        missing = missing_route_participants(self.db, route_id, rider_ids)
        if missing:
            raise ValidationError(f"Participants not on this route: {', '.join(missing)}")

    def _recompute_total(self, transfer: Transfer) -> None:
        """total_cost is Σ cost × quantity over the transfer's vehicles."""
        self.db.flush()
        total = self.db.query(
            func.coalesce(func.sum(TransferVehicle.cost * TransferVehicle.quantity), 0)
        ).filter(TransferVehicle.transfer_id == transfer.id).scalar()
        transfer.total_cost = float(total)

    @staticmethod
    def _apply(transfer: Transfer, data: TransferCreate) -> None:
        transfer.transfer_date = data.transfer_date
        transfer.from_location_id = data.from_location_id
        transfer.to_location_id = data.to_location_id
        transfer.notes = data.notes
