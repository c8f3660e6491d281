"""Tests for polymorphic entity name resolution."""
from tourops.models import Hotel, Vehicle, VehicleOwner
from tourops.services import EntityRef, EntityResolver


class TestEntityResolver:
    def test_named_types(self, db_session, directory):
        resolver = EntityResolver(db_session)

        assert resolver.resolve(EntityRef("location", directory.manaus)) == "Manaus"
        assert resolver.resolve(EntityRef("hotel", directory.pousada)) == "Pousada Rio Negro"
        assert resolver.resolve(EntityRef("third-party", directory.boats)) == "Amazon Boats Ltda"
        assert resolver.resolve(EntityRef("client", directory.ana)) == "Ana Souza"
        assert resolver.resolve(EntityRef("staff", directory.carlos)) == "Carlos Mendes"

    def test_vehicle_owner_labels(self, db_session, directory):
        resolver = EntityResolver(db_session)

        assert resolver.resolve(EntityRef("vehicle", directory.jeep)) == "car4x4 - Company"
        assert resolver.resolve(EntityRef("vehicle", directory.hotel_boat)) == "boat - Pousada Rio Negro"
        assert resolver.resolve(EntityRef("vehicle", directory.rented_quad)) == "quadbike - Amazon Boats Ltda"

    def test_owner_fallbacks(self, db_session):
        orphan_hotel_car = Vehicle(type="carSedan", vehicle_owner=VehicleOwner.HOTEL.value)
        orphan_rental = Vehicle(type="outro", vehicle_owner=VehicleOwner.THIRD_PARTY.value)
        db_session.add_all([orphan_hotel_car, orphan_rental])
        db_session.commit()

        resolver = EntityResolver(db_session)

        assert resolver.resolve(EntityRef("vehicle", orphan_hotel_car.id)) == "carSedan - Hotel"
        assert resolver.resolve(EntityRef("vehicle", orphan_rental.id)) == "outro - Third Party"

    def test_unknown_references(self, db_session, directory):
        resolver = EntityResolver(db_session)

        assert resolver.resolve(EntityRef("hotel", "missing")) is None
        assert resolver.resolve(EntityRef("spaceship", directory.manaus)) is None
        assert resolver.resolve(EntityRef("hotel", None)) is None
        assert resolver.resolve(None) is None

    def test_lookups_are_memoised(self, db_session, directory):
        resolver = EntityResolver(db_session)
        assert resolver.resolve(EntityRef("hotel", directory.pousada)) == "Pousada Rio Negro"

        db_session.get(Hotel, directory.pousada).name = "Renamed"
        db_session.commit()

        assert resolver.resolve(EntityRef("hotel", directory.pousada)) == "Pousada Rio Negro"
        assert EntityResolver(db_session).resolve(EntityRef("hotel", directory.pousada)) == "Renamed"
