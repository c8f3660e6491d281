"""Tests for the route roster and segment membership."""
import pytest

from tourops.models import Participant, RoomParticipant, SegmentParticipant, TransferParticipant
from tourops.schemas import ParticipantCreate, SegmentCreate
from tourops.services import ParticipantRoster, SegmentStore


class TestRoster:
    async def test_client_defaults_role(self, client, route, directory):
        response = await client.post(f"/routes/{route['id']}/participants", json={"clientId": directory.ana})

        assert response.status_code == 201
        data = response.json()
        assert data["role"] == "client"
        assert data["clientName"] == "Ana Souza"
        assert data["guideName"] is None
        assert data["isOptional"] is False

    async def test_staff_defaults_role(self, client, route, directory):
        response = await client.post(f"/routes/{route['id']}/participants", json={"guideId": directory.carlos})

        assert response.json()["role"] == "staff"
        assert response.json()["guideName"] == "Carlos Mendes"

    async def test_needs_client_or_staff(self, client, route):
        response = await client.post(f"/routes/{route['id']}/participants", json={"notes": "?"})

        assert response.status_code == 400
        assert response.json() == {"message": "Client or Staff is required"}

    async def test_rejects_both(self, client, route, directory):
        response = await client.post(
            f"/routes/{route['id']}/participants",
            json={"clientId": directory.ana, "guideId": directory.carlos},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Cannot assign both")

    async def test_update_and_list(self, client, route, directory):
        base = f"/routes/{route['id']}/participants"
        participant = (await client.post(base, json={"clientId": directory.ana})).json()

        response = await client.put(
            f"{base}/{participant['id']}",
            json={"guideId": directory.carlos, "role": "guide-tail", "isOptional": True},
        )

        assert response.status_code == 200
        listed = (await client.get(base)).json()
        assert len(listed) == 1
        assert listed[0]["clientId"] is None
        assert listed[0]["guideName"] == "Carlos Mendes"
        assert listed[0]["role"] == "guide-tail"
        assert listed[0]["isOptional"] is True

    async def test_update_other_route_participant(self, client, route, directory):
        other = (await client.post("/routes", json={"name": "Other"})).json()
        participant = (await client.post(
            f"/routes/{other['id']}/participants", json={"clientId": directory.ana}
        )).json()

        response = await client.put(
            f"/routes/{route['id']}/participants/{participant['id']}", json={"clientId": directory.bruno}
        )

        assert response.status_code == 404


class TestSegmentMembership:
    async def test_add_twice_conflicts(self, client, route, directory):
        segment = (await client.post(f"/routes/{route['id']}/segments", json={})).json()
        participant = (await client.post(
            f"/routes/{route['id']}/participants", json={"clientId": directory.ana}
        )).json()
        url = f"/routes/{route['id']}/segments/{segment['id']}/participants"

        first = await client.post(url, json={"participantId": participant["id"]})
        second = await client.post(url, json={"participantId": participant["id"]})

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"message": "Participant already in segment"}

        listed = (await client.get(url)).json()
        assert [p["id"] for p in listed] == [participant["id"]]

    async def test_remove_from_segment(self, client, route, directory):
        segment = (await client.post(f"/routes/{route['id']}/segments", json={})).json()
        participant = (await client.post(
            f"/routes/{route['id']}/participants", json={"clientId": directory.ana}
        )).json()
        url = f"/routes/{route['id']}/segments/{segment['id']}/participants"
        await client.post(url, json={"participantId": participant["id"]})

        response = await client.delete(f"{url}/{participant['id']}")
        assert response.status_code == 200
        assert (await client.get(url)).json() == []

        response = await client.delete(f"{url}/{participant['id']}")
        assert response.status_code == 404

    async def test_set_segments_replaces(self, client, route, directory):
        route_id = route["id"]
        s1 = (await client.post(f"/routes/{route_id}/segments", json={})).json()
        s2 = (await client.post(f"/routes/{route_id}/segments", json={})).json()
        s3 = (await client.post(f"/routes/{route_id}/segments", json={})).json()
        participant = (await client.post(
            f"/routes/{route_id}/participants", json={"clientId": directory.ana}
        )).json()
        url = f"/routes/{route_id}/participants/{participant['id']}/segments"

        await client.put(url, json={"segmentIds": [s1["id"], s2["id"]]})
        response = await client.put(url, json={"segmentIds": [s2["id"], s3["id"], s3["id"]]})

        assert response.status_code == 200
        assert response.json() == {"segmentIds": [s2["id"], s3["id"]]}
        for segment, expected in ((s1, 0), (s2, 1), (s3, 1)):
            members = (await client.get(f"/routes/{route_id}/segments/{segment['id']}/participants")).json()
            assert len(members) == expected

    async def test_set_segments_with_foreign_segment_changes_nothing(self, client, route, directory):
        route_id = route["id"]
        mine = (await client.post(f"/routes/{route_id}/segments", json={})).json()
        other = (await client.post("/routes", json={"name": "Other"})).json()
        theirs = (await client.post(f"/routes/{other['id']}/segments", json={})).json()
        participant = (await client.post(
            f"/routes/{route_id}/participants", json={"clientId": directory.ana}
        )).json()
        url = f"/routes/{route_id}/participants/{participant['id']}/segments"
        await client.put(url, json={"segmentIds": [mine["id"]]})

        response = await client.put(url, json={"segmentIds": [theirs["id"]]})

        assert response.status_code == 404
        members = (await client.get(f"/routes/{route_id}/segments/{mine['id']}/participants")).json()
        assert len(members) == 1


class TestRosterService:
    def test_attach_is_idempotent(self, db_session, directory):
        from tourops.models import Route

        route = Route(name="Direct")
        db_session.add(route)
        db_session.commit()
        segment = SegmentStore(db_session).create_segment(route.id, SegmentCreate())
        roster = ParticipantRoster(db_session)
        participant = roster.create_participant(route.id, ParticipantCreate(client_id=directory.ana))

        assert roster.attach_to_segment(segment.id, participant.id) is True
        assert roster.attach_to_segment(segment.id, participant.id) is False
        db_session.commit()

        assert db_session.query(SegmentParticipant).count() == 1

    async def test_delete_cascades_assignments(self, client, route, directory, db_session):
        route_id = route["id"]
        segment = (await client.post(f"/routes/{route_id}/segments", json={})).json()
        participant = (await client.post(
            f"/routes/{route_id}/participants", json={"clientId": directory.ana}
        )).json()
        await client.post(
            f"/routes/{route_id}/segments/{segment['id']}/participants",
            json={"participantId": participant["id"]},
        )
        accommodation = (await client.post(
            f"/routes/{route_id}/segments/{segment['id']}/accommodations",
            json={"hotelId": directory.pousada, "clientType": "client"},
        )).json()
        await client.post(
            f"/routes/{route_id}/segments/{segment['id']}/accommodations/{accommodation['id']}/rooms",
            json={"roomType": "single", "participants": [{"participantId": participant["id"]}]},
        )
        await client.post(f"/routes/{route_id}/transfers", json={
            "transferDate": "2026-07-01",
            "fromLocationId": directory.manaus,
            "toLocationId": directory.novo_airao,
            "participants": [participant["id"]],
        })

        response = await client.delete(f"/routes/{route_id}/participants/{participant['id']}")

        assert response.status_code == 200
        assert db_session.query(Participant).count() == 0
        assert db_session.query(SegmentParticipant).count() == 0
        assert db_session.query(RoomParticipant).count() == 0
        assert db_session.query(TransferParticipant).count() == 0

    async def test_delete_missing(self, client, route):
        response = await client.delete(f"/routes/{route['id']}/participants/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Participant not found"}


@pytest.mark.parametrize("role", ["client", "guide-captain", "guide-tail", "staff"])
async def test_every_role_is_accepted(client, route, directory, role):
    response = await client.post(
        f"/routes/{route['id']}/participants", json={"guideId": directory.carlos, "role": role}
    )
    assert response.status_code == 201
    assert response.json()["role"] == role
