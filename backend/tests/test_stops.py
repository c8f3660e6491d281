"""Tests for the ordered stops inside a segment."""


async def _segment(client, route_id):
    return (await client.post(f"/routes/{route_id}/segments", json={})).json()


class TestStops:
    async def test_create_and_list(self, client, route, directory):
        segment = await _segment(client, route["id"])
        base = f"/routes/{route['id']}/segments/{segment['id']}/stops"

        created = await client.post(base, json={"locationId": directory.anavilhanas, "notes": "lunch"})
        await client.post(base, json={"locationId": directory.novo_airao, "stopOrder": 0})

        assert created.status_code == 201
        assert created.json()["stopOrder"] == 1
        assert created.json()["locationName"] == "Anavilhanas"

        listed = (await client.get(base)).json()
        assert [s["locationName"] for s in listed] == ["Novo Airão", "Anavilhanas"]

    async def test_explicit_zero_order_is_kept(self, client, route, directory):
        segment = await _segment(client, route["id"])

        response = await client.post(
            f"/routes/{route['id']}/segments/{segment['id']}/stops",
            json={"locationId": directory.manaus, "stopOrder": 0},
        )

        assert response.status_code == 201
        assert response.json()["stopOrder"] == 0

    async def test_location_is_required(self, client, route):
        segment = await _segment(client, route["id"])

        response = await client.post(f"/routes/{route['id']}/segments/{segment['id']}/stops", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "Location ID is required"}

    async def test_reorder(self, client, route, directory):
        segment = await _segment(client, route["id"])
        base = f"/routes/{route['id']}/segments/{segment['id']}/stops"
        a = (await client.post(base, json={"locationId": directory.manaus, "stopOrder": 1})).json()
        b = (await client.post(base, json={"locationId": directory.anavilhanas, "stopOrder": 2})).json()

        response = await client.put(
            f"{base}/reorder",
            json={"stopOrders": [{"id": a["id"], "stopOrder": 2}, {"id": b["id"], "stopOrder": 1}]},
        )

        assert response.status_code == 200
        listed = (await client.get(base)).json()
        assert [s["id"] for s in listed] == [b["id"], a["id"]]

    async def test_reorder_with_unknown_stop_changes_nothing(self, client, route, directory):
        segment = await _segment(client, route["id"])
        base = f"/routes/{route['id']}/segments/{segment['id']}/stops"
        a = (await client.post(base, json={"locationId": directory.manaus, "stopOrder": 3})).json()

        response = await client.put(
            f"{base}/reorder",
            json={"stopOrders": [{"id": a["id"], "stopOrder": 1}, {"id": "ghost", "stopOrder": 2}]},
        )

        assert response.status_code == 404
        assert (await client.get(base)).json()[0]["stopOrder"] == 3

    async def test_delete(self, client, route, directory):
        segment = await _segment(client, route["id"])
        base = f"/routes/{route['id']}/segments/{segment['id']}/stops"
        stop = (await client.post(base, json={"locationId": directory.manaus})).json()

        response = await client.delete(f"{base}/{stop['id']}")
        assert response.status_code == 200
        assert (await client.get(base)).json() == []

        response = await client.delete(f"{base}/{stop['id']}")
        assert response.status_code == 404
        assert response.json() == {"message": "Stop not found"}

    async def test_segment_must_belong_to_route(self, client, route, directory):
        other = (await client.post("/routes", json={"name": "Other"})).json()
        segment = await _segment(client, other["id"])

        response = await client.post(
            f"/routes/{route['id']}/segments/{segment['id']}/stops",
            json={"locationId": directory.manaus},
        )

        assert response.status_code == 404

    async def test_deleting_segment_removes_stops(self, client, route, directory, db_session):
        from tourops.models import SegmentStop

        segment = await _segment(client, route["id"])
        await client.post(
            f"/routes/{route['id']}/segments/{segment['id']}/stops",
            json={"locationId": directory.manaus},
        )

        await client.delete(f"/routes/{route['id']}/segments/{segment['id']}")

        assert db_session.query(SegmentStop).count() == 0
