"""End-to-end walk through planning a trip."""


async def test_amazon_trip(client, directory):
    response = await client.post("/routes", json={"name": "Amazon Trip"})
    assert response.status_code == 201
    route = response.json()
    assert route["status"] == "draft"
    route_id = route["id"]

    first = (await client.post(f"/routes/{route_id}/segments", json={})).json()
    assert (first["dayNumber"], first["segmentOrder"]) == (1, 0)
    second = (await client.post(f"/routes/{route_id}/segments", json={})).json()
    assert (second["dayNumber"], second["segmentOrder"]) == (2, 1)

    response = await client.post(
        f"/routes/{route_id}/transfers",
        json={"transferDate": "2026-07-01", "fromLocationId": directory.manaus, "toLocationId": directory.manaus},
    )
    assert response.status_code == 400

    response = await client.post(
        f"/routes/{route_id}/participants",
        json={"clientId": directory.ana, "guideId": directory.carlos},
    )
    assert response.status_code == 400
    assert "Cannot assign both" in response.json()["message"]

    participant = (await client.post(f"/routes/{route_id}/participants", json={"clientId": directory.ana})).json()
    url = f"/routes/{route_id}/segments/{first['id']}/participants"
    assert (await client.post(url, json={"participantId": participant["id"]})).status_code == 201
    assert (await client.post(url, json={"participantId": participant["id"]})).status_code == 409

    aggregate = (await client.get(f"/routes/{route_id}")).json()
    assert [s["dayNumber"] for s in aggregate["segments"]] == [1, 2]
    assert [p["clientName"] for p in aggregate["participants"]] == ["Ana Souza"]
