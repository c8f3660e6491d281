"""Tests for the transaction ledger."""


class TestTransactions:
    async def test_required_fields(self, client, route):
        response = await client.post(f"/routes/{route['id']}/transactions", json={"amount": 10})

        assert response.status_code == 400
        assert response.json() == {"message": "Transaction date, amount and type are required"}

    async def test_amount_must_be_non_zero(self, client, route):
        response = await client.post(
            f"/routes/{route['id']}/transactions",
            json={"transactionDate": "2026-06-01", "amount": 0, "type": "payment"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Amount must be non-zero"}

    async def test_unknown_type(self, client, route):
        response = await client.post(
            f"/routes/{route['id']}/transactions",
            json={"transactionDate": "2026-06-01", "amount": 5, "type": "gift"},
        )
        assert response.status_code == 400

    async def test_create_defaults_currency_and_resolves_accounts(self, client, route, directory):
        response = await client.post(
            f"/routes/{route['id']}/transactions",
            json={
                "transactionDate": "2026-06-01",
                "amount": 1200.5,
                "type": "payment",
                "paymentMethod": "pix",
                "fromAccountId": directory.ana_account,
                "toAccountId": directory.cash,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["currency"] == "BRL"
        assert data["fromAccountName"] == "Ana Souza"
        assert data["toAccountName"] == "Tour Ops Cash"

    async def test_list_newest_first(self, client, route):
        base = f"/routes/{route['id']}/transactions"
        await client.post(base, json={"transactionDate": "2026-05-01", "amount": 100, "type": "payment"})
        await client.post(base, json={"transactionDate": "2026-06-15", "amount": -40, "type": "refund", "currency": "USD"})
        await client.post(base, json={"transactionDate": "2026-06-01", "amount": 60, "type": "expense"})

        listed = (await client.get(base)).json()

        assert [t["transactionDate"] for t in listed] == ["2026-06-15", "2026-06-01", "2026-05-01"]
        assert listed[0]["currency"] == "USD"

    async def test_unknown_route(self, client):
        response = await client.get("/routes/nope/transactions")
        assert response.status_code == 404
