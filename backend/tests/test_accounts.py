"""Account API tests."""

import uuid

import pytest

from ledger_api.config import settings


@pytest.mark.asyncio
async def test_create_account_assigns_sequential_ids(client):
    first = await client.post("/accounts", json={"fullName": "X", "balance": 0})
    second = await client.post("/accounts", json={"fullName": "Y"})

    assert first.status_code == 201
    assert second.status_code == 201
    a, b = first.json(), second.json()
    assert a["id"] == 1
    assert b["id"] == 2
    assert a["_id"] != b["_id"]
    assert a["fullName"] == "X"
    assert a["firstName"] == ""
    assert a["currency"] == "R$"
    assert a["balance"] == 0


@pytest.mark.asyncio
async def test_create_account_ignores_client_id(client):
    response = await client.post("/accounts", json={"id": 99, "fullName": "X"})
    assert response.status_code == 201
    assert response.json()["id"] == 1


@pytest.mark.asyncio
async def test_create_account_with_bad_type_is_400(client):
    response = await client.post("/accounts", json={"balance": "lots"})
    assert response.status_code == 400
    assert "balance" in response.json()["message"]


@pytest.mark.asyncio
async def test_list_seeds_default_account_when_empty(client):
    response = await client.get("/accounts")
    assert response.status_code == 200
    accounts = response.json()
    assert len(accounts) == 1
    assert accounts[0]["fullName"] == "Joana da Silva Oliveira"
    assert accounts[0]["balance"] == 2500
    assert accounts[0]["id"] == 1

    again = await client.get("/accounts")
    assert again.json() == accounts


@pytest.mark.asyncio
async def test_list_without_seeding(client, monkeypatch):
    monkeypatch.setattr(settings, "seed_default_account", False)
    response = await client.get("/accounts")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_returns_existing_accounts_only(client):
    await client.post("/accounts", json={"fullName": "X"})
    response = await client.get("/accounts")
    assert [a["fullName"] for a in response.json()] == ["X"]


@pytest.mark.asyncio
async def test_get_account(client):
    created = (await client.post("/accounts", json={"fullName": "X"})).json()
    response = await client.get(f"/accounts/{created['_id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_missing_account_is_404(client):
    response = await client.get(f"/accounts/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"message": "Account not found"}


@pytest.mark.asyncio
async def test_update_merges_present_fields_only(client):
    created = (
        await client.post("/accounts", json={"fullName": "X", "firstName": "Xa", "balance": 5})
    ).json()

    response = await client.put(f"/accounts/{created['_id']}", json={"lastName": "Z"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["lastName"] == "Z"
    assert updated["fullName"] == "X"
    assert updated["firstName"] == "Xa"
    assert updated["balance"] == 5
    assert updated["id"] == created["id"]


@pytest.mark.asyncio
async def test_update_rejects_null(client):
    created = (await client.post("/accounts", json={"fullName": "X"})).json()
    response = await client.put(f"/accounts/{created['_id']}", json={"balance": None})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_missing_account_is_404(client):
    response = await client.put(f"/accounts/{uuid.uuid4()}", json={"fullName": "Y"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_account(client):
    created = (await client.post("/accounts", json={"fullName": "X"})).json()

    response = await client.delete(f"/accounts/{created['_id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Account deleted"}

    assert (await client.get(f"/accounts/{created['_id']}")).status_code == 404
    assert (await client.delete(f"/accounts/{created['_id']}")).status_code == 404
