"""HTTP-level tests for the /users endpoints."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient
from sqlalchemy import text

ANN = {
    "name": "Ann",
    "email": "ann@x.com",
    "age": 30,
    "address": {"city": "Lyon", "house": "12"},
}


def _with(**overrides):
    payload = dict(ANN)
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_full_lifecycle(client: AsyncClient):
    response = await client.post("/users", json=ANN)
    assert response.status_code == 201
    assert response.json() == {"id": 1, **ANN}

    updated = {
        "name": "Ann B",
        "email": "ann@x.com",
        "age": 31,
        "address": {"city": "Lyon", "house": "14"},
    }
    response = await client.put("/users/1", json=updated)
    assert response.status_code == 200
    assert response.json() == {"message": "User updated successfully."}

    response = await client.get("/users")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, **updated}]

    response = await client.delete("/users/1")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully."}

    response = await client.get("/users")
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_users_empty(client: AsyncClient):
    response = await client.get("/users")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_coerces_numeric_string_age(client: AsyncClient):
    response = await client.post("/users", json=_with(age="42"))

    assert response.status_code == 201
    assert response.json()["age"] == 42


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({k: v for k, v in ANN.items() if k != "name"}, "name"),
        ({k: v for k, v in ANN.items() if k != "email"}, "email"),
        (_with(age="thirty"), "age"),
        (_with(address={"city": "Lyon"}), "address"),
        (_with(address={"city": "Lyon", "house": 12}), "address"),
    ],
)
async def test_create_rejects_invalid_payload(client: AsyncClient, payload, field):
    response = await client.post("/users", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["field"] == field
    assert body["message"].startswith("Invalid")
    assert (await client.get("/users")).json() == []


@pytest.mark.asyncio
async def test_create_rejects_non_object_body(client: AsyncClient):
    response = await client.post("/users", json=["Ann"])

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request."


@pytest.mark.asyncio
async def test_create_duplicate_email_is_save_failure(client: AsyncClient):
    assert (await client.post("/users", json=ANN)).status_code == 201

    response = await client.post("/users", json=_with(name="Someone Else"))

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "An error occurred while saving the user."
    assert "error" in body
    assert len((await client.get("/users")).json()) == 1


@pytest.mark.asyncio
async def test_store_usable_after_failed_insert(client: AsyncClient):
    await client.post("/users", json=ANN)
    await client.post("/users", json=ANN)

    response = await client.post("/users", json=_with(email="bob@x.com", name="Bob"))

    assert response.status_code == 201
    assert [u["email"] for u in (await client.get("/users")).json()] == ["ann@x.com", "bob@x.com"]


@pytest.mark.asyncio
async def test_update_unknown_id_returns_404(client: AsyncClient):
    response = await client.put("/users/999", json=ANN)

    assert response.status_code == 404
    assert response.json() == {"message": "User not found."}


@pytest.mark.asyncio
async def test_update_missing_field_returns_400(client: AsyncClient):
    await client.post("/users", json=ANN)

    response = await client.put("/users/1", json=_with(age=0))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid or missing fields in the request."
    assert (await client.get("/users")).json()[0]["age"] == 30


@pytest.mark.asyncio
async def test_update_non_numeric_age_is_store_failure(client: AsyncClient):
    await client.post("/users", json=ANN)

    response = await client.put("/users/1", json=_with(age="abc"))

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to update user."


@pytest.mark.asyncio
async def test_update_to_taken_email_is_store_failure(client: AsyncClient):
    await client.post("/users", json=ANN)
    await client.post("/users", json=_with(email="bob@x.com", name="Bob"))

    response = await client.put("/users/2", json=_with(name="Bob"))

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to update user."
    assert (await client.get("/users")).json()[1]["email"] == "bob@x.com"


@pytest.mark.asyncio
async def test_delete_unknown_id_returns_404(client: AsyncClient):
    response = await client.delete("/users/999")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found."}


@pytest.mark.asyncio
async def test_delete_removes_exactly_one_row(client: AsyncClient):
    await client.post("/users", json=ANN)
    await client.post("/users", json=_with(email="bob@x.com", name="Bob"))

    assert (await client.delete("/users/1")).status_code == 200

    users = (await client.get("/users")).json()
    assert [u["id"] for u in users] == [2]


@pytest.mark.asyncio
async def test_non_integer_id_is_not_found(client: AsyncClient):
    response = await client.delete("/users/abc")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found."}

    response = await client.put("/users/abc", json=ANN)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_id_beyond_column_range_is_not_found(client: AsyncClient):
    await client.post("/users", json=ANN)

    response = await client.delete("/users/99999999999999999999")
    assert response.status_code == 404
    assert response.json() == {"message": "User not found."}

    response = await client.put("/users/99999999999999999999", json=ANN)
    assert response.status_code == 404
    assert len((await client.get("/users")).json()) == 1


@pytest.mark.asyncio
async def test_create_age_beyond_column_range_is_save_failure(client: AsyncClient):
    response = await client.post("/users", json=_with(age=10**30))

    assert response.status_code == 500
    assert response.json()["message"] == "An error occurred while saving the user."
    assert (await client.get("/users")).json() == []


@pytest.mark.asyncio
async def test_update_rounds_fractional_age(client: AsyncClient):
    await client.post("/users", json=ANN)

    response = await client.put("/users/1", json=_with(age=31.5))

    assert response.status_code == 200
    assert (await client.get("/users")).json()[0]["age"] == 32


@pytest.mark.asyncio
async def test_list_substitutes_unknown_for_corrupt_address(app: FastAPI, client: AsyncClient):
    await client.post("/users", json=ANN)
    async with app.state.database.session() as session:
        await session.execute(
            text(
                "INSERT INTO users (name, email, age, address) "
                "VALUES ('Broken', 'broken@x.com', 50, 'not json')"
            )
        )

    response = await client.get("/users")

    assert response.status_code == 200
    users = response.json()
    assert users[0]["address"] == ANN["address"]
    assert users[1]["address"] == {"city": "Unknown", "house": "Unknown"}


@pytest.mark.asyncio
async def test_list_survives_deeply_nested_address(app: FastAPI, client: AsyncClient):
    async with app.state.database.session() as session:
        await session.execute(
            text(
                "INSERT INTO users (name, email, age, address) "
                "VALUES ('Deep', 'deep@x.com', 50, :address)"
            ),
            {"address": "[" * 100000},
        )

    response = await client.get("/users")

    assert response.status_code == 200
    assert response.json()[0]["address"] == {"city": "Unknown", "house": "Unknown"}
