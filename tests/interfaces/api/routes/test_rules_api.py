"""Integration tests for the rule API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from rulechain.infrastructure.database import SessionLocal
from rulechain.infrastructure.models import EntryModel, RuleModel


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _create(client: TestClient, **overrides) -> dict:
    payload = {
        "categoryId": "food",
        "property": "desc",
        "operator": "contains",
        "value": "COFFEE",
        **overrides,
    }
    response = client.post("/rules/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def _ordered_ids(client: TestClient) -> list[int]:
    response = client.get("/rules/")
    assert response.status_code == 200
    return [rule["id"] for rule in response.json()]


def test_rule_crud_flow(client: TestClient) -> None:
    first = _create(client)
    assert first["categoryId"] == "food"
    assert first["prev"] is None and first["next"] is None
    assert first["createdTime"] is not None
    assert first["deletedTime"] is None

    second = _create(client, categoryId="big", property="amount", operator="greaterThan", value=100)
    assert second["next"] == first["id"]
    assert second["value"] == "100"
    assert _ordered_ids(client) == [second["id"], first["id"]]

    detail = client.get(f"/rules/{first['id']}")
    assert detail.status_code == 200
    assert detail.json()["prev"] == second["id"]

    moved = client.put(
        f"/rules/{first['id']}",
        json={"prev": None, "next": second["id"], "value": "TEA"},
    )
    assert moved.status_code == 200, moved.text
    assert moved.json()["value"] == "TEA"
    assert moved.json()["updatedTime"] is not None
    assert _ordered_ids(client) == [first["id"], second["id"]]

    delete_response = client.delete(f"/rules/{first['id']}")
    assert delete_response.status_code == 204
    assert client.get(f"/rules/{first['id']}").status_code == 404
    assert client.delete(f"/rules/{first['id']}").status_code == 404
    assert _ordered_ids(client) == [second["id"]]
    assert client.get(f"/rules/{second['id']}").json()["next"] is None


def test_invalid_rules_are_rejected(client: TestClient) -> None:
    unknown_operator = client.post(
        "/rules/",
        json={"categoryId": "food", "property": "desc", "operator": "regex", "value": "x"},
    )
    assert unknown_operator.status_code == 422

    bad_number = client.post(
        "/rules/",
        json={"categoryId": "big", "property": "amount", "operator": "lessThan", "value": "cheap"},
    )
    assert bad_number.status_code == 400

    rule = _create(client)
    self_link = client.put(f"/rules/{rule['id']}", json={"prev": None, "next": rule["id"]})
    assert self_link.status_code == 400

    one_sided = client.put(f"/rules/{rule['id']}", json={"next": None, "value": "TEA"})
    assert one_sided.status_code == 400
    assert client.get(f"/rules/{rule['id']}").json()["value"] == "COFFEE"

    unknown_field = client.put(f"/rules/{rule['id']}", json={"deletedTime": None})
    assert unknown_field.status_code == 422

    assert client.put("/rules/999", json={"value": "x"}).status_code == 404
    assert _ordered_ids(client) == [rule["id"]]


def test_broken_chain_is_reported(client: TestClient) -> None:
    with SessionLocal() as session:
        session.add_all(
            [
                RuleModel(category_id="a", property="desc", operator="is", value="A"),
                RuleModel(category_id="b", property="desc", operator="is", value="B"),
            ]
        )
        session.commit()

    response = client.get("/rules/")
    assert response.status_code == 409
    assert "head" in response.json()["detail"]

    assert client.post("/rules/apply").status_code == 409


def test_apply_rules_endpoint(client: TestClient) -> None:
    _create(client, categoryId="sweets", value="OFFEE")
    _create(client, categoryId="coffee", value="COFFEE")

    with SessionLocal() as session:
        entries = [
            EntryModel(fields={"desc": "COFFEE SHOP"}),
            EntryModel(category_id="none", fields={"desc": "TOFFEE"}),
            EntryModel(category_id="coffee", fields={"desc": "COFFEE BEANS"}),
            EntryModel(fields={"desc": "RENT"}),
        ]
        session.add_all(entries)
        session.commit()
        shop, toffee, beans, rent = (entry.id for entry in entries)

    only_shop = client.post("/rules/apply", json={"entryIds": [shop]})
    assert only_shop.status_code == 200
    assert only_shop.json() == {"changes": {"coffee": [shop]}, "updated": 1}

    everything = client.post("/rules/apply")
    assert everything.status_code == 200
    assert everything.json() == {"changes": {"sweets": [toffee]}, "updated": 1}

    with SessionLocal() as session:
        categories = {
            model.id: model.category_id for model in session.query(EntryModel).all()
        }
    assert categories == {shop: "coffee", toffee: "sweets", beans: "coffee", rent: None}
