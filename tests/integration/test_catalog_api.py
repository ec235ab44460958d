"""Integration tests for the seller, customer and menu endpoints."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.db.models.query import QuerySet

from modules.menus.models import Menu

pytestmark = pytest.mark.integration


@pytest.fixture()
def seller(api_client):
    response = api_client.post(
        "/api/v1/sellers/",
        {"name": "Warung Satu", "address": "Jl. Sudirman 1", "open_hour": 8, "closed_hour": 22},
        format="json",
    )
    assert response.status_code == 201
    return response.json()


class TestSellers:
    def test_create(self, seller):
        assert seller["seller_id"] == 1
        assert seller["open_hour"] == 8

    def test_invalid_hour(self, api_client):
        response = api_client.post(
            "/api/v1/sellers/", {"name": "Warung", "open_hour": 24}, format="json"
        )
        assert response.status_code == 400
        assert "open_hour" in response.json()

    def test_list_and_retrieve(self, api_client, seller):
        assert api_client.get("/api/v1/sellers/").json() == [seller]
        assert api_client.get("/api/v1/sellers/1/").json() == seller
        assert api_client.get("/api/v1/sellers/2/").status_code == 404

    def test_update_address(self, api_client, seller):
        response = api_client.patch(
            "/api/v1/sellers/1/address/", {"address": "Jl. Thamrin 9"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["address"] == "Jl. Thamrin 9"


class TestCustomers:
    def test_create_and_retrieve(self, api_client):
        created = api_client.post(
            "/api/v1/customers/", {"name": "Ayu", "address": "Jl. Merdeka 7"}, format="json"
        )
        assert created.status_code == 201
        customer_id = created.json()["customer_id"]

        response = api_client.get(f"/api/v1/customers/{customer_id}/")
        assert response.json() == {"customer_id": customer_id, "name": "Ayu", "address": "Jl. Merdeka 7"}

    def test_unknown(self, api_client):
        response = api_client.get("/api/v1/customers/5/")
        assert response.status_code == 404
        assert response.json()["code"] == "customer_not_found"


class TestMenus:
    def test_create(self, api_client, seller):
        response = api_client.post(
            "/api/v1/menus/",
            {"seller_id": seller["seller_id"], "name": "Nasi Goreng", "price": "12.50"},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["price"] == "12.50"
        assert response.json()["menu_id"] == 1

    def test_unknown_seller(self, api_client):
        response = api_client.post(
            "/api/v1/menus/", {"seller_id": 3, "name": "Soto", "price": "1.00"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "seller_not_found"

    def test_list_by_seller(self, api_client, seller):
        for name in ("Nasi Goreng", "Es Teh"):
            api_client.post(
                "/api/v1/menus/", {"seller_id": 1, "name": name, "price": "2.00"}, format="json"
            )

        assert len(api_client.get("/api/v1/menus/?seller_id=1").json()) == 2
        assert api_client.get("/api/v1/menus/?seller_id=2").json() == []

    def test_retrieve_when_catalog_unavailable(self, api_client):
        with patch.object(Menu.objects, "filter", side_effect=DatabaseError("gone")):
            response = api_client.get("/api/v1/menus/1/")

        assert response.status_code == 503
        assert response.json()["code"] == "catalog_persistence_error"
        assert response.json()["menu_id"] == 1

    def test_list_when_catalog_unavailable(self, api_client):
        with patch.object(QuerySet, "_fetch_all", side_effect=DatabaseError("gone")):
            response = api_client.get("/api/v1/menus/?seller_id=1")

        assert response.status_code == 503
        assert response.json()["code"] == "catalog_persistence_error"
