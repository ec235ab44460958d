from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from modules.core.context import MarketplaceContext
from modules.customers.dtos import CustomerDTO
from modules.menus.dtos import MenuDTO
from modules.sellers.dtos import SellerDTO
from shared.infrastructure.bus import InMemoryEventBus
from tests.doubles import (
    InMemoryCustomerRepository,
    InMemoryMenuRepository,
    InMemoryOrderRepository,
    InMemorySellerRepository,
    InMemorySequenceRepository,
)


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# In-memory marketplace
# ---------------------------------------------------------------------------


@pytest.fixture()
def memory_context():
    """A fully wired context over in-memory repositories."""
    return MarketplaceContext(
        sequences=InMemorySequenceRepository(),
        sellers=InMemorySellerRepository(),
        customers=InMemoryCustomerRepository(),
        menus=InMemoryMenuRepository(),
        orders=InMemoryOrderRepository(),
        event_bus=InMemoryEventBus(),
    )


@pytest.fixture()
def seeded_context(memory_context):
    """Seller 1 owns menus 10 (12.50) and 11 (4.25); seller 2 owns menu 20.

    Customer 7 lives at "Jl. Merdeka 7".
    """
    memory_context.sellers.insert(
        SellerDTO(seller_id=1, name="Warung Satu", address="Jl. Sudirman 1")
    )
    memory_context.sellers.insert(
        SellerDTO(seller_id=2, name="Warung Dua", address="Jl. Thamrin 2")
    )
    memory_context.customers.insert(
        CustomerDTO(customer_id=7, name="Ayu", address="Jl. Merdeka 7")
    )
    memory_context.menus.insert(
        MenuDTO(menu_id=10, seller_id=1, name="Nasi Goreng", price=Decimal("12.50"))
    )
    memory_context.menus.insert(
        MenuDTO(menu_id=11, seller_id=1, name="Es Teh", price=Decimal("4.25"))
    )
    memory_context.menus.insert(
        MenuDTO(menu_id=20, seller_id=2, name="Sate Ayam", price=Decimal("9.00"))
    )
    return memory_context
