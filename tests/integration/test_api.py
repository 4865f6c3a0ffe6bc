"""Integration tests for the read API."""

import json
from collections.abc import Iterator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from pool_analytics.api.endpoints import get_store, set_default_store
from pool_analytics.api.main import app, create_app, load_snapshot
from pool_analytics.config import PricingConfig
from pool_analytics.models.entities import Bundle, Factory
from pool_analytics.models.events import InitializeEvent
from pool_analytics.store.memory import InMemoryEntityStore
from tests.helpers import (
    ANCHOR_POOL,
    ANCHOR_SQRT_PRICE,
    ANCHOR_TICK,
    FACTORY_ADDRESS,
    MISSING_POOL,
    TOKEN_X,
    USDC_E,
)

CUSTOM_FACTORY = "0x" + "fa" * 20


@pytest.fixture
def client(processor) -> Iterator[TestClient]:
    """A test client serving the network after the anchor pool is initialized."""
    processor.process(
        InitializeEvent(address=ANCHOR_POOL, sqrt_price_x96=ANCHOR_SQRT_PRICE, tick=ANCHOR_TICK)
    )
    app.dependency_overrides[get_store] = lambda: processor.store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestReadEndpoints:
    """Tests for the entity endpoints."""

    def test_health_check(self, client):
        """Health endpoint returns ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_bundle(self, client):
        """The bundle is served with its output field names."""
        response = client.get("/bundle")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "1"
        assert Decimal(data["ethPriceUSD"]) == 2500

    def test_factory(self, client):
        """The factory counter is served."""
        response = client.get("/factory")
        assert response.status_code == 200
        assert response.json() == {"id": FACTORY_ADDRESS, "txCount": 0}

    def test_token_lookup_is_case_insensitive(self, client):
        """Token addresses match regardless of case."""
        response = client.get(f"/tokens/{USDC_E.upper().replace('0X', '0x')}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == USDC_E
        assert Decimal(data["derivedETH"]) == Decimal("0.0004")
        assert data["poolCount"] == 1

    def test_pool(self, client):
        """Pools are served with their current price state."""
        response = client.get(f"/pools/{ANCHOR_POOL}")
        assert response.status_code == 200
        data = response.json()
        assert data["tick"] == ANCHOR_TICK
        assert int(data["sqrtPrice"]) == ANCHOR_SQRT_PRICE
        assert Decimal(data["token0Price"]) == 2500

    def test_unknown_token(self, client):
        """Unknown tokens are 404."""
        response = client.get(f"/tokens/{TOKEN_X[:-2]}00")
        assert response.status_code == 404
        assert response.json() == {"detail": "Token not found"}

    def test_unknown_pool(self, client):
        """Unknown pools are 404."""
        response = client.get(f"/pools/{MISSING_POOL}")
        assert response.status_code == 404


class TestEmptyStore:
    """Tests against a store without the singletons."""

    def test_bundle_not_found(self):
        """A store without a bundle answers 404."""
        app.dependency_overrides[get_store] = lambda: InMemoryEntityStore()
        try:
            response = TestClient(app).get("/bundle")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 404
        assert response.json() == {"detail": "Bundle not found"}


class TestCreateApp:
    """Tests for the application factory."""

    def test_serves_given_store(self, network_store):
        """An app built around a store serves that store without overrides."""
        client = TestClient(create_app(network_store))

        response = client.get(f"/tokens/{TOKEN_X}")
        assert response.status_code == 200
        assert response.json()["decimals"] == 18

    def test_serves_custom_config_singletons(self):
        """Singleton ids come from the config the app was built with."""
        config = PricingConfig(factory_address=CUSTOM_FACTORY, bundle_id="main")
        store = InMemoryEntityStore(
            [Bundle(id="main", eth_price_usd=Decimal(1800)), Factory(id=CUSTOM_FACTORY, tx_count=7)]
        )
        client = TestClient(create_app(store, config))

        factory = client.get("/factory")
        assert factory.status_code == 200
        assert factory.json() == {"id": CUSTOM_FACTORY, "txCount": 7}
        assert Decimal(client.get("/bundle").json()["ethPriceUSD"]) == 1800

    def test_default_config_misses_custom_singletons(self):
        """Without the config, the default singleton ids are looked up."""
        store = InMemoryEntityStore([Factory(id=CUSTOM_FACTORY)])
        assert TestClient(create_app(store)).get("/factory").status_code == 404

    def test_load_snapshot_sets_default_store(self, tmp_path, network_store):
        """A snapshot file seeds the store served by the default app."""
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps(network_store.to_snapshot()))

        load_snapshot(str(path))
        try:
            response = TestClient(app).get(f"/pools/{ANCHOR_POOL}")
        finally:
            set_default_store(InMemoryEntityStore())

        assert response.status_code == 200
        assert response.json()["tick"] is None
