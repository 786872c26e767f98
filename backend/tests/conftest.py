"""
Shared fixtures: settings with a known API key, a scriptable stand-in for the
Shopify client, and a TestClient wired to both.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from catalog_gateway.api.deps import get_shopify
from catalog_gateway.core.config import Settings
from catalog_gateway.main import create_app

API_KEY = "test-key"


class FakeShopify:
    """Records every execute() call and answers through `handler`."""

    def __init__(self, handler: Optional[Callable[[str, Dict[str, Any]], Any]] = None):
        self.handler = handler or (lambda query, variables: {})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        variables = variables or {}
        self.calls.append((query, variables))
        return self.handler(query, variables)

    @property
    def searches(self) -> List[str]:
        return [v["q"] for _, v in self.calls if "q" in v]


def variant_node(variant_id: str, sku: str, title: str = "Blue Widget", vendor: str = "Acme") -> dict:
    return {
        "id": variant_id,
        "sku": sku,
        "barcode": f"bc-{sku}",
        "product": {"id": "gid://shopify/Product/1", "title": title, "vendor": vendor},
    }


def variants_payload(*nodes: dict) -> dict:
    return {"productVariants": {"nodes": list(nodes)}}


@pytest.fixture
def settings():
    return Settings(
        SHOPIFY_SHOP="test-shop.myshopify.com",
        SHOPIFY_ADMIN_TOKEN="shpat_test",
        SHOPIFY_API_VERSION="2025-07",
        MW_API_KEY=API_KEY,
    )


@pytest.fixture
def fake_shopify():
    return FakeShopify()


@pytest.fixture
def app(settings, fake_shopify):
    app = create_app(settings)
    app.dependency_overrides[get_shopify] = lambda: fake_shopify
    return app


@pytest.fixture
def client(app):
    return TestClient(app, headers={"X-API-Key": API_KEY})
