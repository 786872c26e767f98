import json
import logging
from typing import Any, Dict, Optional

import httpx

from catalog_gateway.core.config import Settings

logger = logging.getLogger(__name__)


class ShopifyError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ShopifyConfigError(ShopifyError):
    pass


class ShopifyHTTPError(ShopifyError):
    """Shopify answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Shopify HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ShopifyGraphQLError(ShopifyError):
    """Transport succeeded but the payload carries a GraphQL `errors` array."""

    def __init__(self, errors: Any):
        super().__init__(f"Shopify GraphQL errors: {json.dumps(errors, ensure_ascii=False, separators=(',', ':'))}")
        self.errors = errors


class ShopifyAdminClient:
    """
    Thin Admin GraphQL client: one POST per call, no retries.

    `transport` exists so tests can swap in httpx.MockTransport.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        shop = (self.settings.SHOPIFY_SHOP or "").strip()
        token = (self.settings.SHOPIFY_ADMIN_TOKEN or "").strip()
        if not shop:
            raise ShopifyConfigError("SHOPIFY_SHOP is not set")
        if not token:
            raise ShopifyConfigError("SHOPIFY_ADMIN_TOKEN is not set")
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": token,
        }

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        """
        POST {query, variables} and return the `data` payload.

        Raises ShopifyHTTPError on non-2xx and ShopifyGraphQLError when the
        response has an `errors` key.
        """
        headers = self._headers()
        payload = {"query": query, "variables": variables or {}}

        logger.debug("Shopify GraphQL call variables=%s", payload["variables"])
        async with httpx.AsyncClient(transport=self._transport) as client:
            r = await client.post(self.settings.graphql_url, headers=headers, json=payload)

        text = r.text
        if not r.is_success:
            raise ShopifyHTTPError(r.status_code, text)

        data = json.loads(text)
        if data.get("errors") is not None:
            raise ShopifyGraphQLError(data["errors"])

        return data.get("data")
