from fastapi import Request

from catalog_gateway.core.shopify import ShopifyAdminClient


def get_shopify(request: Request) -> ShopifyAdminClient:
    # Built once in create_app() from the startup Settings.
    return request.app.state.shopify
