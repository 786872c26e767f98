from typing import Any, Dict

from catalog_gateway.core.shopify import ShopifyAdminClient
from catalog_gateway.core.text import html_to_text
from catalog_gateway.schemas.variants import VariantDescription, VariantDescriptionText

VARIANT_DESCRIPTION_QUERY = """
query VariantDesc($id: ID!) {
  productVariant(id: $id) {
    id
    sku
    product { id title vendor descriptionHtml }
  }
}
"""


async def _fetch_variant(client: ShopifyAdminClient, variant_id: str) -> Dict[str, Any]:
    data = await client.execute(VARIANT_DESCRIPTION_QUERY, {"id": variant_id})
    # Unknown ids come back as productVariant: null, which is not an error here.
    return (data or {}).get("productVariant") or {}


async def fetch_description(client: ShopifyAdminClient, variant_id: str) -> VariantDescription:
    v = await _fetch_variant(client, variant_id)
    product = v.get("product") or {}
    return VariantDescription(
        variant_id=v.get("id"),
        sku=v.get("sku"),
        product_id=product.get("id"),
        title=product.get("title"),
        vendor=product.get("vendor"),
        description_html=product.get("descriptionHtml"),
    )


async def fetch_description_text(client: ShopifyAdminClient, variant_id: str) -> VariantDescriptionText:
    """Same lookup as fetch_description, with the HTML flattened to plain text."""
    v = await _fetch_variant(client, variant_id)
    product = v.get("product") or {}
    html = product.get("descriptionHtml") or ""
    return VariantDescriptionText(
        variant_id=v.get("id"),
        sku=v.get("sku"),
        title=product.get("title"),
        vendor=product.get("vendor"),
        description_text=html_to_text(html),
    )
