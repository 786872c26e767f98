import logging

from fastapi import APIRouter, Depends, HTTPException

from catalog_gateway.api.deps import get_shopify
from catalog_gateway.core.shopify import ShopifyAdminClient
from catalog_gateway.core.variants import fetch_description, fetch_description_text
from catalog_gateway.schemas.variants import VariantDescription, VariantDescriptionText

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/variant", tags=["variants"])

# `:path` so full gids ("gid://shopify/ProductVariant/123") route without encoding tricks.


def _require_id(variant_id: str) -> None:
    # `:path` also matches "", as in /variant//description
    if not variant_id:
        raise HTTPException(status_code=404, detail="Not Found")


@router.get("/{variant_id:path}/description", response_model=VariantDescription)
async def variant_description(variant_id: str, shopify: ShopifyAdminClient = Depends(get_shopify)):
    _require_id(variant_id)
    try:
        return await fetch_description(shopify, variant_id)
    except Exception as e:
        logger.exception("description lookup failed for %s", variant_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{variant_id:path}/description_text", response_model=VariantDescriptionText)
async def variant_description_text(variant_id: str, shopify: ShopifyAdminClient = Depends(get_shopify)):
    """Plain-text description for agents that read it out loud."""
    _require_id(variant_id)
    try:
        return await fetch_description_text(shopify, variant_id)
    except Exception as e:
        logger.exception("description_text lookup failed for %s", variant_id)
        raise HTTPException(status_code=500, detail=str(e))
