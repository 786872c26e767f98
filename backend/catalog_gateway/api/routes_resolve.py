import logging

from fastapi import APIRouter, Depends, HTTPException

from catalog_gateway.api.deps import get_shopify
from catalog_gateway.core.references import parse_reference, resolve_candidates
from catalog_gateway.core.shopify import ShopifyAdminClient
from catalog_gateway.schemas.resolve import ParsedOut, ResolveRequest, ResolveResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resolve"])


@router.post("/resolve_reference", response_model=ResolveResponse)
async def resolve_reference(req: ResolveRequest, shopify: ShopifyAdminClient = Depends(get_shopify)):
    """
    Turn a spoken/typed product reference into Shopify variant candidates.
    Returns the first non-empty batch; an empty list is a normal answer.
    """
    try:
        parsed = parse_reference(req.text)
        candidates = await resolve_candidates(shopify, parsed)

        return ResolveResponse(
            input=req.text,
            parsed=ParsedOut(ref=parsed.ref, code=parsed.code),
            candidates=candidates,
        )

    except Exception as e:
        logger.exception("resolve_reference failed for %r", req.text)
        raise HTTPException(status_code=500, detail=str(e))
