from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from catalog_gateway.core.shopify import ShopifyAdminClient
from catalog_gateway.schemas.resolve import ParsedReference, VariantCandidate

logger = logging.getLogger(__name__)

# "Blue Widget (123456)" -> label + code. The lazy label still runs up to the
# LAST "(digits)" group because the pattern is anchored at the end.
_LABEL_WITH_CODE = re.compile(r"^(.*?)\s*\(\s*([0-9]+)\s*\)\s*$")
_BARE_CODE = re.compile(r"[0-9]{6,}")

VARIANTS_QUERY = """
query Variants($q: String!) {
  productVariants(first: 10, query: $q) {
    nodes {
      id
      sku
      barcode
      product { id title vendor }
    }
  }
}
"""


def parse_reference(text: Optional[str]) -> ParsedReference:
    """
    Classify free text spoken/typed by the caller:
      "Blue Widget (123456)" => ref="Blue Widget", code="123456"
      "123456"               => code="123456"
      anything else          => ref=<trimmed text>
    """
    s = (text or "").strip()

    m = _LABEL_WITH_CODE.match(s)
    if m:
        return ParsedReference(ref=m.group(1).strip(), code=m.group(2).strip(), raw=s)

    if _BARE_CODE.fullmatch(s):
        return ParsedReference(ref=None, code=s, raw=s)

    return ParsedReference(ref=s, code=None, raw=s)


def candidate_queries(parsed: ParsedReference) -> List[str]:
    """
    Search strings in the order they are tried: broad search first,
    then the same values pinned to the sku field. Empty values are skipped.
    """
    values = [parsed.raw, parsed.ref, parsed.code]
    broad = [v for v in values if v]
    by_sku = [f'sku:"{v}"' for v in values if v]
    return broad + by_sku


def _to_candidate(node: Dict[str, Any]) -> VariantCandidate:
    product = node.get("product") or {}
    return VariantCandidate(
        variant_id=node.get("id"),
        sku=node.get("sku"),
        barcode=node.get("barcode"),
        title=product.get("title"),
        vendor=product.get("vendor"),
    )


async def resolve_candidates(client: ShopifyAdminClient, parsed: ParsedReference) -> List[VariantCandidate]:
    """
    Run candidate_queries() one by one and return the first non-empty batch.
    Any Shopify error aborts the whole lookup.
    """
    for q in candidate_queries(parsed):
        data = await client.execute(VARIANTS_QUERY, {"q": q})
        nodes = ((data or {}).get("productVariants") or {}).get("nodes") or []
        logger.debug("Resolver query %r returned %d variant(s)", q, len(nodes))
        if nodes:
            return [_to_candidate(n) for n in nodes]

    return []
