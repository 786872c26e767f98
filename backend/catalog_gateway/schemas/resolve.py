from pydantic import BaseModel
from typing import Optional, List


class ResolveRequest(BaseModel):
    text: Optional[str] = None


class ParsedReference(BaseModel):
    ref: Optional[str] = None   # human label, e.g. "Blue Widget"
    code: Optional[str] = None  # numeric code, 6+ digits when given bare
    raw: str = ""


class ParsedOut(BaseModel):
    ref: Optional[str] = None
    code: Optional[str] = None


class VariantCandidate(BaseModel):
    variant_id: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    title: Optional[str] = None
    vendor: Optional[str] = None


class ResolveResponse(BaseModel):
    input: Optional[str] = None
    parsed: ParsedOut
    candidates: List[VariantCandidate]
