from pydantic import BaseModel
from typing import Optional


class VariantDescription(BaseModel):
    variant_id: Optional[str] = None
    sku: Optional[str] = None
    product_id: Optional[str] = None
    title: Optional[str] = None
    vendor: Optional[str] = None
    description_html: Optional[str] = None


class VariantDescriptionText(BaseModel):
    variant_id: Optional[str] = None
    sku: Optional[str] = None
    title: Optional[str] = None
    vendor: Optional[str] = None
    description_text: str = ""
