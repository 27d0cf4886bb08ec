"""
LLM Fallback Response Schemas.

Pydantic models instructor uses to constrain what the fallback parser may
return. The model only picks catalog ids and quantities; every price is
computed in code.
"""

from pydantic import BaseModel, Field


class LLMOrderLine(BaseModel):
    """One recognized menu item."""
    id: str = Field(description="Menu id from the catalog list, e.g. 'M0' or 'M1a'")
    qty: int = Field(default=1, description="How many were ordered (1 if not said)")


class LLMOrderResponse(BaseModel):
    """Parser output for a menu-backed order."""
    processed: str = Field(
        default="",
        description="Short clean human-readable summary of what was ordered",
    )
    lines: list[LLMOrderLine] = Field(
        default_factory=list,
        description="Recognized items; empty if nothing in the text is on the menu",
    )


class LLMGenericItem(BaseModel):
    """One product from a free-form shop order."""
    name: str = Field(description="Product name normalized to English, e.g. 'Red Wires'")
    quantity: int = Field(default=1, description="How many were ordered (1 if not said)")
    total_price: float | None = Field(
        default=None,
        description="Spoken TOTAL price for this line, or null if no price was said",
    )


class LLMGenericOrderResponse(BaseModel):
    """Parser output for a free-form shop order."""
    items: list[LLMGenericItem] = Field(default_factory=list)
