"""Shared building blocks for gateway JSON contracts"""

from decimal import Decimal
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, PlainSerializer


def _amount_to_number(value: Decimal) -> float:
    """
    JSON number for an amount.

    Doubles hold about 15 significant digits; an amount that would not read
    back to the same Decimal is refused instead of being rounded on the wire.
    """
    number = float(value)
    if Decimal(repr(number)) != value:
        raise ValueError(f"amount {value} cannot be sent as a JSON number without losing precision")
    return number


# Major currency units; written as a JSON number, read from numbers or numeric strings
Amount = Annotated[Decimal, PlainSerializer(_amount_to_number, return_type=float, when_used="json")]


class Contract(BaseModel):
    """Immutable record mirroring one gateway JSON object"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation: snake_case keys, unset fields omitted"""
        return self.model_dump(mode="json", exclude_none=True)
