# models/offer.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

MISSING = "—"


@dataclass
class OfferSummary:
    """
    Display view of a raw flight offer. The offer itself stays an opaque dict
    so it can be sent back to the order endpoint exactly as it was received.
    """
    offer_id: str
    departure_at: str
    arrival_at: str
    total: str
    currency: str

    @property
    def price(self) -> str:
        return f"{self.total} {self.currency}"

    @classmethod
    def from_offer(cls, offer: Dict[str, Any]) -> "OfferSummary":
        segments = _first_itinerary_segments(offer)
        first = segments[0] if segments else {}
        last = segments[-1] if segments else {}
        price = offer.get("price") or {}
        return cls(
            offer_id=_text(offer.get("id")),
            departure_at=_text((first.get("departure") or {}).get("at")),
            arrival_at=_text((last.get("arrival") or {}).get("at")),
            total=_text(price.get("total")),
            currency=_text(price.get("currency")),
        )


@dataclass
class OrderSummary:
    order_id: str
    flight_id: str
    total: str
    currency: str

    @property
    def price(self) -> str:
        return f"{self.total} {self.currency}"

    @classmethod
    def from_order(cls, order: Dict[str, Any]) -> "OrderSummary":
        offers = order.get("flightOffers") or []
        booked = OfferSummary.from_offer(offers[0]) if offers else None
        return cls(
            order_id=_text(order.get("id")),
            flight_id=booked.offer_id if booked else MISSING,
            total=booked.total if booked else MISSING,
            currency=booked.currency if booked else "",
        )


def _first_itinerary_segments(offer: Dict[str, Any]) -> List[Dict[str, Any]]:
    itineraries = offer.get("itineraries") or []
    if not itineraries:
        return []
    return itineraries[0].get("segments") or []


def _text(value: Optional[Any]) -> str:
    if value in (None, ""):
        return MISSING
    return str(value)
