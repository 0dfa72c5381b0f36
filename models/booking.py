# models/booking.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

ORDER_TYPE = "flight-orders"


@dataclass(frozen=True)
class Traveler:
    traveler_id: str
    first_name: str
    last_name: str
    date_of_birth: str
    email: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.traveler_id,
            "dateOfBirth": self.date_of_birth,
            "name": {"firstName": self.first_name, "lastName": self.last_name},
            "contact": {"emailAddress": self.email},
        }


@dataclass(frozen=True)
class Payment:
    card_number: str
    expiry_date: str
    card_holder: str
    method: str = "creditCard"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "cardNumber": self.card_number,
            "expiryDate": self.expiry_date,
            "cardHolder": self.card_holder,
        }


# Placeholder booking party used until the form collects real traveler details.
DEFAULT_TRAVELERS = (
    Traveler(
        traveler_id="1",
        first_name="John",
        last_name="Doe",
        date_of_birth="1990-01-01",
        email="john.doe@example.com",
    ),
)
DEFAULT_PAYMENTS = (
    Payment(card_number="4111111111111111", expiry_date="12/24", card_holder="John Doe"),
)


def build_order_payload(
    offer: Dict[str, Any],
    travelers: Sequence[Traveler] = DEFAULT_TRAVELERS,
    payments: Sequence[Payment] = DEFAULT_PAYMENTS,
) -> Dict[str, Any]:
    """Wrap exactly one selected offer into a flight-order request document."""
    traveler_payload: List[Dict[str, Any]] = [t.to_payload() for t in travelers]
    payment_payload: List[Dict[str, Any]] = [p.to_payload() for p in payments]
    return {
        "data": {
            "type": ORDER_TYPE,
            "flightOffers": [offer],
            "travelers": traveler_payload,
            "payments": payment_payload,
        }
    }
