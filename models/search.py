# models/search.py
from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from models.errors import ValidationError

IATA_CODE_PATTERN = re.compile(r"[A-Z]{3}")
CURRENCY_CODE = "AUD"

INVALID_IATA_MESSAGE = "Please enter valid IATA codes for origin and destination (3 uppercase letters)."

DateLike = Union[date, str, None]


@dataclass
class SearchCriteria:
    origin: str = ""
    destination: str = ""
    departure_date: DateLike = None
    return_date: DateLike = None
    adults: int = 1

    def validate(self) -> None:
        if not is_iata_code(self.origin) or not is_iata_code(self.destination):
            raise ValidationError(INVALID_IATA_MESSAGE)

    def to_query_params(self, currency: str = CURRENCY_CODE) -> Dict[str, Any]:
        """
        Query parameters for the flight-offers endpoint.
        returnDate is left out entirely for one-way searches.
        """
        params: Dict[str, Any] = {
            "originLocationCode": self.origin,
            "destinationLocationCode": self.destination,
            "departureDate": _iso(self.departure_date),
            "adults": int(self.adults),
            "currencyCode": currency,
        }
        return_date = _iso(self.return_date)
        if return_date:
            params["returnDate"] = return_date
        return params


def is_iata_code(value: Any) -> bool:
    return isinstance(value, str) and IATA_CODE_PATTERN.fullmatch(value) is not None


def _iso(value: DateLike) -> Optional[str]:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
