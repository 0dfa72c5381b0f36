# agents/booking_form_agent.py
from __future__ import annotations
import logging
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import requests

from models.booking import DEFAULT_PAYMENTS, DEFAULT_TRAVELERS, Payment, Traveler, build_order_payload
from models.errors import BookingError, OffersFetchError, OrderCreationError, ValidationError
from models.search import CURRENCY_CODE, SearchCriteria

logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = "Error fetching flight offers. Please try again."
BOOKING_ERROR_MESSAGE = "Error creating flight order. Please try again."

SEARCH_FIELDS = {f.name for f in fields(SearchCriteria)}


class BookingState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    SEARCH_FAILED = "search_failed"
    REVIEWING = "reviewing"
    BOOKING = "booking"
    BOOKED = "booked"
    BOOKING_FAILED = "booking_failed"


SELECTABLE_STATES = {BookingState.RESULTS, BookingState.REVIEWING, BookingState.BOOKING_FAILED}


class BookingFormAgent:
    """
    Owns the booking form session: search criteria, fetched offers, the offer under
    review and the placed order. One BookingState value drives what the form shows,
    so the review panel and the confirmation panel can never be open together.

    The client only needs fetch_access_token / fetch_flight_offers / create_flight_order
    (see clients.amadeus_client.AmadeusClient).
    """

    def __init__(
        self,
        client,
        travelers: Sequence[Traveler] = DEFAULT_TRAVELERS,
        payments: Sequence[Payment] = DEFAULT_PAYMENTS,
        currency: str = CURRENCY_CODE,
    ):
        self.client = client
        self.travelers = tuple(travelers)
        self.payments = tuple(payments)
        self.currency = currency

        self.criteria = SearchCriteria()
        self.state = BookingState.IDLE
        self.offers: List[Dict[str, Any]] = []
        self.selected_offer: Optional[Dict[str, Any]] = None
        self.order: Optional[Dict[str, Any]] = None
        self.error = ""

    # Derived UI flags

    @property
    def loading(self) -> bool:
        return self.state in (BookingState.SEARCHING, BookingState.BOOKING)

    busy = loading

    @property
    def show_modal(self) -> bool:
        return self.state in (BookingState.REVIEWING, BookingState.BOOKING)

    @property
    def show_confirmation(self) -> bool:
        return self.state == BookingState.BOOKED

    @property
    def no_offers(self) -> bool:
        return self.state == BookingState.RESULTS and not self.offers

    # Operations

    def update_field(self, name: str, value: Any) -> None:
        if name not in SEARCH_FIELDS:
            raise ValueError(f"Unknown search field: {name}")
        setattr(self.criteria, name, value)

    def submit_search(self) -> bool:
        """
        Validate the criteria, then fetch a token and the matching offers.
        Returns True when offers (possibly none) were loaded.
        """
        if self.busy:
            logger.warning("⚠️ Search ignored: a request is already in flight")
            return False

        self.error = ""
        self.offers = []
        self.selected_offer = None
        self.order = None

        try:
            self.criteria.validate()
        except ValidationError as e:
            self.error = str(e)
            self.state = BookingState.IDLE
            return False

        params = self.criteria.to_query_params(self.currency)
        logger.info(
            "🔎 Searching flights: %s -> %s on %s",
            params["originLocationCode"],
            params["destinationLocationCode"],
            params["departureDate"],
        )
        self.state = BookingState.SEARCHING
        try:
            offers = self._fetch_offers(params)
        except BookingError as e:
            logger.error("❌ Flight search failed: %s", e)
            self.error = SEARCH_ERROR_MESSAGE
            self.state = BookingState.SEARCH_FAILED
            return False
        except Exception:
            logger.exception("❌ Flight search failed unexpectedly")
            self.error = SEARCH_ERROR_MESSAGE
            self.state = BookingState.SEARCH_FAILED
            return False

        self.offers = offers
        self.state = BookingState.RESULTS
        logger.info("✅ Found %d flight offers", len(offers))
        return True

    def select_offer(self, index: int) -> Dict[str, Any]:
        if self.state not in SELECTABLE_STATES:
            raise RuntimeError(f"Cannot select an offer while {self.state.value}")
        if not 0 <= index < len(self.offers):
            raise IndexError(f"Offer index {index} out of range (have {len(self.offers)})")
        self.selected_offer = self.offers[index]
        self.error = ""
        self.state = BookingState.REVIEWING
        return self.selected_offer

    def cancel_selection(self) -> None:
        if self.state != BookingState.REVIEWING:
            return
        self.selected_offer = None
        self.state = BookingState.RESULTS

    def confirm_booking(self) -> bool:
        """
        Book the offer under review with a fresh token.
        On failure the review panel closes and the error is shown; offers stay listed.
        """
        if self.state != BookingState.REVIEWING or self.selected_offer is None:
            logger.warning("⚠️ Booking ignored in state %s", self.state.value)
            return False

        payload = build_order_payload(self.selected_offer, self.travelers, self.payments)
        self.state = BookingState.BOOKING
        try:
            order = self._create_order(payload)
        except Exception:
            logger.exception("❌ Flight order failed for offer %s", self.selected_offer.get("id"))
            self.error = BOOKING_ERROR_MESSAGE
            self.state = BookingState.BOOKING_FAILED
            return False

        self.order = order
        self.error = ""
        self.state = BookingState.BOOKED
        logger.info("✅ Flight order %s created", self.order.get("id"))
        return True

    def close_confirmation(self) -> None:
        if self.state == BookingState.BOOKED:
            self.state = BookingState.RESULTS

    # Remote calls, with transport errors mapped onto the form's error kinds

    def _fetch_offers(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        token = self.client.fetch_access_token()
        try:
            return list(self.client.fetch_flight_offers(token, params))
        except requests.RequestException as e:
            raise OffersFetchError(str(e)) from e

    def _create_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Place the order and return its `data` object."""
        token = self.client.fetch_access_token()
        try:
            response = self.client.create_flight_order(token, payload)
        except requests.RequestException as e:
            raise OrderCreationError(str(e)) from e
        order = response.get("data") if isinstance(response, dict) else None
        if not isinstance(order, dict):
            raise OrderCreationError("Order response has no data object")
        return order
