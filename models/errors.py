# models/errors.py
from __future__ import annotations


class BookingError(Exception):
    """Base class for failures surfaced by the booking form."""


class ValidationError(BookingError):
    """Search criteria rejected locally, before any network call."""


class AuthenticationError(BookingError):
    """The client-credentials exchange did not yield a token."""


class OffersFetchError(BookingError):
    pass


class OrderCreationError(BookingError):
    pass
