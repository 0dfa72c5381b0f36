# utils/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://test.api.amadeus.com"
AUTH_PATH = "/v1/security/oauth2/token"
FLIGHT_OFFERS_PATH = "/v2/shopping/flight-offers"
CREATE_ORDER_PATH = "/v1/booking/flight-orders"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class AmadeusConfig:
    """
    Endpoints and client credentials for the travel API.
    Built once at startup and handed to AmadeusClient; nothing mutates it afterwards.
    """
    client_id: str
    client_secret: str
    base_url: str = DEFAULT_BASE_URL
    auth_url: str = ""
    flight_offers_url: str = ""
    create_order_url: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        base = self.base_url.rstrip("/")
        # frozen dataclass: fill derived URLs through object.__setattr__
        object.__setattr__(self, "base_url", base)
        if not self.auth_url:
            object.__setattr__(self, "auth_url", base + AUTH_PATH)
        if not self.flight_offers_url:
            object.__setattr__(self, "flight_offers_url", base + FLIGHT_OFFERS_PATH)
        if not self.create_order_url:
            object.__setattr__(self, "create_order_url", base + CREATE_ORDER_PATH)

    def __repr__(self) -> str:
        return (
            f"AmadeusConfig(base_url={self.base_url!r}, auth_url={self.auth_url!r}, "
            f"flight_offers_url={self.flight_offers_url!r}, create_order_url={self.create_order_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "AmadeusConfig":
        load_dotenv(dotenv_path)
        client_id = os.getenv("AMADEUS_CLIENT_ID")
        client_secret = os.getenv("AMADEUS_CLIENT_SECRET")
        if not client_id:
            raise ValueError("Missing AMADEUS_CLIENT_ID. Set it in .env or pass to constructor.")
        if not client_secret:
            raise ValueError("Missing AMADEUS_CLIENT_SECRET. Set it in .env or pass to constructor.")

        timeout_raw = os.getenv("AMADEUS_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"AMADEUS_TIMEOUT must be a number of seconds, got {timeout_raw!r}") from None

        return cls(
            client_id=client_id,
            client_secret=client_secret,
            base_url=os.getenv("AMADEUS_BASE_URL") or DEFAULT_BASE_URL,
            auth_url=os.getenv("AMADEUS_AUTH_URL") or "",
            flight_offers_url=os.getenv("AMADEUS_FLIGHT_OFFERS_URL") or "",
            create_order_url=os.getenv("AMADEUS_CREATE_ORDER_URL") or "",
            timeout=timeout,
        )
