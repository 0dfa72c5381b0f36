# clients/amadeus_client.py
from __future__ import annotations
import logging
from typing import Any, Dict, List

import requests

from models.errors import AuthenticationError
from utils.config import AmadeusConfig

logger = logging.getLogger(__name__)

ORDER_CONTENT_TYPE = "application/vnd.amadeus+json"


class AmadeusClient:
    """
    Thin wrapper over the three travel API calls used by the booking form:
    token exchange, flight-offer search and flight-order creation.
    Keeps no state between calls apart from the configuration it was built with.
    """

    def __init__(self, config: AmadeusConfig):
        self.config = config

    def fetch_access_token(self) -> str:
        """
        Exchange the client credentials for a bearer token.
        Any failure becomes AuthenticationError, raised with neither cause nor context
        so the credentials in the request body cannot be reached through it.
        """
        data = {
            "grant_type": "client_credentials",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
        }
        failure = None
        token = None
        try:
            res = requests.post(
                self.config.auth_url,
                data=data,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.config.timeout,
            )
            res.raise_for_status()
            body = res.json()
            token = body.get("access_token") if isinstance(body, dict) else None
        except requests.RequestException as e:
            failure = f"{type(e).__name__}, status={getattr(e.response, 'status_code', None)}"
        except ValueError:
            failure = "response was not JSON"

        # raised outside the except blocks: no requests exception may sit in __context__
        if failure is None and (not token or not isinstance(token, str)):
            failure = "no access_token in response"
        if failure:
            logger.error("❌ Token request failed (%s)", failure)
            raise AuthenticationError("Authentication failed.")
        return token

    def fetch_flight_offers(self, token: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Return the `data` list of the offers response exactly as received."""
        res = requests.get(
            self.config.flight_offers_url,
            headers=self._auth_headers(token),
            params=params,
            timeout=self.config.timeout,
        )
        res.raise_for_status()
        return _json_object(res).get("data") or []

    def create_flight_order(self, token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Post a flight-order document and return the full response body."""
        headers = self._auth_headers(token)
        headers["Content-Type"] = ORDER_CONTENT_TYPE
        res = requests.post(
            self.config.create_order_url,
            json=payload,
            headers=headers,
            timeout=self.config.timeout,
        )
        res.raise_for_status()
        return _json_object(res)

    def _auth_headers(self, token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}


def _json_object(res: requests.Response) -> Dict[str, Any]:
    body = res.json()
    if not isinstance(body, dict):
        raise requests.exceptions.InvalidJSONError(
            f"Expected a JSON object, got {type(body).__name__}", response=res
        )
    return body

