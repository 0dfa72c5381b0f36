from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from clients.amadeus_client import AmadeusClient
from models.search import INVALID_IATA_MESSAGE

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def make_offer(offer_id, total):
    return {
        "id": offer_id,
        "itineraries": [
            {"segments": [{"departure": {"at": "2024-12-01T06:00:00"}, "arrival": {"at": "2024-12-01T07:30:00"}}]}
        ],
        "price": {"total": total, "currency": "AUD"},
    }


class FakeApi:
    def __init__(self, offers):
        self.offers = offers
        self.searches = []
        self.orders = []

    def install(self, monkeypatch):
        monkeypatch.setattr(AmadeusClient, "fetch_access_token", lambda client: "tok")
        monkeypatch.setattr(
            AmadeusClient, "fetch_flight_offers", lambda client, token, params: self.fetch_flight_offers(token, params)
        )
        monkeypatch.setattr(
            AmadeusClient, "create_flight_order", lambda client, token, payload: self.create_flight_order(token, payload)
        )

    def fetch_flight_offers(self, token, params):
        self.searches.append(params)
        return self.offers

    def create_flight_order(self, token, payload):
        self.orders.append(payload)
        offer = payload["data"]["flightOffers"][0]
        return {"data": {"id": "ORDER-1", "flightOffers": [offer]}}


@pytest.fixture(autouse=True)
def credentials(monkeypatch):
    monkeypatch.setenv("AMADEUS_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("AMADEUS_CLIENT_SECRET", "test-client-secret")


def search(at, origin="SYD", destination="MEL"):
    at.text_input(key="origin").input(origin)
    at.text_input(key="destination").input(destination)
    submit = next(b for b in at.button if b.label == "Search Flights")
    submit.click().run(timeout=10)


def markdown_values(at):
    return [m.value for m in at.markdown]


def confirm_buttons(at):
    return [b for b in at.button if b.label == "Confirm"]


def test_two_offers_render_two_rows(monkeypatch):
    api = FakeApi([make_offer("1", "120.00"), make_offer("2", "180.00")])
    api.install(monkeypatch)
    at = AppTest.from_file(APP_PATH).run(timeout=10)

    search(at)

    assert not at.exception
    assert api.searches[0]["currencyCode"] == "AUD"
    assert len(confirm_buttons(at)) == 2
    values = markdown_values(at)
    assert "1" in values and "2" in values
    assert "120.00 AUD" in values
    assert "180.00 AUD" in values


def test_selecting_first_row_opens_review_panel(monkeypatch):
    FakeApi([make_offer("1", "120.00"), make_offer("2", "180.00")]).install(monkeypatch)
    at = AppTest.from_file(APP_PATH).run(timeout=10)
    search(at)

    at.button(key="select_offer_0").click().run(timeout=10)

    assert [s.value for s in at.subheader] == ["Confirm Flight Booking"]
    values = markdown_values(at)
    assert "**Flight ID:** 1" in values
    assert "**Price:** 120.00 AUD" in values


def test_booking_shows_confirmation(monkeypatch):
    api = FakeApi([make_offer("1", "120.00"), make_offer("2", "180.00")])
    api.install(monkeypatch)
    at = AppTest.from_file(APP_PATH).run(timeout=10)
    search(at)
    at.button(key="select_offer_1").click().run(timeout=10)

    at.button(key="confirm_booking").click().run(timeout=10)

    assert len(api.orders) == 1
    assert api.orders[0]["data"]["flightOffers"][0]["id"] == "2"
    assert [s.value for s in at.subheader] == ["Booking Confirmed"]
    values = markdown_values(at)
    assert "**Order ID:** ORDER-1" in values
    assert "**Price:** 180.00 AUD" in values

    at.button(key="close_confirmation").click().run(timeout=10)
    assert not at.subheader


def test_empty_results_show_no_offers(monkeypatch):
    FakeApi([]).install(monkeypatch)
    at = AppTest.from_file(APP_PATH).run(timeout=10)

    search(at)

    assert [i.value for i in at.info] == ["No flight offers found."]
    assert not at.error
    assert not confirm_buttons(at)


def test_lowercase_code_rejected_before_search(monkeypatch):
    api = FakeApi([make_offer("1", "120.00")])
    api.install(monkeypatch)
    at = AppTest.from_file(APP_PATH).run(timeout=10)

    search(at, origin="syd")

    assert api.searches == []
    assert [e.value for e in at.error] == [INVALID_IATA_MESSAGE]
