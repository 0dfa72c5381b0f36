from __future__ import annotations

import logging
from datetime import date, timedelta

import streamlit as st

from agents.booking_form_agent import BookingFormAgent, BookingState
from clients.amadeus_client import AmadeusClient
from models.offer import OfferSummary, OrderSummary
from utils.config import AmadeusConfig
from utils.logging_setup import configure_logging

configure_logging()
logger = logging.getLogger("booking_app")

APP_STYLE = """
<style>
:root {
  --bg: #f6f8fb;
  --panel: #ffffff;
  --text: #0f172a;
  --muted: #475569;
  --accent: #0ea5e9;
}
html, body {
  background: var(--bg);
  color: var(--text);
}
.main .block-container {
  padding: 1.5rem 2rem 3rem;
  background: var(--bg);
}
.hero {
  background: linear-gradient(135deg, rgba(14,165,233,0.18), rgba(34,197,94,0.14));
  border: 1px solid rgba(14,165,233,0.12);
  padding: 1.25rem 1.5rem;
  border-radius: 14px;
  margin-bottom: 1rem;
  text-align: center;
}
.hero h1 {
  margin: 0;
  color: var(--text);
}
</style>
"""

COLUMN_WIDTHS = [2, 3, 3, 2, 1.3]


@st.cache_resource
def get_client() -> AmadeusClient:
    return AmadeusClient(AmadeusConfig.from_env())


def get_form() -> BookingFormAgent:
    if "booking_form" not in st.session_state:
        st.session_state.booking_form = BookingFormAgent(get_client())
    return st.session_state.booking_form


def render_search_form(form: BookingFormAgent) -> None:
    with st.form("search_form"):
        if form.error:
            st.error(form.error)
        origin = st.text_input("Origin (IATA Code)", value=form.criteria.origin, max_chars=3, key="origin")
        destination = st.text_input(
            "Destination (IATA Code)", value=form.criteria.destination, max_chars=3, key="destination"
        )
        departure = st.date_input(
            "Departure Date",
            value=form.criteria.departure_date or date.today() + timedelta(days=14),
            key="departure_date",
        )
        return_date = st.date_input("Return Date", value=form.criteria.return_date or None, key="return_date")
        adults = st.number_input("Adults", min_value=1, step=1, value=int(form.criteria.adults or 1), key="adults")
        submitted = st.form_submit_button("Search Flights", disabled=form.busy, type="primary")

    if not submitted:
        return

    form.update_field("origin", origin)
    form.update_field("destination", destination)
    form.update_field("departure_date", departure)
    form.update_field("return_date", return_date)
    form.update_field("adults", int(adults))
    with st.spinner("Loading..."):
        form.submit_search()
    st.rerun()


def render_offers(form: BookingFormAgent) -> None:
    if form.state in (BookingState.IDLE, BookingState.SEARCH_FAILED):
        return
    if form.no_offers:
        st.info("No flight offers found.")
        return

    header = st.columns(COLUMN_WIDTHS)
    for col, title in zip(header, ["Flight ID", "Departure", "Arrival", "Price", "Action"]):
        col.markdown(f"**{title}**")

    selectable = not form.busy and form.state != BookingState.BOOKED
    for index, offer in enumerate(form.offers):
        summary = OfferSummary.from_offer(offer)
        cols = st.columns(COLUMN_WIDTHS)
        cols[0].write(summary.offer_id)
        cols[1].write(summary.departure_at)
        cols[2].write(summary.arrival_at)
        cols[3].write(summary.price)
        cols[4].button(
            "Confirm",
            key=f"select_offer_{index}",
            on_click=form.select_offer,
            args=(index,),
            disabled=not selectable,
        )


def render_review_panel(form: BookingFormAgent) -> None:
    if not form.show_modal or form.selected_offer is None:
        return

    summary = OfferSummary.from_offer(form.selected_offer)
    with st.container(border=True):
        st.subheader("Confirm Flight Booking")
        st.markdown(f"**Flight ID:** {summary.offer_id}")
        st.markdown(f"**Departure:** {summary.departure_at}")
        st.markdown(f"**Arrival:** {summary.arrival_at}")
        st.markdown(f"**Price:** {summary.price}")

        confirm_col, cancel_col = st.columns(2)
        confirm = confirm_col.button(
            "Confirm Booking", key="confirm_booking", type="primary", disabled=form.busy
        )
        cancel_col.button("Cancel", key="cancel_selection", on_click=form.cancel_selection, disabled=form.busy)

    if confirm:
        with st.spinner("Booking your flight..."):
            form.confirm_booking()
        st.rerun()


def render_confirmation(form: BookingFormAgent) -> None:
    if not form.show_confirmation or form.order is None:
        return

    summary = OrderSummary.from_order(form.order)
    with st.container(border=True):
        st.subheader("Booking Confirmed")
        st.markdown(f"**Order ID:** {summary.order_id}")
        st.markdown(f"**Flight ID:** {summary.flight_id}")
        st.markdown(f"**Price:** {summary.price}")
        st.button("Close", key="close_confirmation", on_click=form.close_confirmation)


st.set_page_config(page_title="Flight Booking", page_icon="✈️")
st.markdown(APP_STYLE, unsafe_allow_html=True)
st.markdown('<div class="hero"><h1>Flight Booking</h1></div>', unsafe_allow_html=True)

try:
    booking_form = get_form()
except ValueError as exc:
    logger.error("Configuration error: %s", exc)
    st.error(f"The booking service is not configured. ({exc})")
    st.stop()

render_search_form(booking_form)
render_review_panel(booking_form)
render_confirmation(booking_form)
render_offers(booking_form)
