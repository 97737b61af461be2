from __future__ import annotations

import logging
import os
from typing import Sequence

import matplotlib.pyplot as plt
import plotly.graph_objects as go
import streamlit as st

from dca import (
    DcaSimulator,
    MessageLevel,
    PreviewCalculator,
    ServiceMessage,
    SimulationResult,
    SpotPriceService,
    StrategyValidator,
)
from dca.config import (
    DEFAULT_ANNUAL_GROWTH_PCT,
    DURATION_PRESETS,
    FREQUENCY_OPTIONS,
    GROWTH_PRESETS,
    MAX_ANNUAL_GROWTH_PCT,
    MAX_DURATION_MONTHS,
    MIN_DURATION_MONTHS,
)
from dca.formatting import format_btc, format_horizon, format_price, format_price_change
from dca.services import build_monthly_frame, to_csv_bytes

logging.basicConfig(
    level=os.environ.get("DCA_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ------------------ Page config ------------------ #
st.set_page_config(page_title="DCA BTC Simulation", layout="centered")
st.title("📈 DCA BTC Simulation")


# ------------------ Utilities ------------------ #
@st.cache_data(ttl=60, show_spinner=False)
def _load_spot_price():
    return SpotPriceService().load_spot_price()


def _display_messages(messages: Sequence[ServiceMessage], *, stop_on_error: bool = False) -> None:
    has_error = False
    for message in messages:
        if message.level == MessageLevel.ERROR:
            st.error(message.text)
            has_error = True
        elif message.level == MessageLevel.WARNING:
            st.warning(message.text)
        else:
            st.info(message.text)
    if stop_on_error and has_error:
        st.stop()


def _pick_duration() -> int:
    options = [f"{months} Months" for months in DURATION_PRESETS] + ["Custom"]
    choice = st.radio("Duration", options, index=2, horizontal=True)
    if choice != "Custom":
        return int(choice.split()[0])
    return int(
        st.number_input(
            "Custom duration (months)",
            min_value=MIN_DURATION_MONTHS,
            max_value=MAX_DURATION_MONTHS,
            value=18,
            step=1,
        )
    )


def _pick_growth() -> float:
    options = [f"{growth}%" for growth in GROWTH_PRESETS] + ["Custom"]
    default_index = GROWTH_PRESETS.index(int(DEFAULT_ANNUAL_GROWTH_PCT))
    choice = st.radio("BTC Growth Prediction", options, index=default_index, horizontal=True)
    if choice != "Custom":
        return float(choice.rstrip("%"))
    return float(
        st.number_input(
            "Custom growth (% annually)",
            min_value=0.0,
            max_value=MAX_ANNUAL_GROWTH_PCT,
            value=37.5,
            step=0.1,
        )
    )


def _render_preview(validator: StrategyValidator, form: dict) -> None:
    result = validator.validate(**form)
    if not result.is_valid:
        return

    preview = PreviewCalculator().preview(result.params)
    st.subheader("📊 Expected Returns Preview")
    st.caption("Quick Estimate: smooth growth, no volatility, best case.")
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Invested", format_price(preview.invested_total))
    col2.metric("Expected Value", format_price(preview.expected_final_value))
    col3.metric(
        "Expected Profit",
        format_price(preview.expected_profit),
        f"{preview.expected_roi_pct:.1f}%",
    )


def _render_projection(simulation: SimulationResult) -> None:
    projection = simulation.projection
    st.subheader("🎯 Investment Projection")
    st.caption(
        f"Realistic Simulation: {simulation.params.annual_growth_pct:g}% growth trend "
        "+ market volatility."
    )
    col1, col2 = st.columns(2)
    col1.metric("Total Invested", format_price(projection.invested_total))
    col2.metric("Total BTC", format_btc(projection.units_total))

    label = "Profit" if projection.profit_loss >= 0 else "Loss"
    col1.metric(label, format_price(abs(projection.profit_loss)))
    col2.metric("Return", f"{projection.profit_loss_pct:+.1f}%")

    st.markdown(
        f"**Purchase Amount:** {format_price(projection.periodic_amount)} · "
        f"**Frequency:** {projection.frequency.value.capitalize()} · "
        f"**Duration:** {format_horizon(projection.duration_months)} · "
        f"**Average Cost:** {format_price(projection.average_cost)}"
    )


def _render_monthly_table(simulation: SimulationResult) -> None:
    df_monthly = build_monthly_frame(simulation.monthly_results)
    low, high = simulation.price_range

    st.subheader("📋 Month-by-Month Simulation")
    fmt = {
        "BTC Price": "${:,.0f}",
        "Invested": "${:,.2f}",
        "BTC Bought": "{:.8f}",
        "Total BTC": "{:.8f}",
        "Total Invested": "${:,.2f}",
        "Portfolio Value": "${:,.2f}",
    }
    st.dataframe(df_monthly.set_index("Month").style.format(fmt))
    st.download_button(
        "Download simulation (.csv)",
        data=to_csv_bytes(df_monthly),
        file_name="dca_simulation.csv",
        mime="text/csv",
    )

    col1, col2, col3 = st.columns(3)
    col1.metric("Average Cost per BTC", format_price(simulation.projection.average_cost))
    col2.metric("BTC Price Range", f"{format_price(low)} - {format_price(high)}")
    col3.metric("Total Return", f"{simulation.total_return_pct:.1f}%")
    st.caption(
        f"Expected final price: {format_price(simulation.expected_final_price)} · "
        "Volatility impact: ±10% monthly"
    )

    # ------------------ Chart 1: Line (Plotly) ------------------ #
    fig_line = go.Figure()
    fig_line.add_trace(
        go.Scatter(x=df_monthly["Date"], y=df_monthly["Portfolio Value"], name="Portfolio Value")
    )
    fig_line.add_trace(
        go.Scatter(x=df_monthly["Date"], y=df_monthly["Total Invested"], name="Total Invested")
    )
    fig_line.add_trace(
        go.Scatter(
            x=df_monthly["Date"],
            y=df_monthly["BTC Price"],
            name="BTC Price",
            yaxis="y2",
            line={"dash": "dot"},
        )
    )
    fig_line.update_layout(
        title="Portfolio Value vs Invested",
        yaxis_title="USD",
        yaxis2={"title": "BTC Price (USD)", "overlaying": "y", "side": "right"},
        hovermode="x unified",
    )
    st.plotly_chart(fig_line, use_container_width=True)

    # ------------------ Chart 2: Bars (Matplotlib) ------------------ #
    plt.rcParams["savefig.transparent"] = True
    fig_bar, ax = plt.subplots(facecolor="none")
    ax.set_facecolor("none")
    ax.bar(df_monthly["Month"], df_monthly["Total BTC"], color="#f7931a")
    ax.set_xlabel("Month")
    ax.set_ylabel("BTC")
    ax.set_title(f"BTC accumulation over {format_horizon(len(df_monthly))}")
    st.pyplot(fig_bar, transparent=True)


def main() -> None:
    # ------------------ Spot price ------------------ #
    spot = _load_spot_price()
    _display_messages(spot.messages)

    col_price, col_change = st.columns(2)
    col_price.metric(
        "Live BTC Price",
        format_price(spot.price),
        format_price_change(spot.change_pct),
    )
    col_change.markdown(f"**Source:** {spot.source}")

    # ------------------ Inputs ------------------ #
    st.subheader("DCA Strategy & Growth Prediction")
    available_balance = st.number_input(
        "Available USD balance",
        min_value=0.0,
        value=10000.0,
        step=100.0,
    )
    amount = st.number_input("Amount per purchase (USD)", min_value=0.0, value=100.0, step=10.0)
    frequency = st.selectbox(
        "Frequency",
        list(FREQUENCY_OPTIONS),
        index=2,
        format_func=lambda key: " - ".join(FREQUENCY_OPTIONS[key]),
    )
    duration = _pick_duration()
    growth = _pick_growth()

    form = {
        "amount": amount,
        "frequency": frequency,
        "duration_months": duration,
        "annual_growth_pct": growth,
        "starting_price": spot.price,
        "available_balance": available_balance,
    }
    validator = StrategyValidator()
    _render_preview(validator, {**form, "available_balance": None})

    st.divider()
    if st.button("Run DCA Simulation", type="primary", use_container_width=True):
        validation = validator.validate(**form)
        _display_messages(validation.messages, stop_on_error=True)
        with st.spinner("Running simulation…"):
            st.session_state["simulation"] = DcaSimulator().run(validation.params)
        st.success("DCA simulation completed!")

    simulation = st.session_state.get("simulation")
    if simulation is not None:
        _render_projection(simulation)
        _render_monthly_table(simulation)

    st.caption(
        "Risk-free testing: simulated prices follow the chosen growth trend with "
        "random monthly swings. No real funds are used."
    )


if __name__ == "__main__":
    main()
