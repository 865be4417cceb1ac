"""Preflop Trainer — Streamlit Dashboard.

Four-tab interactive dashboard for drilling six-max preflop decisions:
  Tab 1 — Trainer              (deal, answer fold/call/raise, graded verdict)
  Tab 2 — Range Charts         (matplotlib 13×13 chart per seat)
  Tab 3 — Interactive Lookup   (Plotly, hover for action + frequency + rationale)
  Tab 4 — Range Report         (combo-weighted summary, session breakdown)

Run:
    streamlit run app.py
"""

from __future__ import annotations

import contextlib
import io
import logging

import matplotlib

matplotlib.use("Agg")  # must be set before any other matplotlib imports

import streamlit as st

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# ─── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Preflop Trainer",
    page_icon="🃏",
    layout="wide",
)

# ─── Lazy imports (inside functions to keep startup fast) ─────────────────────


@st.cache_resource
def _load_modules():
    """Import analysis modules and build the strategy table once per process."""
    from src.analysis.heat_maps import plot_all_ranges, plot_range_chart
    from src.analysis.plotly_lookup import build_all_positions_figure, build_range_lookup_figure
    from src.analysis.strategy_report import (
        print_position_guide,
        print_position_range,
        print_range_summary,
        print_session_report,
        summarize_range,
    )
    from src.engine.cards import card_to_symbol, is_red
    from src.engine.positions import POSITION_INFO, ROTATION, Position
    from src.strategy.ranges import default_strategy_table
    from src.strategy.table import Action
    from src.trainer.session import Phase, TrainingSession

    return {
        "table": default_strategy_table(),
        "plot_all_ranges": plot_all_ranges,
        "plot_range_chart": plot_range_chart,
        "build_all_positions_figure": build_all_positions_figure,
        "build_range_lookup_figure": build_range_lookup_figure,
        "print_position_guide": print_position_guide,
        "print_position_range": print_position_range,
        "print_range_summary": print_range_summary,
        "print_session_report": print_session_report,
        "summarize_range": summarize_range,
        "card_to_symbol": card_to_symbol,
        "is_red": is_red,
        "POSITION_INFO": POSITION_INFO,
        "ROTATION": ROTATION,
        "Position": Position,
        "Action": Action,
        "Phase": Phase,
        "TrainingSession": TrainingSession,
    }


m = _load_modules()

if "session" not in st.session_state:
    st.session_state["session"] = m["TrainingSession"](table=m["table"])
    st.session_state["last_verdict"] = None

session = st.session_state["session"]


def _deal() -> None:
    session.deal_next_hand()
    st.session_state["last_verdict"] = None


def _answer(action) -> None:
    st.session_state["last_verdict"] = session.submit_action(action)


def _reset() -> None:
    session.reset_stats()


def _capture(fn, *args) -> str:
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        fn(*args)
    return buf.getvalue()


# ─── Sidebar ──────────────────────────────────────────────────────────────────

with st.sidebar:
    st.title("🃏 Preflop Trainer")
    st.markdown("---")

    stats = session.get_stats()
    col1, col2 = st.columns(2)
    col1.metric("Accuracy", f"{session.get_accuracy()}%")
    col2.metric("Hands", f"{stats.total}")
    st.progress(session.get_accuracy() / 100)
    st.caption(f"{stats.correct} correct of {stats.total}")
    st.button("Reset stats", on_click=_reset)

    st.markdown("---")
    st.subheader("Position Guide")
    for seat in m["ROTATION"]:
        info = m["POSITION_INFO"][seat]
        st.caption(f"**{info.name}** {info.full_name}: {info.description}")

# ─── Tabs ─────────────────────────────────────────────────────────────────────

tab1, tab2, tab3, tab4 = st.tabs(
    [
        "Trainer",
        "Range Charts",
        "Interactive Lookup",
        "Range Report",
    ]
)

# ── Tab 1: Trainer ────────────────────────────────────────────────────────────

with tab1:
    phase = session.phase
    state = session.state
    info = m["POSITION_INFO"][state.position]

    st.header(f"6-Handed Table: {info.full_name}")
    st.caption(info.description)

    if state.hand is not None:
        card_html = " ".join(
            f"<span style='font-size:3rem;color:{'#c62828' if m['is_red'](c) else '#212121'}'>"
            f"{m['card_to_symbol'](c)}</span>"
            for c in state.hand.cards
        )
        st.markdown(card_html, unsafe_allow_html=True)
        st.subheader(f"Hand: {state.hand.hand_class}")

    if phase is m["Phase"].NOT_STARTED:
        st.button("Start Training", type="primary", on_click=_deal)
    elif phase is m["Phase"].AWAITING_ACTION:
        col_f, col_c, col_r = st.columns(3)
        col_f.button("Fold", on_click=_answer, args=(m["Action"].FOLD,), use_container_width=True)
        col_c.button("Call", on_click=_answer, args=(m["Action"].CALL,), use_container_width=True)
        col_r.button(
            "Raise", on_click=_answer, args=(m["Action"].RAISE,), type="primary", use_container_width=True
        )
    else:
        verdict = st.session_state["last_verdict"]
        if verdict is not None:
            message = (
                f"You chose **{verdict.action.value}**. "
                f"GTO recommends **{verdict.entry.action.value}** ({verdict.entry.frequency}%)."
            )
            if verdict.is_correct:
                st.success("Correct! " + message)
            else:
                st.error("Incorrect. " + message)
            st.info(f"**Reasoning:** {verdict.entry.rationale}")
        st.button("Next Hand", type="primary", on_click=_deal)

# ── Tab 2: Range Charts ───────────────────────────────────────────────────────

with tab2:
    st.header("Range Charts")
    st.caption("Red = raise, blue = call, grey = fold. Faded cells use the seat's default entry.")

    seat_name = st.selectbox(
        "Seat",
        options=[p.value for p in m["ROTATION"]],
        format_func=lambda v: m["POSITION_INFO"][m["Position"](v)].full_name,
        key="chart_seat",
    )
    fig_seat = m["plot_range_chart"](m["table"], m["Position"](seat_name), show=False)
    st.pyplot(fig_seat)

    st.markdown("---")
    st.subheader("All Seats")
    fig_all = m["plot_all_ranges"](m["table"], show=False)
    st.pyplot(fig_all)

# ── Tab 3: Interactive Lookup ─────────────────────────────────────────────────

with tab3:
    st.header("Interactive Range Lookup")
    st.caption("Hover over any cell to see the action, frequency and reasoning.")

    lookup_seat = st.selectbox(
        "Seat",
        options=[p.value for p in m["ROTATION"]],
        format_func=lambda v: m["POSITION_INFO"][m["Position"](v)].full_name,
        key="lookup_seat",
    )
    fig_lookup = m["build_range_lookup_figure"](m["table"], m["Position"](lookup_seat))
    st.plotly_chart(fig_lookup, use_container_width=True)

    st.markdown("---")
    st.subheader("All Seats")
    st.plotly_chart(m["build_all_positions_figure"](m["table"]), use_container_width=True)

# ── Tab 4: Range Report ───────────────────────────────────────────────────────

with tab4:
    st.header("Range Report")

    import pandas as pd

    rows = []
    for seat in m["ROTATION"]:
        summary = m["summarize_range"](m["table"], seat)
        rows.append(
            {
                "Seat": seat.value,
                "Raise %": round(summary.share(m["Action"].RAISE) * 100, 1),
                "Call %": round(summary.share(m["Action"].CALL) * 100, 1),
                "Fold %": round(summary.share(m["Action"].FOLD) * 100, 1),
                "Listed hands": summary.n_explicit,
            }
        )
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Session Report")
    st.code(_capture(m["print_session_report"], session), language=None)

    st.markdown("---")
    st.subheader("Full Ranges (stdout capture)")
    report = _capture(m["print_position_guide"]) + _capture(m["print_range_summary"], m["table"])
    for seat in m["ROTATION"]:
        report += _capture(m["print_position_range"], m["table"], seat)
    st.code(report, language=None)
