# ui/calculator_page.py
from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from core.calculate import CalculationResult, build_input, run_calculation
from core.configuration import CalculationConfig
from core.errors import InvalidInput
from electrical.conductors import gauge_ids
from reports.charts import close_chart, drop_chart
from reports.text_report import NO_GAUGE_WARNING, results_frame


# ==========================================================
# Inputs (sidebar)
# ==========================================================
def _read_inputs(cfg: CalculationConfig) -> Dict[str, Any]:
    with st.sidebar:
        st.header("Circuit")
        voltage = st.number_input("Voltage (V)", value=12.0, min_value=0.0, step=0.5)
        current = st.number_input("Current (A)", value=10.0, min_value=0.0, step=0.5)
        distance = st.number_input("One-way distance (ft)", value=25.0, min_value=0.0, step=1.0)

        st.subheader("Criteria")
        max_drop = st.number_input(
            "Max acceptable drop (%)",
            value=float(cfg.max_drop_pct),
            min_value=0.0,
            step=0.5,
        )
        gauges: List[str] = st.multiselect(
            "Gauges (empty = all)",
            options=gauge_ids(),
            format_func=lambda g: f"{g} AWG",
        )

    return {
        "voltage": voltage,
        "current": current,
        "distance_ft": distance,
        "max_drop_pct": max_drop,
        "gauges": gauges,
    }


# ==========================================================
# Results
# ==========================================================
def _render_results(res: CalculationResult) -> None:
    rec = res.recommendation
    c1, c2, c3 = st.columns(3)
    if rec is None:
        c1.metric("Recommended gauge", "—")
        st.warning(NO_GAUGE_WARNING)
    else:
        c1.metric("Recommended gauge", rec.gauge.label)
        c2.metric("Voltage drop", f"{rec.voltage_drop_volts:.3f} V")
        c3.metric("Drop", f"{rec.voltage_drop_percent:.2f} %")

    st.subheader("Drop per gauge")
    st.dataframe(
        results_frame(res, formatted=False).style.format(
            {"Resistance (Ω)": "{:.4f}", "Voltage Drop (V)": "{:.3f}", "Drop (%)": "{:.2f}"}
        ),
        hide_index=True,
        width="stretch",
    )

    fig = drop_chart(res)
    st.pyplot(fig)
    close_chart(fig)


def render(cfg: CalculationConfig) -> None:
    st.title("Wire Gauge Voltage Drop Calculator")
    st.caption("Copper conductors at 75°C, round trip (two conductors).")

    raw = _read_inputs(cfg)
    try:
        res = run_calculation(build_input(**raw))
    except InvalidInput as e:
        st.error(str(e))
        st.stop()
        return

    _render_results(res)
