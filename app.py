from __future__ import annotations

import json
import logging

import pandas as pd
import streamlit as st
import plotly.graph_objects as go

from weekprofile.config import SETTINGS
from weekprofile.core.aggregator import aggregate_frame
from weekprofile.core.data_validation import ValidationError

logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

EXAMPLES = {
    "Complete week with aggregation": {
        "2020-01-01": 4, "2020-01-02": 4, "2020-01-03": 6, "2020-01-04": 8,
        "2020-01-05": 2, "2020-01-06": -6, "2020-01-07": 2, "2020-01-08": -2,
    },
    "Missing days (Thu, Fri)": {
        "2020-01-01": 6, "2020-01-04": 12, "2020-01-05": 14, "2020-01-06": 2, "2020-01-07": 4,
    },
    "Only Monday and Sunday": {"2020-01-06": 100, "2020-01-12": 200},
    "Invalid dates mixed in": {
        "2020-01-06": 10, "2020-13-01": 999, "invalid": 5, "2020/01/12": 7,
        "2020-01-08": 30, "2020-01-12": 70,
    },
    "Missing Monday": {
        "2020-01-07": 20, "2020-01-08": 30, "2020-01-09": 40, "2020-01-10": 50,
        "2020-01-11": 60, "2020-01-12": 70,
    },
}

st.set_page_config(page_title=SETTINGS.app_name, layout="wide")

st.markdown("""
<style>
  .app-title {font-size: 1.8rem; font-weight: 780; margin-bottom: 0.25rem;}
  .subtle {color: rgba(49, 51, 63, 0.7);}
  .panel {border: 1px solid rgba(49, 51, 63, 0.12); padding: 14px; border-radius: 14px; background: white;}
</style>
""", unsafe_allow_html=True)

def entries_from_editor(df: pd.DataFrame) -> dict:
    out = {}
    for _, row in df.dropna(subset=["date", "value"]).iterrows():
        out[str(row["date"]).strip()] = int(row["value"])
    return out

def plot_profile(frame: pd.DataFrame, title: str, key: str | None = None):
    colors = [SETTINGS.interpolated_color if f else SETTINGS.observed_color for f in frame["interpolated"]]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=frame["day"], y=frame["value"], marker_color=colors,
        text=frame["value"], textposition="outside",
        customdata=["interpolated" if f else "observed" for f in frame["interpolated"]],
        hovertemplate="%{x}: %{y} (%{customdata})<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Weekday",
        yaxis_title="Value",
        height=SETTINGS.chart_height,
        margin=dict(l=10, r=10, t=60, b=10),
        showlegend=False,
    )
    st.plotly_chart(fig, use_container_width=True, key=key)

st.markdown(f'<div class="app-title">{SETTINGS.app_name}</div>', unsafe_allow_html=True)
st.markdown('<div class="subtle">Dates → weekday totals • missing weekdays filled by linear interpolation</div>', unsafe_allow_html=True)
st.write("")

with st.sidebar:
    st.header("Input")
    example = st.selectbox("Example", list(EXAMPLES.keys()))
    st.caption("Rows whose date is not a real YYYY-MM-DD calendar date are ignored.")
    st.caption("Blue bars are observed sums, orange bars are interpolated.")

left, right = st.columns([0.85, 1.15])

with left:
    st.markdown('<div class="panel">', unsafe_allow_html=True)
    st.subheader("Entries")
    seed = pd.DataFrame({"date": list(EXAMPLES[example].keys()), "value": list(EXAMPLES[example].values())})
    edited = st.data_editor(seed, num_rows="dynamic", use_container_width=True, hide_index=True, key=f"editor_{example}")
    st.markdown("</div>", unsafe_allow_html=True)

entries = entries_from_editor(edited)

with right:
    st.markdown('<div class="panel">', unsafe_allow_html=True)
    st.subheader("Weekday profile")
    try:
        frame = aggregate_frame(entries)
    except ValidationError as e:
        logger.info("Rejected input for '%s': %s", example, e)
        st.error(str(e))
        st.markdown("</div>", unsafe_allow_html=True)
        st.stop()

    if frame.empty:
        st.info("No entries.")
        st.markdown("</div>", unsafe_allow_html=True)
        st.stop()

    plot_profile(frame, title=example, key=f"chart_{example.replace(' ', '_')}")
    result = {day: int(value) for day, value in zip(frame["day"], frame["value"])}
    m1, m2 = st.columns(2)
    m1.metric("Observed weekdays", int((~frame["interpolated"]).sum()))
    m2.metric("Interpolated weekdays", int(frame["interpolated"].sum()))
    st.code(json.dumps(result, indent=2), language="json")
    st.markdown("</div>", unsafe_allow_html=True)
