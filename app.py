import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import Optional

from headcount.charts import deployment_bar, driver_cost_pie, tier_cost_bar, top_schools_bar
from headcount.data import load_dashboard_data, prepare_context
from headcount.frames import schools_frame
from headcount.filters import (
    SORT_KEYS,
    STATUS_FILTERS,
    TAB_LABELS,
    TABS,
    ViewState,
    select_tab,
    set_sort,
    set_status_filter,
    toggle_expanded,
)
from headcount.formatting import (
    format_currency,
    format_currency_columns,
    format_number,
    format_pct,
    format_ratio,
    format_variance,
    format_variance_columns,
)
from headcount.metrics_drivers import compute_drivers
from headcount.metrics_interim import compute_interim
from headcount.metrics_overview import compute_overview
from headcount.metrics_salaries import compute_salaries
from headcount.metrics_schools import compute_school_detail

alt.data_transformers.disable_max_rows()

SORT_LABELS = {
    "name": "School",
    "enrolled": "Enrolled",
    "guides_actual": "Guides",
    "variance": "Variance",
    "annual_cost": "Annual Cost",
}
STATUS_FILTER_LABELS = {"all": "All", "over": "Over Model", "at": "At Model", "under": "Under Model"}
SCHOOL_TABLE_COLUMNS = ["name", "enrolled", "confirmed_enrollments", "guides_actual", "guides_model", "variance", "annual_cost", "student_guide_ratio", "driver"]


# ---------- UI / layout helpers ----------
STATUS_TONES = {"over": "#f59e0b", "at": "#10b981", "under": "#6b7280"}


def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .page-head {border-bottom: 1px solid #e5e7eb;padding-bottom: 4px;margin-bottom: 10px;}
        .page-head .view {margin-top: 4px;}
        .page-head .title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-left-width: 4px;border-radius: 10px;padding: 14px;margin-bottom: 12px;}
        .card-title {font-weight: 600;color: #111827;}
        .card-meta {font-size: 0.85rem;color: #6b7280;}
        .chip {display: inline-block;background: #f3f4f6;border-radius: 12px;padding: 2px 10px;margin-right: 6px;font-size: 0.85rem;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, meta: Optional[str] = None, tone: Optional[str] = None):
    """Bordered section; ``tone`` is a model status and colors the left edge."""
    edge = STATUS_TONES.get(tone or "", "#e5e7eb")
    container = st.container()
    container.markdown(
        f"<div class='card' style='border-left-color: {edge}'>"
        f"<div class='card-title'>{title}</div><div class='card-meta'>{meta or ''}</div>",
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def format_state_summary(state: ViewState) -> str:
    arrow = "▲" if state.sort_ascending else "▼"
    chips = [
        f"Status: {STATUS_FILTER_LABELS[state.status_filter]}",
        f"Sort: {SORT_LABELS[state.sort_key]} {arrow}",
    ]
    return "".join([f"<span class='chip'>{txt}</span>" for txt in chips])


def render_page_header(title: str, state: ViewState, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    inject_base_styles()
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(
            f"<div class='page-head'><div class='title'>{title}</div><div class='view'>{format_state_summary(state)}</div></div>",
            unsafe_allow_html=True,
        )
    with c2:
        if export_df is not None and not export_df.empty:
            st.download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name=export_name,
                mime="text/csv",
            )


def update_state(new_state: ViewState):
    st.session_state["view_state"] = new_state


def school_table(rows) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=SCHOOL_TABLE_COLUMNS)
    df = format_variance_columns(df, ["variance"])
    return format_currency_columns(df, ["annual_cost"])


# ---------- UI setup ----------
st.set_page_config(page_title="Headcount Out-of-Model Analysis", layout="wide")
inject_base_styles()

data_ctx = load_dashboard_data()
if not data_ctx.get("schools"):
    st.error("No school records loaded.")
    st.stop()

if "view_state" not in st.session_state:
    st.session_state["view_state"] = ViewState()
state: ViewState = st.session_state["view_state"]

metrics = data_ctx["portfolio"]
st.title("Headcount Out-of-Model Analysis")
st.caption(
    f"{metrics.total_schools} schools | {format_number(metrics.total_enrolled)} students | "
    f"{metrics.total_guides} guides | Updated {data_ctx['updated']}"
)

# ----- Sidebar: navigation + view state -----
with st.sidebar:
    st.markdown("### Navigate")
    tab = st.radio("Navigate", TABS, index=TABS.index(state.active_tab), format_func=lambda t: TAB_LABELS[t])
    if tab != state.active_tab:
        update_state(select_tab(state, tab))

    st.markdown("---")
    st.markdown("### View")
    status_filter = st.radio(
        "Status filter",
        STATUS_FILTERS,
        index=STATUS_FILTERS.index(state.status_filter),
        format_func=lambda f: STATUS_FILTER_LABELS[f],
    )
    if status_filter != state.status_filter:
        update_state(set_status_filter(st.session_state["view_state"], status_filter))

    sort_cols = st.columns(len(SORT_KEYS))
    for col, key in zip(sort_cols, SORT_KEYS):
        if col.button(SORT_LABELS[key], key=f"sort_{key}", help="Click again to flip direction"):
            update_state(set_sort(st.session_state["view_state"], key))

state = st.session_state["view_state"]
ctx = prepare_context(state, data_ctx)


# ----- Page renderers -----
def render_overview_page():
    payload = compute_overview(state, ctx)
    kpis = payload["kpis"]
    render_page_header("Executive Overview", state)
    with card("KPI Tiles"):
        cols = st.columns(5)
        cols[0].metric("Total Guides", f"{kpis['total_guides']}", help=f"Model: {kpis['total_model']}")
        cols[1].metric("Excess Guides", format_variance(kpis["total_variance"]), help=f"{kpis['over_model_schools']} schools over model")
        cols[2].metric("Annual OOM Cost", format_currency(kpis["over_model_cost"]), help="Estimated annualized")
        cols[3].metric("Student:Guide", format_ratio(kpis["student_guide_ratio"]), help="Model targets 8:1 to 25:1")
        cols[4].metric(
            "Utilization",
            format_pct(kpis["capacity_utilization"], 1),
            help=f"{format_number(kpis['total_enrolled'])} / {format_number(kpis['total_capacity'])} seats",
        )

    chart_cols = st.columns(2)
    with chart_cols[0]:
        with card("OOM Cost by Driver Category"):
            if payload["driver_cost_shares"]:
                st.altair_chart(driver_cost_pie(payload["driver_cost_shares"]), use_container_width=True)
            else:
                st.info("No out-of-model schools for this filter.")
    with chart_cols[1]:
        with card("Top Schools by Annual OOM Cost"):
            st.altair_chart(top_schools_bar(payload["top_over_model_schools"]), use_container_width=True)

    with card("OOM Cost per Student at Capacity"):
        per_seat = payload["cost_per_seat"]
        rows = per_seat["rows"] + [{"name": "TOTAL", **per_seat["total"]}]
        df = pd.DataFrame(rows, columns=["name", "capacity", "enrolled", "variance", "annual_cost", "cost_per_seat"])
        df = format_variance_columns(df, ["variance"])
        st.dataframe(format_currency_columns(df, ["annual_cost", "cost_per_seat"]), hide_index=True, use_container_width=True)

    with card("Cost by Driver Category", meta="Select a driver to expand"):
        df = pd.DataFrame(payload["drivers"], columns=["driver", "schools", "excess_guides", "annual_cost", "pct_of_total", "nature"])
        df = format_variance_columns(df, ["excess_guides"])
        df["pct_of_total"] = df["pct_of_total"].apply(lambda v: format_pct(v))
        st.dataframe(format_currency_columns(df, ["annual_cost"]), hide_index=True, use_container_width=True)
        totals = payload["driver_totals"]
        st.markdown(
            f"**TOTAL**: {totals['schools']} schools | {format_variance(totals['excess_guides'])} guides | {format_currency(totals['annual_cost'])}"
        )
        for d in payload["drivers"]:
            if st.button(("▼ " if state.expanded_driver == d["driver"] else "▶ ") + d["driver"], key=f"drv_{d['driver']}"):
                update_state(toggle_expanded(state, d["driver"], "driver"))
                st.rerun()
        if payload["expanded_driver_schools"]:
            st.dataframe(school_table(payload["expanded_driver_schools"]), hide_index=True, use_container_width=True)

    with card("Decisions Outstanding"):
        cols = st.columns(2)
        for i, d in enumerate(payload["decisions"]):
            cols[i % 2].markdown(f"**{d['title']}** ({d['cost']})  \n{d['question']}")


def render_drivers_page():
    payload = compute_drivers(state, ctx)
    render_page_header("Driver Analysis", state)
    if not payload["drivers"]:
        st.info("No out-of-model schools for this filter.")
    for d in payload["drivers"]:
        with card(d["driver"], meta=f"{d['schools']} schools | {format_variance(d['excess_guides'])} | {format_currency(d['annual_cost'])}"):
            st.caption(d["nature"])
            st.dataframe(school_table(d["school_rows"]), hide_index=True, use_container_width=True)


def render_schools_page():
    payload = compute_school_detail(state, ctx)
    render_page_header("School Detail", state, export_df=schools_frame(ctx["filtered_schools"]), export_name="schools.csv")
    for sec in payload["sections"]:
        with card(sec["label"], meta=f"{sec['subtotal']['schools']} schools", tone=sec["status"]):
            for group in sec["groups"]:
                st.markdown(f"**{group['type']}**")
                st.dataframe(school_table(group["schools"]), hide_index=True, use_container_width=True)
                sub = group["subtotal"]
                st.caption(
                    f"{group['type']} subtotal: {sub['enrolled']} enrolled | {sub['guides_actual']} guides | "
                    f"model {sub['guides_model']} | {format_variance(sub['variance'])} | {format_currency(sub['annual_cost'])}"
                )
            sub = sec["subtotal"]
            st.markdown(
                f"**{sec['label']} Total**: {sub['enrolled']} enrolled | {sub['guides_actual']} guides | "
                f"model {sub['guides_model']} | {format_variance(sub['variance'])} | {format_currency(sub['annual_cost'])}"
            )
    total = payload["total"]
    st.markdown(
        f"**Portfolio Total**: {total['schools']} schools | {total['enrolled']} enrolled | {total['guides_actual']} guides | "
        f"model {total['guides_model']} | {format_variance(total['variance'])} | {format_currency(total['annual_cost'])}"
    )


def render_salaries_page():
    payload = compute_salaries(state, ctx)
    kpis = payload["kpis"]
    render_page_header("Salary vs Model", state)
    with card("KPI Tiles"):
        cols = st.columns(4)
        cols[0].metric("Staff Over Salary Model", f"{kpis['flagged_staff']}", help="Individual salary flags")
        cols[1].metric("Total Salary Overage", format_currency(kpis["total_delta"]), help="vs approved model comp")
        cols[2].metric("Schools Affected", f"{kpis['schools_affected']}", help=f"of {kpis['schools_with_staff']} with staff")
        cols[3].metric("Avg Overage", format_currency(kpis["avg_overage"]), help="Per flagged person")

    with card("Guide Cost as % of Tuition Revenue by Tier"):
        tiers = pd.DataFrame(
            payload["tuition_tiers"],
            columns=["tier", "schools", "enrolled", "guides", "ratio", "avg_salary", "revenue", "guide_cost_per_student", "guide_pct_revenue", "excess_cost"],
        )
        tiers["guide_pct_revenue"] = [
            format_pct(p, 1) if rev > 0 else "—" for p, rev in zip(tiers["guide_pct_revenue"], tiers["revenue"])
        ]
        tiers["ratio"] = tiers["ratio"].apply(format_ratio)
        tiers = format_currency_columns(tiers, ["avg_salary", "revenue", "guide_cost_per_student", "excess_cost"])
        st.dataframe(tiers, hide_index=True, use_container_width=True)
        if payload["tuition_tiers"]:
            st.altair_chart(tier_cost_bar(payload["tuition_tiers"]), use_container_width=True)

    for s in payload["schools"]:
        with card(s["school"], meta=f"{s['count']} flags | {format_currency(s['total_delta'])}"):
            st.caption(f"Pricing model: {s['model']}")
            df = pd.DataFrame(s["flags"], columns=["name", "role", "actual", "benchmark", "delta"])
            st.dataframe(format_currency_columns(df, ["actual", "benchmark", "delta"]), hide_index=True, use_container_width=True)


def render_interim_page():
    payload = compute_interim(state, ctx)
    kpis = payload["kpis"]
    render_page_header("Interim Assignments", state)
    with card("KPI Tiles"):
        cols = st.columns(4)
        cols[0].metric("Guides Tracked", f"{kpis['guides_tracked']}", help=f"Across {kpis['home_campuses']} home campuses")
        cols[1].metric("Avg Deploy %", f"{kpis['avg_pct_deployed']}%", help="Time spent away from home campus")
        cols[2].metric("Home Campuses", f"{kpis['home_campuses']}", help="Sending guides to other schools")
        top = kpis["top_destination"]
        cols[3].metric("Top Destination", top["destination"] if top else "N/A", help=f"{top['guides']} deployments" if top else None)

    with card("Deployment by Home Campus"):
        st.altair_chart(deployment_bar(payload["campuses"]), use_container_width=True)

    for c in payload["campuses"]:
        label = f"{c['campus']}: {c['guides']} guides, avg {c['avg_pct_deployed']}% deployed elsewhere"
        if st.button(("▼ " if c["expanded"] else "▶ ") + label, key=f"campus_{c['campus']}"):
            update_state(toggle_expanded(state, c["campus"], "campus"))
            st.rerun()
        if c["expanded"]:
            df = pd.DataFrame(c["staff"], columns=["guide_name", "role", "deployments", "pct_deployed_elsewhere"])
            df["deployments"] = df["deployments"].apply(", ".join)
            st.dataframe(df, hide_index=True, use_container_width=True)

    with card("Schools Receiving the Most Support"):
        st.dataframe(pd.DataFrame(payload["receiving_schools"]), hide_index=True, use_container_width=True)


if state.active_tab == "overview":
    render_overview_page()
elif state.active_tab == "drivers":
    render_drivers_page()
elif state.active_tab == "schools":
    render_schools_page()
elif state.active_tab == "salaries":
    render_salaries_page()
else:
    render_interim_page()

st.caption("Data: " + " · ".join(data_ctx["sources"]) + f" · Updated {data_ctx['updated']}")
