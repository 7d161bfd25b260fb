"""
Streamlit UI for FootyHub – live matches, standings and a match predictor.

Start the relay first, then run from project root:

    python -m footyhub.api.main
    streamlit run src/footyhub/ui/app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure the project src/ directory is on sys.path so that:
#   from footyhub.client.views import ...
# works when running via "streamlit run src/footyhub/ui/app.py"
# from the project root.
# ---------------------------------------------------------------------------
SRC_ROOT = Path(__file__).resolve().parents[2]  # .../src
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from footyhub.client.api_client import HubApiClient  # noqa: E402
from footyhub.client.export import standings_to_csv  # noqa: E402
from footyhub.client.state import HubContext  # noqa: E402
from footyhub.client.views import (  # noqa: E402
    load_initial_data,
    load_standings,
    predict_view,
    switch_tab,
)
from footyhub.config import (  # noqa: E402
    STANDINGS_CHOICES,
    TAB_LA_LIGA,
    TAB_LIVE,
    TAB_PREDICTOR,
    TAB_PREMIER_LEAGUE,
    TAB_STANDINGS,
)
from footyhub.errors import FetchError  # noqa: E402

TAB_LABELS = {
    TAB_LIVE: "🔴 Live",
    TAB_STANDINGS: "📊 Standings",
    TAB_PREMIER_LEAGUE: "🏴 Premier League",
    TAB_LA_LIGA: "🇪🇸 La Liga",
    TAB_PREDICTOR: "🔮 Predictor",
}

PAGE_CSS = """
<style>
.match-card { border: 1px solid #ddd; border-radius: 8px; padding: 10px; margin-bottom: 10px; }
.match-header { display: flex; justify-content: space-between; font-size: 0.8rem; color: #666; }
.status-live { color: #d00; font-weight: bold; }
.team-row { display: flex; justify-content: space-between; align-items: center; }
.team-crest { width: 20px; height: 20px; margin-right: 6px; }
.standings-table { width: 100%; border-collapse: collapse; }
.standings-table td.points { font-weight: 800; color: #326295; }
.info-banner { background: #eef5ff; padding: 12px; border-radius: 6px; }
.error { background: #ffecec; color: #a00; padding: 12px; border-radius: 6px; }
.pred-winner { font-size: 1.2rem; font-weight: bold; }
.pred-bars { display: flex; gap: 10px; margin-top: 10px; align-items: center; }
.pred-side { flex: 1; text-align: center; }
.pred-vs { font-weight: bold; color: #888; }
.pred-track { background: #eee; height: 10px; border-radius: 5px; margin-top: 5px; overflow: hidden; }
.pred-fill { height: 100%; }
.pred-fill.home { background: #326295; }
.pred-fill.away { background: #d62828; }
.pred-analysis { font-size: 0.8rem; margin-top: 15px; color: #666; border-top: 1px solid #eee; padding-top: 10px; }
</style>
"""


def get_context() -> HubContext:
    """The HubContext owned by this browser session, created on first access."""
    if "hub_context" not in st.session_state:
        ctx = HubContext(api=HubApiClient.from_settings())
        load_initial_data(ctx)
        st.session_state["hub_context"] = ctx
    return st.session_state["hub_context"]


def html(fragment: str) -> None:
    st.markdown(fragment, unsafe_allow_html=True)


def render_live_tab(ctx: HubContext) -> None:
    st.subheader("Today's matches")
    view = switch_tab(ctx, TAB_LIVE)
    html(view.sections["live-matches"])


def render_standings_tab(ctx: HubContext) -> None:
    st.subheader("League standings")
    codes = list(STANDINGS_CHOICES)
    code = st.selectbox(
        "League",
        options=codes,
        format_func=lambda c: STANDINGS_CHOICES[c],
        index=0,
    )
    ctx.current_tab = TAB_STANDINGS
    view = load_standings(ctx, code)
    html(view.sections["standings-table"])

    if not view.error:
        try:
            csv_text = standings_to_csv(ctx.get_standings(code))
        except FetchError:
            return
        st.download_button(
            "⬇️ Download table (CSV)",
            data=csv_text,
            file_name=f"standings_{code}.csv",
            mime="text/csv",
        )


def render_league_tab(ctx: HubContext, tab: str) -> None:
    view = switch_tab(ctx, tab)
    if "error" in view.sections:
        html(view.sections["error"])

    col_left, col_right = st.columns([2, 3])
    with col_left:
        st.subheader("Upcoming fixtures")
        html(view.sections.get("matches", ""))
    with col_right:
        st.subheader("Table")
        html(view.sections.get("standings", ""))


def render_predictor_tab(ctx: HubContext) -> None:
    st.subheader("Match prediction engine")
    ctx.current_tab = TAB_PREDICTOR

    teams = ctx.registry.teams
    if not teams:
        st.info("No teams loaded yet. Open a league tab to load its standings.")
        return

    names = {t.id: t.name for t in teams}
    options = [0] + [t.id for t in teams]

    col_home, col_away = st.columns(2)
    with col_home:
        home_id = st.selectbox(
            "Home team",
            options=options,
            format_func=lambda i: names.get(i, "Select Home Team"),
        )
    with col_away:
        away_id = st.selectbox(
            "Away team",
            options=options,
            format_func=lambda i: names.get(i, "Select Away Team"),
        )

    if st.button("🔮 Predict", key="predict"):
        html(predict_view(ctx, home_id, away_id))


def main() -> None:
    st.set_page_config(page_title="FootyHub – Football Hub", layout="wide")
    html(PAGE_CSS)
    st.title("⚽ FootyHub")

    ctx = get_context()

    tab = st.radio(
        "Section",
        options=list(TAB_LABELS),
        format_func=lambda t: TAB_LABELS[t],
        horizontal=True,
        label_visibility="collapsed",
    )

    if tab == TAB_LIVE:
        render_live_tab(ctx)
    elif tab == TAB_STANDINGS:
        render_standings_tab(ctx)
    elif tab == TAB_PREDICTOR:
        render_predictor_tab(ctx)
    else:
        render_league_tab(ctx, tab)


if __name__ == "__main__":
    main()
