"""Streamlit dashboard entry point."""

import asyncio
from dataclasses import dataclass

import altair as alt
import streamlit as st

from src.application.identity_context import IdentityContext
from src.application.ports.identity import IdentityProviderPort
from src.application.use_cases.refresh_portfolio import (
    RefreshPortfolioUseCase,
)
from src.domain.models import PortfolioSummary
from src.domain.services.breakdown import (
    build_chart_slices,
    format_amount,
    format_net_worth,
    format_quantity,
)
from src.infrastructure.container import (
    build_identity_provider,
    build_refresh_portfolio_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.supabase_auth import AuthenticationError


SESSION_KEY = "wealth_dashboard_session"
DEFAULT_REDIRECT = "http://localhost:8501"
TOKEN_PARAM = "access_token"


@dataclass
class DashboardSession:
    """Per-browser wiring kept in Streamlit session state."""

    identity_context: IdentityContext
    identity_provider: IdentityProviderPort
    refresher: RefreshPortfolioUseCase


def _build_session() -> DashboardSession:
    """Wire the identity context, provider and refresh use case."""
    settings = DashboardSettings.from_env()
    identity_context = IdentityContext(logger=get_app_logger())
    refresher = build_refresh_portfolio_use_case(
        identity_context,
        settings=settings,
    )
    refresher.attach()
    return DashboardSession(
        identity_context=identity_context,
        identity_provider=build_identity_provider(identity_context, settings),
        refresher=refresher,
    )


def _get_session() -> DashboardSession:
    """Return this browser's session, creating it on first run."""
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        session = _build_session()
        st.session_state[SESSION_KEY] = session
    return session


def _refresh(session: DashboardSession) -> PortfolioSummary | None:
    """Value the portfolio of the signed-in user."""
    get_usage_logger().info("Portfolio refresh requested")
    return asyncio.run(session.refresher.refresh())


def _prepare_donut_chart_data(
    summary: PortfolioSummary,
) -> list[dict[str, str | float | bool]]:
    """Prepare Altair-ready rows, one per portfolio item.

    Args:
        summary: Valued portfolio.

    Returns:
        list[dict[str, str | float | bool]]: Chart rows keyed by position so
        that items sharing a name keep their own color.
    """
    return [
        {
            "key": f"{index}",
            "label": chart_slice.label,
            "value": abs(chart_slice.value),
            "color": chart_slice.color,
            "is_liability": chart_slice.is_liability,
            "value_label": chart_slice.value_label,
        }
        for index, chart_slice in enumerate(build_chart_slices(summary))
    ]


def _render_portfolio_chart(
    summary: PortfolioSummary,
    chart_size: int = 300,
) -> None:
    """Render the portfolio donut with the asset count in its center.

    Args:
        summary: Valued portfolio.
        chart_size: Width/height for the chart canvas.
    """
    data = _prepare_donut_chart_data(summary)
    if not data:
        st.info("No assets yet.")
        return

    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.38,
        outerRadius=chart_size * 0.5,
        padAngle=0.06,
        stroke=None,
    ).encode(
        theta=alt.Theta("value:Q"),
        color=alt.Color(
            "key:N",
            scale=alt.Scale(
                domain=[row["key"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=None,
        ),
        order=alt.Order("key:N"),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("value_label:N"),
        ],
    )
    center = alt.Chart(
        alt.Data(values=[{"text": f"{summary.asset_count} Assets"}])
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=12,
        fontWeight="bold",
        color="#6b7280",
    ).encode(
        text="text:N"
    )

    chart = alt.layer(base, center).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_items(summary: PortfolioSummary) -> None:
    """Render the per-item breakdown list."""
    st.caption("PORTFOLIO BREAKDOWN")
    for item in summary.items:
        name_col, value_col = st.columns([3, 2])
        marker = "↘" if item.is_liability else "↗"
        name_col.markdown(f"{marker} **{item.name}**")
        name_col.caption(format_quantity(item))
        value_col.markdown(
            f"{'-' if item.is_liability else ''}"
            f"${format_amount(item.total_value)}"
        )
        if not item.price_available:
            value_col.caption("Price unavailable")


def _pop_redirect_token() -> str | None:
    """Take the OAuth redirect token out of the URL so it is used once."""
    if TOKEN_PARAM not in st.query_params:
        return None
    token = st.query_params[TOKEN_PARAM]
    del st.query_params[TOKEN_PARAM]
    return token


def _render_sign_in(session: DashboardSession) -> None:
    """Render the signed-out screen."""
    st.title("WEALTH")
    st.caption("Minimal net worth tracking with live market prices")

    try:
        sign_in_url = session.identity_provider.authorize_url(
            DEFAULT_REDIRECT
        )
    except RuntimeError as exc:
        st.warning(str(exc))
    else:
        st.link_button("Sign in with Google", sign_in_url)

    access_token = _pop_redirect_token() or st.text_input(
        "Access token",
        type="password",
    )
    if not access_token:
        return
    try:
        session.identity_provider.sign_in(access_token)
    except (AuthenticationError, RuntimeError) as exc:
        st.error(str(exc))
        return
    st.rerun()


def _render_dashboard(session: DashboardSession) -> None:
    """Render net worth, chart and breakdown for the signed-in user."""
    summary = session.refresher.latest
    if summary is None:
        with st.spinner("Loading prices..."):
            summary = _refresh(session)
    if summary is None:
        st.warning("Portfolio could not be loaded. Try refreshing.")
        return

    net_worth_col, actions_col = st.columns([4, 1])
    net_worth_col.metric(
        "Net Worth",
        f"$ {format_net_worth(summary.net_worth)}",
    )
    if actions_col.button("Refresh"):
        _refresh(session)
        st.rerun()
    if actions_col.button("Sign out"):
        session.identity_provider.sign_out()
        _pop_redirect_token()
        st.rerun()

    if summary.unavailable_count:
        st.caption(
            f"{summary.unavailable_count} price(s) unavailable; "
            "those items count as zero."
        )
    _render_portfolio_chart(summary)
    _render_items(summary)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth", layout="centered")
    session = _get_session()
    if not session.identity_context.is_authenticated:
        _render_sign_in(session)
        return
    _render_dashboard(session)


if __name__ == "__main__":  # pragma: no cover
    main()
