"""Habitable Zone Timeline — Streamlit app for a planet's climate over its star's life."""

import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from hztimeline.catalog import CatalogError, load_catalog  # noqa: E402
from hztimeline.compute import TrackError  # noqa: E402
from hztimeline.config import load_settings  # noqa: E402
from hztimeline.formatting import format_age  # noqa: E402
from hztimeline.i18n import t  # noqa: E402
from hztimeline.logging_config import setup_logging  # noqa: E402
from hztimeline.models import TimelineInputs  # noqa: E402
from hztimeline.playback import MAX_RATE, MIN_RATE, TICK_INTERVAL  # noqa: E402
from hztimeline.renderers.plotly_timeline import render_plotly_timeline  # noqa: E402
from hztimeline.renderers.svg_legend import render_zone_legend_svg  # noqa: E402
from hztimeline.view import TimelineView  # noqa: E402

_settings = load_settings()
setup_logging(_settings.log_level, _settings.log_file)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in, at which point _lang is set correctly.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☀",
    layout="wide",
)

st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    .elapsed { font-size: 1.05rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

try:
    _catalog = load_catalog(_settings.catalog_path)
except CatalogError as e:
    st.error(t("error_catalog", _lang).format(error=html.escape(str(e))))
    st.stop()

# --- Watched inputs ---
_labels = [p.label for p in _catalog]
col_star, col_dist = st.columns(2)
with col_star:
    star_idx = st.selectbox(
        t("label_star", _lang),
        options=range(len(_catalog)),
        format_func=lambda i: _labels[i],
    )
with col_dist:
    distance = st.number_input(
        t("label_distance", _lang),
        min_value=0.01,
        max_value=100.0,
        value=_settings.default_distance,
        step=0.05,
        format="%.2f",
    )

_inputs = TimelineInputs(star_mass_idx=star_idx, planet_distance=distance, star_age=0.0)

# --- Session state initialization ---
try:
    if "view" not in st.session_state:
        st.session_state.view = TimelineView(_catalog, _inputs)
        st.session_state.view.scrub(0.0)
    else:
        st.session_state.view.update(_inputs)
except TrackError as e:
    st.error(t("error_track", _lang).format(error=html.escape(str(e))))
    st.stop()
if "playing" not in st.session_state:
    st.session_state.playing = False
if "rate_text" not in st.session_state:
    st.session_state.rate_text = "1.0"

view: TimelineView = st.session_state.view


def _on_scrub() -> None:
    view.scrub(st.session_state.position)


def _on_rate() -> None:
    # Out-of-range input is ignored and the previous rate stays in effect
    view.cursor.set_rate(st.session_state.rate_text)


def _on_toggle() -> None:
    st.session_state.playing = not st.session_state.playing


st.header(t("heading_controls", _lang))
col_rate, col_btn = st.columns([3, 1])
with col_rate:
    st.text_input(
        f"{t('label_rate', _lang)} ({MIN_RATE}–{MAX_RATE})",
        key="rate_text",
        on_change=_on_rate,
    )
with col_btn:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    st.button(
        t("btn_stop", _lang) if st.session_state.playing else t("btn_play", _lang),
        on_click=_on_toggle,
        type="primary",
    )


# While playing, the fragment reruns every tick and acts as the playback timer
@st.fragment(run_every=TICK_INTERVAL if st.session_state.playing else None)
def _timeline_panel() -> None:
    if st.session_state.playing and not view.cursor.advance():
        st.session_state.playing = False
        st.session_state.position = view.cursor.position
        st.rerun()

    st.session_state.position = view.cursor.position
    st.slider(
        t("label_position", _lang),
        min_value=0.0,
        max_value=1.0,
        step=0.001,
        key="position",
        on_change=_on_scrub,
        label_visibility="collapsed",
    )

    sample = view.cursor.current_sample
    st.markdown(
        f"<div class='elapsed'>{t('label_elapsed', _lang).format(age=format_age(sample.time))}"
        f" · {t('planet_temp', _lang).format(temp=sample.temp)}</div>",
        unsafe_allow_html=True,
    )
    st.plotly_chart(
        render_plotly_timeline(view.data, view.cursor.position),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    st.markdown(
        render_zone_legend_svg(view.data, view.cursor.sample_index),
        unsafe_allow_html=True,
    )
    st.caption(t("zone_legend", _lang))


_timeline_panel()
