import logging
import time

import streamlit as st
import structlog

from config import (
    AppConfig,
    current_seed,
    get_config_from_widgets,
    set_default_config,
)
from voronoi_reveal.errors import EmptySiteSetError, InvalidDimensionsError
from voronoi_reveal.log import configure_logging
from voronoi_reveal.playback import Playback, advance, show, start
from voronoi_reveal.renderer.image import to_image
from voronoi_reveal.renderer.progressive import render_animation
from voronoi_reveal.renderer.static import render_static
from voronoi_reveal.sampling import generate_sites
from voronoi_reveal.sites import SiteSet

configure_logging(logging.INFO)
logger = structlog.get_logger()

st.set_page_config(layout="wide", page_title="Voronoi Diagram Viewer")


def new_sites(config: AppConfig) -> SiteSet:
    return generate_sites(
        config.site_count,
        seed=current_seed(config),
        low=config.site_low,
        high=config.site_high,
    )


def do_render(config: AppConfig) -> None:
    st.session_state["seed_counter"] += 1
    sites = new_sites(config)
    try:
        grid = render_static(sites, config.width, config.height)
    except (EmptySiteSetError, InvalidDimensionsError) as e:
        st.error(f"Render failed: {e}")
        return
    st.session_state["sites"] = sites
    st.session_state["playback"] = show(grid, now=time.monotonic())
    logger.info("render_clicked", sites=len(sites), width=config.width)


def do_play(config: AppConfig) -> None:
    sites: SiteSet = st.session_state["sites"]
    try:
        frames = render_animation(sites, config.width, config.height)
    except (EmptySiteSetError, InvalidDimensionsError) as e:
        st.error(f"Animation failed: {e}")
        return
    st.session_state["playback"] = start(frames, now=time.monotonic())
    logger.info("play_clicked", frames=len(frames))


# --------- Main App ---------

set_default_config()
if "sites" not in st.session_state:
    st.session_state["sites"] = new_sites(st.session_state["config"])
    st.session_state["playback"] = Playback()

tab_viewer, tab_config = st.tabs(["Viewer", "Config"])

with tab_config:
    st.session_state["config"] = get_config_from_widgets()

with tab_viewer:
    config: AppConfig = st.session_state["config"]
    st.header("Voronoi Diagram Viewer")

    render_col, play_col, _ = st.columns([0.2, 0.2, 0.6])
    with render_col:
        if st.button("Render", key="render_btn"):
            do_render(config)
    with play_col:
        if st.button("Play Video", key="play_btn"):
            do_play(config)

    placeholder = st.empty()
    playback: Playback = st.session_state["playback"]
    while playback.playing:
        playback = advance(playback, time.monotonic(), config.frame_interval)
        if playback.image is not None:
            placeholder.image(to_image(playback.image))
        time.sleep(config.frame_interval)
    st.session_state["playback"] = playback

    if playback.image is not None:
        placeholder.image(to_image(playback.image))
