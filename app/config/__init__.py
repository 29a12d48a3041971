from dataclasses import dataclass
from typing import Optional

import streamlit as st

from voronoi_reveal.playback import DEFAULT_FRAME_INTERVAL
from voronoi_reveal.renderer.static import DEFAULT_HEIGHT, DEFAULT_WIDTH
from voronoi_reveal.sampling import DEFAULT_SITE_COUNT, DEFAULT_SITE_RANGE

from .shared_ui import seed_section

__all__ = [
    "AppConfig",
    "set_default_config",
    "get_config_from_widgets",
    "current_seed",
]


@dataclass(frozen=True)
class AppConfig:
    width: int
    height: int
    site_count: int
    site_low: float
    site_high: float
    seed: Optional[int]
    frame_interval: float


def _initial_config() -> AppConfig:
    return AppConfig(
        width=DEFAULT_WIDTH,
        height=DEFAULT_HEIGHT,
        site_count=DEFAULT_SITE_COUNT,
        site_low=DEFAULT_SITE_RANGE[0],
        site_high=DEFAULT_SITE_RANGE[1],
        seed=0,
        frame_interval=DEFAULT_FRAME_INTERVAL,
    )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()
        st.session_state["seed_counter"] = 0


def current_seed(config: AppConfig) -> int:
    """Seed for the next site set: the configured base plus the render count."""
    base_seed = config.seed if config.seed is not None else 0
    return base_seed + st.session_state["seed_counter"]


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Image Size")
    width = st.number_input(
        "Width", min_value=1, max_value=2000, value=current.width, key="width"
    )
    height = st.number_input(
        "Height", min_value=1, max_value=2000, value=current.height, key="height"
    )

    st.subheader("Sites")
    site_count = st.number_input(
        "Site count", min_value=1, max_value=64, value=current.site_count, key="sites"
    )
    site_low, site_high = st.slider(
        "Sampling range",
        min_value=0.0,
        max_value=1.0,
        value=(current.site_low, current.site_high),
        help="Both coordinates are drawn uniformly from this range.",
        key="site_range",
    )
    seed = seed_section(key="seed")

    st.subheader("Playback")
    frame_interval_ms = st.number_input(
        "Frame interval (ms)",
        min_value=1,
        max_value=1000,
        value=int(round(current.frame_interval * 1000)),
        key="frame_interval",
    )

    return AppConfig(
        width=int(width),
        height=int(height),
        site_count=int(site_count),
        site_low=float(site_low),
        site_high=float(site_high),
        seed=int(seed),
        frame_interval=frame_interval_ms / 1000,
    )
