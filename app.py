# app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# === make repo imports work under `streamlit run` ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.configuration import load_configuration
from ui.calculator_page import render


def main() -> None:
    st.set_page_config(page_title="Wire Util", layout="wide")

    try:
        cfg = load_configuration()
    except (OSError, ValueError) as e:
        st.error(f"Invalid configuration: {e}")
        st.stop()
        return

    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.WARNING))
    render(cfg)


main()
