"""Constants and paths for the box-office chart."""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"
OUTPUT_DIR = PROJECT_ROOT / "output"

MOVIES_PATH = Path(os.getenv("BOXOFFICE_MOVIES_PATH", RAW_DIR / "movies.json"))
CHART_PATH = OUTPUT_DIR / "box_office.png"

# ── Pipeline ─────────────────────────────────────────────────────────────────
START_YEAR = int(os.getenv("BOXOFFICE_START_YEAR", "2008"))
NUM_YEARS = int(os.getenv("BOXOFFICE_NUM_YEARS", "10"))  # seasonal bands only
REFERENCE_YEAR = int(os.getenv("BOXOFFICE_REFERENCE_YEAR", str(date.today().year)))
TOP_N_GENRES = 3

# ── Chart ────────────────────────────────────────────────────────────────────
WIDTH = 1200   # px
HEIGHT = 300   # px
DPI = 100
MARGIN = {"top": 20, "right": 20, "bottom": 20, "left": 40}

# pink, green, purple
GENRE_COLORS = ["#e683b4", "#53c3ac", "#8475e8"]
OTHER_GENRE_COLOR = "#cccccc"
HOLIDAY_COLORS = {
    "summer": "#eb6a5b",
    "winter": "#51aae8",
}
CURVE_SPREAD_MONTHS = 2
