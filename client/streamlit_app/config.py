"""Configuration for the Streamlit TweetForge client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:8000")
HISTORY_LIMIT = int(os.getenv("TWEETFORGE_HISTORY_LIMIT", "20"))
