"""Session state helpers for Streamlit."""
from __future__ import annotations

import streamlit as st


def init_session_state() -> None:
    defaults = {
        "prompt": "",
        "generated_tweet": None,
        "generated_id": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def set_prompt(prompt: str) -> None:
    st.session_state.prompt = prompt


def set_generated(tweet: str, tweet_id: str | None) -> None:
    st.session_state.generated_tweet = tweet
    st.session_state.generated_id = tweet_id


def clear_generated_if(tweet_id: str) -> None:
    if st.session_state.generated_id == tweet_id:
        set_generated(None, None)
