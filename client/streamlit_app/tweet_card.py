"""Tweet card rendering."""
from __future__ import annotations

import streamlit as st

from formatting import character_status, format_created_at


def render_tweet_card(content: str, subtitle: str = "Just now") -> None:
    status = character_status(content)
    with st.container(border=True):
        st.markdown(f"**TweetForge User** &nbsp; `@tweetforge` · {subtitle}")
        # st.code renders a copy-to-clipboard button
        st.code(content, language=None, wrap_lines=True)
        if status.over_limit:
            st.markdown(f":red[**{status.label}** characters, over the limit]")
        else:
            st.caption(f"{status.label} characters")


def render_history_item(item: dict) -> None:
    render_tweet_card(item.get("content", ""), subtitle=format_created_at(item.get("createdAt")))
    st.caption(f"Topic: {item.get('topic', '')}")
