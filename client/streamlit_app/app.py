"""Streamlit client for TweetForge: landing page and tweet generator."""
from __future__ import annotations

import streamlit as st

from api_client import APIClient, error_message, get_client
from config import HISTORY_LIMIT
from state import clear_generated_if, init_session_state, set_generated, set_prompt
from tweet_card import render_history_item, render_tweet_card

EXAMPLE_PROMPTS = [
    "A motivational message about consistency",
    "Hot take on remote work culture",
    "Tech industry observation",
    "Life advice that sounds controversial but is true",
    "Startup wisdom for founders",
]

FEATURES = [
    ("Instant generation", "Describe a topic and get a ready-to-post tweet in seconds."),
    ("Built for engagement", "Concise, punchy copy kept under the 280 character limit."),
    ("History at hand", "Every generated tweet is saved so you can copy or remove it later."),
]


def render_landing() -> None:
    st.title("TweetForge")
    st.subheader("Turn any idea into a viral tweet with AI")
    cols = st.columns(len(FEATURES))
    for col, (title, blurb) in zip(cols, FEATURES):
        with col:
            st.markdown(f"**{title}**")
            st.write(blurb)

    st.markdown("##### AI Generated")
    render_tweet_card(
        "Consistency beats intensity. Show up every day, even when it's boring. That's the whole secret.",
        subtitle="@example",
    )
    st.info("Open **Generator** in the sidebar to forge your first tweet.")
    st.caption("Built with Lyzr AI")


def _generate(client: APIClient, prompt: str) -> None:
    if not prompt.strip():
        st.warning("Please enter a topic. Tell us what you want to tweet about.")
        return
    with st.spinner("Crafting your viral tweet..."):
        try:
            res = client.generate(prompt)
        except Exception as e:
            st.error(error_message(e, "Something went wrong. Please try again."))
            return
    if res.get("success") and res.get("tweet"):
        set_generated(res["tweet"], res.get("id"))
    else:
        st.error("Could not generate a tweet. Please try again.")


def render_generator(client: APIClient) -> None:
    st.header("Generate Your Viral Tweet")
    st.write("Enter your topic or idea below and let AI craft the perfect tweet for you.")

    st.caption("Try an example:")
    cols = st.columns(len(EXAMPLE_PROMPTS))
    for idx, (col, example) in enumerate(zip(cols, EXAMPLE_PROMPTS)):
        with col:
            st.button(example, key=f"example_{idx}", on_click=set_prompt, args=(example,))

    prompt = st.text_area(
        "What do you want to tweet about?",
        key="prompt",
        placeholder="Enter your topic, idea, or the message you want to convey...",
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Generate Tweet", type="primary"):
            _generate(client, prompt)
    with col2:
        if st.session_state.generated_tweet and st.button("Regenerate"):
            _generate(client, prompt)

    if st.session_state.generated_tweet:
        st.markdown("##### Generated Tweet")
        render_tweet_card(st.session_state.generated_tweet)
    else:
        st.caption("Your generated tweet will appear here")

    render_history(client)


def render_history(client: APIClient) -> None:
    st.divider()
    st.subheader("History")
    try:
        res = client.list_tweets(HISTORY_LIMIT)
    except Exception as e:
        st.error(error_message(e, "Failed to fetch tweet history."))
        return

    tweets = res.get("tweets", [])
    if not tweets:
        st.info("No tweets yet.")
        return

    for item in tweets:
        render_history_item(item)
        if st.button("Delete", key=f"delete_{item['id']}"):
            try:
                client.delete_tweet(item["id"])
                clear_generated_if(item["id"])
                st.rerun()
            except Exception as e:
                st.error(error_message(e, "Failed to delete tweet."))


def main():
    st.set_page_config(page_title="TweetForge", layout="wide")
    init_session_state()
    client = get_client()

    page = st.sidebar.radio("Navigation", ["Home", "Generator"])

    if page == "Home":
        render_landing()
    elif page == "Generator":
        render_generator(client)


if __name__ == "__main__":
    main()
