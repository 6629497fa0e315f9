import pytest
import requests

from conftest import TEST_API_URL, make_settings
from tweetforge.core.errors import ConfigurationError, UpstreamError
from tweetforge.services.inference_client import InferenceClient, InferenceConfig


@pytest.fixture
def inference_client():
    return InferenceClient(InferenceConfig.from_settings(make_settings(INFERENCE_TIMEOUT_SECONDS=15)))


def test_from_settings_reports_every_missing_value():
    settings = make_settings(LYZR_API_KEY=None, LYZR_AGENT_ID="", LYZR_SESSION_ID=None)
    with pytest.raises(ConfigurationError) as excinfo:
        InferenceConfig.from_settings(settings)
    assert "LYZR_API_KEY" in excinfo.value.detail
    assert "LYZR_AGENT_ID" in excinfo.value.detail
    assert "LYZR_SESSION_ID" in excinfo.value.detail
    assert "LYZR_USER_ID" not in excinfo.value.detail


def test_prompt_embeds_topic_and_constraints():
    prompt = InferenceClient.build_prompt("coffee")
    assert "about: coffee." in prompt
    assert "under 280 characters" in prompt
    assert "hashtags unless absolutely necessary" in prompt


def test_complete_posts_once_with_credentials(upstream, inference_client):
    upstream.reply({"response": "ok"})

    body = inference_client.complete("the prompt")

    assert body == {"response": "ok"}
    assert len(upstream.calls) == 1
    call = upstream.calls[0]
    assert call["url"] == TEST_API_URL
    assert call["headers"] == {"Content-Type": "application/json", "x-api-key": "test-key"}
    assert call["json"] == {
        "user_id": "user-1",
        "agent_id": "agent-1",
        "session_id": "session-1",
        "message": "the prompt",
    }
    assert call["timeout"] == 15


def test_non_success_status_raises_without_retry(upstream, inference_client):
    upstream.reply(status_code=502, text="bad gateway")
    with pytest.raises(UpstreamError) as excinfo:
        inference_client.complete("p")
    assert "502" in excinfo.value.detail
    assert len(upstream.calls) == 1


def test_network_fault_raises_upstream_error(upstream, inference_client):
    upstream.error = requests.ConnectionError("connection refused")
    with pytest.raises(UpstreamError):
        inference_client.complete("p")


def test_non_json_body_raises_upstream_error(upstream, inference_client):
    upstream.reply(text="<html>oops</html>")
    with pytest.raises(UpstreamError):
        inference_client.complete("p")
