import pytest

from tweetforge.core.errors import ConfigurationError, TweetNotFoundError, UpstreamError
from tweetforge.services.tweet_service import MAX_LIMIT, TweetService, parse_limit


class StubInferenceClient:
    def __init__(self, body):
        self.body = body
        self.prompts = []

    def build_prompt(self, topic):
        return f"prompt:{topic}"

    def complete(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.body, Exception):
            raise self.body
        return self.body


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 50), ("10", 10), (" 7 ", 7), ("abc", 50), ("", 50), ("0", 50), ("-3", 50), ("2.5", 50),
        ("1_0", 50), ("\u0661\u0662", 50), ("+5", 50),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


def test_parse_limit_custom_default():
    assert parse_limit("nope", default=20) == 20


def test_generate_persists_normalized_text(storage):
    inference = StubInferenceClient({"message": '  "Ship it."  '})
    service = TweetService(storage, inference, default_style="house")

    generated = service.generate("shipping")

    assert generated.text == "Ship it."
    assert inference.prompts == ["prompt:shipping"]
    stored = storage.get_tweet(generated.id)
    assert (stored.topic, stored.content, stored.style) == ("shipping", "Ship it.", "house")


def test_generate_stores_style_literally(storage):
    service = TweetService(storage, StubInferenceClient("text"))
    generated = service.generate("topic", style="sarcastic")
    assert storage.get_tweet(generated.id).style == "sarcastic"


def test_generate_without_client_is_configuration_error(storage):
    service = TweetService(storage, None)
    with pytest.raises(ConfigurationError):
        service.generate("topic")
    assert storage.get_tweets() == []


def test_upstream_failure_persists_nothing(storage):
    service = TweetService(storage, StubInferenceClient(UpstreamError("boom")))
    with pytest.raises(UpstreamError):
        service.generate("topic")
    assert storage.get_tweets() == []


def test_empty_normalized_text_is_upstream_error(storage):
    service = TweetService(storage, StubInferenceClient({"response": '""'}))
    with pytest.raises(UpstreamError):
        service.generate("topic")
    assert storage.get_tweets() == []


def test_delete_and_get_missing_raise_not_found(storage):
    service = TweetService(storage, None)
    with pytest.raises(TweetNotFoundError):
        service.delete_tweet("missing")
    with pytest.raises(TweetNotFoundError):
        service.get_tweet("missing")


def test_list_tweets_uses_default_limit(storage):
    for i in range(3):
        storage.create_tweet("t", f"c{i}")
    service = TweetService(storage, None, default_limit=2)
    assert len(service.list_tweets()) == 2
    assert len(service.list_tweets(3)) == 3


def test_parse_limit_caps_oversized_values():
    assert parse_limit("5000") == MAX_LIMIT
    assert parse_limit("99999999999999999999") == MAX_LIMIT
