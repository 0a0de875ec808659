# tests/test_retrieval.py

import json
from unittest.mock import MagicMock, patch

import pytest

from llm_pipeline.llm_engine import ModelCallFailed, ModelTimeout
from verse_engine.knowledge_base import lookup
from verse_engine.retrieval import (
    ERROR_MODEL_DEGRADED,
    ERROR_NOT_CONFIGURED,
    ERROR_TOPIC_REQUIRED,
    ERROR_UNEXPECTED,
    retrieve_verses,
)

MODEL_VERSES = [
    {
        "reference": "Micah 6:8",
        "text": "He has shown you, O mortal, what is good.",
        "explanation": "Summarises the ethical demands placed on the faithful.",
    },
    {
        "reference": "Amos 5:24",
        "text": "But let justice roll on like a river, righteousness like a never-failing stream!",
        "explanation": "Frames justice as a continuous, flowing duty.",
    },
]


def _client(reply=None, error=None, configured=True):
    client = MagicMock()
    client.is_configured = configured
    if error is not None:
        client.generate.side_effect = error
    else:
        client.generate.return_value = reply
    return client


def _dump(verses):
    return [v.model_dump() for v in verses]


# --- Validation & configuration ---

@pytest.mark.parametrize("topic", [None, "", "   ", "\n\t", 42, ["love"], {"lesson": "love"}])
def test_invalid_topic_is_rejected_without_calls(topic):
    client = _client(reply="{}")
    with patch("verse_engine.retrieval.lookup") as mock_lookup:
        result = retrieve_verses(topic, client)

    assert result.success is True
    assert result.error == ERROR_TOPIC_REQUIRED
    assert result.lesson == ""
    assert result.verses == []
    client.generate.assert_not_called()
    mock_lookup.assert_not_called()


@pytest.mark.parametrize("client", [None, _client(reply="{}", configured=False)])
def test_missing_credential_returns_empty_verses(client):
    result = retrieve_verses("Love", client)
    assert result.success is True
    assert result.error == ERROR_NOT_CONFIGURED
    assert result.lesson == "Love"
    assert result.verses == []
    if client is not None:
        client.generate.assert_not_called()


# --- Model call failures ---

def test_model_failure_falls_back_with_details():
    client = _client(error=ModelCallFailed("Connection refused"))
    result = retrieve_verses("forgiveness", client)

    assert result.success is True
    assert result.error == ERROR_MODEL_DEGRADED
    assert "Connection refused" in result.details
    assert result.lesson == "forgiveness"
    assert result.verses == lookup("forgiveness")


def test_model_unreachable_wisdom_scenario():
    client = _client(error=ModelTimeout("Model request timed out"))
    payload = retrieve_verses("wisdom", client).to_payload()

    assert payload["success"] is True
    assert payload["error"]
    assert payload["details"]
    assert payload["lesson"] == "wisdom"
    assert [v["reference"] for v in payload["verses"]] == ["Proverbs 1:7", "James 1:5", "Proverbs 3:13-14"]


def test_model_failure_with_empty_message_reports_unknown_error():
    result = retrieve_verses("hope", _client(error=RuntimeError()))
    assert result.details == "Unknown error"
    assert result.verses == lookup("hope")


def test_prompt_sent_to_model_contains_topic():
    client = _client(reply=json.dumps({"topic": "Justice", "verses": MODEL_VERSES}))
    retrieve_verses("Justice", client)
    prompt = client.generate.call_args.args[0]
    assert '"Justice"' in prompt


# --- Successful parses ---

def test_fenced_json_reply_is_used_verbatim():
    reply = "```json\n" + json.dumps({"topic": "Justice", "verses": MODEL_VERSES}, indent=2) + "\n```"
    result = retrieve_verses("Justice", _client(reply=reply))

    assert result.error is None
    assert result.lesson == "Justice"
    assert _dump(result.verses) == MODEL_VERSES


def test_model_topic_overrides_lesson_when_present():
    reply = json.dumps({"topic": "Social justice", "verses": MODEL_VERSES})
    assert retrieve_verses("justice", _client(reply=reply)).lesson == "Social justice"


@pytest.mark.parametrize("reply", [{"verses": MODEL_VERSES}, {"topic": None, "verses": MODEL_VERSES}, {"topic": "", "verses": MODEL_VERSES}])
def test_missing_model_topic_keeps_original_lesson(reply):
    assert retrieve_verses("Justice", _client(reply=json.dumps(reply))).lesson == "Justice"


@pytest.mark.parametrize("reply", [{"topic": "Justice"}, {"topic": "Justice", "verses": None}, {"topic": "Justice", "verses": []}])
def test_reply_without_verses_yields_empty_list(reply):
    result = retrieve_verses("Justice", _client(reply=json.dumps(reply)))
    assert result.error is None
    assert result.verses == []


def test_extra_fields_in_reply_are_ignored():
    verses = [dict(MODEL_VERSES[0], translation="NIV")]
    reply = json.dumps({"topic": "Justice", "verses": verses, "notes": "extra"})
    result = retrieve_verses("Justice", _client(reply=reply))
    assert _dump(result.verses) == [MODEL_VERSES[0]]


# --- Unparseable replies ---

@pytest.mark.parametrize(
    "reply",
    [
        '{"topic": "love", "verses": [{"reference": "John 3:16", "text": "For God so',
        "Sure! Here are some verses about love.",
        "",
        json.dumps(MODEL_VERSES),
        json.dumps({"topic": "love", "verses": [{"reference": "John 3:16"}]}),
        json.dumps({"topic": "love", "verses": [{"reference": 316, "text": "t", "explanation": "e"}]}),
        json.dumps({"topic": "love", "verses": "John 3:16"}),
    ],
)
def test_unparseable_reply_falls_back_silently(reply):
    result = retrieve_verses("Love one another", _client(reply=reply))

    assert result.success is True
    assert result.error is None
    assert result.details is None
    assert result.lesson == "Love one another"
    assert result.verses == lookup("Love one another")


def test_deeply_nested_reply_falls_back_silently():
    """Nesting deep enough to exhaust the JSON decoder still yields fallback verses."""
    result = retrieve_verses("wisdom", _client(reply="[" * 200000))

    assert result.success is True
    assert result.error is None
    assert result.lesson == "wisdom"
    assert result.verses == lookup("wisdom")


@pytest.mark.parametrize("bad_topic", [7, ["Justice"], {"name": "Justice"}, True])
def test_non_string_model_topic_keeps_model_verses(bad_topic):
    reply = json.dumps({"topic": bad_topic, "verses": MODEL_VERSES})
    result = retrieve_verses("Justice", _client(reply=reply))

    assert result.error is None
    assert result.lesson == "Justice"
    assert _dump(result.verses) == MODEL_VERSES


# --- Catch-all ---

def test_unexpected_failure_is_converted():
    client = _client(reply="{}")
    with patch("verse_engine.retrieval.build_prompt", side_effect=KeyError("boom")):
        result = retrieve_verses("faith", client)

    assert result.success is True
    assert result.error == ERROR_UNEXPECTED
    assert "boom" in result.details
    assert result.lesson == ""
    assert result.verses == []


def test_payload_omits_unset_error_fields():
    reply = json.dumps({"topic": "Justice", "verses": MODEL_VERSES})
    payload = retrieve_verses("Justice", _client(reply=reply)).to_payload()
    assert set(payload) == {"success", "lesson", "verses"}
