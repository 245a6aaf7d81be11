"""Unit tests for GeminiInsightService with a mocked Gemini client."""

from unittest.mock import MagicMock, patch

import pytest

from tango_viewer.core import VocabRecord
from tango_viewer.services import GeminiInsightService, InsightResult

MODULE = "tango_viewer.services.insight.gemini_insight_service"


@pytest.fixture
def record():
    return VocabRecord(
        id="w1",
        expression="猫",
        part_of_speech="noun",
        reading="ねこ",
        definition="cat",
    )


@pytest.fixture
def service():
    return GeminiInsightService()


@pytest.fixture
def mock_client():
    """Patch genai.Client and yield the client instance it returns."""
    with patch(f"{MODULE}.genai.Client") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def no_sleep():
    with patch(f"{MODULE}.time.sleep") as sleep:
        yield sleep


def _response(text):
    response = MagicMock()
    response.text = text
    return response


def test_prompt_mentions_word_details(service, record):
    prompt = service.build_prompt(record)
    assert '"猫" [ねこ]' in prompt
    assert "noun" in prompt
    assert '"cat"' in prompt


def test_successful_explanation(service, record, mock_client):
    mock_client.models.generate_content.return_value = _response("  ### Nuance\nA cat.  ")

    result = service.explain_word(record, api_key="key")

    assert isinstance(result, InsightResult)
    assert result.is_success()
    assert result.text == "### Nuance\nA cat."
    assert result.model == GeminiInsightService.MODEL_NAME


def test_successful_result_is_cached_per_record(service, record, mock_client):
    mock_client.models.generate_content.return_value = _response("A cat.")

    first = service.explain_word(record, api_key="key")
    second = service.explain_word(record, api_key="key")

    assert first is second
    assert mock_client.models.generate_content.call_count == 1


def test_clear_cache_forces_new_request(service, record, mock_client):
    mock_client.models.generate_content.return_value = _response("A cat.")

    service.explain_word(record, api_key="key")
    service.clear_cache()
    service.explain_word(record, api_key="key")

    assert mock_client.models.generate_content.call_count == 2


def test_empty_response_is_error_and_not_cached(service, record, mock_client):
    mock_client.models.generate_content.return_value = _response("")

    result = service.explain_word(record, api_key="key")
    service.explain_word(record, api_key="key")

    assert not result.is_success()
    assert result.error == "Empty response from API"
    assert mock_client.models.generate_content.call_count == 2


def test_rate_limit_is_retried(service, record, mock_client, no_sleep):
    mock_client.models.generate_content.side_effect = [
        Exception("429 RESOURCE_EXHAUSTED"),
        _response("A cat."),
    ]

    result = service.explain_word(record, api_key="key")

    assert result.is_success()
    no_sleep.assert_called_once_with(2)


def test_rate_limit_gives_up_after_max_retries(service, record, mock_client, no_sleep):
    mock_client.models.generate_content.side_effect = Exception("429 quota exceeded")

    result = service.explain_word(record, api_key="key")

    assert result.error == "API quota exceeded. Please try again later."
    assert mock_client.models.generate_content.call_count == GeminiInsightService.MAX_RETRIES
    assert [c.args[0] for c in no_sleep.call_args_list] == [2, 4]


def test_authentication_error(service, record, mock_client, no_sleep):
    mock_client.models.generate_content.side_effect = Exception("API_KEY_INVALID")

    result = service.explain_word(record, api_key="bad")

    assert result.error.startswith("Invalid API key or request")
    no_sleep.assert_not_called()


def test_timeout_error(service, record, mock_client):
    mock_client.models.generate_content.side_effect = Exception("Deadline exceeded")

    result = service.explain_word(record, api_key="key")

    assert result.error == "Request timed out. Please check your connection."


def test_unknown_error_gets_generic_message(service, record, mock_client):
    mock_client.models.generate_content.side_effect = Exception("boom")

    result = service.explain_word(record, api_key="key")

    assert result.text is None
    assert "try again" in result.error
