import pytest
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit
from apertium_translator.services.translation_service import Translate
from apertium_translator.models import ApertiumConfig, Language
from apertium_translator.clients.errors import ServiceError

VALID_KEY = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0"


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.config = ApertiumConfig(api_key=VALID_KEY, base_url="http://api.apertium.org/json/")

    # Set default return values for clarity in tests
    client.retrieve_nested_string.return_value = "Hola mundo"
    client.retrieve_string_array.return_value = ["hola", "adiós"]
    return client


@pytest.fixture
def translate(mock_client):
    return Translate(client=mock_client)


def test_build_url_uses_fixed_parameter_prefixes(translate):
    url = translate.build_url("Hello world", Language.ENGLISH, Language.SPANISH)

    assert url.startswith(f"http://api.apertium.org/json/translate?key={VALID_KEY}&langpair=")
    query = parse_qs(urlsplit(url).query)
    assert query["key"] == [VALID_KEY]
    assert query["langpair"] == ["en|es"]
    assert query["q"] == ["Hello world"]


def test_build_url_accepts_plain_codes(translate):
    url = translate.build_url("x", "ca", "oc")

    assert parse_qs(urlsplit(url).query)["langpair"] == ["ca|oc"]


def test_execute_reads_translated_text(translate, mock_client):
    """
    Verifies the service builds the URL and decodes the nested responseData payload.
    """
    # ACT
    result = translate.execute("Hello world", Language.ENGLISH, Language.SPANISH)

    # ASSERT
    assert result == "Hola mundo"
    mock_client.retrieve_nested_string.assert_called_once_with(
        translate.build_url("Hello world", Language.ENGLISH, Language.SPANISH),
        "responseData",
        "translatedText",
    )


def test_execute_batch_sends_array_param(translate, mock_client):
    # ACT
    result = translate.execute_batch(["hello", None, "", "goodbye"], Language.ENGLISH, Language.SPANISH)

    # ASSERT
    assert result == ["hola", "adiós"]
    url, key = mock_client.retrieve_string_array.call_args.args
    assert key == "translatedText"
    assert parse_qs(urlsplit(url).query)["q"] == ['["hello","goodbye"]']


def test_client_failure_is_propagated(translate, mock_client):
    """Errors from the client reach the caller unchanged."""
    # ARRANGE
    mock_client.retrieve_nested_string.side_effect = ServiceError("Error from Apertium API: quota", status_code=429)

    # ACT & ASSERT
    with pytest.raises(ServiceError) as excinfo:
        translate.execute("Hello", Language.ENGLISH, Language.SPANISH)

    assert excinfo.value.status_code == 429
    assert "quota" in excinfo.value.detail
