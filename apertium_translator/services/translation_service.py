import logging
from typing import Iterable, List, Optional
from urllib.parse import quote_plus
from apertium_translator.clients.api_client import (
    PARAM_API_KEY,
    PARAM_LANG_PAIR,
    PARAM_TEXT,
    ApertiumAPIClient,
    build_string_array_param,
)
from apertium_translator.models import LanguagePair

logger = logging.getLogger(__name__)


class Translate:
    SERVICE_PATH = "/translate?"

    # Service requires the API client via Dependency Injection
    def __init__(self, client: ApertiumAPIClient):
        self._client = client

    def build_url(self, text: str, source, target) -> str:
        """Builds the translate query URL. source/target may be Language members or codes."""
        config = self._client.config
        lang_pair = LanguagePair.of(source, target)
        return (
            config.base_url.rstrip("/")
            + self.SERVICE_PATH
            + PARAM_API_KEY + quote_plus(config.api_key or "")
            + PARAM_LANG_PAIR + quote_plus(lang_pair.to_param())
            + PARAM_TEXT + quote_plus(text)
        )

    def execute(self, text: str, source, target) -> str:
        """Translates a single text from source to target language."""
        logger.info(f"Translating {len(text)} chars ({source}|{target})")
        url = self.build_url(text, source, target)
        return self._client.retrieve_nested_string(url, "responseData", "translatedText")

    def execute_batch(self, texts: Iterable[Optional[str]], source, target) -> List[Optional[str]]:
        """
        Translates several texts in one request.
        Empty and None texts are dropped from the request, so the result only has
        slots for the texts that were actually sent.
        """
        param = build_string_array_param(texts)
        logger.info(f"Translating batch {param[:30]}... ({source}|{target})")
        url = self.build_url(param, source, target)
        return self._client.retrieve_string_array(url, "translatedText")
