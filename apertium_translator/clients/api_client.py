import hashlib
import logging
from typing import Iterable, List, Optional
import redis
from apertium_translator.models import API_KEY_MIN_LENGTH, ApertiumConfig
from apertium_translator.clients import decoders
from apertium_translator.clients.errors import ERROR_PREFIX, ApertiumError, ConfigurationError
from apertium_translator.clients.transport import fetch

logger = logging.getLogger(__name__)

PARAM_API_KEY = "key="
PARAM_LANG_PAIR = "&langpair="
PARAM_TEXT = "&q="

RETRIEVE_ERROR = f"{ERROR_PREFIX} Error retrieving translation : "


def validate_service_state(config: ApertiumConfig) -> Optional[ConfigurationError]:
    """Returns the configuration error that blocks requests, or None when ready."""
    if config.api_key is None or len(config.api_key) < API_KEY_MIN_LENGTH:
        return ConfigurationError(
            "INVALID_API_KEY - Please set the API Key with your Apertium API Key"
        )
    return None


def build_string_array_param(values: Iterable) -> str:
    """
    Serializes values into the JSON array literal the q parameter expects, e.g. ["a","b"].
    None and empty entries are skipped. Values are NOT escaped: quotes or backslashes
    inside a value pass through unchanged.
    """
    quoted = []
    for value in values:
        if value is None:
            continue
        value = str(value)
        if value:
            quoted.append(f'"{value}"')
    return "[" + ",".join(quoted) + "]"


class ApertiumAPIClient:
    CACHE_PREFIX = "apertium:response:"

    def __init__(self, config: ApertiumConfig):
        self.config = config
        # Response cache is opt-in; no redis_url means every call goes to the network
        self.redis = None
        if config.redis_url is not None:
            self.redis = redis.Redis.from_url(config.redis_url, decode_responses=True)

    def _cache_key(self, url: str) -> str:
        return self.CACHE_PREFIX + hashlib.sha256(url.encode("utf-8")).hexdigest()

    def retrieve_response(self, url: str) -> str:
        """Validates the config, then returns the body text for url (cached when enabled)."""
        error = validate_service_state(self.config)
        if error is not None:
            raise error

        if self.redis is None:
            return fetch(url, self.config)

        cache_key = self._cache_key(url)
        try:
            cached_response = self.redis.get(cache_key)
        except redis.RedisError as e:
            # An unreachable cache never blocks the request
            logger.error(f"Cache read failed, continuing uncached: {str(e)}")
            return fetch(url, self.config)

        if cached_response is not None:
            logger.info(f"Cache hit for: {cache_key}")
            return cached_response

        logger.info(f"Cache miss for: {cache_key}")
        response = fetch(url, self.config)

        # Only 200 responses reach this point, so failures are never cached
        try:
            self.redis.setex(cache_key, self.config.cache_ttl, response)
        except redis.RedisError as e:
            logger.error(f"Cache write failed: {str(e)}")
        return response

    def _retrieve(self, url: str, decode, *args):
        try:
            return decode(self.retrieve_response(url), *args)
        except ApertiumError as e:
            raise type(e)(f"{RETRIEVE_ERROR}{e.detail}", status_code=e.status_code) from e

    def retrieve_string(self, url: str) -> str:
        return self._retrieve(url, decoders.as_string)

    def retrieve_string_array(self, url: str, key: Optional[str] = None) -> List[Optional[str]]:
        """Decodes an array of strings, or of objects when key names the property to read."""
        return self._retrieve(url, decoders.as_string_array, key)

    def retrieve_nested_string(self, url: str, key: str, sub_key: str) -> str:
        return self._retrieve(url, decoders.as_nested_string, key, sub_key)

    def retrieve_int_array(self, url: str) -> List[int]:
        return self._retrieve(url, decoders.as_int_array)

    def clear_cache(self):
        """Clear the response cache. Useful for testing."""
        if self.redis is None:
            return
        keys = self.redis.keys(self.CACHE_PREFIX + "*")
        if keys:
            self.redis.delete(*keys)

    def close(self):
        """Close Redis connection (call on shutdown)."""
        if self.redis is not None:
            self.redis.close()
