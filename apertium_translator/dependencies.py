from apertium_translator.clients import ApertiumAPIClient
from apertium_translator.models import ApertiumConfig
from apertium_translator.services import Translate

_api_client = None
_translate_service = None

def get_api_client() -> ApertiumAPIClient:
    global _api_client
    if _api_client is None:
        _api_client = ApertiumAPIClient(ApertiumConfig.from_env())
    return _api_client

def get_translate_service() -> Translate:
    global _translate_service
    if _translate_service is None:
        _translate_service = Translate(client=get_api_client())
    return _translate_service

def reset_clients():
    """Drops the cached instances so the next call re-reads the environment."""
    global _api_client, _translate_service
    if _api_client is not None:
        _api_client.close()
    _api_client = None
    _translate_service = None
