import pytest

from api_request_builder.config import ENV_BASE_URL, ENV_JSON_CONTENT_TYPE, ENV_LOG_REQUESTS


@pytest.fixture(autouse=True)
def clean_builder_env(monkeypatch):
    for key in (ENV_BASE_URL, ENV_LOG_REQUESTS, ENV_JSON_CONTENT_TYPE):
        monkeypatch.delenv(key, raising=False)
