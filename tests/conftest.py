import pytest

from mindvault.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, GEMINI_API_KEY="test-key", GEMINI_MODEL="")
