"""Settings are validated when the app starts."""

import pytest
from pydantic import ValidationError

from core.config import Settings


def test_defaults():
    settings = Settings(SECRET_KEY="k", _env_file=None)
    assert settings.ARTICLE_PAGE_SIZE >= 1
    assert settings.JWT_ALG == "HS256"


@pytest.mark.parametrize("page_size", [0, -1])
def test_page_size_must_be_positive(page_size):
    with pytest.raises(ValidationError):
        Settings(SECRET_KEY="k", ARTICLE_PAGE_SIZE=page_size, _env_file=None)


def test_cors_origins_are_split():
    settings = Settings(SECRET_KEY="k", CORS_ORIGINS=" http://a.test , ,http://b.test", _env_file=None)
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
