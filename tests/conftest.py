"""Test configuration for pytest."""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flickr_recent.config import config
from flickr_recent.utils import ui
from flickr_recent.utils.dialogs import UserInteraction
from flickrapi.auth import FlickrAccessToken
from flickrapi.tokencache import OAuthTokenCache


class FakeInteraction(UserInteraction):
    """Scripted stand-in for the dialogs."""

    def __init__(self, confirm=True, verifier="123-456-789"):
        self.confirm_answer = confirm
        self.verifier = verifier
        self.confirmations = []
        self.prompts = []
        self.notifications = []
        self.opened_urls = []
        self.closed = False

    def confirm(self, title, message):
        self.confirmations.append((title, message))
        return self.confirm_answer

    def prompt(self, message):
        self.prompts.append(message)
        return self.verifier

    def notify(self, title, message, level="info"):
        self.notifications.append((title, message, level))

    def open_url(self, url):
        self.opened_urls.append(url)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep logs and tokens inside the test's temporary directory."""
    monkeypatch.setattr(config, "CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setattr(config, "API_KEY", "test_api_key")
    monkeypatch.setattr(config, "API_SECRET", "test_api_secret")
    monkeypatch.setattr(config, "AUTH_TOKEN_DIR", str(tmp_path / "app_auth_token"))
    monkeypatch.setattr(ui, "_logger", None)
    # flickrapi remembers saved tokens per API key for the whole process
    monkeypatch.setattr(OAuthTokenCache, "RAM_CACHE", {})
    yield
    logger = logging.getLogger(ui.__name__)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def token_path(tmp_path):
    return tmp_path / "app_auth_token"


@pytest.fixture
def sample_credential():
    return FlickrAccessToken(
        token="72157720000000000-abcdef0123456789",
        token_secret="0123456789abcdef",
        access_level="read",
        fullname="Test User",
        username="testuser",
        user_nsid="12345678@N00"
    )


@pytest.fixture
def fake_interaction():
    return FakeInteraction()


@pytest.fixture
def recent_photos_response():
    """A parsed-json flickr.photos.getRecent response with three photos."""
    return {
        "photos": {
            "page": 1,
            "pages": 100,
            "perpage": 10,
            "total": 1000,
            "photo": [
                {
                    "id": "53012345678", "owner": "98765432@N02", "secret": "a1b2c3d4e5",
                    "server": "65535", "farm": 66, "title": "Sunset over the bay",
                    "ispublic": 1, "isfriend": 0, "isfamily": 0,
                    "datetaken": "2026-10-17 18:22:01", "datetakengranularity": 0,
                    "datetakenunknown": "0", "tags": "sunset bay clouds"
                },
                {
                    "id": "53012345679", "owner": "11111111@N05", "secret": "f6e5d4c3b2",
                    "server": "65535", "farm": 66, "title": "",
                    "ispublic": 1, "isfriend": 0, "isfamily": 0,
                    "datetaken": "2026-10-18 07:01:44", "datetakengranularity": 0,
                    "datetakenunknown": "1", "tags": ""
                },
                {
                    "id": "53012345680", "owner": "22222222@N01", "secret": "0a9b8c7d6e",
                    "server": "65535", "farm": 66, "title": "Cat \"Milo\" asleep",
                    "ispublic": 1, "isfriend": 0, "isfamily": 0,
                    "datetaken": "2026-10-16 12:00:00", "datetakengranularity": 0,
                    "datetakenunknown": "0", "tags": "cat"
                },
            ]
        },
        "stat": "ok"
    }


@pytest.fixture
def make_interaction():
    """Factory for interactions with specific answers."""
    return FakeInteraction


def _token_fields(token):
    return (token.token, token.token_secret, token.access_level,
            token.fullname, token.username, token.user_nsid)


@pytest.fixture
def token_fields():
    """Compare flickrapi tokens by value."""
    return _token_fields
