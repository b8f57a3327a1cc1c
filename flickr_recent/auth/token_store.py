"""
Persistence of the Flickr access token between runs.
The token is kept in flickrapi's OAuth token cache; loading reports a result instead of raising.
"""
import os
import sqlite3
from collections import namedtuple

from flickrapi.auth import FlickrAccessToken
from flickrapi.exceptions import CacheDatabaseError
from flickrapi.tokencache import OAuthTokenCache

from ..config import config

# The credential type is flickrapi's own token
Credential = FlickrAccessToken


class NotFound(namedtuple('NotFound', 'path reason')):
    """No usable token: no cache at the path, or no token cached for this API key."""
    __slots__ = ()


class ParseError(namedtuple('ParseError', 'path reason')):
    """Something is at the path but flickrapi cannot read a token from it."""
    __slots__ = ()


class TokenStore:
    """Reads and writes the access token in the token cache directory at `path`."""

    def __init__(self, path, api_key=None):
        self.path = path
        self.api_key = api_key or config.API_KEY

    def _cache(self):
        return OAuthTokenCache(self.api_key, path=self.path)

    def load(self):
        """Return a Credential, or NotFound / ParseError."""
        if not os.path.exists(self.path):
            return NotFound(self.path, "token cache does not exist")
        if not os.path.isdir(self.path):
            return ParseError(self.path, "not a token cache directory")

        try:
            token = self._cache().token
        except (CacheDatabaseError, sqlite3.Error) as e:
            return ParseError(self.path, f"unreadable token cache: {e}")
        except OSError as e:
            return NotFound(self.path, str(e))

        if token is None:
            return NotFound(self.path, "no token cached for this API key")
        return token

    def save(self, credential):
        """Store the credential, replacing any token cached for this API key."""
        self._cache().token = credential
