"""
Flickr Recent Photos - authorize a Flickr application and list recent photos.

This package shows the OAuth flow with a saved access token and a single
read-only call to the Flickr API.
"""

__version__ = "1.0.0"
__author__ = "Flickr Recent Photos Contributors"

from .config import config
from .main import main

__all__ = ['main', 'config']
