"""
Configuration module for Flickr Recent Photos.
Centralizes all configuration settings and environment variables.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PLACEHOLDER_API_KEY = "YOUR_API_KEY"
PLACEHOLDER_API_SECRET = "YOUR_API_SECRET"


class Config:
    """Configuration settings for the recent photos client."""

    # Flickr API credentials
    API_KEY = os.getenv("API_KEY", PLACEHOLDER_API_KEY)
    API_SECRET = os.getenv("API_SECRET", PLACEHOLDER_API_SECRET)

    # Where the authorization token is saved between runs
    AUTH_TOKEN_DIR = os.getenv(
        "AUTH_TOKEN_DIR", os.path.join(os.path.expanduser("~"), "app_auth_token")
    )

    # Authorization settings
    PERMS = "read"
    OAUTH_CALLBACK = "oob"

    # Recent photos request
    PAGE = 1
    PER_PAGE = 10
    EXTRAS = ("tags", "date_taken")
    PHOTO_PAGE_URL = "https://www.flickr.com/photos/{owner}/{photo_id}"

    # Directory settings
    CACHE_DIR = os.getenv("CACHE_DIR", "./cache")

    @property
    def log_file(self):
        return os.path.join(self.CACHE_DIR, "flickr_recent.log")

    def validate(self):
        """Validate that required configuration is present."""
        if not self.API_KEY or not self.API_SECRET:
            raise ValueError("API_KEY and API_SECRET must be set in environment variables or .env file")

        if self.API_KEY == PLACEHOLDER_API_KEY or self.API_SECRET == PLACEHOLDER_API_SECRET:
            raise ValueError("API_KEY and API_SECRET still hold placeholder values; "
                             "get a key at https://www.flickr.com/services/apps/create/apply/")

# Global configuration instance
config = Config()
