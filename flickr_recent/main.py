"""
Main application module for Flickr Recent Photos.
Loads or obtains an access token, then lists recent photos.
"""
import sys

from requests.exceptions import RequestException

from .config import config
from .utils.ui import print_and_log, print_exception, setup_logging
from .utils.dialogs import create_interaction
from .api.client import RecentPhotosClient, create_flickr_client
from .auth.flow import AuthorizationFlow, CANCELLED, REJECTED
from .auth.token_store import Credential, TokenStore
from .cli import parse_arguments


class RecentPhotosApp:
    """Main application class: token, authorization, then the recent photos listing."""

    def __init__(self, interaction=None, token_store=None, photos_client=None, client_factory=None):
        self.interaction = interaction
        self.token_store = token_store
        self.photos_client = photos_client or RecentPhotosClient()
        self.client_factory = client_factory or create_flickr_client

    def run(self, argv=None):
        """Run the application and return the process exit code."""
        args = parse_arguments(argv)

        setup_logging()

        try:
            config.validate()
        except ValueError as e:
            print_and_log(f"❌ ERROR: {e}", "ERROR")
            return 1

        if self.token_store is None:
            self.token_store = TokenStore(args.token_dir or config.AUTH_TOKEN_DIR)

        result = self.token_store.load()
        if isinstance(result, Credential):
            print_and_log(f"🔑 Loaded auth token from {self.token_store.path}", "DEBUG")
            flickr = self.client_factory(result)
        else:
            print_and_log("Could not load auth token, requesting authorization...")
            print_and_log(f"Token cache {result.path}: {result.reason}", "DEBUG")

            try:
                # Tk fails here when there is no display
                if self.interaction is None:
                    self.interaction = create_interaction(console=args.console)

                flow = AuthorizationFlow(self.interaction, self.token_store,
                                         client_factory=self.client_factory)
                outcome = flow.run()
            except Exception:
                print_exception("Authorization failed.")
                return 1
            finally:
                if self.interaction is not None:
                    self.interaction.close()

            if outcome.status == CANCELLED:
                return 0
            if outcome.status == REJECTED:
                # Flickr returned no token; the listing still runs, unauthenticated
                print_and_log("⚠️ Continuing without an access token", "WARNING")
            flickr = outcome.flickr

        self._show_recent_photos(flickr)
        return 0

    def _show_recent_photos(self, flickr):
        """Fetch and print the recent photos; failures are reported, not raised."""
        try:
            photos = self.photos_client.fetch_recent(flickr)
        except RequestException as e:
            print_and_log(f"⚠️ Network error: {e}", "ERROR")
            print_exception("Error getting recent photos.")
            return
        except Exception:
            print_exception("Error getting recent photos.")
            return

        print_and_log(f"Fetched {len(photos)} recent photos", "DEBUG")
        print(f"Got {len(photos)} recent photos!")
        for photo in photos:
            print(photo.describe())


def main():
    """Main entry point for the application."""
    app = RecentPhotosApp()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
