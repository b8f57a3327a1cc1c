"""
Interactive OAuth authorization against Flickr.
Walks the user through authorizing the application and saves the resulting token.
"""
from collections import namedtuple

from flickrapi.exceptions import FlickrError

from ..api.client import create_flickr_client
from ..config import config
from ..utils.ui import print_and_log

AUTHORIZED = 'authorized'
CANCELLED = 'cancelled'
REJECTED = 'rejected'

CONFIRM_TITLE = "Flickr Authorization Required"
CONFIRM_MESSAGE = ("Click OK to open Flickr in your browser and authorize access.\n"
                   "Then come back here and enter the authorization code.")
CANCELLED_TITLE = "Cannot Proceed"
CANCELLED_MESSAGE = "Flickr authorization cancelled."
FAILED_TITLE = "Authorization Failed"
FAILED_MESSAGE = "Authorization token was null. Flickr authorization failed."

# flickr is the session the flow ended with; credential is set only when authorized
AuthorizationOutcome = namedtuple('AuthorizationOutcome', 'status flickr credential')


class AuthorizationFlow:
    """Request token, user verification, access token exchange, then persistence."""

    def __init__(self, interaction, token_store, client_factory=create_flickr_client):
        self.interaction = interaction
        self.token_store = token_store
        self.client_factory = client_factory

    def request_authorization_url(self):
        """Get a request token and the URL where the user authorizes it.

        The request token stays inside the returned FlickrAPI session.
        """
        flickr = self.client_factory()
        flickr.get_request_token(oauth_callback=config.OAUTH_CALLBACK)
        authorize_url = flickr.auth_url(perms=config.PERMS)
        return flickr, authorize_url

    def exchange_for_access_token(self, flickr, verifier):
        """Trade the verification code for an access token; None if Flickr gave none."""
        flickr.get_access_token(verifier)
        return flickr.token_cache.token

    def run(self):
        """Run the whole flow and return an AuthorizationOutcome."""
        flickr, authorize_url = self.request_authorization_url()
        print_and_log(f"Authorization URL: {authorize_url}", "DEBUG")

        if not self.interaction.confirm(CONFIRM_TITLE, CONFIRM_MESSAGE):
            return self._cancel(flickr)

        self.interaction.open_url(authorize_url)
        verifier = self.interaction.prompt(
            f"Authorize at \n {authorize_url}\nand then enter the validation code.")
        if not verifier or not verifier.strip():
            raise FlickrError("No verification code entered")

        credential = self.exchange_for_access_token(flickr, verifier.strip())
        if credential is None:
            print_and_log(FAILED_MESSAGE, "ERROR")
            self.interaction.notify(FAILED_TITLE, FAILED_MESSAGE, level="error")
            return AuthorizationOutcome(REJECTED, flickr, None)

        self.token_store.save(credential)
        print_and_log(f"✅ Authorized as {credential.username or credential.user_nsid}, "
                      f"token saved to {self.token_store.path}")
        return AuthorizationOutcome(AUTHORIZED, flickr, credential)

    def _cancel(self, flickr):
        print_and_log(CANCELLED_MESSAGE, "WARNING")
        self.interaction.notify(CANCELLED_TITLE, CANCELLED_MESSAGE, level="info")
        return AuthorizationOutcome(CANCELLED, flickr, None)
