"""
Command line interface for Flickr Recent Photos.
Handles argument parsing.
"""
import argparse


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Authorize with Flickr and list the 10 most recent photos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Authorize with dialogs if needed, then list photos
  %(prog)s --console                    # Authorize through console prompts
  %(prog)s --token-dir ./flickr_token   # Keep the token cache somewhere else
        """
    )

    parser.add_argument(
        '--token-dir', '-t',
        type=str,
        help='Directory of the saved authorization token cache. '
             'Defaults to AUTH_TOKEN_DIR or ~/app_auth_token.'
    )

    parser.add_argument(
        '--console', '-c',
        action='store_true',
        help='Ask for authorization in the terminal instead of dialog boxes.'
    )

    return parser.parse_args(argv)
