#!/usr/bin/env python3
"""
Entry point for Flickr Recent Photos.
"""

from flickr_recent.main import main

if __name__ == "__main__":
    main()
