"""
Flickr API client for the recent photos listing.
Builds the flickrapi session and turns the response into photo summaries.
"""
from collections import namedtuple

import flickrapi

from ..config import config


def create_flickr_client(credential=None):
    """Create a FlickrAPI session, signed with the credential when one is given."""
    return flickrapi.FlickrAPI(
        config.API_KEY,
        config.API_SECRET,
        token=credential,
        store_token=False,
        format='parsed-json'
    )


class PhotoSummary(namedtuple('PhotoSummary', 'photo_id title owner date_taken tags')):
    """One entry of a photo listing."""

    __slots__ = ()

    @classmethod
    def from_json(cls, photo):
        tags = photo.get('tags') or ''
        return cls(
            photo_id=photo['id'],
            title=photo.get('title', ''),
            owner=photo.get('owner', ''),
            date_taken=photo.get('datetaken', ''),
            tags=tuple(tags.split())
        )

    @property
    def url(self):
        return config.PHOTO_PAGE_URL.format(owner=self.owner, photo_id=self.photo_id)

    def describe(self):
        """Single console line for the photo."""
        return (f'Id {self.photo_id}: "{self.title}", taken on {self.date_taken} '
                f'with tags [{", ".join(self.tags)}] @ {self.url}')


class RecentPhotosClient:
    """Fetches the most recent public photos."""

    def fetch_recent(self, flickr, page=config.PAGE, per_page=config.PER_PAGE, extras=config.EXTRAS):
        """Fetch one page of recent photos, in the order Flickr returns them."""
        photos_data = flickr.photos.getRecent(
            extras=",".join(extras),
            per_page=per_page,
            page=page
        )['photos']

        return [PhotoSummary.from_json(photo) for photo in photos_data['photo']]
