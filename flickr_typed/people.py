"""
Methods of the flickr.people.* family.
"""
from .api.client import fetch
from .api.request import FlickrRequest, HTTPVerb, set_optional, set_page
from .schemas.people import GetPhotosOptions, PersonResponse, PhotoListResponse

DEFAULT_OPTIONS = GetPhotosOptions()


def _photos_params(user_id, options):
    params = {'user_id': user_id}
    set_optional(params, 'safe_search', options.safe_search)
    set_optional(params, 'min_upload_date', options.min_upload_date)
    set_optional(params, 'max_upload_date', options.max_upload_date)
    set_optional(params, 'min_taken_date', options.min_taken_date)
    set_optional(params, 'max_taken_date', options.max_taken_date)
    set_optional(params, 'content_type', options.content_type)
    set_optional(params, 'privacy_filter', options.privacy_filter)
    set_optional(params, 'per_page', options.per_page)
    set_page(params, options.page)
    set_optional(params, 'extras', options.extras)
    return params


def get_info(client, user_id, authenticate=False):
    """Return a person's profile."""
    request = FlickrRequest.read("flickr.people.getInfo", {'user_id': user_id}, authenticate)
    return client.execute(request, PersonResponse)


def get_photos(client, user_id, options=DEFAULT_OPTIONS, authenticate=False):
    """Return one page of a person's photos.

    Non-public photos are only returned to an authenticated caller with
    permission to see them.
    """
    request = FlickrRequest.read(
        "flickr.people.getPhotos", _photos_params(user_id, options), authenticate)
    return client.execute(request, PhotoListResponse)


class PeopleClient:
    """Cancellable people calls over an httpx.AsyncClient."""

    def __init__(self, http_client, builder):
        self.http_client = http_client
        self.builder = builder

    async def get_info(self, user_id, timeout=None):
        request = self.builder.new_request(
            HTTPVerb.GET, "flickr.people.getInfo", {'user_id': user_id}, timeout=timeout)
        response = await fetch(self.http_client, request, PersonResponse)
        return response.ensure_ok().person

    async def get_photos(self, user_id, options=DEFAULT_OPTIONS, timeout=None):
        request = self.builder.new_request(
            HTTPVerb.GET, "flickr.people.getPhotos", _photos_params(user_id, options), timeout=timeout)
        response = await fetch(self.http_client, request, PhotoListResponse)
        return response.ensure_ok().photos
