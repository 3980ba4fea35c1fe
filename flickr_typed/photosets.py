"""
Methods of the flickr.photosets.* family.

Every function takes a client first (anything with
`execute(request, response_type)`, normally a FlickrClient) and returns the
decoded response envelope. Mutating methods require a user token with
'write' permission.
"""
from .api.client import fetch
from .api.request import FlickrRequest, HTTPVerb, join_ids, set_optional, set_page
from .schemas.base import BasicResponse
from .schemas.photosets import PhotosetResponse, PhotosetsListResponse, PhotosListResponse

PHOTOS_PER_PAGE = 50


def get_list(client, authenticate=False, user_id="", page=0):
    """Return the sets belonging to `user_id`.

    Without `user_id` Flickr answers for the calling user, which needs an
    authenticated call. Private sets are only listed when authenticated.
    """
    params = set_optional({}, 'user_id', user_id)
    set_page(params, page)
    request = FlickrRequest.read("flickr.photosets.getList", params, authenticate)
    return client.execute(request, PhotosetsListResponse)


def add_photo(client, photoset_id, photo_id):
    """Add a photo to a set."""
    request = FlickrRequest.write("flickr.photosets.addPhoto", {
        'photoset_id': photoset_id,
        'photo_id': photo_id,
    })
    return client.execute(request, BasicResponse)


def create(client, title, description, primary_photo_id):
    """Create a set with `primary_photo_id` as its primary photo."""
    request = FlickrRequest.write("flickr.photosets.create", {
        'title': title,
        'description': description,
        'primary_photo_id': primary_photo_id,
    })
    return client.execute(request, PhotosetResponse)


def delete(client, photoset_id):
    request = FlickrRequest.write("flickr.photosets.delete", {'photoset_id': photoset_id})
    return client.execute(request, BasicResponse)


def remove_photo(client, photoset_id, photo_id):
    request = FlickrRequest.write("flickr.photosets.removePhoto", {
        'photoset_id': photoset_id,
        'photo_id': photo_id,
    })
    return client.execute(request, BasicResponse)


def _photos_params(photoset_id, owner_id, page):
    params = {'photoset_id': photoset_id}
    # optional, but makes the query faster
    set_optional(params, 'user_id', owner_id)
    set_page(params, page)
    params['per_page'] = str(PHOTOS_PER_PAGE)
    return params


def get_photos(client, authenticate, photoset_id, owner_id="", page=0):
    """Return one page (50 photos) of a set. Private sets need `authenticate`."""
    request = FlickrRequest.read(
        "flickr.photosets.getPhotos", _photos_params(photoset_id, owner_id, page), authenticate)
    return client.execute(request, PhotosListResponse)


def edit_meta(client, photoset_id, title, description=""):
    """Change a set's title and, when given, its description."""
    params = {'photoset_id': photoset_id, 'title': title}
    set_optional(params, 'description', description)
    request = FlickrRequest.write("flickr.photosets.editMeta", params)
    return client.execute(request, BasicResponse)


def edit_photos(client, photoset_id, primary_id, photo_ids):
    """Replace the photos of a set; use it to add, remove and re-order photos.

    `photo_ids` is the complete new content, in order, and must include
    `primary_id`.
    """
    request = FlickrRequest.write("flickr.photosets.editPhotos", {
        'photoset_id': photoset_id,
        'primary_photo_id': primary_id,
        'photo_ids': join_ids(photo_ids),
    })
    return client.execute(request, BasicResponse)


reorder_photos = edit_photos


def _info_params(photoset_id, owner_id):
    params = {'photoset_id': photoset_id}
    set_optional(params, 'user_id', owner_id)
    return params


def get_info(client, authenticate, photoset_id, owner_id=""):
    """Return a set's metadata. Private sets need `authenticate`."""
    request = FlickrRequest.read(
        "flickr.photosets.getInfo", _info_params(photoset_id, owner_id), authenticate)
    return client.execute(request, PhotosetResponse)


def order_sets(client, photoset_ids):
    """Set the order of the calling user's sets.

    Sets missing from `photoset_ids` go to the end, ordered by id.
    """
    request = FlickrRequest.write("flickr.photosets.orderSets", {
        'photoset_ids': join_ids(photoset_ids),
    })
    return client.execute(request, BasicResponse)


def remove_photos(client, photoset_id, photo_ids):
    request = FlickrRequest.write("flickr.photosets.removePhotos", {
        'photoset_id': photoset_id,
        'photo_ids': join_ids(photo_ids),
    })
    return client.execute(request, BasicResponse)


def set_primary_photo(client, photoset_id, primary_id):
    request = FlickrRequest.write("flickr.photosets.setPrimaryPhoto", {
        'photoset_id': photoset_id,
        'photo_id': primary_id,
    })
    return client.execute(request, BasicResponse)


class PhotosetClient:
    """Cancellable photoset calls over an httpx.AsyncClient.

    Each method returns the payload alone, so a stat="fail" envelope is
    raised as FlickrAPIError.
    """

    def __init__(self, http_client, builder):
        self.http_client = http_client
        self.builder = builder

    async def get_info(self, photoset_id, user_id, timeout=None):
        request = self.builder.new_request(
            HTTPVerb.GET, "flickr.photosets.getInfo",
            _info_params(photoset_id, user_id), timeout=timeout)
        response = await fetch(self.http_client, request, PhotosetResponse)
        return response.ensure_ok().photoset

    async def get_photos(self, photoset_id, user_id, page=0, timeout=None):
        request = self.builder.new_request(
            HTTPVerb.GET, "flickr.photosets.getPhotos",
            _photos_params(photoset_id, user_id, page), timeout=timeout)
        response = await fetch(self.http_client, request, PhotosListResponse)
        return response.ensure_ok().photoset
