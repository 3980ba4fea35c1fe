"""
OAuth authorization flow.
Uses flickrapi to obtain (or reuse its cached) user access token.
"""
import flickrapi
from flickrapi.exceptions import FlickrError
from requests.exceptions import RequestException

from ..config import config
from ..errors import RequestBuildError
from .signing import Credentials


def authorize(perms="read", api=None, prompt=input, announce=print):
    """Authorize this application for `perms` and return the resulting Credentials.

    flickrapi keeps the token in its own cache (~/.flickr), so the browser
    step only happens the first time or when more permissions are needed.
    """
    if not config.API_KEY or not config.API_SECRET:
        raise RequestBuildError("API_KEY and API_SECRET must be set to authorize")

    flickr = api or flickrapi.FlickrAPI(config.API_KEY, config.API_SECRET, format='etree')

    try:
        if not flickr.token_valid(perms=perms):
            flickr.get_request_token(oauth_callback='oob')
            authorize_url = flickr.auth_url(perms=perms)
            announce(f"Open this URL to authorize: {authorize_url}")
            verifier = prompt("Enter the verification code: ").strip()
            flickr.get_access_token(verifier)
    except (FlickrError, RequestException) as e:
        raise RequestBuildError(f"authorize: {e}") from e

    token = flickr.token_cache.token
    if token is None:
        raise RequestBuildError("flickrapi did not return an access token")

    return Credentials(
        api_key=config.API_KEY,
        api_secret=config.API_SECRET,
        oauth_token=token.token,
        oauth_token_secret=token.token_secret,
    )
