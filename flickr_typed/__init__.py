"""
flickr-typed - typed bindings for the Flickr photosets and people APIs.

Builds signed requests, submits them, and decodes the XML responses into
immutable dataclasses.
"""

__version__ = "1.0.0"
__author__ = "flickr-typed Contributors"

from .config import config
from .errors import DecodeError, FlickrAPIError, FlickrTypedError, RequestBuildError, TransportError
from .api import Credentials, FlickrClient, FlickrRequestBuilder
from .people import PeopleClient
from .photosets import PhotosetClient

__all__ = [
    'config',
    'DecodeError', 'FlickrAPIError', 'FlickrTypedError', 'RequestBuildError', 'TransportError',
    'Credentials', 'FlickrClient', 'FlickrRequestBuilder',
    'PeopleClient', 'PhotosetClient',
]
