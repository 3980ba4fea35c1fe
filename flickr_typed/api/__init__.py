"""API package initialization."""

from .client import FlickrClient, fetch
from .request import FlickrRequest, FlickrRequestBuilder, HTTPVerb, Signing
from .signing import Credentials, Signer

__all__ = [
    'FlickrClient', 'fetch',
    'FlickrRequest', 'FlickrRequestBuilder', 'HTTPVerb', 'Signing',
    'Credentials', 'Signer',
]
