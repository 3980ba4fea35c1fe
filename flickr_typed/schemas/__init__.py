"""Schemas package initialization."""

from .base import BasicResponse, ResponseError, decode, decode_response
from .decoders import parse_flickr_time, parse_timezone
from .photosets import (
    Photo, Photoset, PhotosetList, PhotosList,
    PhotosetResponse, PhotosetsListResponse, PhotosListResponse,
)
from .people import (
    ContentType, GetPhotosOptions, PeoplePhoto, Person, PersonPhotos, PersonResponse,
    PhotoList, PhotoListResponse, PrivacyFilter, SafetyLevel,
)

__all__ = [
    'BasicResponse', 'ResponseError', 'decode', 'decode_response',
    'parse_flickr_time', 'parse_timezone',
    'Photo', 'Photoset', 'PhotosetList', 'PhotosList',
    'PhotosetResponse', 'PhotosetsListResponse', 'PhotosListResponse',
    'ContentType', 'GetPhotosOptions', 'PeoplePhoto', 'Person', 'PersonPhotos', 'PersonResponse',
    'PhotoList', 'PhotoListResponse', 'PrivacyFilter', 'SafetyLevel',
]
