"""
Response schemas for the flickr.photosets.* methods.
"""
from dataclasses import dataclass
from typing import List, Optional

from .base import BasicResponse, attr, many, nested, text
from .decoders import parse_bool, parse_int


@dataclass(frozen=True)
class Photoset:
    id: str = attr("id")
    owner: str = attr("owner")
    username: str = attr("username")
    primary: str = attr("primary")
    secret: str = attr("secret")
    server: str = attr("server")
    farm: str = attr("farm")
    count_views: int = attr("count_views", parse_int)
    count_comments: int = attr("count_comments", parse_int)
    count_photos: int = attr("count_photos", parse_int)
    count_videos: int = attr("count_videos", parse_int)
    can_comment: bool = attr("can_comment", parse_bool)
    date_create: int = attr("date_create", parse_int)
    date_update: int = attr("date_update", parse_int)
    photos: int = attr("photos", parse_int)
    visibility_can_see_set: bool = attr("visibility_can_see_set", parse_bool)
    needs_interstitial: bool = attr("needs_interstitial", parse_bool)
    title: str = text("title")
    description: str = text("description")


@dataclass(frozen=True)
class Photo:
    """A photo as listed by flickr.photosets.getPhotos."""
    id: str = attr("id")
    title: str = attr("title")
    secret: str = attr("secret")
    server: str = attr("server")
    farm: str = attr("farm")
    is_primary: bool = attr("isprimary", parse_bool)
    is_public: bool = attr("ispublic", parse_bool)
    is_friend: bool = attr("isfriend", parse_bool)
    is_family: bool = attr("isfamily", parse_bool)


@dataclass(frozen=True)
class PhotosetList:
    page: int = attr("page", parse_int)
    pages: int = attr("pages", parse_int)
    per_page: int = attr("perpage", parse_int)
    total: int = attr("total", parse_int)
    items: List[Photoset] = many("photoset", Photoset)


@dataclass(frozen=True)
class PhotosList:
    """One page of the photos in a set, with the set's own metadata."""
    id: str = attr("id")
    primary: str = attr("primary")
    owner: str = attr("owner")
    owner_name: str = attr("ownername")
    title: str = attr("title")
    page: int = attr("page", parse_int)
    pages: int = attr("pages", parse_int)
    per_page: int = attr("perpage", parse_int)
    total: int = attr("total", parse_int)
    photos: List[Photo] = many("photo", Photo)


@dataclass(frozen=True)
class PhotosetsListResponse(BasicResponse):
    photosets: Optional[PhotosetList] = nested("photosets", PhotosetList)


@dataclass(frozen=True)
class PhotosetResponse(BasicResponse):
    photoset: Optional[Photoset] = nested("photoset", Photoset)


@dataclass(frozen=True)
class PhotosListResponse(BasicResponse):
    photoset: Optional[PhotosList] = nested("photoset", PhotosList)
