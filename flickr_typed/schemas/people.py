"""
Response schemas, enumerations and options for the flickr.people.* methods.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from .base import BasicResponse, attr, many, nested, text
from .decoders import flickr_time_element, parse_bool, parse_int, timezone_element


class SafetyLevel(IntEnum):
    """safe_search values."""
    NOT_SPECIFIED = 0
    SAFE = 1
    MODERATE = 2
    RESTRICTED = 3


class ContentType(IntEnum):
    """content_type values."""
    NOT_SPECIFIED = 0
    PHOTOS_ONLY = 1
    SCREENSHOTS_ONLY = 2
    OTHER_ONLY = 3
    PHOTOS_AND_SCREENSHOTS = 4
    SCREENSHOTS_AND_OTHER = 5
    PHOTOS_AND_OTHER = 6
    ALL = 7


class PrivacyFilter(IntEnum):
    """privacy_filter values."""
    NOT_SPECIFIED = 0
    PUBLIC = 1
    FRIENDS = 2
    FAMILY = 3
    FRIENDS_AND_FAMILY = 4
    PRIVATE = 5


@dataclass(frozen=True)
class GetPhotosOptions:
    """Optional arguments of flickr.people.getPhotos.

    Dates are MySQL datetimes or unix timestamps, passed through as given.
    Every field left at its default is omitted from the request.
    """
    safe_search: SafetyLevel = SafetyLevel.NOT_SPECIFIED
    min_upload_date: str = ""
    max_upload_date: str = ""
    min_taken_date: str = ""
    max_taken_date: str = ""
    content_type: ContentType = ContentType.NOT_SPECIFIED
    privacy_filter: PrivacyFilter = PrivacyFilter.NOT_SPECIFIED
    extras: Union[str, Sequence[str]] = ""
    per_page: int = 0
    page: int = 0


@dataclass(frozen=True)
class PeoplePhoto:
    id: str = attr("id")
    owner: str = attr("owner")
    secret: str = attr("secret")
    server: str = attr("server")
    farm: str = attr("farm")
    title: str = attr("title")
    is_public: bool = attr("ispublic", parse_bool)
    is_friend: bool = attr("isfriend", parse_bool)
    is_family: bool = attr("isfamily", parse_bool)

    # populated when extras contains "url_o"
    url_o: str = attr("url_o")
    height_o: int = attr("height_o", parse_int)
    width_o: int = attr("width_o", parse_int)

    description: str = text("description")
    license: str = attr("license")
    date_upload: str = attr("dateupload")
    date_taken: str = attr("datetaken")
    owner_name: str = attr("ownername")
    icon_server: str = attr("iconserver")
    icon_farm: str = attr("iconfarm")
    original_format: str = attr("originalformat")
    last_update: str = attr("lastupdate")

    # geo
    latitude: str = attr("latitude")
    longitude: str = attr("longitude")
    accuracy: str = attr("accuracy")
    context: str = attr("context")

    # space-separated lists
    tags: str = attr("tags")
    machine_tags: str = attr("machine_tags")

    # o_dims
    o_width: int = attr("o_width", parse_int)
    o_height: int = attr("o_height", parse_int)

    views: int = attr("views", parse_int)
    media: str = attr("media")
    path_alias: str = attr("pathalias")

    url_sq: str = attr("url_sq")
    height_sq: int = attr("height_sq", parse_int)
    width_sq: int = attr("width_sq", parse_int)

    url_t: str = attr("url_t")
    height_t: int = attr("height_t", parse_int)
    width_t: int = attr("width_t", parse_int)

    url_s: str = attr("url_s")
    height_s: int = attr("height_s", parse_int)
    width_s: int = attr("width_s", parse_int)

    url_m: str = attr("url_m")
    height_m: int = attr("height_m", parse_int)
    width_m: int = attr("width_m", parse_int)

    url_n: str = attr("url_n")
    height_n: int = attr("height_n", parse_int)
    width_n: int = attr("width_n", parse_int)

    url_z: str = attr("url_z")
    height_z: int = attr("height_z", parse_int)
    width_z: int = attr("width_z", parse_int)

    url_c: str = attr("url_c")
    height_c: int = attr("height_c", parse_int)
    width_c: int = attr("width_c", parse_int)

    url_l: str = attr("url_l")
    height_l: int = attr("height_l", parse_int)
    width_l: int = attr("width_l", parse_int)


@dataclass(frozen=True)
class PhotoList:
    page: int = attr("page", parse_int)
    pages: int = attr("pages", parse_int)
    per_page: int = attr("perpage", parse_int)
    total: int = attr("total", parse_int)
    photos: List[PeoplePhoto] = many("photo", PeoplePhoto)


@dataclass(frozen=True)
class PersonPhotos:
    """The <photos> summary inside a person record."""
    first_date: int = text("firstdate", parse_int)
    first_date_taken: Optional[datetime] = nested("firstdatetaken", flickr_time_element)
    count: int = text("count", parse_int)


@dataclass(frozen=True)
class Person:
    id: str = attr("id")
    nsid: str = attr("nsid")
    is_pro: bool = attr("ispro", parse_bool)
    is_deleted: bool = attr("is_deleted", parse_bool)
    icon_server: int = attr("iconserver", parse_int)
    icon_farm: int = attr("iconfarm", parse_int)
    path_alias: str = attr("path_alias")
    has_stats: bool = attr("has_stats", parse_bool)
    pro_badge: str = attr("pro_badge")
    expire: int = attr("expire", parse_int)
    upload_count: int = attr("upload_count", parse_int)
    upload_limit: int = attr("upload_limit", parse_int)
    upload_limit_status: str = attr("upload_limit_status")
    is_cognito_user: bool = attr("is_cognito_user", parse_bool)
    all_rights_reserved_photos_count: int = attr("all_rights_reserved_photos_count", parse_int)
    has_adfree: bool = attr("has_adfree", parse_bool)
    has_free_standard_shipping: bool = attr("has_free_standard_shipping", parse_bool)
    has_free_educational_resources: bool = attr("has_free_educational_resources", parse_bool)

    username: str = text("username")
    realname: str = text("realname")
    mbox_sha1sum: str = text("mbox_sha1sum")
    location: str = text("location")
    timezone: Optional[ZoneInfo] = nested("timezone", timezone_element)
    photos_url: str = text("photosurl")
    profile_url: str = text("profileurl")
    photos: Optional[PersonPhotos] = nested("photos", PersonPhotos)


@dataclass(frozen=True)
class PersonResponse(BasicResponse):
    person: Optional[Person] = nested("person", Person)


@dataclass(frozen=True)
class PhotoListResponse(BasicResponse):
    photos: Optional[PhotoList] = nested("photos", PhotoList)
