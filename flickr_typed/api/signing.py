"""
Request signing for the Flickr REST API.
API-key access adds the application key; user access signs with OAuth 1.0a via oauthlib.
"""
import logging
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit

from oauthlib.oauth1 import Client as OAuthClient, SIGNATURE_TYPE_QUERY

from ..config import config
from ..errors import RequestBuildError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Application key/secret plus an optional user access token."""
    api_key: str
    api_secret: str
    oauth_token: str = ""
    oauth_token_secret: str = ""

    @classmethod
    def from_config(cls, cfg=None):
        cfg = cfg or config
        return cls(
            api_key=cfg.API_KEY or "",
            api_secret=cfg.API_SECRET or "",
            oauth_token=cfg.OAUTH_TOKEN,
            oauth_token_secret=cfg.OAUTH_TOKEN_SECRET,
        )

    @property
    def has_user_token(self):
        return bool(self.oauth_token and self.oauth_token_secret)

    def __repr__(self):
        # never leak secrets into logs or tracebacks
        return f"Credentials(api_key={self.api_key!r}, has_user_token={self.has_user_token})"


class Signer:
    """Signs parameter maps; every call returns a new map and leaves its input untouched."""

    def __init__(self, credentials):
        self.credentials = credentials

    def api_sign(self, params):
        """Sign for anonymous, API-key access."""
        if not self.credentials.api_key:
            raise RequestBuildError("api_key is required to sign a request")
        signed = dict(params)
        signed['api_key'] = self.credentials.api_key
        return signed

    def oauth_sign(self, verb, url, params):
        """Sign with the user's OAuth access token.

        The signature covers the HTTP verb, the endpoint and every parameter,
        so the returned map may be sent in the query string or in a
        form-encoded body.
        """
        creds = self.credentials
        if not creds.api_key or not creds.api_secret:
            raise RequestBuildError("api_key and api_secret are required for OAuth signing")
        if not creds.has_user_token:
            raise RequestBuildError("an OAuth access token is required; run `flickr-typed auth` first")

        client = OAuthClient(
            creds.api_key,
            client_secret=creds.api_secret,
            resource_owner_key=creds.oauth_token,
            resource_owner_secret=creds.oauth_token_secret,
            signature_type=SIGNATURE_TYPE_QUERY,
        )
        unsigned = f"{url}?{urlencode(params)}" if params else url
        try:
            signed_uri, _, _ = client.sign(unsigned, http_method=verb)
        except ValueError as e:
            raise RequestBuildError(f"oauth sign: {e}") from e

        log.debug("OAuth signed %s %s", verb, params.get('method', ''))
        return dict(parse_qsl(urlsplit(signed_uri).query, keep_blank_values=True))
