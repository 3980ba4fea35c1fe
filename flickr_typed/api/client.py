"""
Flickr API client.
Signs requests, sends them and decodes the XML responses into typed records.
"""
import logging

import httpx
import requests
from requests.exceptions import RequestException

from ..config import config
from ..errors import DecodeError, RequestBuildError, TransportError
from ..schemas.base import decode_response
from .request import HTTPVerb, Signing
from .signing import Credentials, Signer

log = logging.getLogger(__name__)


class FlickrClient:
    """Synchronous client: one signed request and one decoded response per call.

    Holds no per-call state; the session and credentials are only read.
    Nothing is retried and the envelope's stat is left for the caller to check.
    """

    def __init__(self, credentials=None, session=None, rest_url=None, timeout=None):
        self.credentials = credentials or Credentials.from_config()
        self.signer = Signer(self.credentials)
        self.session = session or requests.Session()
        self.rest_url = rest_url or config.REST_URL
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def sign(self, request):
        """Return the signed wire parameters for `request`."""
        wire = request.wire_params()
        if request.signing is Signing.OAUTH:
            return self.signer.oauth_sign(request.verb.value, self.rest_url, wire)
        return self.signer.api_sign(wire)

    def prepare(self, request):
        """Build the signed requests.PreparedRequest for `request`."""
        signed = self.sign(request)
        try:
            if request.verb is HTTPVerb.POST:
                raw = requests.Request('POST', self.rest_url, data=signed)
            else:
                raw = requests.Request('GET', self.rest_url, params=signed)
            return self.session.prepare_request(raw)
        except (RequestException, ValueError) as e:
            raise RequestBuildError(f"build {request.method}: {e}") from e

    def execute(self, request, response_type):
        """Send `request` and decode the body into `response_type`."""
        prepared = self.prepare(request)
        log.debug("Calling %s (%s, %s)", request.method, request.verb.value, request.signing.value)

        try:
            response = self.session.send(prepared, timeout=self.timeout)
        except RequestException as e:
            raise TransportError(f"http {request.verb.value}: {e}") from e

        try:
            try:
                response.raise_for_status()
            except RequestException as e:
                raise TransportError(f"http {request.verb.value}: {e}") from e
            try:
                return decode_response(response_type, response.content)
            except DecodeError as e:
                raise DecodeError(f"parse api response: {e}") from e
        finally:
            response.close()


async def fetch(http_client, request, response_type):
    """Send an httpx request and decode the body into `response_type`.

    Cancelling the awaiting task aborts the in-flight request. The response
    is closed on every exit path.
    """
    # requests built outside the client do not pick up its default timeout
    request.extensions.setdefault('timeout', http_client.timeout.as_dict())
    try:
        response = await http_client.send(request, stream=True)
    except httpx.HTTPError as e:
        raise TransportError(f"http {request.method}: {e}") from e

    try:
        try:
            body = await response.aread()
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"http {request.method}: {e}") from e
        try:
            return decode_response(response_type, body)
        except DecodeError as e:
            raise DecodeError(f"parse api response: {e}") from e
    finally:
        await response.aclose()
