"""
Main application module.
Dispatches command line subcommands to the API bindings.
"""
import sys

from . import people, photosets
from .api.auth import authorize
from .api.client import FlickrClient
from .cli import parse_arguments
from .config import config
from .errors import FlickrTypedError
from .utils.ui import print_and_log, setup_logging


class FlickrTypedApp:
    """Runs one command line invocation."""

    def __init__(self, client_factory=FlickrClient, authorizer=authorize):
        self.client_factory = client_factory
        self.authorizer = authorizer
        self.client = None

    def run(self, argv=None):
        """Run the command and return the process exit status."""
        args = parse_arguments(argv)
        setup_logging()

        try:
            config.validate()
        except ValueError as e:
            print_and_log(f"❌ ERROR: {e}", "ERROR")
            return 1

        handler = getattr(self, f"_cmd_{args.command}")
        try:
            return handler(args)
        except FlickrTypedError as e:
            print_and_log(f"❌ {type(e).__name__}: {e}", "ERROR")
            return 1

    def _get_client(self):
        if self.client is None:
            self.client = self.client_factory()
        return self.client

    def _check(self, response):
        if not response.ok:
            err = response.error
            detail = f"[err {err.code}] {err.message}" if err else response.stat
            print_and_log(f"❌ Flickr returned an error: {detail}", "ERROR")
            return False
        return True

    def _payload(self, response, field):
        """Return the envelope's `field`, or None after logging a failure."""
        if not self._check(response):
            return None
        payload = getattr(response, field)
        if payload is None:
            print_and_log(f"❌ Flickr response has no <{field}> element", "ERROR")
        return payload

    def _cmd_auth(self, args):
        perms = args.perms or config.AUTH_PERMS
        credentials = self.authorizer(perms=perms)
        print_and_log(f"✅ Authorized with '{perms}' permission. Add these lines to your .env:")
        print(f"OAUTH_TOKEN={credentials.oauth_token}")
        print(f"OAUTH_TOKEN_SECRET={credentials.oauth_token_secret}")
        return 0

    def _cmd_sets(self, args):
        response = photosets.get_list(self._get_client(), args.auth, args.user, args.page)
        listing = self._payload(response, 'photosets')
        if listing is None:
            return 1

        print_and_log(f"📚 Page {listing.page}/{listing.pages}, {listing.total} sets")
        for item in listing.items:
            print_and_log(f"  {item.id}  {item.title} ({item.count_photos} photos, {item.count_videos} videos)")
        return 0

    def _cmd_photos(self, args):
        response = photosets.get_photos(
            self._get_client(), args.auth, args.photoset_id, args.user, args.page)
        listing = self._payload(response, 'photoset')
        if listing is None:
            return 1

        print_and_log(f"📂 {listing.title or listing.id}: page {listing.page}/{listing.pages}, {listing.total} photos")
        for photo in listing.photos:
            marker = "👑" if photo.is_primary else "  "
            print_and_log(f"  {marker} {photo.id}  {photo.title}")
        return 0

    def _cmd_person(self, args):
        response = people.get_info(self._get_client(), args.user_id, args.auth)
        person = self._payload(response, 'person')
        if person is None:
            return 1

        print_and_log(f"👤 {person.username} ({person.nsid})")
        if person.realname:
            print_and_log(f"  Name: {person.realname}")
        if person.location:
            print_and_log(f"  Location: {person.location}")
        if person.timezone is not None:
            print_and_log(f"  Time zone: {person.timezone.key}")
        if person.photos is not None:
            print_and_log(f"  Photos: {person.photos.count}")
            if person.photos.first_date_taken is not None:
                print_and_log(f"  First taken: {person.photos.first_date_taken:%Y-%m-%d %H:%M:%S}")
        if person.profile_url:
            print_and_log(f"  Profile: {person.profile_url}")
        return 0


def main(argv=None):
    sys.exit(FlickrTypedApp().run(argv))


if __name__ == "__main__":
    main()
