"""
Command line interface for the Flickr bindings.
Handles argument parsing.
"""
import argparse

from .config import VALID_PERMS


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def build_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="flickr-typed",
        description="Query Flickr photosets and people from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s auth --perms write                 # Authorize and print the access token
  %(prog)s sets --user 12345678@N00           # List a user's public sets
  %(prog)s photos 72157624618609504 --page 2  # Second page of a set
  %(prog)s person 12345678@N00 --auth         # Profile, signed with your token
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    auth = subparsers.add_parser('auth', help='Authorize this application with Flickr')
    auth.add_argument(
        '--perms',
        choices=VALID_PERMS,
        help='Permission level to request (defaults to AUTH_PERMS or "read").'
    )

    sets = subparsers.add_parser('sets', help='List photosets')
    sets.add_argument('--user', '-u', default="", help='Owner NSID. Defaults to the authenticated user.')
    sets.add_argument('--page', '-p', type=positive_int, default=1, help='Page number.')
    sets.add_argument('--auth', action='store_true', help='Sign with your OAuth token.')

    photos = subparsers.add_parser('photos', help='List the photos in a set')
    photos.add_argument('photoset_id', help='Photoset id.')
    photos.add_argument('--user', '-u', default="", help='Owner NSID; speeds up the lookup.')
    photos.add_argument('--page', '-p', type=positive_int, default=1, help='Page number.')
    photos.add_argument('--auth', action='store_true', help='Sign with your OAuth token.')

    person = subparsers.add_parser('person', help='Show a person\'s profile')
    person.add_argument('user_id', help='NSID of the person.')
    person.add_argument('--auth', action='store_true', help='Sign with your OAuth token.')

    return parser


def parse_arguments(argv=None):
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
