"""
Configuration module for the Flickr bindings.
Centralizes credentials, endpoint and logging settings read from the environment.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_REST_URL = "https://api.flickr.com/services/rest/"
VALID_PERMS = ('read', 'write', 'delete')


class Config:
    """Configuration settings for the Flickr bindings."""

    # Application credentials
    @property
    def API_KEY(self):
        return os.getenv("API_KEY")

    @property
    def API_SECRET(self):
        return os.getenv("API_SECRET")

    # User access token, obtained with `flickr-typed auth`
    @property
    def OAUTH_TOKEN(self):
        return os.getenv("OAUTH_TOKEN", "")

    @property
    def OAUTH_TOKEN_SECRET(self):
        return os.getenv("OAUTH_TOKEN_SECRET", "")

    # Endpoint settings
    @property
    def REST_URL(self):
        return os.getenv("FLICKR_REST_URL", DEFAULT_REST_URL)

    @property
    def REQUEST_TIMEOUT(self):
        return float(os.getenv("REQUEST_TIMEOUT", 30))

    # Permission level asked for during authorization
    @property
    def AUTH_PERMS(self):
        return os.getenv("AUTH_PERMS", "read").lower().strip()

    # Directory settings
    @property
    def CACHE_DIR(self):
        return os.getenv("CACHE_DIR", "./cache")

    @property
    def log_file(self):
        return os.path.join(self.CACHE_DIR, "flickr_typed.log")

    @property
    def has_user_token(self):
        """True when both halves of the OAuth access token are present."""
        return bool(self.OAUTH_TOKEN and self.OAUTH_TOKEN_SECRET)

    def validate(self):
        """Validate that required configuration is present."""
        if not self.API_KEY or not self.API_SECRET:
            raise ValueError("API_KEY and API_SECRET must be set in environment variables or .env file")

        try:
            timeout = self.REQUEST_TIMEOUT
        except ValueError:
            raise ValueError("REQUEST_TIMEOUT must be a number")
        if timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")

        if self.AUTH_PERMS not in VALID_PERMS:
            raise ValueError(f"AUTH_PERMS must be one of: {', '.join(VALID_PERMS)}")


# Global configuration instance
config = Config()
