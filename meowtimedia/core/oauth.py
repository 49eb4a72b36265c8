"""Google OAuth client (Authlib). Registered only when credentials are configured."""
import logging

from authlib.integrations.starlette_client import OAuth

from meowtimedia.core.config import Settings

logger = logging.getLogger(__name__)

GOOGLE_METADATA_URL = "https://accounts.google.com/.well-known/openid-configuration"

oauth = OAuth()


def get_google_client(settings: Settings):
    """Return the registered Google client, or None if OAuth is not configured."""
    if not settings.google_oauth_enabled:
        return None
    client = oauth.create_client("google")
    if client is None:
        client = oauth.register(
            name="google",
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            server_metadata_url=GOOGLE_METADATA_URL,
            client_kwargs={"scope": "openid email profile"},
        )
        logger.info("Google OAuth registered")
    return client
