from functools import lru_cache

from app.config import settings
from app.output.channels import ChannelConfig, resolve_channels


@lru_cache
def get_channel_config() -> ChannelConfig:
    """Channels resolved once per process from settings."""
    return resolve_channels(settings)
