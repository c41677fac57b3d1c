from ratepoll.config.settings import (
    LoggingSettings,
    RedisSettings,
    Settings,
    StateSettings,
    TransportSettings,
    load_settings,
)

__all__ = [
    'Settings',
    'TransportSettings',
    'LoggingSettings',
    'StateSettings',
    'RedisSettings',
    'load_settings',
]
