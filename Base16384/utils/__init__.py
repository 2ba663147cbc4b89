from Base16384.utils.config import CodecConfig, get_config, set_config, ConfigContext
from Base16384.utils.logging import get_logger, Base16384Logger
from Base16384.utils.buffers import as_byte_array, as_symbol_array, as_writable, split_groups

__all__ = [
    "CodecConfig",
    "get_config",
    "set_config",
    "ConfigContext",
    "get_logger",
    "Base16384Logger",
    "as_byte_array",
    "as_symbol_array",
    "as_writable",
    "split_groups",
]
