"""
Codec configuration for Base16384.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional
from contextlib import contextmanager

from Base16384.utils.logging import get_logger


@dataclass(frozen=True)
class CodecConfig:
    """
    Tuning knobs for the codec.

    None of these settings change the encoded or decoded output.
    """

    # 7-byte groups packed per numpy pass; bounds temporary memory
    batch_groups: int = 1 << 16
    log_level: int = logging.WARNING

    def __post_init__(self):
        if self.batch_groups <= 0:
            raise ValueError(f"batch_groups must be positive, got {self.batch_groups}")

    def with_options(self, **changes) -> "CodecConfig":
        """Gets a copy of the config with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }


_config: Optional[CodecConfig] = None

def get_config() -> CodecConfig:
    global _config

    if _config is None:
        _config = CodecConfig()
        get_logger().set_level(_config.log_level)
    
    return _config

def set_config(config: CodecConfig) -> None:
    global _config
    _config = config
    get_logger().set_level(config.log_level)

@contextmanager
def ConfigContext(config: CodecConfig):
    previous_config = get_config()
    set_config(config)
    try:
        yield config
    finally:
        set_config(previous_config)
