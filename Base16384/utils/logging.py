import logging
import sys
from typing import Optional

class Base16384Logger:
    def __init__(self, name: str = "Base16384", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        
        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def info(self, msg: str) -> None:
        self.logger.info(msg)
    
    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
    
    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
    
    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def transform(
        self,
        operation: str,
        in_len: int,
        out_len: int,
        **kwargs,
    ) -> None:
        if not self.is_debug():
            return
        msg = f"{operation} | in: {in_len} | out: {out_len}"
        for k, v in kwargs.items():
            msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[Base16384Logger] = None

def get_logger() -> Base16384Logger:
    global _logger
    if _logger is None:
        _logger = Base16384Logger()
    return _logger
