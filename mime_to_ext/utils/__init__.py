from .lazy import Lazy
from .logs import enable_logs

__all__ = [
    "Lazy",
    "enable_logs",
]
