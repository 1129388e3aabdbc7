"""AurumX - live advisory trading signals for gold."""

__version__ = "0.1.0"

from aurumx import core, data, strategy

__all__ = [
    "__version__",
    "core",
    "data",
    "strategy",
]
