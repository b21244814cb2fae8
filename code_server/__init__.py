"""One-time code server package exposing the Flask app factory."""

from .app import create_app
from .config import ServerSettings
from .generator import ALPHABET, CODE_LENGTH, RandomSourceError, generate
from .models import Code
from .store import CodeStore

__all__ = [
    "create_app",
    "ServerSettings",
    "ALPHABET",
    "CODE_LENGTH",
    "RandomSourceError",
    "generate",
    "Code",
    "CodeStore",
]
