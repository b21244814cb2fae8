"""In-memory registry of issued, unredeemed codes."""

from __future__ import annotations

import logging
import threading
from typing import Dict

from .models import Code

LOGGER = logging.getLogger(__name__)


class CodeStore:
    """Thread-safe map of code value to the record it was issued with.

    Entries leave the store only through :meth:`redeem`; nothing expires them.
    """

    def __init__(self) -> None:
        self._codes: Dict[str, Code] = {}
        self._lock = threading.Lock()

    def issue(self, code: Code) -> None:
        with self._lock:
            collided = code.value in self._codes
            self._codes[code.value] = code
        if collided:
            LOGGER.warning("Issued code collided with an outstanding code; record replaced")

    def redeem(self, value: str) -> bool:
        # Check and delete must happen under one lock acquisition.
        with self._lock:
            return self._codes.pop(value, None) is not None

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._codes

    def __len__(self) -> int:
        with self._lock:
            return len(self._codes)
