"""Startup construction of toggle sets.

Applications build their toggles once, at startup, from the file named by
``TOGGLES_FILE`` and treat the result as read-only afterwards:

    TOGGLES = SharedToggles(MyToggle)

    def handler():
        if TOGGLES.get().get_enum(MyToggle.FeatureA):
            ...

``SharedToggles.get`` is safe to call from several threads; the set is built
exactly once. Mutating the shared instance after that is not synchronized.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from enum_toggles.config import ToggleSettings, get_settings
from enum_toggles.toggles import KindLike, ToggleSet

logger = logging.getLogger(__name__)


def build_toggles(kind: KindLike, settings: Optional[ToggleSettings] = None) -> ToggleSet:
    """Create a toggle set and load it from ``TOGGLES_FILE`` when set.

    Raises:
        ToggleFileError: ``TOGGLES_FILE`` is set but cannot be read
    """
    settings = settings or get_settings()
    toggles = ToggleSet(kind)

    path = settings.TOGGLES_FILE.strip()
    if not path:
        logger.warning("TOGGLES_FILE not set, all toggles are off")
        return toggles

    toggles.load_from_file(path)
    return toggles


class SharedToggles:
    """Init-once holder for a process-wide toggle set."""

    def __init__(self, kind: KindLike, settings: Optional[ToggleSettings] = None):
        self.kind = kind
        self.settings = settings
        self._toggles: Optional[ToggleSet] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._toggles is not None

    def get(self) -> ToggleSet:
        """Return the shared set, building it on first use."""
        toggles = self._toggles
        if toggles is not None:
            return toggles

        with self._lock:
            if self._toggles is None:
                self._toggles = build_toggles(self.kind, self.settings)
            return self._toggles

    def reset(self) -> None:
        """Forget the built set; the next ``get`` rebuilds it."""
        with self._lock:
            self._toggles = None


__all__ = ["build_toggles", "SharedToggles"]
