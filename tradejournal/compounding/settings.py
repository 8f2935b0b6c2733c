"""Key-value store for the calculator's strategy settings."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from tradejournal.compounding.config import StrategyConfig

log = logging.getLogger(__name__)


class SettingsStore:
    """
    Persists a :class:`StrategyConfig` to a JSON file.

    Write pattern:
      When the user saves the settings form, the caller passes the new
      config to :meth:`save`.  The file is written atomically (write to
      ``.tmp``, then rename).

    Read pattern:
      At session start the caller uses :meth:`load` to restore the last
      saved config.  Returns ``None`` if nothing was saved yet or the file
      no longer validates, in which case the caller falls back to defaults.
    """

    FILENAME = "settings.json"
    VERSION = 1

    def __init__(self, settings_dir: Path):
        self._dir = settings_dir
        self._path = settings_dir / self.FILENAME
        self._tmp_path = settings_dir / f".{self.FILENAME}.tmp"

    @property
    def path(self) -> Path:
        return self._path

    def save(self, config: StrategyConfig) -> None:
        """Atomically write the current settings."""
        self._dir.mkdir(parents=True, exist_ok=True)

        data: dict[str, Any] = {
            "version": self.VERSION,
            "saved_at": datetime.now(timezone.utc).isoformat(),
            "strategy": config.to_dict(),
        }
        self._tmp_path.write_text(json.dumps(data, indent=2))
        self._tmp_path.replace(self._path)
        log.debug("Strategy settings saved to %s", self._path)

    def load(self) -> StrategyConfig | None:
        """Load the last saved settings, or ``None`` if none are usable."""
        if not self._path.exists():
            return None

        try:
            data = json.loads(self._path.read_text())
            return StrategyConfig.from_raw(data.get("strategy", {}))
        except Exception:
            log.exception("Failed to load strategy settings from %s", self._path)
            return None

    def clear(self) -> None:
        """Remove the saved settings."""
        if self._path.exists():
            self._path.unlink()
            log.info("Strategy settings cleared")
