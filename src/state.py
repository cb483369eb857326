"""
Seed state: remembers the last seed that was applied so the daily refresh can skip
regenerating the same wallpaper twice in one day.
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)


class SeedStateStore:
    """JSON file {"last_seed": int, "updated_at": iso8601}."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_last_seed(self) -> int | None:
        """Last applied seed, or None when the file is missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read seed state %s: %s; treating as empty", self.path, e)
            return None
        seed = data.get("last_seed") if isinstance(data, dict) else None
        if isinstance(seed, bool) or not isinstance(seed, int):
            return None
        return seed

    def save_last_seed(self, seed: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        record = {
            "last_seed": int(seed),
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(record, f)
        tmp.replace(self.path)
