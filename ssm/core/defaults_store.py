import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import DecodeError
from .models import Defaults

logger = logging.getLogger(__name__)


class DefaultsStore:
    """
    Reads and writes the single defaults record kept in ``defaults.json``.
    """

    def __init__(self, path, home=None):
        self.path = Path(path)
        self.home = home

    def fallback(self) -> Defaults:
        return Defaults.fallback(self.home)

    def load(self) -> Defaults:
        """
        Returns the stored defaults, seeding the file on first use.

        A missing or empty file is replaced by the fallback record. Fields
        missing from an existing file are not backfilled: they decode to
        their zero value.

        Raises:
            DecodeError: The file is not valid JSON or not a defaults object.
            OSError: The file cannot be created, read or written.
        """
        if not self.path.exists():
            return self._seed()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except UnicodeDecodeError as exc:
            raise DecodeError(self.path, exc) from exc

        if not raw.strip():
            return self._seed()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(self.path, exc) from exc

        if data is None:
            return self._seed()

        try:
            return Defaults.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(self.path, exc) from exc

    def save(self, defaults):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(defaults.to_json(), f, indent=2)

    def _seed(self):
        defaults = self.fallback()
        logger.info("Writing fallback defaults to %s", self.path)
        self.save(defaults)
        return defaults
