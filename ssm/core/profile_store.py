import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError
from .models import Profile

logger = logging.getLogger(__name__)

_profiles_adapter = TypeAdapter(List[Profile])


class ProfileStore:
    """
    Reads and writes the ordered list of profiles kept in ``connections.json``.

    Nothing is cached: every call goes back to the file. There is no locking,
    so two processes editing the same file at once can lose an update.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> List[Profile]:
        """
        Returns the stored profiles in order.

        A missing file is created holding an empty list. An empty file (or
        one holding ``null``) reads as no profiles.

        Raises:
            DecodeError: The file is not valid JSON or not a list of profiles.
            OSError: The file cannot be created or read.
        """
        if not self.path.exists():
            logger.info("Creating empty connections file at %s", self.path)
            self.save([])
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except UnicodeDecodeError as exc:
            raise DecodeError(self.path, exc) from exc

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(self.path, exc) from exc

        if data is None:
            return []

        try:
            return _profiles_adapter.validate_python(data)
        except ValidationError as exc:
            raise DecodeError(self.path, exc) from exc

    def save(self, profiles):
        """
        Overwrites the file with the full list of profiles.

        Args:
            profiles (list): Profiles to store, in display order.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [profile.to_json() for profile in profiles]
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.debug("Saved %d connection(s) to %s", len(payload), self.path)
