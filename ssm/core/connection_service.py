import logging
import re
from typing import List, Tuple

from .defaults_store import DefaultsStore
from .errors import InvalidInput, OutOfRange
from .launcher import Launcher
from .models import Defaults, DefaultsInput, Profile, ProfileInput
from .paths import connections_path, defaults_path
from .profile_store import ProfileStore

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
# Values a signed 64-bit integer can hold.
INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def parse_int(text):
    """
    Parses a base-10 integer with an optional sign.

    Surrounding whitespace, underscores, non-ASCII digits and values outside
    the signed 64-bit range are rejected.

    Raises:
        InvalidInput: If ``text`` is not an integer.
    """
    if isinstance(text, bool):
        raise InvalidInput(text)
    if isinstance(text, int):
        return text
    if not isinstance(text, str) or not _INT_RE.fullmatch(text):
        raise InvalidInput(text)
    try:
        value = int(text)
    except ValueError as exc:
        raise InvalidInput(text) from exc
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidInput(text)
    return value


class ConnectionService:
    """
    Adds, removes, lists and connects to stored profiles.

    All file access goes through the two stores; each call reloads them.
    """

    def __init__(self, profiles, defaults, launcher=None):
        self.profiles = profiles
        self.defaults = defaults
        self.launcher = launcher or Launcher()

    @classmethod
    def from_config_dir(cls, config_dir, launcher=None):
        return cls(
            ProfileStore(connections_path(config_dir)),
            DefaultsStore(defaults_path(config_dir)),
            launcher=launcher,
        )

    def list(self) -> List[Profile]:
        return self.profiles.load()

    def current_defaults(self) -> Defaults:
        return self.defaults.load()

    def add(self, entry: ProfileInput) -> Profile:
        """
        Stores a new profile, filling blanks from the current defaults.

        The port falls back when its text is not an integer; username and
        key path fall back only when empty. Name and host are kept as typed.
        """
        defaults = self.defaults.load()

        try:
            port = parse_int(entry.port)
        except InvalidInput:
            port = defaults.port

        profile = Profile(
            name=entry.name,
            host=entry.host,
            port=port,
            username=entry.username or defaults.username,
            key_path=entry.key_path or defaults.key_path,
        )

        profiles = self.profiles.load()
        profiles.append(profile)
        self.profiles.save(profiles)
        logger.info("Added connection '%s' (%s)", profile.name, profile.host)
        return profile

    def resolve(self, index) -> Profile:
        """
        Returns the profile at a 1-based position.

        Args:
            index (int | str): Position, or the text the user typed.

        Raises:
            InvalidInput: ``index`` is text that is not an integer.
            OutOfRange: ``index`` is outside ``[1, len]``.
        """
        position = parse_int(index)
        profiles = self.profiles.load()
        return profiles[self._check_bounds(position, profiles)]

    def delete(self, index) -> Profile:
        """
        Removes the profile at a 1-based position and saves the rest in order.

        The file is left untouched when ``index`` is invalid.
        """
        position = parse_int(index)
        profiles = self.profiles.load()
        removed = profiles.pop(self._check_bounds(position, profiles))
        self.profiles.save(profiles)
        logger.info("Deleted connection %d ('%s')", position, removed.name)
        return removed

    def connect(self, index):
        """
        Launches the SSH client for the profile at a 1-based position.

        Returns:
            int: Exit status of the client.
        """
        return self.launcher.launch(self.resolve(index))

    def edit_defaults(self, changes: DefaultsInput) -> Tuple[Defaults, List[str]]:
        """
        Updates the stored defaults with the non-empty fields of ``changes``.

        A port that does not parse keeps the current value and produces a
        warning instead of an error.

        Returns:
            tuple: The saved defaults and a list of warning messages.
        """
        current = self.defaults.load()
        updates = {}
        warnings = []

        if changes.port != "":
            try:
                updates["port"] = parse_int(changes.port)
            except InvalidInput:
                warnings.append("Invalid port number. Keeping current value.")
        if changes.username != "":
            updates["username"] = changes.username
        if changes.key_path != "":
            updates["key_path"] = changes.key_path

        defaults = current.model_copy(update=updates)
        self.defaults.save(defaults)
        return defaults, warnings

    @staticmethod
    def _check_bounds(position, profiles):
        if position < 1 or position > len(profiles):
            raise OutOfRange(position, len(profiles))
        return position - 1
