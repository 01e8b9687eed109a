from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FALLBACK_PORT = 22
FALLBACK_USERNAME = "root"


class _StoredRecord(BaseModel):
    """
    Shared decoding rules for records read back from the JSON files.

    A field holding ``null`` decodes to its zero value. The port is strict:
    ``"22"``, ``22.0`` and ``true`` are rejected rather than coerced.
    """
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_zero(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Profile(_StoredRecord):
    """
    One stored SSH connection target.

    Fields missing from the stored JSON decode to their zero value. The key
    path is serialized as ``ssh_key``.
    """

    name: str = ""
    host: str = ""
    port: int = Field(0, strict=True)
    username: str = ""
    key_path: str = Field("", alias="ssh_key")

    def to_json(self):
        return self.model_dump(by_alias=True)


class Defaults(_StoredRecord):
    """
    Values used to fill in fields left blank when adding a profile.
    """

    port: int = Field(0, strict=True)
    username: str = ""
    key_path: str = Field("", alias="ssh_key")

    @classmethod
    def fallback(cls, home: Optional[Path] = None):
        """
        Built-in values used when no defaults have been stored yet.

        Args:
            home (Path): Home directory holding ``.ssh/id_rsa``. Defaults to
                the current user's home.
        """
        home = Path(home) if home is not None else Path.home()
        return cls(
            port=FALLBACK_PORT,
            username=FALLBACK_USERNAME,
            key_path=str(home / ".ssh" / "id_rsa"),
        )

    def to_json(self):
        return self.model_dump(by_alias=True)


class ProfileInput(BaseModel):
    # Raw text as typed by the user; blanks are resolved against Defaults.
    name: str = ""
    host: str = ""
    port: str = ""
    username: str = ""
    key_path: str = ""


class DefaultsInput(BaseModel):
    port: str = ""
    username: str = ""
    key_path: str = ""
