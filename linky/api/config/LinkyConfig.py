"""Run-wide linky configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..link.Tag import Tag


class LinkyConfig(BaseModel):
    """Settings shared by every link of a run."""

    model_config = ConfigDict(extra="forbid")

    check: bool = Field(False, description="Fetch targets and resolve fragments")
    follow: bool = Field(False, description="Follow HTTP redirects")
    mute: list[Tag] = Field(default_factory=list, description="Tags to suppress from output")
    prefixes: list[str] = Field(default_factory=list, description="Anchor ID prefixes, tried in order")
    root: str = Field("/", description="Directory root-relative links are joined to")
    timeout: float | None = Field(None, gt=0, description="HTTP timeout in seconds")

    @classmethod
    def get_config_path(cls) -> Path | None:
        """Get path to config file from LINKY_CONFIG, if set."""
        env_path = os.environ.get("LINKY_CONFIG")
        if env_path:
            return Path(env_path).expanduser()
        return None

    @classmethod
    def load(cls, path: Path | str) -> "LinkyConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = Path(path)

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def with_overrides(
        self,
        check: bool = False,
        follow: bool = False,
        mute: list[Tag] | None = None,
        prefixes: list[str] | None = None,
        root: str | None = None,
    ) -> "LinkyConfig":
        """Return a copy with command-line values applied.

        Flags only switch settings on; lists replace the configured ones
        when given.
        """
        updates: dict = {}
        if check:
            updates["check"] = True
        if follow:
            updates["follow"] = True
        if mute:
            updates["mute"] = list(mute)
        if prefixes:
            updates["prefixes"] = list(prefixes)
        if root is not None:
            updates["root"] = root
        return self.model_copy(update=updates)
