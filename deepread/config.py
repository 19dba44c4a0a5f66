import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 6000


def optional_env(name: str) -> str | None:
    # Blank values from CI secrets count as unset.
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def int_env(name: str, default: int) -> int:
    value = optional_env(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    base_url: str = ""
    output_dir: Path = field(default_factory=Path.cwd)
    max_tokens: int = DEFAULT_MAX_TOKENS

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "Settings":
        """
        Reads settings from the environment, after loading a .env file if one exists.
        Variables already set in the environment are not overridden by .env.
        """
        env_file = dotenv_path or Path.cwd() / ".env"
        if env_file.exists():
            load_dotenv(env_file, override=False)

        output_dir = optional_env("DIGEST_OUTPUT_DIR")
        return cls(
            api_key=optional_env("OPENAI_API_KEY"),
            model=optional_env("OPENAI_MODEL") or DEFAULT_MODEL,
            base_url=optional_env("REPO_URL") or "",
            output_dir=Path(output_dir) if output_dir else Path.cwd(),
            max_tokens=int_env("DIGEST_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        )

    def with_overrides(self, **changes) -> "Settings":
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)

    @property
    def daily_dir(self) -> Path:
        return self.output_dir / "daily"

    @property
    def archive_path(self) -> Path:
        return self.output_dir / "archive.json"

    @property
    def feed_path(self) -> Path:
        return self.output_dir / "feed.xml"
