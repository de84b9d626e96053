"""Environment variable loading and settings for image-editor.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Recognised variables:
  IMAGE_EDITOR_VERBOSE   1/true/yes/on prints progress lines on stderr
"""

import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    """Runtime settings resolved from the environment."""

    verbose: bool = False
    env_path: Path | None = None  # .env file that was loaded, if any

    @classmethod
    def from_env(cls) -> 'Settings':
        raw = os.environ.get('IMAGE_EDITOR_VERBOSE', '')
        return cls(verbose=raw.strip().lower() in _TRUTHY)

    @classmethod
    def load(cls, env_file: str | None = None) -> 'Settings':
        """Load .env (see load_env), then resolve settings from the environment."""
        env_path = load_env(env_file=env_file)
        settings = cls.from_env()
        settings.env_path = env_path
        return settings


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path
