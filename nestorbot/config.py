"""Configuration read from the process environment."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_HOST = "https://v2.asknestor.me"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RelayConfig:
    """Where and how production responses are posted."""

    auth_token: str = ""
    api_host: str = DEFAULT_API_HOST
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "RelayConfig":
        return cls(
            auth_token=os.getenv("__NESTOR_AUTH_TOKEN", ""),
            api_host=os.getenv("__NESTOR_API_HOST") or DEFAULT_API_HOST,
            timeout=float(os.getenv("__NESTOR_RELAY_TIMEOUT", "10")),
        )


@dataclass
class RuntimeConfig:
    team_id: str = ""
    bot_id: str = ""
    debug_mode: bool = False
    scripts_dir: str = "scripts"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Create RuntimeConfig from environment variables."""
        return cls(
            team_id=os.getenv("__NESTOR_TEAM_ID", ""),
            bot_id=os.getenv("__NESTOR_BOT_ID", ""),
            debug_mode=_env_flag("__NESTOR_DEBUG_MODE"),
            scripts_dir=os.getenv("__NESTOR_SCRIPTS_DIR", "scripts"),
            port=int(os.getenv("PORT", "3000")),
        )
