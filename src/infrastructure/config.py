"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://www.pbinfo.ro"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    """Endpoints and transport options for the pbinfo client."""

    base_url: str = DEFAULT_BASE_URL
    ajax_url: str = DEFAULT_BASE_URL + "/ajx-module"
    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from PBINFO_* environment variables.

        PBINFO_TIMEOUT is in seconds; unset or 0 disables the time-out.
        """
        base_url = os.getenv("PBINFO_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        ajax_url = os.getenv("PBINFO_AJAX_URL", f"{base_url}/ajx-module").rstrip("/")

        raw_timeout = os.getenv("PBINFO_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as e:
            raise ValueError(f"PBINFO_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from e

        return cls(
            base_url=base_url,
            ajax_url=ajax_url,
            timeout=timeout or None,
            user_agent=os.getenv("PBINFO_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
