import os
from pathlib import Path
from typing import Dict

ROOT_DIR = Path(__file__).resolve().parents[2]


def load_env(env_path: str | None = None, override: bool = False) -> None:
    """
    Minimal .env loader.
    - env_path: optional path to .env; defaults to repo root/.env
    - override: if True, overwrite existing os.environ values
    """
    path = Path(env_path) if env_path else ROOT_DIR / ".env"
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            key = k.strip()
            val = v.strip().strip('"').strip("'")
            if key and (override or key not in os.environ):
                os.environ[key] = val


# Singleton settings dict
_settings: Dict[str, str] | None = None


def get_settings() -> Dict[str, str]:
    """Return application settings from environment with sane defaults.

    Returns a singleton dict that can be modified at runtime for testing.
    """
    global _settings
    if _settings is None:
        _settings = {
            "POLICY_PATH": os.getenv("POLICY_PATH", str(ROOT_DIR / "docs" / "policy.yaml")),
            "AUDIT_LOG_DIR": os.getenv("AUDIT_LOG_DIR", os.path.join("logs", "audit")),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
            "RATE_LIMIT_DEFAULT": os.getenv("RATE_LIMIT_DEFAULT", "100/minute"),
            "RATE_LIMIT_DASHBOARD": os.getenv("RATE_LIMIT_DASHBOARD", "120/minute"),
            "RATE_LIMIT_STORAGE": os.getenv("RATE_LIMIT_STORAGE", "memory://"),
        }
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
