"""
Upload limits and scoring-client configuration.

The pipeline itself never reads the environment. ScoringConfig.from_env() is
called by the dashboard and handed to scoring.clients.build_client().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Tuple

Backend = Literal["local", "watson", "gpt"]
BACKENDS: Tuple[str, ...] = ("local", "watson", "gpt")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = PROJECT_ROOT / ".env"


@dataclass(frozen=True)
class UploadLimits:
    max_bytes: int = 10 * 1024 * 1024
    allowed_mime_types: Tuple[str, ...] = ("text/csv",)
    allowed_suffix: str = ".csv"


@dataclass(frozen=True)
class ScoringConfig:
    backend: Backend = "local"
    base_url: str = ""
    api_key: str = ""
    timeout_seconds: float = 30.0

    # local simulation
    simulation_delay_seconds: float = 2.0
    simulation_seed: Optional[int] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = ENV_PATH) -> "ScoringConfig":
        """
        Build a config from RISK_* / GPT_* environment variables, loading
        `.env` from the project root first when present.

        RISK_BACKEND selects local | watson | gpt (default local). The gpt
        backend reads GPT_API_BASE_URL / GPT_API_KEY, the others
        RISK_API_BASE_URL / RISK_API_KEY.
        """
        if env_path is not None:
            from dotenv import load_dotenv
            load_dotenv(env_path)

        backend = (os.getenv("RISK_BACKEND") or "local").strip().lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown RISK_BACKEND {backend!r}; expected one of {BACKENDS}.")

        if backend == "gpt":
            base_url = os.getenv("GPT_API_BASE_URL", "")
            api_key = os.getenv("GPT_API_KEY", "")
        else:
            base_url = os.getenv("RISK_API_BASE_URL", "")
            api_key = os.getenv("RISK_API_KEY", "")

        seed_raw = (os.getenv("RISK_SIMULATION_SEED") or "").strip()
        return cls(
            backend=backend,  # type: ignore[arg-type]
            base_url=base_url.strip().rstrip("/"),
            api_key=api_key.strip(),
            timeout_seconds=float(os.getenv("RISK_TIMEOUT_SECONDS", "30")),
            simulation_delay_seconds=float(os.getenv("RISK_SIMULATION_DELAY", "2")),
            simulation_seed=int(seed_raw) if seed_raw else None,
        )
