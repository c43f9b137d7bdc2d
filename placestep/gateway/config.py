from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class GatewayConfig:
    base_url: str = os.getenv("PLACESTEP_API_URL", "http://localhost:8080")
    list_path: str = "/api/getList"
    search_path: str = "/api/llm-recommend"
    timeout: float = 10.0


DEFAULT_GATEWAY_CONFIG = GatewayConfig()
