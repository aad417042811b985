import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from app.core.logging_config import get_logger
from app.core.rules import SORT_RELEVANCE

load_dotenv()

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _default_catalog_path() -> str:
    return str(PROJECT_ROOT / "data" / "recipes.json")


@dataclass(frozen=True)
class MatcherConfig:
    # UX pacing only; the match itself is instant.
    simulated_delay_ms: int = 1500
    catalog_path: str = field(default_factory=_default_catalog_path)
    default_sort: str = SORT_RELEVANCE


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return default
        return parsed if parsed >= 0 else default
    return default


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _config_path() -> Path:
    return PROJECT_ROOT / "config" / "matcher_config.json"


def load_matcher_config(path: Optional[Path] = None) -> MatcherConfig:
    """Load matcher settings from JSON, then apply environment overrides.

    ``SIMULATED_DELAY_MS`` and ``RECIPE_CATALOG_PATH`` take precedence over the
    file. Missing or unreadable files fall back to defaults.
    """
    config_path = path or _config_path()
    data: Dict[str, Any] = {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        data = {}
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid matcher config JSON at {config_path}: {exc}")
        data = {}

    defaults = MatcherConfig()
    simulated_delay_ms = _as_int(data.get("simulated_delay_ms"), defaults.simulated_delay_ms)
    catalog_path = _as_str(data.get("catalog_path"), defaults.catalog_path)

    simulated_delay_ms = _as_int(os.getenv("SIMULATED_DELAY_MS"), simulated_delay_ms)
    catalog_path = _as_str(os.getenv("RECIPE_CATALOG_PATH"), catalog_path)

    if not Path(catalog_path).is_absolute():
        catalog_path = str(PROJECT_ROOT / catalog_path)

    return MatcherConfig(
        simulated_delay_ms=simulated_delay_ms,
        catalog_path=catalog_path,
        default_sort=_as_str(data.get("default_sort"), defaults.default_sort)
    )
