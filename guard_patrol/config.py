"""Configuration dataclasses and YAML loader for the guard patrol simulation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import yaml

from .model.strategy import STRATEGIES


@dataclass
class SearchConfig:
    enabled: bool = True
    workers: int = 1
    chunk_size: int = 16
    timeout: Optional[float] = None  # seconds, None = no limit


@dataclass
class PatrolConfig:
    input_path: Optional[Path] = None
    strategy: str = "simple"
    search: SearchConfig = field(default_factory=SearchConfig)

    # Export flags (can be overridden by CLI)
    csv_enabled: bool = True
    snapshot_enabled: bool = True
    gif_enabled: bool = False
    frame_every: int = 1
    quiet: bool = False
    out_dir: Path = field(default_factory=lambda: Path("./output"))


def _positive_int(value: Any, name: str) -> int:
    """Validate a strictly positive integer setting."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {value!r}")
    return value


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return an optional mapping section; an empty `key:` counts as absent."""
    section = raw.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' must be a mapping, got {type(section).__name__}")
    return section


def _parse_search(search_raw: Dict[str, Any]) -> SearchConfig:
    """Parse search settings from raw YAML data."""
    timeout = search_raw.get('timeout')
    if timeout is not None and (isinstance(timeout, bool)
                                or not isinstance(timeout, (int, float))
                                or timeout <= 0):
        raise ValueError(f"search.timeout must be a positive number, got {timeout!r}")
    return SearchConfig(
        enabled=search_raw.get('enabled', True),
        workers=_positive_int(search_raw.get('workers', 1), 'search.workers'),
        chunk_size=_positive_int(search_raw.get('chunk_size', 16), 'search.chunk_size'),
        timeout=timeout
    )


def load_config(config_path: Path) -> PatrolConfig:
    """Load and validate YAML configuration file."""
    config_path = Path(config_path)
    with open(config_path, encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError("Configuration root must be a mapping")

    strategy = raw.get('strategy', 'simple')
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown step strategy: {strategy}")

    # Input path is resolved relative to the config file
    input_path = None
    if raw.get('input'):
        input_path = Path(raw['input'])
        if not input_path.is_absolute():
            input_path = config_path.parent / input_path

    # Parse export config (optional)
    export_raw = _section(raw, 'export')

    return PatrolConfig(
        input_path=input_path,
        strategy=strategy,
        search=_parse_search(_section(raw, 'search')),
        csv_enabled=export_raw.get('csv', True),
        snapshot_enabled=export_raw.get('snapshot', True),
        gif_enabled=export_raw.get('gif', False),
        frame_every=_positive_int(export_raw.get('frame_every', 1), 'export.frame_every')
    )
