from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import yaml


@dataclass(frozen=True)
class Settings:
    # Paths
    log_dir: str = "./logs"
    report_dir: str = "./reports"

    # Logging / reports
    log_level: str = "INFO"
    report_items_limit: int = 200


@dataclass(frozen=True)
class LoadedSettings:
    settings: Settings
    sources_used: list[str]


def _read_yaml_config(path: Path) -> dict:
    if not path.exists():
        return {}
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


def _env_get(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def loadSettings(
    config_path: str | None,
    cli_overrides: dict,
) -> LoadedSettings:
    """
    Priority: CLI > ENV > config > defaults
    """
    sources: list[str] = []
    defaults = Settings()

    # 1) config file
    cfg: dict = {}
    if config_path:
        cfg = _read_yaml_config(Path(config_path))
        if cfg:
            sources.append("config")

    # 2) env
    env = {
        "log_dir": _env_get("SUIMU_LOG_DIR"),
        "report_dir": _env_get("SUIMU_REPORT_DIR"),
        "log_level": _env_get("SUIMU_LOG_LEVEL"),
        "report_items_limit": _env_get("SUIMU_REPORT_ITEMS_LIMIT"),
    }
    if any(v is not None for v in env.values()):
        sources.append("env")

    def parse_int(v: str | None) -> int | None:
        if v is None:
            return None
        return int(v)

    # merge config -> env -> cli
    merged = {
        "log_dir": cfg.get("log_dir", defaults.log_dir),
        "report_dir": cfg.get("report_dir", defaults.report_dir),
        "log_level": cfg.get("log_level", defaults.log_level),
        "report_items_limit": cfg.get("report_items_limit", defaults.report_items_limit),
    }

    # apply env
    if env["log_dir"] is not None:
        merged["log_dir"] = env["log_dir"]
    if env["report_dir"] is not None:
        merged["report_dir"] = env["report_dir"]
    if env["log_level"] is not None:
        merged["log_level"] = env["log_level"]
    if env["report_items_limit"] is not None:
        merged["report_items_limit"] = parse_int(env["report_items_limit"])

    # 3) apply CLI overrides (only those explicitly passed)
    if any(v is not None for v in cli_overrides.values()):
        sources.append("cli")

    for k, v in cli_overrides.items():
        if v is None:
            continue
        merged[k] = v

    settings = Settings(
        log_dir=str(merged["log_dir"]),
        report_dir=str(merged["report_dir"]),
        log_level=str(merged["log_level"]),
        report_items_limit=int(merged["report_items_limit"]),
    )

    return LoadedSettings(settings=settings, sources_used=sources)
