# Purpose: Environment-driven paths and URLs shared by the generator, downloader and icon component.
# Notes: LUCIDE_ICONS_DIR, LUCIDE_ICONS_OUT, LUCIDE_ICONS_PATH_PREFIX, LUCIDE_ASSETS_ROOT,
#        LUCIDE_ARCHIVE_URL and LUCIDE_DOWNLOAD_TIMEOUT_S are all optional.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent

DEFAULT_ARCHIVE_URL = "https://github.com/lucide-icons/lucide/archive/refs/heads/main.zip"


@dataclass(frozen=True)
class CodegenConfig:
    icons_dir: Path
    out_path: Path
    path_prefix: str


@dataclass(frozen=True)
class DownloadConfig:
    archive_url: str
    icons_dir: Path
    timeout_s: float


def _env_path(name: str, default: Path) -> Path:
    raw = os.environ.get(name, "").strip()
    return Path(raw) if raw else default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got '{raw}'") from None


def get_codegen_config() -> CodegenConfig:
    prefix = os.environ.get("LUCIDE_ICONS_PATH_PREFIX")
    return CodegenConfig(
        icons_dir=_env_path("LUCIDE_ICONS_DIR", PROJECT_ROOT / "icons"),
        out_path=_env_path("LUCIDE_ICONS_OUT", PACKAGE_DIR / "icons_generated.py"),
        path_prefix="icons" if prefix is None else prefix.strip(),
    )


def get_download_config() -> DownloadConfig:
    return DownloadConfig(
        archive_url=os.environ.get("LUCIDE_ARCHIVE_URL", "").strip() or DEFAULT_ARCHIVE_URL,
        icons_dir=_env_path("LUCIDE_ICONS_DIR", PROJECT_ROOT / "icons"),
        timeout_s=_env_float("LUCIDE_DOWNLOAD_TIMEOUT_S", 120.0),
    )


def get_assets_root() -> Path:
    return _env_path("LUCIDE_ASSETS_ROOT", PROJECT_ROOT)
