from __future__ import annotations

import argparse
import shutil
import sys
import tempfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import Callable
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from lucide_icons.config import get_download_config

LOG_PREFIX = "[download_icons]"
ARCHIVE_ICONS_FOLDER = "icons"
BAR_WIDTH = 50


def _log(msg: str) -> None:
    print(f"{LOG_PREFIX} {msg}", flush=True)


def progress_bar(current: int, total: int, *, width: int = BAR_WIDTH) -> str:
    percent = (current * 100 // total) if total else 100
    filled = percent * width // 100
    return f"[{'█' * filled}{'░' * (width - filled)}] {percent:3d}% ({current}/{total})"


def _print_progress(current: int, total: int) -> None:
    end = "\n" if current >= total else ""
    print(f"\r   {progress_bar(current, total)}", end=end, flush=True)


def icon_members(zf: zipfile.ZipFile) -> list[zipfile.ZipInfo]:
    """SVG entries directly under `<repo-root>/icons/` in a GitHub branch archive."""
    out: list[zipfile.ZipInfo] = []
    for info in zf.infolist():
        if info.is_dir():
            continue
        parts = PurePosixPath(info.filename).parts
        if len(parts) == 3 and parts[1] == ARCHIVE_ICONS_FOLDER and parts[2].endswith(".svg"):
            out.append(info)
    return sorted(out, key=lambda i: i.filename)


def clear_icons(icons_dir: Path) -> int:
    removed = 0
    for f in icons_dir.glob("*.svg"):
        f.unlink()
        removed += 1
    return removed


def extract_icons(
    archive_path: Path,
    icons_dir: Path,
    *,
    on_progress: Callable[[int, int], None] | None = None,
) -> int:
    """Replace the SVG files in `icons_dir` with the ones from the archive. Returns the number copied."""
    with zipfile.ZipFile(archive_path) as zf:
        members = icon_members(zf)
        if not members:
            raise RuntimeError(f"No {ARCHIVE_ICONS_FOLDER}/*.svg entries found in archive {archive_path}")

        icons_dir.mkdir(parents=True, exist_ok=True)
        clear_icons(icons_dir)

        total = len(members)
        for i, info in enumerate(members, start=1):
            target = icons_dir / PurePosixPath(info.filename).name
            with zf.open(info) as src, target.open("wb") as dst:
                shutil.copyfileobj(src, dst)
            if on_progress:
                on_progress(i, total)
    return total


def fetch_archive(url: str, dest: Path, *, timeout_s: float) -> int:
    req = Request(url, headers={"User-Agent": "lucide-icons-downloader"})
    try:
        with urlopen(req, timeout=timeout_s) as resp, dest.open("wb") as f:  # nosec - fixed upstream archive
            shutil.copyfileobj(resp, f)
    except HTTPError as e:
        raise RuntimeError(f"Archive download failed: HTTP {e.code} {url}") from e
    except URLError as e:
        raise RuntimeError(f"Archive download failed: {e.reason}") from e
    return dest.stat().st_size


def download_icons(url: str, icons_dir: Path, *, timeout_s: float) -> int:
    with tempfile.TemporaryDirectory(prefix="lucide-") as tmp:
        archive = Path(tmp) / "lucide.zip"
        _log(f"Step 1: Downloading {url}")
        size = fetch_archive(url, archive, timeout_s=timeout_s)
        _log(f"Downloaded {size / 1024 / 1024:.1f} MB")

        _log(f"Step 2: Copying icons to {icons_dir}")
        count = extract_icons(archive, icons_dir, on_progress=_print_progress)
        _log("Cleaning up temporary files")
    return count


def main(argv: list[str] | None = None) -> int:
    cfg = get_download_config()
    ap = argparse.ArgumentParser(description="Download the Lucide SVG icons into the icons directory")
    ap.add_argument("--url", default=cfg.archive_url, help="Lucide repository zip archive URL")
    ap.add_argument("--icons-dir", default=str(cfg.icons_dir), help="Destination directory for <icon-name>.svg files")
    ap.add_argument("--timeout", type=float, default=cfg.timeout_s, help="Download timeout in seconds")
    args = ap.parse_args(argv)

    icons_dir = Path(args.icons_dir)
    try:
        count = download_icons(args.url, icons_dir, timeout_s=args.timeout)
    except (RuntimeError, OSError, zipfile.BadZipFile) as e:
        print(f"{LOG_PREFIX} ERROR: {e}", file=sys.stderr, flush=True)
        return 1

    _log(f"Successfully downloaded {count} icons to {icons_dir}/")
    return 0
