from __future__ import annotations

import argparse
import sys
from pathlib import Path

from lucide_icons.config import get_codegen_config

from .errors import IconGenerationError
from .generator import generate, is_up_to_date

LOG_PREFIX = "[gen_icon_names]"


def main(argv: list[str] | None = None) -> int:
    cfg = get_codegen_config()
    ap = argparse.ArgumentParser(description="Generate the IconName enum module from a directory of SVG icons")
    ap.add_argument("--icons-dir", default=str(cfg.icons_dir), help="Directory containing <icon-name>.svg files")
    ap.add_argument("--out", default=str(cfg.out_path), help="Output Python module path")
    ap.add_argument(
        "--path-prefix",
        default=cfg.path_prefix,
        help="Prefix joined to each file name to form the asset path (default: icons)",
    )
    ap.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the output module is missing or stale",
    )
    args = ap.parse_args(argv)

    icons_dir = Path(args.icons_dir)
    out_path = Path(args.out)

    try:
        if args.check:
            if is_up_to_date(icons_dir, out_path, path_prefix=args.path_prefix):
                print(f"{LOG_PREFIX} {out_path} is up to date", flush=True)
                return 0
            print(f"{LOG_PREFIX} {out_path} is stale; rerun without --check", file=sys.stderr, flush=True)
            return 1

        enumeration = generate(icons_dir, out_path, path_prefix=args.path_prefix)
    except IconGenerationError as e:
        raise SystemExit(f"{LOG_PREFIX} ERROR: {e}") from e

    print(f"{LOG_PREFIX} Wrote {out_path} ({enumeration.count()} icons from {icons_dir})", flush=True)
    return 0
