from __future__ import annotations

import math
from html import escape
from typing import Any
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, Response
from pydantic import ValidationError

from lucide_icons import icons_generated
from lucide_icons.config import get_assets_root
from lucide_icons.icon import Icon, IconLoadError, IconSize, IconVisualConfig
from lucide_icons.icons_generated import IconName

app = FastAPI(title="Lucide Icons Playground", docs_url="/docs", redoc_url=None)

COLOR_PRESETS = ("#1F4E79", "#e11d48", "#16a34a", "#d97706")
ROTATION_PRESETS = (0, 45, 90, 180, 270)

_UI_CSS = """
:root { --ink:#1f2933; --muted:#6b7280; --line:#e5e7eb; --accent:#1F4E79; }
* { box-sizing:border-box; }
body { margin:0; font-family:system-ui,-apple-system,Segoe UI,Roboto,sans-serif; color:var(--ink); background:#f8fafc; }
.topbar { background:#fff; border-bottom:1px solid var(--line); }
.container { margin:0 auto; padding:16px 20px; }
.brand { display:flex; align-items:center; gap:8px; font-weight:600; }
.brand-dot { width:10px; height:10px; border-radius:50%; background:var(--accent); }
.muted { color:var(--muted); }
.card { background:#fff; border:1px solid var(--line); border-radius:10px; padding:16px 18px; margin-bottom:16px; }
.toolbar { display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
.toolbar input { padding:8px 10px; border:1px solid var(--line); border-radius:8px; min-width:260px; }
.grid { display:grid; grid-template-columns:repeat(auto-fill, minmax(120px, 1fr)); gap:10px; }
.tile { display:flex; flex-direction:column; align-items:center; gap:8px; padding:14px 6px; border:1px solid var(--line); border-radius:8px; background:#fff; color:var(--accent); }
.tile code { font-size:11px; color:var(--muted); word-break:break-all; text-align:center; }
.tile .glyph { display:inline-flex; transition:transform .12s ease; }
.tile:hover .glyph { transform:scale(1.6); }
.presets { display:flex; gap:6px; align-items:center; flex-wrap:wrap; margin-top:10px; font-size:13px; }
.presets .muted { min-width:56px; }
.presets a { padding:3px 8px; border:1px solid var(--line); border-radius:6px; color:var(--ink); text-decoration:none; }
.presets a.active { border-color:var(--accent); color:var(--accent); font-weight:600; }
""".strip()

_FILTER_SCRIPT = """
<script>
  const box = document.getElementById('q');
  box.addEventListener('input', () => {
    const q = box.value.trim().toLowerCase();
    let shown = 0;
    document.querySelectorAll('.tile').forEach((el) => {
      const hit = !q || el.dataset.name.includes(q);
      el.style.display = hit ? '' : 'none';
      if (hit) shown += 1;
    });
    document.getElementById('shown').textContent = shown;
  });
</script>
""".strip()


def _ui_shell(*, title: str, body_html: str, extra_script: str = "", max_width_px: int = 1200) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{escape(title)}</title>
    <style>{_UI_CSS}</style>
  </head>
  <body>
    <header class="topbar">
      <div class="container" style="max-width:{max_width_px}px;">
        <div class="brand"><span class="brand-dot"></span><span>Lucide Icons</span></div>
      </div>
    </header>
    <main>
      <div class="container" style="max-width:{max_width_px}px;">
        {body_html}
      </div>
    </main>
    {extra_script}
  </body>
</html>"""


def _lookup(icon_name: str) -> IconName:
    try:
        return IconName(icon_name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown icon: {icon_name}") from None


def _render(icon: Icon) -> str:
    try:
        return icon.render(get_assets_root())
    except IconLoadError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e


def _visual_config(
    size: str | None,
    color: str | None,
    rotate: float | None,
    *,
    default_size: IconSize | None = None,
) -> IconVisualConfig:
    if rotate is not None and not math.isfinite(rotate):
        raise HTTPException(status_code=400, detail="rotate must be a finite number")
    try:
        return IconVisualConfig(
            size=size or default_size,
            color=color or None,
            rotation=math.radians(rotate) if rotate else None,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid visual config: {e.errors()[0].get('msg', '')}") from e


def _gallery_href(current: dict[str, str], **update: str) -> str:
    params = {k: v for k, v in {**current, **update}.items() if v}
    return f"/?{urlencode(params)}" if params else "/"


def _preset_row(label: str, links: list[tuple[str, str, bool]]) -> str:
    items: list[str] = []
    for text, href, active in links:
        cls = ' class="active"' if active else ""
        items.append(f'<a href="{escape(href)}"{cls}>{escape(text)}</a>')
    return f'<div class="presets"><span class="muted">{escape(label)}</span>{"".join(items)}</div>'


@app.get("/", response_class=HTMLResponse)
def gallery(
    size: str | None = Query(default=None, description="xsmall, small, medium, large or xlarge (default large)"),
    color: str | None = Query(default=None, description="CSS color applied to every icon"),
    rotate: float | None = Query(default=None, description="Rotation in degrees applied to every icon"),
) -> str:
    config = _visual_config(size, color, rotate, default_size=IconSize.LARGE)
    current = {"size": size or "", "color": color or "", "rotate": f"{rotate:g}" if rotate else ""}

    tiles: list[str] = []
    for icon in icons_generated.all():
        svg = _render(Icon(icon, config=config))
        label = escape(icons_generated.name(icon))
        tiles.append(
            f'<div class="tile" data-name="{label}" title="IconName.{icon.name}">'
            f'<span class="glyph">{svg}</span><code>{label}</code></div>'
        )

    active_size = config.size.value if config.size else ""
    size_links = [(s.value, _gallery_href(current, size=s.value), s.value == active_size) for s in IconSize]
    color_links = [("default", _gallery_href(current, color=""), not config.color)]
    color_links += [(c, _gallery_href(current, color=c), c == config.color) for c in COLOR_PRESETS]
    rotate_links = []
    for deg in ROTATION_PRESETS:
        value = str(deg) if deg else ""
        rotate_links.append((f"{deg}°", _gallery_href(current, rotate=value), current["rotate"] == value))

    total = icons_generated.count()
    body_html = f"""
      <div class="card">
        <h1>Icon gallery</h1>
        <div class="toolbar">
          <input id="q" type="search" placeholder="Filter icons…" autocomplete="off" />
          <span class="muted"><span id="shown">{total}</span> of {total} icons</span>
        </div>
        {_preset_row("Size", size_links)}
        {_preset_row("Color", color_links)}
        {_preset_row("Rotate", rotate_links)}
      </div>
      <div class="card">
        <div class="grid">{"".join(tiles)}</div>
      </div>
    """.strip()
    return _ui_shell(title="Lucide Icons Playground", body_html=body_html, extra_script=_FILTER_SCRIPT)


@app.get("/icons")
def list_icons() -> dict[str, Any]:
    rows = [
        {"identifier": icon.name, "name": icons_generated.name(icon), "path": icons_generated.path(icon)}
        for icon in icons_generated.all()
    ]
    return {"count": icons_generated.count(), "icons": rows}


@app.get("/icons/{icon_name}.svg")
def icon_svg(
    icon_name: str,
    size: str | None = Query(default=None, description="xsmall, small, medium, large or xlarge"),
    color: str | None = Query(default=None, description="CSS color, e.g. #1F4E79"),
    rotate: float | None = Query(default=None, description="Rotation in degrees"),
) -> Response:
    icon_id = _lookup(icon_name)
    config = _visual_config(size, color, rotate)
    svg = _render(Icon(icon_id, config=config))
    return Response(content=svg, media_type="image/svg+xml")


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}
