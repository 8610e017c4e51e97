from __future__ import annotations

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from lucide_icons import Icon, IconLoadError, IconName, IconNamed, IconSize, IconVisualConfig
from lucide_icons.config import PROJECT_ROOT


class CustomIcon:
    def path(self) -> str:
        return "custom/logo.svg"


def test_default_render_follows_text_size() -> None:
    svg = Icon(IconName.X).render(PROJECT_ROOT)
    assert svg == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" stroke="currentColor" '
        'stroke-width="2" stroke-linecap="round" stroke-linejoin="round" width="1em" height="1em" '
        'style="flex-shrink:0"><path d="M18 6 6 18" /> <path d="m6 6 12 12" /></svg>'
    )


def test_size_color_and_rotation() -> None:
    svg = Icon(IconName.Heart).with_size(IconSize.LARGE).color("#e11d48").rotate(math.pi / 2).render(PROJECT_ROOT)
    assert 'width="1.5rem" height="1.5rem"' in svg
    assert "color:#e11d48" in svg
    assert "transform:rotate(1.5708rad)" in svg
    assert 'stroke="currentColor"' in svg
    assert svg.count("<svg") == 1 and svg.endswith("</svg>")


def test_custom_size_wins_over_predefined() -> None:
    svg = Icon(IconName.Star).with_size(IconSize.XSMALL).size("20px").css_class("icon star").render(PROJECT_ROOT)
    assert 'width="20px" height="20px"' in svg
    assert 'class="icon star"' in svg


@pytest.mark.parametrize(
    "size, rems",
    [(IconSize.XSMALL, 0.75), (IconSize.SMALL, 0.875), (IconSize.MEDIUM, 1.0), (IconSize.LARGE, 1.5), (IconSize.XLARGE, 2.0)],
)
def test_icon_size_rems(size: IconSize, rems: float) -> None:
    assert size.to_rems() == rems


def test_builder_returns_new_icons() -> None:
    base = Icon(IconName.Search)
    colored = base.color("var(--brand)")
    assert base.config.color is None
    assert colored.config.color == "var(--brand)"
    assert colored.asset_path == base.asset_path == "icons/search.svg"


def test_custom_icon_sets_and_paths() -> None:
    assert isinstance(IconName.Check, IconNamed)
    assert isinstance(CustomIcon(), IconNamed)
    assert Icon(CustomIcon()).asset_path == "custom/logo.svg"
    assert Icon.from_path("icons/check.svg").color("red").asset_path == "icons/check.svg"


def test_missing_asset_raises(tmp_path: Path) -> None:
    with pytest.raises(IconLoadError):
        Icon(IconName.Heart).render(tmp_path)
    with pytest.raises(IconLoadError):
        Icon().render(PROJECT_ROOT)


def test_malformed_asset_raises(tmp_path: Path) -> None:
    (tmp_path / "broken.svg").write_text("<png/>", encoding="utf-8")
    with pytest.raises(IconLoadError):
        Icon.from_path("broken.svg").render(tmp_path)


def test_multiline_element_keeps_attribute_spacing(tmp_path: Path) -> None:
    (tmp_path / "logo.svg").write_text(
        '<svg viewBox="0 0 24 24">\n  <path\n    d="M5 12h14"\n    stroke="currentColor"\n  />\n\n  <circle cx="12" cy="12" r="3" />\n</svg>\n',
        encoding="utf-8",
    )
    svg = Icon.from_path("logo.svg").render(tmp_path)
    assert '<path d="M5 12h14" stroke="currentColor" />' in svg
    assert svg.endswith('/> <circle cx="12" cy="12" r="3" /></svg>')


def test_single_quoted_root_attributes_are_kept(tmp_path: Path) -> None:
    (tmp_path / "logo.svg").write_text(
        "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 24 24' width='24' data-note='say \"hi\"'><g/></svg>",
        encoding="utf-8",
    )
    svg = Icon.from_path("logo.svg").color("red").render(tmp_path)
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" ')
    assert 'data-note="say &quot;hi&quot;"' in svg
    assert 'width="1em"' in svg and 'width="24"' not in svg


@pytest.mark.parametrize("bad", [Icon(IconName.Heart), "icons/heart.svg"])
def test_icon_rejects_non_named_values(bad: object) -> None:
    with pytest.raises(TypeError, match="path\\(\\) method"):
        Icon(bad)  # type: ignore[arg-type]


def test_assets_root_from_env(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "icons").mkdir()
    (tmp_path / "icons" / "heart.svg").write_text('<svg viewBox="0 0 1 1"><g/></svg>', encoding="utf-8")
    monkeypatch.setenv("LUCIDE_ASSETS_ROOT", str(tmp_path))
    assert Icon(IconName.Heart).render().endswith("><g/></svg>")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"color": 'red" onload="x'},
        {"color": "red;background:url(x)"},
        {"color": "   "},
        {"custom_size": "20"},
        {"custom_size": "big"},
        {"transform": "<script>"},
        {"rotation": float("inf")},
        {"css_class": 'a"b'},
        {"size": "huge"},
        {"unknown": 1},
    ],
)
def test_visual_config_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        IconVisualConfig(**kwargs)


def test_visual_config_accepts_size_names() -> None:
    assert IconVisualConfig(size="large").size is IconSize.LARGE
    assert IconVisualConfig(size="large").css_size() == "1.5rem"
