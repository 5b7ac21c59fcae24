# どこで: `src/surfkit/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 値ボックスの見た目や GUI ウィンドウの既定値を、コードを触らずに差し替えられるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """surfkit の実行時設定。"""

    config_path: Path | None
    value_box_width: float
    value_box_slide_speed: float
    value_box_border_color: tuple[float, float, float, float]
    node_gui_window_size: tuple[int, int]
    node_gui_window_pos: tuple[int, int]
    node_gui_background_color: tuple[float, float, float, float]


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".surfkit" / "config.yaml",
        home / ".config" / "surfkit" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping を再帰的に後勝ちでマージした dict を返す。"""

    out = dict(base)
    for k, v in override.items():
        prev = out.get(k)
        if isinstance(prev, dict) and isinstance(v, dict):
            out[k] = _merge(prev, v)
        else:
            out[k] = v
    return out


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        return int(seq[0]), int(seq[1])
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc


def _as_rgba(value: Any, *, key: str) -> tuple[float, float, float, float]:
    try:
        seq = [float(v) for v in value]
    except Exception as exc:
        raise RuntimeError(f"{key} は [r, g, b, a] の数値配列である必要があります: got={value!r}") from exc
    if len(seq) != 4:
        raise RuntimeError(f"{key} は [r, g, b, a] の数値配列である必要があります: got={value!r}")
    r, g, b, a = (max(0.0, min(1.0, v)) for v in seq)
    return r, g, b, a


def _as_positive_float(value: Any, *, key: str) -> float:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    try:
        f = float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc
    if f <= 0:
        raise ValueError(f"{key} は正の値である必要があります: got={f}")
    return f


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    return _load_yaml_text(path.read_text(encoding="utf-8"), source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("surfkit")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="surfkit/resource/default_config.yaml")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.surfkit/config.yaml` / `~/.config/surfkit/config.yaml`（先に見つかった方）
    3) `set_config_path()` で指定した config
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    try:
        version_i = int(version)  # type: ignore[arg-type]
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    ui = _as_mapping(payload.get("ui"), key="ui")
    value_box = _as_mapping(ui.get("value_box"), key="ui.value_box")
    node_gui = _as_mapping(ui.get("node_gui"), key="ui.node_gui")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        value_box_width=_as_positive_float(value_box.get("width"), key="ui.value_box.width"),
        value_box_slide_speed=_as_positive_float(
            value_box.get("slide_speed"), key="ui.value_box.slide_speed"
        ),
        value_box_border_color=_as_rgba(
            value_box.get("border_color"), key="ui.value_box.border_color"
        ),
        node_gui_window_size=_as_int_pair(
            node_gui.get("window_size"), key="ui.node_gui.window_size"
        ),
        node_gui_window_pos=_as_int_pair(
            node_gui.get("window_pos"), key="ui.node_gui.window_pos"
        ),
        node_gui_background_color=_as_rgba(
            node_gui.get("background_color"), key="ui.node_gui.background_color"
        ),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
