# どこで: `src/escher/core/runtime_config.py`。
# 何を: config.yaml（同梱既定 → 自動検出 → 明示指定の後勝ち）をロードし、
#       出力先・キャンバス既定値・再帰深さ上限をキャッシュして提供する。

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

import yaml

_logger = logging.getLogger(__name__)

ColorRGB = tuple[float, float, float]
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """escher の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    canvas_size: tuple[int, int]
    background_color: ColorRGB
    line_color: ColorRGB
    line_thickness: float
    max_depth: int
    png_scale: float


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定し、キャッシュを捨てる。None で明示指定を解除する。"""

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    _EXPLICIT_CONFIG_PATH = None if path is None else Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _discover_config() -> Path | None:
    for candidate in (
        Path.cwd() / ".escher" / "config.yaml",
        Path.home() / ".config" / "escher" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return data


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping を再帰的に後勝ちでマージする。"""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _lookup(payload: dict[str, Any], dotted: str) -> Any:
    node: Any = payload
    for part in dotted.split("."):
        if not isinstance(node, dict):
            raise RuntimeError(f"{dotted} の親は mapping である必要があります: got={node!r}")
        node = node.get(part)
    if node is None:
        raise RuntimeError(f"{dotted} が未設定です（同梱 default_config.yaml を確認してください）")
    return node


def _get(payload: dict[str, Any], dotted: str, convert: Callable[[Any], T]) -> T:
    """`a.b.c` 形式のキーを引いて `convert` で変換する。変換失敗は RuntimeError。"""
    raw = _lookup(payload, dotted)
    try:
        return convert(raw)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{dotted} の値が不正です: got={raw!r}") from exc


def _numbers(n: int, kind: Callable[[Any], T]) -> Callable[[Any], tuple[T, ...]]:
    def convert(value: Any) -> tuple[T, ...]:
        if isinstance(value, (str, bytes)) or len(value) != n:
            raise ValueError(f"長さ {n} の配列が必要")
        return tuple(kind(v) for v in value)

    return convert


def _strict_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("bool は整数として扱わない")
    return int(value)


def _path(value: Any) -> Path:
    text = str(value).strip()
    if not text:
        raise ValueError("空のパス")
    return Path(os.path.expandvars(os.path.expanduser(text)))


def _require_positive(dotted: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{dotted} は正の値である必要があります: got={value!r}")


def _load_payload(explicit: Path | None, discovered: Path | None) -> dict[str, Any]:
    packaged = resources.files("escher").joinpath("resource", "default_config.yaml")
    payload = _parse_yaml(packaged.read_text(encoding="utf-8"), source="escher/resource/default_config.yaml")
    for path in (discovered, explicit):
        if path is not None:
            _logger.debug("config を読み込みます: %s", path)
            payload = _merge(payload, _parse_yaml(path.read_text(encoding="utf-8"), source=str(path)))
    return payload


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    Raises
    ------
    FileNotFoundError
        明示指定された config が存在しない場合。
    RuntimeError
        未設定・型不正・未対応 version の場合。
    ValueError
        寸法・線幅・倍率が正でない、または max_depth が負の場合。
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit = _EXPLICIT_CONFIG_PATH
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = _discover_config()
    payload = _load_payload(explicit, discovered)

    version = _get(payload, "version", _strict_int)
    if version != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    canvas_size = _get(payload, "canvas.size", _numbers(2, _strict_int))
    for v in canvas_size:
        _require_positive("canvas.size", v)
    line_thickness = _get(payload, "line.thickness", float)
    _require_positive("line.thickness", line_thickness)
    png_scale = _get(payload, "export.png.scale", float)
    _require_positive("export.png.scale", png_scale)
    max_depth = _get(payload, "recursion.max_depth", _strict_int)
    if max_depth < 0:
        raise ValueError(f"recursion.max_depth は 0 以上である必要があります: got={max_depth}")

    cfg = RuntimeConfig(
        config_path=explicit or discovered,
        output_dir=_get(payload, "paths.output_dir", _path),
        canvas_size=(canvas_size[0], canvas_size[1]),
        background_color=_get(payload, "canvas.background_color", _numbers(3, float)),
        line_color=_get(payload, "line.color", _numbers(3, float)),
        line_thickness=line_thickness,
        max_depth=max_depth,
        png_scale=png_scale,
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return runtime_config().output_dir


def check_depth_budget(n: int) -> int:
    """再帰深さ `n` が `recursion.max_depth` 以下であることを確認して返す。

    Raises
    ------
    ValueError
        上限を超える場合。
    """

    max_depth = runtime_config().max_depth
    if n > max_depth:
        raise ValueError(f"再帰深さ {n} は recursion.max_depth={max_depth} を超えています")
    return n


__all__ = [
    "RuntimeConfig",
    "check_depth_budget",
    "output_root_dir",
    "runtime_config",
    "set_config_path",
]
