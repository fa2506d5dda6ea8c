# backend/spark_joy/utils/config.py

"""
環境変数読み取り用のユーティリティ。
GitHub / Notion / digest の各設定モジュールから共通利用する。
"""

import os
from typing import Optional

from dotenv import load_dotenv


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def load_env_file(path: Optional[str] = None) -> bool:
    """
    .env ファイルを読み込む（ローカル開発用）。

    既に設定済みの環境変数は上書きしない。
    """
    return load_dotenv(dotenv_path=path, override=False)


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
    allow_empty: bool = False,
) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :param allow_empty: True の場合、空文字も値として返す（未設定とは区別する）
    :return: 文字列値
    """
    value = os.getenv(name)

    if allow_empty and value is not None:
        return value

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_int(name: str, default: int) -> int:
    """
    整数値の環境変数を取得するヘルパー。

    不正な値が入っていた場合は RuntimeError にする。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid integer value for env var {name}: {raw!r}"
        ) from exc


def get_env_bool(name: str, default: bool) -> bool:
    """
    真偽値の環境変数を取得するヘルパー。

    "1" / "true" / "yes" / "on" を True、"0" / "false" / "no" / "off" を False とみなす。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    normalized = raw.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False

    raise RuntimeError(f"Invalid boolean value for env var {name}: {raw!r}")
