# backend/spark_joy/digest/config.py

"""
digest 収集処理の設定値読み出しモジュール。
"""

from dataclasses import dataclass
from functools import lru_cache

from spark_joy.parser.scanner import SECTION_MARKER
from spark_joy.utils.config import get_env, get_env_bool


@dataclass(frozen=True)
class DigestSettings:
    """
    収集処理に関する設定値のまとまり。

    post_url は post_url_prefix + frontmatter の url + post_url_suffix で組み立てる。
    """

    section_marker: str = SECTION_MARKER
    post_url_prefix: str = "https://blog.douchi.space"
    post_url_suffix: str = "?utm_source=notion_shopping"
    extract_rating: bool = True

    def build_post_url(self, frontmatter_url: str) -> str:
        return f"{self.post_url_prefix}{frontmatter_url}{self.post_url_suffix}"


@lru_cache()
def get_digest_settings() -> DigestSettings:
    """
    DigestSettings を環境変数から構築して返す。

    任意:
      - SPARK_JOY_SECTION_MARKER   (デフォルト: ## 物)
      - SPARK_JOY_POST_URL_PREFIX  (デフォルト: https://blog.douchi.space)
      - SPARK_JOY_POST_URL_SUFFIX  (デフォルト: ?utm_source=notion_shopping。空文字で suffix なし)
      - SPARK_JOY_EXTRACT_RATING   (デフォルト: true)
    """
    defaults = DigestSettings()
    return DigestSettings(
        section_marker=get_env(
            "SPARK_JOY_SECTION_MARKER",
            default=defaults.section_marker,
            required=False,
        ),
        post_url_prefix=get_env(
            "SPARK_JOY_POST_URL_PREFIX",
            default=defaults.post_url_prefix,
            required=False,
        ),
        post_url_suffix=get_env(
            "SPARK_JOY_POST_URL_SUFFIX",
            default=defaults.post_url_suffix,
            required=False,
            allow_empty=True,
        ),
        extract_rating=get_env_bool("SPARK_JOY_EXTRACT_RATING", default=True),
    )
