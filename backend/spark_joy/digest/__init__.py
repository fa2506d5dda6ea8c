# backend/spark_joy/digest/__init__.py

"""
digest 記事の収集処理モジュール。

- config: セクション見出し・記事 URL の prefix/suffix・評価抽出の有無
- schemas: 収集対象 / 収集結果 / API リクエスト・レスポンスの Pydantic モデル
- service: 取得 → パース → 取得元情報の付与 → 重複除去 → Notion 同期
- router: /digest エンドポイント
"""

from .config import DigestSettings, get_digest_settings  # noqa: F401
from .service import DigestService  # noqa: F401
