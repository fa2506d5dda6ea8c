# backend/spark_joy/__init__.py
"""
spark-joy digest collector package.

This package contains:
- parser: 「## 物」セクションのパーサー（評価・タイトル・リンク・説明文の抽出）
- github: GitHub 上の Markdown 記事の取得
- notion: Notion データベースへの upsert
- digest: 取得 → パース → 重複除去 → 同期 のオーケストレーション
- main / cli: FastAPI アプリと CLI のエントリーポイント
"""
