# backend/spark_joy/notion/__init__.py

"""
Notion 連携用モジュール群。

主な責務:
- Notion データベースの既存ページ（タイトル）を読み取る
- パース済みエントリをタイトルをキーに upsert する（既存ページは変更しない）
"""
