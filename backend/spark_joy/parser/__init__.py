# backend/spark_joy/parser/__init__.py

"""
「## 物」セクションのパーサー群。

- rating: 評価絵文字 → 1〜5 の評価値 / タイトルからの絵文字除去
- classifier: 1 行ごとの分類（見出し形式 / 箇条書き形式 / 継続テキスト）
- scanner: セクション全体を走査する状態機械
- frontmatter: frontmatter の url キーの抽出
- dedupe: タイトルによる重複除去

いずれも純粋関数で、I/O や共有状態を持たない。
"""

from .dedupe import DedupeResult, dedupe  # noqa: F401
from .frontmatter import extract_frontmatter_url  # noqa: F401
from .rating import DEFAULT_RATING, clean_title, extract_rating  # noqa: F401
from .scanner import SECTION_MARKER, parse_section  # noqa: F401
from .schemas import Entry  # noqa: F401
