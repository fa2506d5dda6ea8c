# backend/spark_joy/parser/frontmatter.py

"""
記事先頭の frontmatter（--- で囲まれたブロック）から url を取り出す。

YAML 全体はパースせず、url キーの 1 行だけを見る。
"""

import re
from typing import Optional

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*\r?\n", re.DOTALL)
URL_LINE_PATTERN = re.compile(r"^url:[ \t]*(.+?)[ \t\r]*$", re.MULTILINE)
QUOTE_CHARS = "\"'"


def extract_frontmatter_url(content: str) -> Optional[str]:
    """
    frontmatter の url の値を返す。ブロックやキーが無ければ None。
    """
    block = FRONTMATTER_PATTERN.match(content)
    if not block:
        return None

    url_line = URL_LINE_PATTERN.search(block.group(1))
    if not url_line:
        return None

    value = url_line.group(1).strip()
    # 前後のクォートを 1 文字ずつ外す
    if value[:1] in QUOTE_CHARS:
        value = value[1:]
    if value[-1:] in QUOTE_CHARS:
        value = value[:-1]
    value = value.strip()

    return value or None
