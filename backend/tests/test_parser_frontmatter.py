# backend/tests/test_parser_frontmatter.py

from spark_joy.parser.frontmatter import extract_frontmatter_url


def test_extract_frontmatter_url_plain_value():
    content = "---\ntitle: digest 42\nurl: /posts/spark-joy-42/\n---\n## 物\n"
    assert extract_frontmatter_url(content) == "/posts/spark-joy-42/"


def test_extract_frontmatter_url_strips_quotes():
    assert extract_frontmatter_url('---\nurl: "/a/b/"\n---\nbody\n') == "/a/b/"
    assert extract_frontmatter_url("---\nurl: '/c/'\n---\nbody\n") == "/c/"


def test_extract_frontmatter_url_without_closing_separator():
    assert extract_frontmatter_url("---\nurl: /a/\nno closing line\n") is None


def test_extract_frontmatter_url_requires_block_at_start():
    assert extract_frontmatter_url("intro\n---\nurl: /a/\n---\n") is None


def test_extract_frontmatter_url_missing_key():
    assert extract_frontmatter_url("---\ntitle: x\nslug: y\n---\nbody\n") is None


def test_extract_frontmatter_url_ignores_similar_keys():
    content = "---\nimage_url: /img.png\nurl: /real/\n---\n"
    assert extract_frontmatter_url(content) == "/real/"
