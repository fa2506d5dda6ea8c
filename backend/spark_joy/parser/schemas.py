# backend/spark_joy/parser/schemas.py

"""
パース結果を内部で扱うためのスキーマ定義。
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """
    「物」セクションの 1 エントリ（1 商品）を表現するモデル。

    - パーサーが生成した時点で確定しており、以降は変更しない（frozen）
    - source / year_month / post_url は呼び出し側が with_provenance() で付与する
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., min_length=1, description="評価絵文字を除去した表示用タイトル")
    link: Optional[str] = Field(None, description="商品へのリンク URL")
    link_text: Optional[str] = Field(
        None,
        alias="linkText",
        description="リンクのアンカーテキスト（箇条書き形式のみ）",
    )
    description: str = Field("", description="継続行をスペースで連結した説明文")
    rating: Optional[int] = Field(
        None,
        ge=1,
        le=5,
        description="評価（1〜5）。評価抽出を無効にした場合は None",
    )
    source: Optional[str] = Field(None, description="取得元の記事 URL")
    year_month: Optional[str] = Field(
        None,
        alias="yearMonth",
        description="YYYY-MM 指定で取得した場合のバッチタグ",
    )
    post_url: Optional[str] = Field(
        None,
        alias="postUrl",
        description="frontmatter の url から組み立てた記事の正規 URL",
    )

    def with_provenance(
        self,
        *,
        source: Optional[str] = None,
        year_month: Optional[str] = None,
        post_url: Optional[str] = None,
    ) -> "Entry":
        """
        取得元情報を付与した新しい Entry を返す（自身は変更しない）。
        """
        update: Dict[str, Any] = {}
        if source is not None:
            update["source"] = source
        if year_month is not None:
            update["year_month"] = year_month
        if post_url is not None:
            update["post_url"] = post_url
        return self.model_copy(update=update)

    def to_output(self) -> Dict[str, Any]:
        """
        JSON 出力用の辞書（camelCase、未設定項目は省略）。
        """
        return self.model_dump(by_alias=True, exclude_none=True)
