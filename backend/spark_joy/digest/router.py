# backend/spark_joy/digest/router.py

"""
digest 収集用の FastAPI ルーター定義。

- POST /digest/parse: 送られた Markdown をパースする（ネットワークアクセスなし）
- POST /digest/collect: URL / YYYY-MM を指定して収集（必要なら Notion 同期）
"""

from fastapi import APIRouter, Depends, HTTPException, status

from spark_joy.github.client import GitHubClient
from spark_joy.github.config import get_github_config
from spark_joy.notion.config import get_notion_config
from spark_joy.parser.frontmatter import extract_frontmatter_url
from spark_joy.parser.scanner import parse_section
from spark_joy.utils.config import EnvVarMissingError

from .config import DigestSettings, get_digest_settings
from .schemas import CollectRequest, CollectResponse, ParseRequest, ParseResponse
from .service import DigestService

router = APIRouter(prefix="/digest", tags=["digest"])


# テスト時に dependency_overrides で差し替え可能にする
def get_settings() -> DigestSettings:
    return get_digest_settings()


def get_digest_service() -> DigestService:
    """
    環境変数から DigestService を組み立てる。

    REPO_NAME が未設定の場合は設定エラーとして 500 を返す。
    """
    try:
        github_client = GitHubClient(get_github_config())
    except EnvVarMissingError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

    return DigestService(
        github_client=github_client,
        settings=get_digest_settings(),
        notion_config=get_notion_config(),
    )


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Markdown 記事から「物」セクションのエントリを抽出",
)
def parse_markdown(
    body: ParseRequest,
    settings: DigestSettings = Depends(get_settings),
) -> ParseResponse:
    """
    送られた Markdown 全文をパースしてエントリ一覧を返す。
    """
    frontmatter_url = extract_frontmatter_url(body.content)
    post_url = settings.build_post_url(frontmatter_url) if frontmatter_url else None

    entries = parse_section(
        body.content,
        marker=settings.section_marker,
        with_rating=settings.extract_rating,
    )
    entries = [
        entry.with_provenance(source=body.source, post_url=post_url)
        for entry in entries
    ]

    return ParseResponse(entries=entries, count=len(entries), post_url=post_url)


@router.post(
    "/collect",
    response_model=CollectResponse,
    summary="URL / YYYY-MM を指定して digest 記事を収集",
)
def collect(
    body: CollectRequest,
    service: DigestService = Depends(get_digest_service),
) -> CollectResponse:
    """
    収集して重複除去した結果を返す。sync=True なら Notion にも反映する。

    - 個別記事の取得失敗は failed_sources に入れて 200 を返す
    - 想定外のエラーは 500
    """
    try:
        report = service.run(body.targets, sync=body.sync)
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to collect digest entries.",
        ) from exc

    collected = report.collected
    response = CollectResponse(
        entries=collected.entries,
        count=len(collected.entries),
        total_found=collected.total_found,
        duplicates_removed=collected.removed_count,
        failed_sources=collected.failed_sources,
        invalid_targets=collected.invalid_targets,
    )
    if report.upsert is not None:
        response.created = report.upsert.created
        response.skipped = report.upsert.skipped
        response.failed = report.upsert.failed
    return response
