# backend/spark_joy/main.py

"""
バックエンドアプリケーションのエントリーポイント。

- /digest/parse, /digest/collect エンドポイントを公開する
- /health ヘルスチェック
"""

from fastapi import FastAPI

from spark_joy.digest.router import router as digest_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。
    """
    app = FastAPI(title="Spark Joy Digest Collector")

    app.include_router(digest_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
