"""Flaskアプリケーションエントリーポイント"""

import logging
from flask import Flask
from flask.typing import ResponseReturnValue

from app.config import config
from app.routes import health_bp, clinics_bp
from app.routes.clinics import FETCHER_KEY, VALIDATOR_KEY, error_response
from app.routes.health import READINESS_KEY, ReadinessState
from app.services.aggregator import ClinicAggregator, DataFetcher
from app.services.params_validator import SearchParamsValidator

# ロギング設定
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    fetcher: DataFetcher | None = None,
    validator: SearchParamsValidator | None = None,
) -> Flask:
    """
    Flaskアプリケーションファクトリ

    Args:
        fetcher: クリニックデータ取得（指定なしで実フィードを集約するClinicAggregator）
        validator: 検索パラメータ検証（指定なしで既定のSearchParamsValidator）
    """
    app = Flask(__name__)

    # 設定
    app.json.ensure_ascii = False
    app.json.sort_keys = False  # name, state, availability の順で返す

    readiness = ReadinessState()
    app.extensions[READINESS_KEY] = readiness

    # 依存サービス
    if fetcher is None:
        config.validate_feed_urls()
        fetcher = ClinicAggregator()
    app.extensions[FETCHER_KEY] = fetcher
    app.extensions[VALIDATOR_KEY] = validator or SearchParamsValidator()

    # Blueprint登録
    app.register_blueprint(health_bp)
    app.register_blueprint(clinics_bp)

    # エラーハンドラー
    @app.errorhandler(404)
    def not_found(e: Exception) -> ResponseReturnValue:
        return error_response(404, "not found")

    @app.errorhandler(405)
    def method_not_allowed(e: Exception) -> ResponseReturnValue:
        return error_response(405, "method not allowed")

    @app.errorhandler(500)
    def internal_error(e: Exception) -> ResponseReturnValue:
        logger.exception("Internal server error")
        return error_response(500, "internal server error")

    readiness.ready()
    logger.info(f"Flask app created ({config.version}, env: {config.app_env})")
    return app


# グローバルアプリインスタンス（gunicorn用）
app = create_app()


if __name__ == "__main__":
    app.run(debug=not config.is_production, host="0.0.0.0", port=config.port)
