"""ヘルスチェックエンドポイント"""

import os
import platform
import sys
import threading
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from flask.typing import ResponseReturnValue

from app.config import config

bp = Blueprint("health", __name__)

READINESS_KEY = "readiness"


class ReadinessState:
    """
    レディネス状態（初期状態はunready）

    create_app の最後で ready() を呼び、以降 /ready が200を返す。
    """

    def __init__(self) -> None:
        self._ready = threading.Event()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    def ready(self) -> None:
        self._ready.set()

    def unready(self) -> None:
        self._ready.clear()


@bp.route("/alive")
def liveness_check() -> ResponseReturnValue:
    """ライブネスチェック（常に200）"""
    return jsonify({"status": "alive"})


@bp.route("/health")
def health_check() -> ResponseReturnValue:
    """ヘルスチェック"""
    return jsonify({"status": "healthy"})


@bp.route("/ready")
def readiness_check() -> ResponseReturnValue:
    """レディネスチェック"""
    state: ReadinessState | None = current_app.extensions.get(READINESS_KEY)
    if state is None or not state.is_ready:
        return jsonify({"status": "not ready"}), 503
    return jsonify({"status": "ready"})


@bp.route("/debug")
def debug_info() -> ResponseReturnValue:
    """デバッグ情報エンドポイント"""
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": config.version,
        "environment": config.app_env,
        "system": {
            "platform": platform.system(),
            "platform_release": platform.release(),
            "python_version": sys.version,
            "pid": os.getpid(),
        },
    })
