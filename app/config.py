"""アプリケーション設定管理"""

import os
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv

from app.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config:
    """アプリケーション設定クラス"""

    # 基本パス
    BASE_DIR = Path(__file__).parent.parent
    CONFIG_DIR = BASE_DIR / "config"

    # INFOレベルで動かす環境
    PRODUCTION_ENVS = ("production", "live")

    def __init__(self) -> None:
        # .envファイル読み込み
        load_dotenv()

        # 設定ファイル読み込み
        self._default_config = self._load_yaml("default.yaml")

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        """YAML設定ファイルを読み込む"""
        filepath = self.CONFIG_DIR / filename
        if not filepath.exists():
            logger.warning(f"Config file not found: {filepath}")
            return {}

        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def validate_feed_urls(self) -> None:
        """フィードURLの検証（起動時に呼び出し）"""
        invalid = {}
        for kind, url in self.feed_urls.items():
            parsed = urlparse(url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                invalid[kind] = url

        if invalid:
            raise ConfigurationError(
                "Feed URL configuration is invalid",
                details={"invalid_urls": invalid},
            )

    # プロパティ: 環境変数
    @property
    def app_env(self) -> str:
        return os.environ.get(
            "APP_ENV", os.environ.get("ENVIRONMENT", "development")
        )

    @property
    def is_production(self) -> bool:
        return self.app_env in self.PRODUCTION_ENVS

    @property
    def port(self) -> int:
        return int(
            os.environ.get(
                "PORT", self._default_config.get("server", {}).get("port", 8000)
            )
        )

    @property
    def log_level(self) -> str:
        level = os.environ.get("LOG_LEVEL", "")
        if level:
            return level.upper()
        return "INFO" if self.is_production else "DEBUG"

    @property
    def client_timeout(self) -> float | None:
        value = os.environ.get("CLIENT_TIMEOUT_SEC")
        if value is None:
            value = self._default_config.get("client", {}).get("timeout_sec")
        if value in (None, "", 0, "0"):
            return None
        return float(value)

    @property
    def dental_clinics_url(self) -> str:
        return os.environ.get(
            "DENTAL_CLINICS_URL",
            self._default_config.get("feeds", {}).get("dental", {}).get("url", ""),
        )

    @property
    def vet_clinics_url(self) -> str:
        return os.environ.get(
            "VET_CLINICS_URL",
            self._default_config.get("feeds", {}).get("vet", {}).get("url", ""),
        )

    @property
    def feed_urls(self) -> dict[str, str]:
        return {"dental": self.dental_clinics_url, "vet": self.vet_clinics_url}

    # プロパティ: YAML設定
    @property
    def app_name(self) -> str:
        return self._default_config.get("app_name", "clinic-search-service")

    @property
    def version(self) -> str:
        """バージョン文字列（例: "clinic-search-service 0.0.0-dev"）"""
        semver = self._default_config.get("version", "0.0.0")
        buildstamp = self._default_config.get("buildstamp", "")
        version = f"{self.app_name} {semver}"
        if buildstamp:
            version = f"{version}-{buildstamp}"
        return version


# グローバル設定インスタンス
config = Config()
