"""カスタム例外クラス定義"""

from typing import Any


class ClinicSearchError(Exception):
    """アプリケーション基底例外"""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ClinicSearchError):
    """設定エラー（フィードURL不正など）"""

    pass


class FetchError(ClinicSearchError):
    """フィード取得エラー（通信失敗・非2xx応答）"""

    pass


class ParseError(ClinicSearchError):
    """フィードJSONの解析エラー"""

    pass


class ValidationError(ClinicSearchError):
    """検索リクエストの検証エラー"""

    def __init__(
        self,
        message: str,
        messages: dict[str, str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.messages = messages or {}
