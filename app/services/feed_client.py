"""クリニックフィードのHTTP取得"""

import logging

import requests

from app.config import config
from app.exceptions import FetchError

logger = logging.getLogger(__name__)


class FeedClient:
    """フィードURLから生データを取得する（リトライなし）"""

    def __init__(self, timeout: float | None = None) -> None:
        """
        Args:
            timeout: リクエストタイムアウト秒（Noneで設定値、設定もなければ無制限）
        """
        self.timeout = timeout if timeout is not None else config.client_timeout

    def fetch(self, url: str) -> bytes:
        """
        URLにGETリクエストを送り、レスポンスボディを全て読み込んで返す

        Args:
            url: フィードURL

        Returns:
            レスポンスボディ

        Raises:
            FetchError: 通信エラー、非2xx応答、ボディ読み込み失敗
        """
        logger.debug(f"[FEED] GET {url}")
        try:
            with requests.get(
                url,
                headers={"Connection": "close", "Accept": "application/json"},
                timeout=self.timeout,
            ) as response:
                response.raise_for_status()
                body = response.content
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(
                f"Feed responded with HTTP {status}",
                details={"url": url, "status": status},
            ) from e
        except requests.RequestException as e:
            raise FetchError(
                f"Failed to fetch feed: {type(e).__name__}: {e}",
                details={"url": url},
            ) from e

        logger.debug(f"[FEED] {url}: {len(body)} bytes")
        return body
