"""歯科・動物病院フィードの並行取得と統合"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Protocol

from app.config import config
from app.exceptions import FetchError, ParseError
from app.models.clinic import Clinic
from app.services.feed_client import FeedClient
from app.services.normalizer import FeedKind, normalize

logger = logging.getLogger(__name__)


class DataFetcher(Protocol):
    """ハンドラーが依存するクリニックデータ取得インターフェース"""

    def get_clinic_data(self) -> list[Clinic]:
        ...


@dataclass(frozen=True)
class Feed:
    """取得対象フィード"""

    kind: FeedKind
    url: str


def default_feeds() -> list[Feed]:
    """設定ファイル・環境変数からフィード一覧を作成"""
    return [
        Feed(kind=FeedKind.DENTAL, url=config.dental_clinics_url),
        Feed(kind=FeedKind.VET, url=config.vet_clinics_url),
    ]


class ClinicAggregator:
    """
    全フィードを並行に取得・正規化して1つのリストにまとめる

    フィード単位の失敗はログに残してそのフィードを0件として扱う。
    get_all() 自体は例外を投げない（最悪でも空リスト）。
    結果の順序はフィードの完了順で、実行ごとに変わりうる。
    """

    def __init__(
        self,
        feeds: list[Feed] | None = None,
        client: FeedClient | None = None,
    ) -> None:
        self.feeds = feeds if feeds is not None else default_feeds()
        self.client = client or FeedClient()

    def get_clinic_data(self) -> list[Clinic]:
        return self.get_all()

    def get_all(self) -> list[Clinic]:
        """全フィードのクリニックを取得（フィード数分のスレッドで並行実行）"""
        if not self.feeds:
            return []

        start_time = time.time()
        clinics: list[Clinic] = []

        with ThreadPoolExecutor(max_workers=len(self.feeds)) as executor:
            futures = [executor.submit(self._load_feed, feed) for feed in self.feeds]
            # 各タスクは自分のリストを返し、結合は完了順にここで行う
            for future in as_completed(futures):
                clinics.extend(future.result())

        elapsed = time.time() - start_time
        logger.info(
            f"[AGGREGATE] {len(clinics)} clinics from {len(self.feeds)} feeds "
            f"({elapsed:.2f}s)"
        )
        return clinics

    def _load_feed(self, feed: Feed) -> list[Clinic]:
        """1フィード分の取得＋正規化（失敗時は空リスト）"""
        try:
            raw = self.client.fetch(feed.url)
            clinics = normalize(feed.kind, raw)
        except FetchError as e:
            logger.error(
                f"[AGGREGATE] error fetching {feed.kind.value} clinics: {e.message}"
            )
            return []
        except ParseError as e:
            logger.error(
                f"[AGGREGATE] error parsing {feed.kind.value} clinics: {e.message}"
            )
            return []

        logger.debug(f"[AGGREGATE] {feed.kind.value}: {len(clinics)} clinics")
        return clinics
