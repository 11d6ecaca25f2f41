"""サービス層"""

from app.services.feed_client import FeedClient
from app.services.normalizer import FeedKind, normalize
from app.services.aggregator import ClinicAggregator, DataFetcher, Feed
from app.services.clinic_filter import filter_clinics
from app.services.params_validator import SearchParamsValidator

__all__ = [
    "FeedClient",
    "FeedKind",
    "normalize",
    "ClinicAggregator",
    "DataFetcher",
    "Feed",
    "filter_clinics",
    "SearchParamsValidator",
]
