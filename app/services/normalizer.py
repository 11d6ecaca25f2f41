"""フィードごとのJSONを共通のClinicスキーマへ正規化"""

import logging
from enum import Enum

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from app.exceptions import ParseError
from app.models.clinic import Clinic, DentalClinic, VetClinic

logger = logging.getLogger(__name__)


class FeedKind(str, Enum):
    """フィード種別"""

    DENTAL = "dental"
    VET = "vet"


_ADAPTERS: dict[FeedKind, TypeAdapter] = {
    FeedKind.DENTAL: TypeAdapter(list[DentalClinic]),
    FeedKind.VET: TypeAdapter(list[VetClinic]),
}


def normalize(kind: FeedKind | str, raw: bytes) -> list[Clinic]:
    """
    フィードの生データをClinicリストに変換

    部分的な復旧はしない。1件でも不正ならフィード全体をParseErrorとする。

    Args:
        kind: フィード種別
        raw: フィードのレスポンスボディ（JSON配列）

    Returns:
        正規化済みクリニックのリスト

    Raises:
        ParseError: 未知のフィード種別、またはJSONが不正
    """
    try:
        adapter = _ADAPTERS[FeedKind(kind)]
    except (ValueError, KeyError) as e:
        raise ParseError(f"Unknown feed kind: {kind}") from e

    try:
        entries = adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise ParseError(
            f"Malformed {FeedKind(kind).value} feed payload",
            details={"errors": e.error_count()},
        ) from e

    clinics = [entry.to_clinic() for entry in entries]
    logger.debug(f"Normalized {len(clinics)} {FeedKind(kind).value} clinics")
    return clinics
