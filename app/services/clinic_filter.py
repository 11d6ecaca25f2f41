"""検索条件によるクリニックのフィルタリング"""

import logging
from typing import Callable

from app.models.clinic import Clinic, SearchParams

logger = logging.getLogger(__name__)

Predicate = Callable[[Clinic], bool]


def name_contains(name: str) -> Predicate:
    """クリニック名の部分一致（大文字小文字を区別）"""
    return lambda clinic: name in clinic.name


def state_contains(state: str) -> Predicate:
    """州の部分一致"""
    return lambda clinic: state in clinic.state


def within_availability(from_: str, to: str) -> Predicate:
    """指定時間帯が診療時間内に収まるか（"HH:MM"の文字列比較）"""
    return lambda clinic: (
        clinic.availability.from_ <= from_ and clinic.availability.to >= to
    )


def build_predicates(params: SearchParams) -> list[Predicate]:
    """
    空でない検索条件だけから述語リストを作る

    時間帯条件は from と to の両方がある場合のみ有効。片方だけなら無視する。
    """
    predicates: list[Predicate] = []
    if params.name:
        predicates.append(name_contains(params.name))
    if params.state:
        predicates.append(state_contains(params.state))
    if params.has_time_window:
        predicates.append(within_availability(params.from_, params.to))
    return predicates


def filter_clinics(clinics: list[Clinic], params: SearchParams) -> list[Clinic]:
    """
    全条件をAND結合で適用（元の順序を保持）

    Args:
        clinics: 統合済みクリニックのリスト
        params: 検索条件

    Returns:
        条件に一致したクリニックのリスト（一致なしは空リスト）
    """
    predicates = build_predicates(params)
    if not predicates:
        return list(clinics)

    matched = [c for c in clinics if all(p(c) for p in predicates)]
    logger.debug(f"Matched {len(matched)}/{len(clinics)} clinics")
    return matched
