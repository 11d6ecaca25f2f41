"""クリニック一覧・検索API"""

import logging

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue

from app.exceptions import ValidationError
from app.models.clinic import Clinic, ErrorResponse
from app.services.aggregator import DataFetcher
from app.services.clinic_filter import filter_clinics
from app.services.params_validator import SearchParamsValidator

logger = logging.getLogger(__name__)
bp = Blueprint("clinics", __name__, url_prefix="/v1/clinics")

FETCHER_KEY = "clinic_fetcher"
VALIDATOR_KEY = "search_params_validator"


def _get_fetcher() -> DataFetcher:
    return current_app.extensions[FETCHER_KEY]


def _get_validator() -> SearchParamsValidator:
    return current_app.extensions[VALIDATOR_KEY]


def error_response(
    status: int, error: str, messages: dict[str, str] | None = None
) -> ResponseReturnValue:
    """共通エラーレスポンス {"error": ..., "messages": {...}}"""
    body = ErrorResponse(error=error, messages=messages or {})
    return jsonify(body.model_dump()), status


def _clinics_response(clinics: list[Clinic]) -> ResponseReturnValue:
    return jsonify([c.to_dict() for c in clinics]), 200


@bp.route("", methods=["GET"])
@bp.route("/", methods=["GET"])
def get_all_clinics() -> ResponseReturnValue:
    """全フィードのクリニック一覧"""
    try:
        clinics = _get_fetcher().get_clinic_data()
    except Exception:
        logger.exception("error fetching clinic data")
        return error_response(500, "error fetching all clinics")

    return _clinics_response(clinics)


@bp.route("/search", methods=["POST"])
def search() -> ResponseReturnValue:
    """
    クリニック検索API

    リクエスト（全項目任意、空文字は条件なし）:
    {
        "name": "Good Health",
        "state": "FL",
        "from": "09:00",
        "to": "20:00"
    }
    """
    try:
        params = _get_validator().parse(request.get_data())
    except ValidationError as e:
        return error_response(400, e.message, e.messages)

    try:
        clinics = _get_fetcher().get_clinic_data()
    except Exception:
        logger.exception("error fetching clinic data")
        return error_response(500, "error fetching all clinics")

    matched = filter_clinics(clinics, params)
    logger.info(f"Search matched {len(matched)} clinics")
    return _clinics_response(matched)
