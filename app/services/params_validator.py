"""検索リクエストボディの検証"""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError
from app.models.clinic import SearchParams

logger = logging.getLogger(__name__)


class SearchParamsValidator:
    """リクエストボディをSearchParamsに変換する（create_appで生成して注入）"""

    INVALID_JSON = "invalid json params"
    INVALID_ATTRIBUTES = "invalid attributes"

    def parse(self, body: bytes | str) -> SearchParams:
        """
        リクエストボディを検証してSearchParamsを返す

        Raises:
            ValidationError: JSONが不正、オブジェクトでない、値が文字列でない
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            logger.error(f"Failed parsing search params: {e}")
            raise ValidationError(self.INVALID_JSON) from e

        if not isinstance(data, dict):
            logger.error(f"Search params must be an object, got {type(data).__name__}")
            raise ValidationError(self.INVALID_JSON)

        try:
            return SearchParams.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                self.INVALID_ATTRIBUTES, messages=self.translate_errors(e)
            ) from e

    @staticmethod
    def translate_errors(error: PydanticValidationError) -> dict[str, str]:
        """属性名 -> メッセージの辞書に変換（ネストしたパスは末尾のキーのみ）"""
        messages = {}
        for err in error.errors():
            loc = err.get("loc") or ("body",)
            attribute = str(loc[-1])
            messages[attribute] = f"{attribute} {err['msg'].lower()}"
        return messages
