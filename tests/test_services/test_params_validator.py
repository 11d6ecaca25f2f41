"""検索パラメータ検証のテスト"""

import pytest

from app.exceptions import ValidationError
from app.services.params_validator import SearchParamsValidator


class TestSearchParamsValidator:
    """SearchParamsValidatorのテスト"""

    @pytest.fixture
    def validator(self):
        return SearchParamsValidator()

    def test_parse_all_fields(self, validator):
        """全項目指定"""
        params = validator.parse(
            b'{"name": "Good", "state": "FL", "from": "09:00", "to": "17:00"}'
        )

        assert params.name == "Good"
        assert params.state == "FL"
        assert params.from_ == "09:00"
        assert params.to == "17:00"

    def test_parse_defaults(self, validator):
        """未指定項目は空文字"""
        params = validator.parse("{}")

        assert params.name == ""
        assert params.state == ""
        assert params.from_ == ""
        assert params.to == ""
        assert params.has_time_window is False

    @pytest.mark.parametrize("body", [b"{", b"", b"null", b"[]", b'"FL"', b"\xff"])
    def test_invalid_json(self, validator, body):
        """JSONとして不正、またはオブジェクトでない"""
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(body)

        assert exc_info.value.message == "invalid json params"
        assert exc_info.value.messages == {}

    def test_invalid_attributes(self, validator):
        """文字列以外の値は属性ごとのメッセージ"""
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(b'{"state": ["FL"], "from": 9}')

        assert exc_info.value.message == "invalid attributes"
        assert set(exc_info.value.messages) == {"state", "from"}
        assert exc_info.value.messages["from"].startswith("from ")
