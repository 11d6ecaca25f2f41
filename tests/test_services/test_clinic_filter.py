"""検索フィルターのテスト"""

import pytest

from app.models.clinic import SearchParams
from app.services.clinic_filter import build_predicates, filter_clinics


class TestClinicFilter:
    """filter_clinicsのテスト"""

    def test_empty_params_returns_all(self, sample_clinics):
        """条件なしは全件を順序どおり返す"""
        result = filter_clinics(sample_clinics, SearchParams())

        assert result == sample_clinics
        assert result is not sample_clinics

    def test_empty_list(self):
        """空リストのフィルタリング"""
        assert filter_clinics([], SearchParams(name="Good")) == []

    def test_name_substring(self, sample_clinics):
        """名前の部分一致"""
        result = filter_clinics(sample_clinics, SearchParams(name="Clinic"))

        assert [c.name for c in result] == ["National Veterinary Clinic"]
        excluded = [c for c in sample_clinics if c not in result]
        assert all("Clinic" not in c.name for c in excluded)

    def test_name_case_sensitive(self, sample_clinics):
        """名前は大文字小文字を区別"""
        assert filter_clinics(sample_clinics, SearchParams(name="good health")) == []

    def test_name_trailing_space_no_match(self, scratchpay_clinic):
        """"Good " はScratchpayに一致しない"""
        params = SearchParams(name="Good ", state="FL")

        assert filter_clinics([scratchpay_clinic], params) == []

    def test_state_substring(self, sample_clinics):
        """州の部分一致（"CA" は "CA" のみ、"Cal" は "California"）"""
        assert [c.state for c in filter_clinics(sample_clinics, SearchParams(state="CA"))] == ["CA"]
        assert [c.state for c in filter_clinics(sample_clinics, SearchParams(state="Cal"))] == [
            "California"
        ]

    def test_name_and_state(self, sample_clinics):
        """名前と州のAND"""
        params = SearchParams(state="California", name="Good Health")

        result = filter_clinics(sample_clinics, params)

        assert [c.name for c in result] == ["Good Health"]

    def test_time_window(self, sample_clinics):
        """時間帯が診療時間内のものだけ"""
        params = SearchParams.model_validate({"from": "16:00", "to": "21:00"})

        result = filter_clinics(sample_clinics, params)

        assert [c.name for c in result] == ["National Veterinary Clinic"]

    @pytest.mark.parametrize(
        "payload",
        [{"from": "23:00"}, {"to": "23:59"}, {"from": "", "to": "23:59"}],
    )
    def test_single_sided_time_is_ignored(self, sample_clinics, payload):
        """片側だけの時間指定は条件なしと同じ"""
        params = SearchParams.model_validate(payload)

        assert filter_clinics(sample_clinics, params) == filter_clinics(
            sample_clinics, SearchParams()
        )

    def test_build_predicates_skips_empty(self):
        """空の条件からは述語を作らない"""
        assert build_predicates(SearchParams()) == []
        assert len(build_predicates(SearchParams(name="a", state="b"))) == 2
        assert len(build_predicates(SearchParams.model_validate({"from": "a", "to": "b"}))) == 1
