"""pytest共通設定・fixtures"""

import os
import pytest
from unittest.mock import MagicMock

# テスト用環境変数を設定
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def mock_fetcher():
    """DataFetcherのテストダブル"""
    fetcher = MagicMock()
    fetcher.get_clinic_data.return_value = []
    return fetcher


@pytest.fixture
def app(mock_fetcher):
    """Flaskテストアプリケーション"""
    from app.main import create_app

    app = create_app(fetcher=mock_fetcher)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flaskテストクライアント"""
    return app.test_client()


@pytest.fixture
def scratchpay_clinic():
    """FLのサンプルクリニック"""
    from app.models.clinic import Clinic

    return Clinic.model_validate(
        {
            "name": "Scratchpay Official practice",
            "state": "FL",
            "availability": {"from": "09:00", "to": "20:00"},
        }
    )


@pytest.fixture
def sample_clinics(scratchpay_clinic):
    """複数のサンプルクリニック"""
    from app.models.clinic import Clinic

    return [
        scratchpay_clinic,
        Clinic.model_validate(
            {
                "name": "Good Health",
                "state": "California",
                "availability": {"from": "09:00", "to": "20:00"},
            }
        ),
        Clinic.model_validate(
            {
                "name": "National Veterinary Clinic",
                "state": "CA",
                "availability": {"from": "15:00", "to": "22:30"},
            }
        ),
    ]


@pytest.fixture
def dental_payload():
    """歯科フィードのレスポンスボディ"""
    return (
        b'[{"name": "Good Health Home", "stateName": "Alaska",'
        b' "availability": {"from": "10:00", "to": "19:30"}},'
        b' {"name": "Mayo Clinic", "stateName": "Florida",'
        b' "availability": {"from": "09:00", "to": "20:00"}}]'
    )


@pytest.fixture
def vet_payload():
    """動物病院フィードのレスポンスボディ"""
    return (
        b'[{"clinicName": "Good Health Home", "stateCode": "FL",'
        b' "opening": {"from": "15:00", "to": "20:00"}}]'
    )
