"""クリニックデータモデル（Pydantic）"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Availability(BaseModel):
    """診療時間帯（"HH:MM"形式の文字列）"""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="開始時刻")
    to: str = Field(..., description="終了時刻")


class Clinic(BaseModel):
    """正規化済みクリニック情報（APIレスポンスの単位）"""

    name: str = Field(..., description="クリニック名")
    state: str = Field(..., description="州")
    availability: Availability = Field(..., description="診療時間帯")

    def to_dict(self) -> dict:
        """JSONレスポンス用の辞書（キーは name, state, availability の順）"""
        return self.model_dump(by_alias=True)


class DentalClinic(BaseModel):
    """歯科フィードの1件"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    state: str = Field(..., alias="stateName")
    availability: Availability

    def to_clinic(self) -> Clinic:
        return Clinic(name=self.name, state=self.state, availability=self.availability)


class VetClinic(BaseModel):
    """動物病院フィードの1件"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="clinicName")
    state: str = Field(..., alias="stateCode")
    availability: Availability = Field(..., alias="opening")

    def to_clinic(self) -> Clinic:
        return Clinic(name=self.name, state=self.state, availability=self.availability)


class SearchParams(BaseModel):
    """
    検索リクエスト

    空文字は「条件なし」を意味する。未知のキーは無視する。
    """

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field("", description="クリニック名（部分一致）")
    state: StrictStr = Field("", description="州（部分一致）")
    from_: StrictStr = Field("", alias="from", description="開始時刻")
    to: StrictStr = Field("", description="終了時刻")

    @property
    def has_time_window(self) -> bool:
        """開始・終了の両方が指定されているか"""
        return bool(self.from_) and bool(self.to)


class ErrorResponse(BaseModel):
    """エラーレスポンス"""

    error: str
    messages: dict[str, str] = Field(default_factory=dict)
