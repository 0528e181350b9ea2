from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class _RequestModel(BaseModel):
    """リクエストボディは camelCase（numOfSingleRooms など）で受け取る"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class CreateBookingRequest(_RequestModel):
    """予約作成リクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100, description="予約者氏名")
    email: str = Field(..., min_length=3, max_length=254, description="メールアドレス")
    guests: int = Field(..., ge=1, description="宿泊人数")
    num_of_single_rooms: int = Field(default=0, ge=0)
    num_of_double_rooms: int = Field(default=0, ge=0)
    num_of_suite_rooms: int = Field(default=0, ge=0)
    check_in: str = Field(
        ...,
        pattern=_DATE_PATTERN,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2030-01-10"],
    )
    check_out: str = Field(
        ...,
        pattern=_DATE_PATTERN,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2030-01-12"],
    )


class UpdateBookingRequest(_RequestModel):
    """予約変更リクエストモデル

    指定された項目のみ変更する。氏名・メールアドレスは変更できない。
    """

    guests: int | None = Field(default=None, ge=1)
    num_of_single_rooms: int | None = Field(default=None, ge=0)
    num_of_double_rooms: int | None = Field(default=None, ge=0)
    num_of_suite_rooms: int | None = Field(default=None, ge=0)
    check_in: str | None = Field(default=None, pattern=_DATE_PATTERN)
    check_out: str | None = Field(default=None, pattern=_DATE_PATTERN)

    @model_validator(mode="after")
    def require_any_change(self) -> "UpdateBookingRequest":
        if not self.model_dump(exclude_none=True):
            raise ValueError("At least one attribute to update is required")
        return self
