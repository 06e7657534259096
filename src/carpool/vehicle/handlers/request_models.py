from pydantic import Field

from carpool.shared.utils.request_model import RequestModel

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CreateCarRequest(RequestModel):
    """車両登録リクエストスキーマ"""

    license_plate: str = Field(
        ..., min_length=1, max_length=20, description="ナンバープレート", examples=["AB-123-CD"]
    )
    brand_id: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1, max_length=100, description="車種名")
    color_id: str | None = None


class UpdateCarRequest(RequestModel):
    license_plate: str | None = Field(default=None, min_length=1, max_length=20)
    brand_id: str | None = None
    model: str | None = Field(default=None, min_length=1, max_length=100)
    color_id: str | None = None


class CreateBrandRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Renault"])


class CreateColorRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=50, examples=["Red"])
    hex: str = Field(..., pattern=HEX_COLOR_PATTERN, examples=["#FF0000"])


class UpdateColorRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    hex: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
