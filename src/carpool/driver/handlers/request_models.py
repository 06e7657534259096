from pydantic import Field

from carpool.shared.utils.request_model import RequestModel


class CreateDriverRequest(RequestModel):
    driver_license: str = Field(
        ..., min_length=1, max_length=50, description="運転免許証番号", examples=["B-123456"]
    )
