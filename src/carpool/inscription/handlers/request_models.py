from pydantic import Field

from carpool.shared.utils.request_model import RequestModel


class CreateInscriptionRequest(RequestModel):
    """座席予約リクエスト（乗客は認証トークンのユーザー）"""

    trip_id: str = Field(..., min_length=1, description="旅程ID")
