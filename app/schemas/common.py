from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    JSON 키는 camelCase (tabletNumber, screenTime ...) 로 주고받고,
    요청 본문에서는 snake_case 필드명도 허용합니다.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ActionResponse(CamelModel):
    success: bool
    message: str
