from pydantic import BaseModel, Field


class DeskCreateRequest(BaseModel):
    description: str = Field(max_length=100)

    class Config:
        json_schema_extra = {'example': {'description': 'Desk 1, window side'}}


class DeskResponse(BaseModel):
    id: int
    description: str
