from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Group(BaseModel):
    """
    Группа (сообщество) из файла groups.json.
    Только для чтения, пересоздаётся на каждый запрос.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str = Field(..., description="Описание, может содержать разметку")
    url: str = Field(..., description="Ссылка для вступления в группу")
    tags: List[str]


GroupList = TypeAdapter(List[Group])


class GroupsResponse(BaseModel):
    """
    Ответ API со списком найденных групп.
    """

    term: Optional[str] = None
    total: int
    items: List[Group]


class HealthResponse(BaseModel):
    status: str
    groups_file: bool
    template_file: bool


class ErrorResponse(BaseModel):
    error: str
