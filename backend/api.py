import uvicorn
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from group_store import GroupsSchemaError, load_groups
from schemas import ErrorResponse, GroupsResponse, HealthResponse
from search_filter import filter_groups
from settings import load_api_address, load_groups_path, load_template_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Жизненный цикл API.
    Состояния между запросами нет, поэтому только сообщает
    о старте и о том, какие файлы будут читаться.
    """

    print("Starting API...")
    print(f" groups file: {load_groups_path()}")
    print(f" template file: {load_template_path()}")

    yield

    print("Stopping API...")

app = FastAPI(title='Group Finder API', lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(OSError)
async def file_error_handler(request: Request, exc: OSError):
    print(f"Groups loading error: {exc}")
    return _error_response("Groups file is not available")


@app.exception_handler(GroupsSchemaError)
async def schema_error_handler(request: Request, exc: GroupsSchemaError):
    print(f"Groups file error: {exc}")
    return _error_response("Groups file is malformed")


@app.get("/api/groups", response_model=GroupsResponse)
def groups_endpoint(term: Optional[str] = None):
    """
    Список групп в JSON, с тем же поиском, что и на HTML странице.

    Группы отдаются без разметки и подсветки.
    """

    groups = filter_groups(load_groups(load_groups_path()), term)

    return GroupsResponse(term=term, total=len(groups), items=groups)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """
    Проверка активности сервиса.
    """

    return HealthResponse(
        status="active",
        groups_file=load_groups_path().is_file(),
        template_file=load_template_path().is_file(),
    )


if __name__ == "__main__":
    host, port = load_api_address()
    uvicorn.run(app, host=host, port=port, reload=False)
