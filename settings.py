import os
from pathlib import Path
from dotenv import load_dotenv

from constants import (GROUPS_FILE, TEMPLATE_FILE, DEFAULT_FRONTEND_HOST, DEFAULT_FRONTEND_PORT,
                       DEFAULT_API_HOST, DEFAULT_API_PORT, DEFAULT_API_URL)


def load_groups_path() -> Path:
    """
    Путь к JSON файлу с группами.
    Читается заново при каждом вызове, относительно рабочей директории.
    """

    load_dotenv()
    return Path(os.environ.get('GROUPS_PATH') or GROUPS_FILE)


def load_template_path() -> Path:
    """
    Путь к HTML шаблону страницы.
    """

    load_dotenv()
    return Path(os.environ.get('TEMPLATE_PATH') or TEMPLATE_FILE)


def _load_port(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def load_frontend_address() -> tuple[str, int]:
    load_dotenv()
    host = os.environ.get('FRONTEND_HOST') or DEFAULT_FRONTEND_HOST
    return host, _load_port('FRONTEND_PORT', DEFAULT_FRONTEND_PORT)


def load_api_address() -> tuple[str, int]:
    load_dotenv()
    host = os.environ.get('API_HOST') or DEFAULT_API_HOST
    return host, _load_port('API_PORT', DEFAULT_API_PORT)


def load_api_url() -> str:
    load_dotenv()
    return (os.environ.get('API_URL') or DEFAULT_API_URL).rstrip('/')
