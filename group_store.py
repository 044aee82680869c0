import os
from typing import List, Union
from pydantic import ValidationError

from schemas import Group, GroupList


class GroupsSchemaError(ValueError):
    """
    Файл с группами не является JSON массивом групп нужного формата.
    """

    def __init__(self, path: Union[str, os.PathLike], error: ValueError):
        self.path = path
        self.error = error
        super().__init__(f"Invalid groups file {path}: {error}")


def load_groups(path: Union[str, os.PathLike]) -> List[Group]:
    """
    Читает группы из JSON файла.

    Файл читается при каждом вызове, без кэширования.
    FileNotFoundError и OSError пробрасываются как есть,
    ошибки кодировки, разбора и формата превращаются в GroupsSchemaError.
    """

    with open(path, 'rb') as f:
        raw = f.read()

    try:
        return GroupList.validate_json(raw.decode('utf-8'))
    except (UnicodeDecodeError, ValidationError) as e:
        raise GroupsSchemaError(path, e) from e
