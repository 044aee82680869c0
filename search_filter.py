from typing import Iterable, List, Optional

from constants import TAG_PREFIX
from schemas import Group


def tokenize(query: str) -> List[str]:
    """
    Разбивает запрос на токены в нижнем регистре.
    """

    return query.lower().split()


def matches_token(group: Group, token: str) -> bool:
    """
    Проверяет один токен запроса.

    Токен вида tag:xxx ищется только в тэгах,
    остальные ищутся в названии, описании и тэгах.
    """

    tags = [tag.lower() for tag in group.tags]

    if token.startswith(TAG_PREFIX):
        needle = token[len(TAG_PREFIX):]
        return any(needle in tag for tag in tags)

    return (token in group.name.lower()
            or token in group.description.lower()
            or any(token in tag for tag in tags))


def filter_groups(groups: Iterable[Group], query: Optional[str]) -> List[Group]:
    """
    Оставляет группы, подходящие под каждый токен запроса.
    Порядок групп сохраняется. Пустой запрос ничего не отсекает.
    """

    if not query:
        return list(groups)

    tokens = tokenize(query)

    return [group for group in groups
            if all(matches_token(group, token) for token in tokens)]
