import os
from typing import List, Optional, Union

from constants import GROUPS_PLACEHOLDER, JOIN_LINK_TEXT, NO_RESULTS_TEXT, TABLE_COLUMNS
from group_store import load_groups
from highlighter import highlight
from markup import to_html
from schemas import Group
from search_filter import filter_groups
from settings import load_groups_path, load_template_path


def render_row(group: Group, search_term: Optional[str] = None) -> str:
    """
    Формирует строку таблицы для одной группы.

    Описание проходит через разметку, затем название и описание
    подсвечиваются по search_term. Тэги и ссылка выводятся как есть.
    """

    name = group.name
    description = to_html(group.description)

    if search_term:
        name = highlight(name, search_term)
        description = highlight(description, search_term)

    tags_html = "".join(f"<li>{tag}</li>" for tag in group.tags)

    return (
        f"<tr>\n"
        f"    <td>{name}</td>\n"
        f"    <td>{description}</td>\n"
        f"    <td><ul>{tags_html}</ul></td>\n"
        f"    <td><a href=\"{group.url}\">{JOIN_LINK_TEXT}</a></td>\n"
        f"</tr>"
    )


def render_rows(groups: List[Group], search_term: Optional[str] = None) -> str:
    if not groups:
        return f"<tr><td colspan=\"{TABLE_COLUMNS}\">{NO_RESULTS_TEXT}</td></tr>"

    return "".join(render_row(group, search_term) for group in groups)


class TemplateReadError(OSError):
    """
    Шаблон страницы не удалось прочитать как UTF-8.
    """


def load_template(path: Union[str, os.PathLike]) -> str:
    with open(path, 'rb') as f:
        raw = f.read()

    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TemplateReadError(f"Template {path} is not valid UTF-8: {e}") from e


def render_page(search_term: Optional[str] = None,
                groups_path: Optional[Union[str, os.PathLike]] = None,
                template_path: Optional[Union[str, os.PathLike]] = None) -> str:
    """
    Собирает итоговую HTML страницу.

    Оба файла читаются заново на каждый вызов. Ошибки чтения
    и формата не перехватываются: страница либо собирается целиком,
    либо запрос падает.
    """

    groups = load_groups(groups_path or load_groups_path())
    filtered_groups = filter_groups(groups, search_term)
    groups_html = render_rows(filtered_groups, search_term)

    template = load_template(template_path or load_template_path())

    return template.replace(GROUPS_PLACEHOLDER, groups_html, 1)
