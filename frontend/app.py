"""
Frontend Application Server.

Отдаёт HTML страницу со списком групп и поиском по ним.
Страница собирается заново на каждый запрос из groups.json и index.html.
"""

from flask import Flask, Response, request

from group_store import GroupsSchemaError
from renderer import render_page
from settings import load_frontend_address


app = Flask(__name__)

ERROR_PAGE = "<h1>Internal Server Error</h1>"


def _html(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/html")


@app.route("/")
def index() -> Response:
    """
    Главная страница со всеми группами.

    Returns:
        Response: HTML страница без фильтрации.
    """
    return _html(render_page(None))


@app.route("/search")
def search() -> Response:
    """
    Страница с результатами поиска.

    Параметр term необязателен: без него страница
    совпадает с главной.

    Returns:
        Response: HTML страница с отфильтрованными группами.
    """
    term = request.args.get("term")
    return _html(render_page(term))


@app.errorhandler(OSError)
def handle_file_error(e: OSError) -> Response:
    # FileNotFoundError тоже попадает сюда
    print(f"Rendering error: {e}")
    return _html(ERROR_PAGE, 500)


@app.errorhandler(GroupsSchemaError)
def handle_schema_error(e: GroupsSchemaError) -> Response:
    print(f"Groups file error: {e}")
    return _html(ERROR_PAGE, 500)


if __name__ == "__main__":
    host, port = load_frontend_address()
    print(f"Running at http://{host}:{port}")
    app.run(debug=True, port=port, host=host)
