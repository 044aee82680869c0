import json

import pytest

from schemas import Group


GROUPS_DATA = [
    {
        "name": "Gophers",
        "description": "A *friendly* group",
        "url": "http://x",
        "tags": ["go", "systems"],
    },
    {
        "name": "Rustaceans",
        "description": "Fearless _concurrency_ and !1unsafe! code",
        "url": "http://rust.example",
        "tags": ["Rust", "Systems"],
    },
    {
        "name": "Book Club",
        "description": "We read novels, mostly about wizards",
        "url": "http://books.example",
        "tags": [],
    },
]

TEMPLATE = "<html><body><table>{{groups}}</table></body></html>"


@pytest.fixture
def groups():
    return [Group(**data) for data in GROUPS_DATA]


@pytest.fixture
def groups_file(tmp_path):
    path = tmp_path / "groups.json"
    path.write_text(json.dumps(GROUPS_DATA), encoding="utf-8")
    return path


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "index.html"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def configured_files(monkeypatch, groups_file, template_file):
    """Направляет settings на временные файлы."""
    monkeypatch.setenv("GROUPS_PATH", str(groups_file))
    monkeypatch.setenv("TEMPLATE_PATH", str(template_file))
    return groups_file, template_file
