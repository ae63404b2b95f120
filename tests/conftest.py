import pytest
from fastapi.testclient import TestClient

from htmx_todo.app.main import create_app
from htmx_todo.app.services.todo_store import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
