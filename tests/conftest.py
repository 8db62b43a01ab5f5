import logging
import textwrap
import uuid
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    """Write dedented text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    """Importable module defining the schemas used by checker tests.

    Returns the module name; each test gets a unique one.
    """
    module_name = f"sample_schemas_{uuid.uuid4().hex}"
    (tmp_path / f"{module_name}.py").write_text(
        textwrap.dedent(
            """
            from schematize import CustomSchema, ObjectSchema, OptionalSchema, StringSchema, TypeSchema


            def explode(value):
                raise RuntimeError("predicate failed")


            person = ObjectSchema({
                "name": StringSchema(min_length=1),
                "age": TypeSchema(int),
                "email": OptionalSchema(StringSchema(pattern="@")),
            })


            class Registry:
                person = person


            exploding = CustomSchema(explode)
            not_a_schema = 42
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name
