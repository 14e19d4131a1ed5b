import pytest

# pylint: disable=redefined-outer-name

VALID_TASK_MD = """---
id: {folder}
name: Migrate {folder}
type: task
---

# {folder}

Replace the old client with the new client builder.
"""


@pytest.fixture
def catalog_root(tmp_path):
    """Fixture que crea un catálogo vacío con el directorio tasks."""
    (tmp_path / "tasks").mkdir()
    return tmp_path


@pytest.fixture
def add_task(catalog_root):
    """Fixture que permite agregar carpetas de tareas al catálogo."""

    def _add_task(folder, task_md=None, files=None):
        task_dir = catalog_root / "tasks" / folder
        task_dir.mkdir(parents=True, exist_ok=True)
        if task_md is None:
            task_md = VALID_TASK_MD.format(folder=folder)
        if task_md is not False:
            (task_dir / "task.md").write_text(task_md, encoding="utf-8")
        for name, content in (files or {}).items():
            (task_dir / name).write_text(content, encoding="utf-8")
        return task_dir

    return _add_task
