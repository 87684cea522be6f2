"""アプリケーション層の依存方向のテスト."""

import ast

from pathlib import Path

import pytest

import wareki.application


APPLICATION_DIR = Path(wareki.application.__file__).parent


def _imported_modules(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            modules.append(node.module)
    return modules


@pytest.mark.parametrize(
    "path",
    sorted(APPLICATION_DIR.rglob("*.py")),
    ids=lambda p: str(p.relative_to(APPLICATION_DIR)),
)
def test_application_does_not_import_interfaces(path: Path) -> None:
    imported = _imported_modules(path)

    assert not [m for m in imported if m.startswith("wareki.interfaces")]
