from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from naturalsort import InputError, NaturalSortConfig


def _write_pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(dedent(body).lstrip(), encoding="utf-8")


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    assert NaturalSortConfig.load(tmp_path) == NaturalSortConfig()


def test_defaults_without_tool_table(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[project]\nname = "demo"\n')
    config = NaturalSortConfig.load(tmp_path)
    assert config.separator == ","
    assert not config.output_gzip


def test_tool_table_overrides(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
        [tool.naturalsort]
        separator = ";"
        input_base64 = true
        output_gzip = true
        unknown = "ignored"
        """,
    )
    config = NaturalSortConfig.load(tmp_path)
    assert config == NaturalSortConfig(
        separator=";", input_base64=True, output_gzip=True
    )


@pytest.mark.parametrize(
    "body",
    [
        '[tool.naturalsort]\nseparator = ";;"\n',
        "[tool.naturalsort]\nseparator = 1\n",
        '[tool.naturalsort]\noutput_gzip = "yes"\n',
        "[tool.naturalsort\n",
    ],
)
def test_invalid_values(tmp_path: Path, body: str) -> None:
    _write_pyproject(tmp_path, body)
    with pytest.raises(InputError):
        NaturalSortConfig.load(tmp_path)
