from __future__ import annotations

from pathlib import Path

import pytest

from cmdman import cli
from cmdman.config import ConfigError


def _write_config(tmp_path: Path, output_dir: Path) -> Path:
    path = tmp_path / "manpages.yaml"
    path.write_text(
        f"""
defaults:
  directory: {output_dir}
  author: Config Author
  date: "2026-01-15"
command:
  use: app
  short: Example application
  commands:
    - use: sub
      short: Run the sub command
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_generate_writes_pages_and_reports_paths(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_dir = tmp_path / "man" / "man1"
    cli.generate(config=_write_config(tmp_path, output_dir))

    assert (output_dir / "app-sub.1").exists()
    assert (output_dir / "app.1").exists()
    lines = capsys.readouterr().out.splitlines()
    assert [Path(line.removeprefix("wrote ")).name for line in lines] == [
        "app-sub.1",
        "app.1",
    ]
    page = (output_dir / "app.1").read_text(encoding="utf-8")
    assert '"Jan 2026"' in page
    assert ".SH AUTHOR\nConfig Author\n" in page


def test_generate_applies_overrides(tmp_path: Path) -> None:
    template = tmp_path / "tiny.jinja"
    template.write_text("{{ command_path }} {{ author }} {{ center_footer }}\n", encoding="utf-8")
    override_dir = tmp_path / "override"

    cli.generate(
        config=_write_config(tmp_path, tmp_path / "unused"),
        output_dir=override_dir,
        section="7",
        author="CLI Author",
        date="2025-06-30",
        template=template,
    )

    assert not (tmp_path / "unused").exists()
    assert (override_dir / "app.7").read_text(encoding="utf-8") == (
        "app CLI Author Jun 2025\n"
    )


def test_generate_rejects_invalid_date(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        cli.generate(config=_write_config(tmp_path, tmp_path / "man"), date="soon")


def test_generate_rejects_non_boolean_hidden(tmp_path: Path) -> None:
    path = tmp_path / "manpages.yaml"
    path.write_text("command:\n  use: app\n  hidden: 'false'\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be true or false"):
        cli.generate(config=path, output_dir=tmp_path / "man")
