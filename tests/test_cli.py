"""Tests for the Cyclopts command functions."""

from __future__ import annotations

import logging
import typing as typ

import pytest

from quire import cli
from quire.site import SiteGenerator

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def test_build_reports_written_paths(
    site_source: Path, site_target: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The build command prints one line per written file."""
    cli.build(site_source, site_target)
    out = capsys.readouterr().out
    assert f"wrote {site_target / 'index.html'}" in out
    assert f"wrote {site_target / 'blog' / 'atom.xml'}" in out
    assert (site_target / "about" / "index.html").is_file()


def test_build_exits_non_zero_on_failure(
    site_source: Path, site_target: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Failed documents are listed on stderr and the command exits with 1."""
    (site_source / "fragments" / "page_header.html").unlink()
    with pytest.raises(SystemExit) as excinfo:
        cli.build(site_source, site_target)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "failed about:" in captured.err
    assert "failed projects:" in captured.err
    assert "blog" in captured.out


def test_posts_only_writes_posts(site_source: Path, site_target: Path) -> None:
    """The posts command leaves pages and the landing page alone."""
    cli.posts(site_source, site_target)
    assert (site_target / "blog" / "second-wind" / "index.html").is_file()
    assert not (site_target / "index.html").exists()
    assert not (site_target / "about").exists()


def test_pages_only_writes_pages(site_source: Path, site_target: Path) -> None:
    """The pages command writes static pages and nothing under blog/."""
    cli.pages(site_source, site_target)
    assert (site_target / "projects" / "index.html").is_file()
    assert not (site_target / "blog").exists()


def test_landing_and_feed_commands(
    site_source: Path, site_target: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Single-output commands print the path they wrote."""
    cli.landing(site_source, site_target)
    cli.feed(site_source, site_target)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"wrote {site_target / 'index.html'}",
        f"wrote {site_target / 'blog' / 'atom.xml'}",
    ]


def test_build_runs_generator_once(
    site_source: Path, site_target: Path, mocker: MockerFixture
) -> None:
    """The build command delegates to a single SiteGenerator.run call."""
    spy = mocker.spy(SiteGenerator, "run")
    cli.build(site_source, site_target)
    assert spy.call_count == 1


def test_verbose_enables_debug_logging(
    site_source: Path, site_target: Path, mocker: MockerFixture
) -> None:
    """``--verbose`` configures logging at DEBUG level."""
    basic_config = mocker.patch("quire.cli.logging.basicConfig")
    cli.landing(site_source, site_target, verbose=True)
    basic_config.assert_called_once_with(
        level=logging.DEBUG, format=cli.LOG_FORMAT, force=True
    )


def test_app_name() -> None:
    """The Cyclopts app is registered under the console script name."""
    assert "quire" in cli.app.name


def test_landing_exits_non_zero_without_fragment(
    site_source: Path, site_target: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing landing fragment is reported and the command exits with 1."""
    (site_source / "fragments" / "landing_footer.html").unlink()
    with pytest.raises(SystemExit) as excinfo:
        cli.landing(site_source, site_target)
    assert excinfo.value.code == 1
    assert "failed index:" in capsys.readouterr().err


def test_feed_exits_non_zero_when_posts_fail(
    site_source: Path, site_target: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The feed is still written, but skipped posts make the command fail."""
    (site_source / "fragments" / "post_footer.html").unlink()
    with pytest.raises(SystemExit) as excinfo:
        cli.feed(site_source, site_target)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert f"wrote {site_target / 'blog' / 'atom.xml'}" in captured.out
    assert "failed first-light:" in captured.err
