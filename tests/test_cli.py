"""Tests for prowl._cli — argument parsing and the routes command."""

from __future__ import annotations

from pathlib import Path

import pytest

from prowl._cli import _build_parser, _format_table, main

USERS_ROUTE = (
    "from prowl import Router\n"
    "router = Router()\n"
    "@router.get('/:id')\n"
    "async def show(request):\n"
    "    return 'user'\n"
    "@router.put('/:id')\n"
    "async def update(request):\n"
    "    return 'updated'\n"
)


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_routes_default_args(self) -> None:
        args = _build_parser().parse_args(["routes"])
        assert args.command == "routes"
        assert args.root == "."
        assert args.routes_folder is None
        assert args.prefix is None
        assert args.exclusions is None

    def test_routes_all_flags(self) -> None:
        args = _build_parser().parse_args([
            "routes", "my-app/",
            "--routes-folder", "handlers",
            "--prefix", "/api",
            "--exclude", "admin",
            "--exclude", "^draft",
        ])
        assert args.root == "my-app/"
        assert args.routes_folder == "handlers"
        assert args.prefix == "/api"
        assert args.exclusions == ["admin", "^draft"]

    def test_no_command_returns_none(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None


class TestFormatTable:
    def test_header_and_rows(self) -> None:
        lines = _format_table([("GET", "/users/", "get_users")])
        assert lines[0].split() == ["METHOD", "PATH", "NAME"]
        assert lines[2].split() == ["GET", "/users/", "get_users"]


class TestRoutesCommand:
    """prowl routes — dry-run listing."""

    def test_lists_routes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        users = tmp_path / "routes" / "users"
        users.mkdir(parents=True)
        (users / "index.py").write_text(USERS_ROUTE)

        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path), "--prefix", "/api"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "GET, PUT" in out
        assert "/api/users/:id/" in out
        assert "get_api_users_by_id" in out

    def test_empty_folder(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "routes").mkdir()
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path)])
        assert exc_info.value.code == 0
        assert "No routes found." in capsys.readouterr().out

    def test_missing_folder_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_reports_skipped_modules(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        routes = tmp_path / "routes"
        routes.mkdir()
        (routes / "index.py").write_text(USERS_ROUTE)
        (routes / "empty.py").write_text("from prowl import Router\nrouter = Router()\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path)])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Skipped 1 module(s):" in out
        assert "empty.py: stack is empty" in out

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage" in capsys.readouterr().out
