"""Tests for the command line entry point."""

import json

import httpx
import pytest

from mailcraft.__main__ import main

SOURCE = '---\ntitle: Test\n---\n\n<x-base>\n\n  <x-core.hero headline="Hi" />\n\n</x-base>\n'


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "email.html"
    path.write_text(SOURCE, encoding="utf-8")
    return path


class TestCli:
    """Command dispatch and exit codes."""

    @pytest.mark.unit
    def test_no_command_shows_help(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    @pytest.mark.unit
    def test_unknown_command(self):
        assert main(["frobnicate"]) == 1

    @pytest.mark.unit
    def test_format_check_clean(self, template_file):
        assert main(["format", str(template_file), "--check"]) == 0

    @pytest.mark.unit
    def test_format_write(self, tmp_path):
        path = tmp_path / "messy.html"
        path.write_text('<x-base><x-core.hero headline="Hi"/></x-base>', encoding="utf-8")
        assert main(["format", str(path), "--check"]) == 1
        assert main(["format", str(path), "--write"]) == 0
        assert main(["format", str(path), "--check"]) == 0

    @pytest.mark.unit
    def test_format_parse_error(self, tmp_path):
        path = tmp_path / "broken.html"
        path.write_text("<x-core.hero />", encoding="utf-8")
        assert main(["format", str(path)]) == 1

    @pytest.mark.unit
    def test_inspect(self, template_file, capsys):
        assert main(["inspect", str(template_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["components"] == [{"type": "hero", "props": {"headline": "Hi"}}]

    @pytest.mark.unit
    def test_schemas(self, capsys):
        assert main(["schemas"]) == 0
        assert "footer" in capsys.readouterr().out
        assert main(["schemas", "spacer"]) == 0
        assert json.loads(capsys.readouterr().out)["name"] == "spacer"
        assert main(["schemas", "nope"]) == 1

    @pytest.mark.unit
    def test_starter(self, capsys):
        assert main(["starter", "--title", "Welcome"]) == 0
        assert "title: Welcome" in capsys.readouterr().out

    @pytest.mark.unit
    def test_env(self, capsys):
        assert main(["env", "--category", "editor"]) == 0
        out = capsys.readouterr().out
        assert "MAILCRAFT_HISTORY_LIMIT" in out
        assert "MAILCRAFT_COMPILER_URL" not in out

    @pytest.mark.unit
    def test_preview_writes_traced_html(self, template_file, tmp_path, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            markup = json.loads(request.content)["markup"]
            html = markup.replace('<x-core.hero headline="Hi" />', "<table><tr><td>hero</td></tr></table>")
            return httpx.Response(200, json={"html": html})

        original_client = httpx.Client

        def mocked_client(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return original_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "Client", mocked_client)
        out = tmp_path / "out.html"
        assert main(["preview", str(template_file), "-o", str(out)]) == 0
        assert '<tr data-tpl="0">' in out.read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_preview_bad_variable(self, template_file):
        assert main(["preview", str(template_file), "--var", "novalue"]) == 1
