"""Tests for the command-line interface."""

import json
import pytest

from shortener.cli import main


@pytest.fixture
def storage_args(tmp_path):
    return ["--storage-path", str(tmp_path / "urls.json")]


class TestCLI:
    """Test CLI commands against a JSON document."""

    def test_shorten_and_resolve(self, storage_args, capsys):
        exit_code = main(storage_args + [
            "shorten", "https://example.com/page", "--shortcode", "abc123", "--validity", "5",
        ])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["shortcode"] == "abc123"
        assert output["original_url"] == "https://example.com/page"

        assert main(storage_args + ["resolve", "abc123"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["original_url"] == "https://example.com/page"

    def test_generated_shortcode(self, storage_args, capsys):
        assert main(storage_args + ["shorten", "https://example.com"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert len(output["shortcode"]) == 6

    def test_duplicate_shortcode(self, storage_args, capsys):
        main(storage_args + ["shorten", "https://example.com", "--shortcode", "taken"])
        capsys.readouterr()

        exit_code = main(storage_args + ["shorten", "https://example.org", "--shortcode", "taken"])

        assert exit_code == 1
        error = json.loads(capsys.readouterr().err)
        assert error == {"success": False, "error": "Shortcode already in use: taken"}

    def test_invalid_url(self, storage_args, capsys):
        assert main(storage_args + ["shorten", "not-a-url"]) == 1
        assert "Invalid URL" in json.loads(capsys.readouterr().err)["error"]

    def test_resolve_unknown(self, storage_args, capsys):
        assert main(storage_args + ["resolve", "zzz999"]) == 1
        assert json.loads(capsys.readouterr().err)["error"] == "Short URL expired or not found"

    def test_list_and_stats(self, storage_args, capsys):
        main(storage_args + ["shorten", "https://example.com/a", "--shortcode", "one"])
        main(storage_args + ["shorten", "https://example.com/b", "--shortcode", "two", "--validity", "60"])
        capsys.readouterr()

        assert main(storage_args + ["list"]) == 0
        listing = json.loads(capsys.readouterr().out)
        assert listing["count"] == 2
        assert [u["shortcode"] for u in listing["urls"]] == ["two", "one"]

        assert main(storage_args + ["stats"]) == 0
        stats = json.loads(capsys.readouterr().out)["statistics"]
        assert stats == {"total_urls": 2, "active_urls": 2, "expired_urls": 0}

    def test_custom_storage_key(self, tmp_path, storage_args, capsys):
        main(storage_args + ["--storage-key", "links", "shorten", "https://example.com", "--shortcode", "k1"])

        with open(tmp_path / "urls.json", encoding="utf-8") as f:
            assert "k1" in json.load(f)["links"]

    def test_no_command(self, capsys):
        assert main([]) == 1
