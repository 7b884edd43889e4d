"""End-to-end tests for the digestcheck command."""

import orjson
import pytest
from click.testing import CliRunner

from digestcheck import __version__
from digestcheck.cli import main

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"
ABC_MD5 = "900150983cd24fb0d6963f7d28e17f72"


@pytest.fixture
def runner():
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        # click >= 8.2 always keeps stderr separate
        return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Working directory with two targets."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DIGESTCHECK_CONFIG", raising=False)
    (tmp_path / "empty.txt").write_bytes(b"")
    (tmp_path / "abc.txt").write_bytes(b"abc")
    return tmp_path


class TestProduceMode:
    def test_prints_digests(self, runner, workdir):
        result = runner.invoke(main, ["empty.txt", "abc.txt"])
        assert result.exit_code == 0
        assert result.stdout == f"{EMPTY_MD5}  empty.txt\n{ABC_MD5}  abc.txt\n"

    def test_stdin_by_default(self, runner, workdir):
        result = runner.invoke(main, [], input=b"abc")
        assert result.exit_code == 0
        assert result.stdout == f"{ABC_MD5}  -\n"

    def test_missing_target_fails_fast(self, runner, workdir):
        result = runner.invoke(main, ["abc.txt", "nope.txt", "empty.txt"])
        assert result.exit_code == 1
        assert result.stdout == f"{ABC_MD5}  abc.txt\n"
        assert 'Error when reading "nope.txt"' in result.stderr

    def test_algorithm_option(self, runner, workdir):
        result = runner.invoke(main, ["-a", "sha256", "empty.txt"])
        assert result.exit_code == 0
        assert result.stdout.startswith("e3b0c44298fc1c149afbf4c8996fb924")

    def test_report_requires_check(self, runner, workdir):
        result = runner.invoke(main, ["--report", "out.json", "abc.txt"])
        assert result.exit_code == 2

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCheckMode:
    def test_round_trip(self, runner, workdir):
        """Output of produce mode checks clean."""
        produced = runner.invoke(main, ["empty.txt", "abc.txt"])
        (workdir / "sums.md5").write_text(produced.stdout)

        result = runner.invoke(main, ["-c", "sums.md5"])
        assert result.exit_code == 0
        assert result.stdout == "empty.txt: OK\nabc.txt: OK\n"

    def test_reference_example(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"{EMPTY_MD5} *empty.txt\n")
        result = runner.invoke(main, ["--check", "sums.md5"])
        assert result.exit_code == 0
        assert result.stdout == "empty.txt: OK\n"

    def test_manifest_from_stdin(self, runner, workdir):
        result = runner.invoke(main, ["-c"], input=f"{ABC_MD5}  abc.txt\n")
        assert result.exit_code == 0
        assert result.stdout == "abc.txt: OK\n"

    def test_mismatch(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"{EMPTY_MD5}  abc.txt\n{ABC_MD5}  empty.txt\n")
        result = runner.invoke(main, ["-c", "sums.md5"])
        assert result.exit_code == 1
        assert "abc.txt: FAILED" in result.stderr
        assert "2 computed checksums did NOT match" in result.stderr

    def test_status_is_silent(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"{ABC_MD5}  abc.txt\n")
        result = runner.invoke(main, ["-c", "--status", "sums.md5"])
        assert result.exit_code == 0
        assert result.stdout == ""
        assert result.stderr == ""

    def test_missing_target(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"{ABC_MD5}  gone.txt\n{ABC_MD5}  abc.txt\n")
        result = runner.invoke(main, ["-c", "sums.md5"])
        assert result.exit_code == 1
        assert "FAILED: could not read gone.txt" in result.stderr
        assert result.stdout == ""

        result = runner.invoke(main, ["-c", "--ignore-missing", "sums.md5"])
        assert result.exit_code == 0
        assert result.stdout == "abc.txt: OK\n"

    def test_strict_and_warn(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"junk\n{ABC_MD5}  abc.txt\n")

        result = runner.invoke(main, ["-c", "-w", "sums.md5"])
        assert result.exit_code == 0
        assert "WARNING: sums.md5: 1: line badly formatted" in result.stderr

        result = runner.invoke(main, ["-c", "--strict", "sums.md5"])
        assert result.exit_code == 1
        assert "ERROR: sums.md5: 1: line badly formatted" in result.stderr
        assert result.stdout == ""

    def test_missing_manifest(self, runner, workdir):
        result = runner.invoke(main, ["-c", "nope.md5"])
        assert result.exit_code == 1
        assert "FAILED: could not read nope.md5" in result.stderr
        assert "Traceback" not in result.output

    def test_report(self, runner, workdir):
        (workdir / "sums.md5").write_text(f"{EMPTY_MD5}  abc.txt\n{ABC_MD5}  abc.txt\n")
        result = runner.invoke(main, ["-c", "--report", "out/report.json", "sums.md5"])
        assert result.exit_code == 1

        report = orjson.loads((workdir / "out" / "report.json").read_bytes())
        assert report["algorithm"] == "md5"
        assert report["exit_status"] == 1
        assert report["aborted"] is False
        assert report["failed_targets"] == ["abc.txt"]
        assert [o["kind"] for o in report["outcomes"]] == ["failed", "ok"]

    def test_report_written_on_abort(self, runner, workdir):
        (workdir / "sums.md5").write_text("junk\n")
        result = runner.invoke(main, ["-c", "--strict", "--report", "r.json", "sums.md5"])
        assert result.exit_code == 1
        report = orjson.loads((workdir / "r.json").read_bytes())
        assert report["aborted"] is True


class TestConfigFile:
    def test_config_sets_defaults(self, runner, workdir):
        (workdir / "cfg.yaml").write_text("algorithm: sha1\ncheck:\n  quiet: true\n")
        (workdir / "sums.sha1").write_text(
            "a9993e364706816aba3e25717850c26c9cd0d89d  abc.txt\n"
        )
        result = runner.invoke(main, ["--config", "cfg.yaml", "-c", "sums.sha1"])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_cli_algorithm_overrides_config(self, runner, workdir):
        (workdir / "cfg.yaml").write_text("algorithm: sha1\n")
        result = runner.invoke(main, ["--config", "cfg.yaml", "-a", "md5", "abc.txt"])
        assert result.stdout == f"{ABC_MD5}  abc.txt\n"

    def test_config_from_env(self, runner, workdir, monkeypatch):
        (workdir / "cfg.yaml").write_text("algorithm: xxh64\n")
        monkeypatch.setenv("DIGESTCHECK_CONFIG", "cfg.yaml")
        result = runner.invoke(main, ["empty.txt"])
        assert result.stdout == "ef46db3751d8e999  empty.txt\n"

    def test_bad_config(self, runner, workdir):
        (workdir / "cfg.yaml").write_text("algorithm: crc7\n")
        result = runner.invoke(main, ["--config", "cfg.yaml", "abc.txt"])
        assert result.exit_code == 1
        assert "Error loading config" in result.stderr

    def test_missing_config(self, runner, workdir):
        result = runner.invoke(main, ["--config", "nope.yaml", "abc.txt"])
        assert result.exit_code == 1
        assert "Config file not found" in result.stderr
