from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest
from helpers import make_row

from covowners import __version__
from covowners.cli.main import build_parser, main
from covowners.contracts.schema import validate
from covowners.exit_codes import ERR_INPUT, ERR_ORPHANS, ERR_VALIDATION, OK

pytestmark = pytest.mark.integration

WriteReport = Callable[[list[dict[str, object]]], Path]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CI", "RUN_ID", "COVOWNERS_CONFIG", "COVOWNERS_MAINTAINERS_FILE"):
        monkeypatch.delenv(name, raising=False)


def _json_out(capsys: pytest.CaptureFixture[str]) -> dict[str, object]:
    return json.loads(capsys.readouterr().out)


def test_parser_report_subcommand() -> None:
    ns = build_parser().parse_args(["report", "-i", "r.json", "-m", "M", "--person", "a", "--person", "b"])
    assert ns.cmd == "report"
    assert ns.person == ["a", "b"]
    assert ns.component == []


def test_help_for_all_commands(capsys: pytest.CaptureFixture[str]) -> None:
    for command in ("report", "audit", "owners", "maintainers", "version"):
        with pytest.raises(SystemExit) as exc:
            main([command, "--help"])
        assert exc.value.code == 0
        assert "usage:" in capsys.readouterr().out.lower()


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", "version"]) == OK
    assert capsys.readouterr().out.strip() == f"covowners {__version__}"


def test_report_grouped_json_matches_contract(
    maintainers_file: Path, write_report: WriteReport, capsys: pytest.CaptureFixture[str]
) -> None:
    report = write_report([make_row(2, "/src/plugins/acl/acl.c"), make_row(1, "/src/unowned.c")])
    code = main(["--json", "--run-id", "t-1", "report", "-i", str(report), "-m", str(maintainers_file), "--emails"])
    assert code == OK
    payload = _json_out(capsys)
    validate("covowners.report.v1", payload)
    assert payload["mode"] == "grouped"
    assert payload["run_id"] == "t-1"
    groups = {g["maintainer"]: [d["cid"] for d in g["defects"]] for g in payload["groups"]}
    assert groups["Unidentified owner"] == [1]
    assert groups["Andrew Yourtchenko <ayourtch@example.com>"] == [2]
    assert payload["roster"] == ["Andrew Yourtchenko <ayourtch@example.com>"]


def test_report_query_mode(maintainers_file: Path, write_report: WriteReport, capsys: pytest.CaptureFixture[str]) -> None:
    report = write_report([make_row(2, "/src/plugins/acl/acl.c", "acl_add"), make_row(3, "/src/vnet/bfd/bfd.c")])
    code = main(["-q", "report", "-i", str(report), "-m", str(maintainers_file), "--component", "acl"])
    assert code == OK
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["CID 2: Resource leak in function acl_add, file: src/plugins/acl/acl.c [High]"]


def test_report_text_groups(maintainers_file: Path, write_report: WriteReport, capsys: pytest.CaptureFixture[str]) -> None:
    report = write_report([make_row(3, "/src/vnet/bfd/bfd.c")])
    assert main(["-q", "report", "-i", str(report), "-m", str(maintainers_file), "--emails"]) == OK
    out = capsys.readouterr().out
    assert "Klement Sekera <ksekera@example.com>:\n  CID 3:" in out
    assert out.rstrip().endswith("Klement Sekera <ksekera@example.com>")


def test_report_unreadable_input_fails(maintainers_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-q", "report", "-i", str(tmp_path / "missing.json"), "-m", str(maintainers_file)])
    assert code == ERR_INPUT
    assert "cannot read defect report" in capsys.readouterr().err


def test_malformed_maintainers_fails_json(tmp_path: Path, write_report: WriteReport, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "MAINTAINERS"
    bad.write_text("Intro\nEntry\nQ: what\n", encoding="utf-8")
    report = write_report([make_row(1, "src/a.c")])
    assert main(["--json", "-q", "report", "-i", str(report), "-m", str(bad)]) == ERR_VALIDATION
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["status"] == "error"
    assert err["errors"][0]["kind"] == "malformed_ownership_entry"


def test_audit_report_lists_unowned_defects(
    maintainers_file: Path, write_report: WriteReport, capsys: pytest.CaptureFixture[str]
) -> None:
    report = write_report([make_row(4, "/src/plugins/acl/acl.c"), make_row(9, "/src/nowhere/x.c")])
    assert main(["--json", "-q", "audit", str(report), "-m", str(maintainers_file)]) == ERR_ORPHANS
    payload = _json_out(capsys)
    assert payload["mode"] == "report"
    assert [d["cid"] for d in payload["orphans"]] == [9]


def test_audit_falls_back_to_tree_walk(maintainers_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "tree"
    (root / "src/plugins/acl").mkdir(parents=True)
    (root / "src/plugins/acl/acl.c").write_text("", encoding="utf-8")
    (root / "src/orphan.c").write_text("", encoding="utf-8")
    assert main(["-q", "audit", str(root), "-m", str(maintainers_file)]) == ERR_ORPHANS
    assert capsys.readouterr().out.splitlines() == ["Unowned file: src/orphan.c"]


def test_audit_clean_tree_passes(maintainers_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = tmp_path / "tree"
    (root / "src/vnet").mkdir(parents=True)
    (root / "src/vnet/main.c").write_text("", encoding="utf-8")
    assert main(["--json", "-q", "audit", str(root) + "/", "-m", str(maintainers_file)]) == OK
    payload = _json_out(capsys)
    assert payload["mode"] == "tree"
    assert payload["orphans"] == []


def test_owners_lookup(maintainers_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "-q", "owners", "/src/plugins/acl/acl.c", "src/nowhere.c", "-m", str(maintainers_file)]) == OK
    lookups = _json_out(capsys)["lookups"]
    assert lookups[0]["path"] == "src/plugins/acl/acl.c"
    assert [e["short_name"] for e in lookups[0]["entries"]] == ["acl"]
    assert lookups[1]["entries"] == []


def test_maintainers_dump_uses_env_file(
    maintainers_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("COVOWNERS_MAINTAINERS_FILE", str(maintainers_file))
    assert main(["-q", "maintainers"]) == OK
    out = capsys.readouterr().out
    assert "entries: 4" in out
    assert "- Plugin - ACL [acl]: 2 maintainers, 1 includes, 1 excludes" in out


def test_verbose_logs_go_to_stderr(maintainers_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-v", "--log-json", "--run-id", "t-2", "maintainers", "-m", str(maintainers_file)]) == OK
    err_lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert {"run_id": "t-2", "component": "cli", "action": "start"}.items() <= err_lines[0].items()
