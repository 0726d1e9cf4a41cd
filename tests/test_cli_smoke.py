import json
from pathlib import Path

from typer.testing import CliRunner

from suimu.cli import app

runner = CliRunner()

HEADER = "datetime,video_type,video_id,clip_start,clip_end,status,title,artist,performer,comment"


def write_csv(path: Path, rows: list[str]) -> Path:
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


def run_check(tmp_path: Path, csv_path: Path, *extra: str, run_id: str = "run-1"):
    result = runner.invoke(
        app,
        [
            "--log-dir",
            str(tmp_path / "logs"),
            "--report-dir",
            str(tmp_path / "reports"),
            "--run-id",
            run_id,
            "check",
            str(csv_path),
            *extra,
        ],
    )
    report_path = tmp_path / "reports" / f"report_check_{run_id}.json"
    log_path = tmp_path / "logs" / f"check_{run_id}.log"
    return result, report_path, log_path


def test_help_shows_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "check" in result.stdout
    assert "invoke" in result.stdout


def test_check_clean_file_returns_0(tmp_path: Path):
    csv_path = write_csv(
        tmp_path / "music.csv",
        ["2021-06-25T22:30:00+09:00,YOUTUBE,ZfDYRy17CBY,,,0,Bluerose,星街すいせい,星街すいせい,"],
    )
    result, report_path, log_path = run_check(tmp_path, csv_path, "--json-output")
    assert result.exit_code == 0
    assert "records=1 skipped=0 warnings=0" in result.stdout
    assert '"video_id": "ZfDYRy17CBY"' in result.stdout

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["meta"]["run_id"] == "run-1"
    assert report["meta"]["csv_rows_total"] == 1
    assert report["summary"]["records"] == 1
    assert report["items"] == []
    log_text = log_path.read_text(encoding="utf-8")
    assert "CSV successfully validated. 1 entries found." in log_text
    assert "comp=csv msg=CSV parsed path=" in log_text
    assert "runId=run-1" in log_text


def test_check_reports_skipped_rows_and_warnings(tmp_path: Path):
    csv_path = write_csv(
        tmp_path / "music.csv",
        [
            "2021-06-25T22:30:00+09:00,YOUTUBE,,,,0,no id,,,",
            "2021-06-25T22:30:00+09:00,NICONICO,sm9,30,10,0,t,a,p,",
        ],
    )
    result, report_path, _ = run_check(tmp_path, csv_path)
    assert result.exit_code == 1
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["summary"]["records"] == 1
    assert report["summary"]["skipped"] == 1
    assert report["summary"]["warnings"] == 1
    skipped = [item for item in report["items"] if item["status"] == "skipped"]
    assert skipped[0]["line_no"] == 2
    assert skipped[0]["errors"][0]["field"] == "video_id"
    warned = [item for item in report["items"] if item["status"] == "warning"]
    assert warned[0]["url"] is None
    codes = sorted(w["code"] for w in warned[0]["warnings"])
    assert codes == ["CLIP_ORDER", "UNSUPPORTED_PLATFORM"]


def test_check_format_only_skips_logic(tmp_path: Path):
    csv_path = write_csv(tmp_path / "music.csv", ["2021-06-25T22:30:00+09:00,NICONICO,sm9,30,10,0,t,a,p,"])
    result, report_path, _ = run_check(tmp_path, csv_path, "--format-only")
    assert result.exit_code == 0
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["summary"]["warnings"] == 0


def test_check_missing_csv_returns_2(tmp_path: Path):
    result, report_path, _ = run_check(tmp_path, tmp_path / "missing.csv")
    assert result.exit_code == 2
    assert report_path.exists()


def test_check_bad_header_returns_2(tmp_path: Path):
    csv_path = tmp_path / "music.csv"
    csv_path.write_text("title,artist\nBluerose,星街すいせい\n", encoding="utf-8")
    result, report_path, _ = run_check(tmp_path, csv_path)
    assert result.exit_code == 2
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["summary"]["failed"] == 1
    assert report["summary"]["error"]["kind"] == "InvalidHeader"
    assert report["summary"]["error"]["path"] == str(csv_path)
    assert "ERROR: InvalidHeader:" in result.output


def test_invoke_prints_boundary_json(tmp_path: Path):
    csv_path = write_csv(tmp_path / "music.csv", ["2021-06-25T22:30:00+09:00,YOUTUBE,ZfDYRy17CBY,,,0,Bluerose,,,"])
    result = runner.invoke(
        app,
        ["invoke", "get_maybemusic_by_csv_path", "--args", json.dumps({"csvPath": str(csv_path)})],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["object"][0]["title"] == "Bluerose"


def test_invoke_failure_exit_code(tmp_path: Path):
    result = runner.invoke(
        app,
        ["invoke", "get_maybemusic_by_csv_path", "--args", json.dumps({"csvPath": str(tmp_path / "x.csv")})],
    )
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["kind"] == "NotFound"


def test_invoke_rejects_non_json_args():
    result = runner.invoke(app, ["invoke", "get_maybemusic_by_csv_path", "--args", "{not json"])
    assert result.exit_code == 2


def test_check_warning_item_links_supported_platform(tmp_path: Path):
    csv_path = write_csv(tmp_path / "music.csv", ["2021-06-25T22:30:00+09:00,YOUTUBE,ZfDYRy17CBY,30,10,0,t,a,p,"])
    result, report_path, _ = run_check(tmp_path, csv_path)
    assert result.exit_code == 1
    report = json.loads(report_path.read_text(encoding="utf-8"))
    (item,) = report["items"]
    assert item["url"] == "https://www.youtube.com/watch?v=ZfDYRy17CBY"
    assert item["warnings"][0]["code"] == "CLIP_ORDER"
