import io
import json

import pytest

from ats_analyzer import cli
from ats_analyzer.agent.providers.static import DEMO_RESPONSE


@pytest.fixture
def inputs(tmp_path, job_description, resume_text):
    job = tmp_path / "job.txt"
    resume = tmp_path / "resume.txt"
    job.write_text(job_description, encoding="utf-8")
    resume.write_text(resume_text, encoding="utf-8")
    return str(job), str(resume)


def test_demo_report(inputs, capsys):
    job, resume = inputs

    assert cli.main([job, resume, "--provider", "demo"]) == 0

    out = capsys.readouterr().out
    assert "ATS Compatibility Score: 78/100 (Good)" in out
    assert "Your resume scored 78/100 for ATS compatibility." in out


def test_demo_json_output(inputs, capsys):
    job, resume = inputs

    assert cli.main([job, resume, "--provider", "demo", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ats_score"] == DEMO_RESPONSE["ats_score"]
    assert data["matched_skills"] == DEMO_RESPONSE["matched_skills"]
    assert data["categories"] == DEMO_RESPONSE["categories"]


def test_sample_job_with_resume_from_stdin(monkeypatch, capsys, resume_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(resume_text))

    assert cli.main(["--sample-job", "-", "--provider", "demo", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["ats_score"] == 78


def test_blank_resume_is_input_error(tmp_path, inputs, capsys):
    job, _ = inputs
    blank = tmp_path / "blank.txt"
    blank.write_text("   \n", encoding="utf-8")

    assert cli.main([job, str(blank), "--provider", "demo"]) == 2
    assert "upload your resume" in capsys.readouterr().err


def test_missing_file_is_input_error(tmp_path, inputs, capsys):
    job, _ = inputs

    assert cli.main([job, str(tmp_path / "nope.txt"), "--provider", "demo"]) == 2
    assert "error:" in capsys.readouterr().err


def test_undecodable_resume_is_input_error(tmp_path, inputs, capsys):
    job, _ = inputs
    binary = tmp_path / "resume.pdf"
    binary.write_bytes(b"%PDF-1.\xff\xfe")

    assert cli.main([job, str(binary), "--provider", "demo"]) == 2
    assert "error:" in capsys.readouterr().err


def test_unconfigured_backend_is_reported(inputs, capsys):
    job, resume = inputs

    assert cli.main([job, resume, "--provider", "no_such_module.NoSuchLLM"]) == 1
    assert "error:" in capsys.readouterr().err


def test_job_file_and_sample_job_are_exclusive(inputs):
    job, resume = inputs

    with pytest.raises(SystemExit):
        cli.main([job, resume, "--sample-job"])
