from __future__ import annotations

from pathlib import Path

import pandas as pd

from address_extractor.cli import main as cli_main

CONFIG_ENV_VAR = "ADDRESS_EXTRACTOR_CONFIG"


def test_cli_no_files_success(temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=0 success=0 failed=0 addresses=0 errors=0" in out


def test_cli_processes_directory(temp_workdir: Path, export_files, capsys):
    code = cli_main(["data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO file=shopify.csv platform=UNIVERSAL confidence=100 addresses=2 errors=0" in out
    assert "SUMMARY files=2 success=2 failed=0 addresses=4 errors=0" in out


def test_cli_writes_output_csv(temp_workdir: Path, export_files, capsys):
    code = cli_main(["data", "--output", "out/labels.csv"])
    out = capsys.readouterr().out
    assert code == 0
    assert "exported 4 addresses to out/labels.csv" in out

    df = pd.read_csv(temp_workdir / "out" / "labels.csv", dtype=str, keep_default_na=False)
    assert list(df["Ville"]) == ["Paris", "Berlin", "Paris", "Lyon"]


def test_cli_missing_input(temp_workdir: Path, capsys):
    code = cli_main(["missing.csv"])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR processing: Input not found" in out


def test_cli_invalid_config(temp_workdir: Path, capsys):
    cfg = temp_workdir / "config" / "bad.yml"
    cfg.write_text("match_threshold: 500\n", encoding="utf-8")
    code = cli_main(["--config", str(cfg)])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR config: config validation failed" in out


def test_cli_config_from_environment(monkeypatch, temp_workdir: Path, export_files, capsys):
    cfg = temp_workdir / "config" / "csv_only.yml"
    cfg.write_text("accepted_extensions: [.csv]\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(cfg))
    code = cli_main(["data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=1 success=1" in out


def test_cli_config_from_dotenv(monkeypatch, temp_workdir: Path, export_files, capsys):
    # register the variable so load_dotenv's write is undone after the test
    monkeypatch.setenv(CONFIG_ENV_VAR, "unused")
    monkeypatch.delenv(CONFIG_ENV_VAR)
    cfg = temp_workdir / "config" / "csv_only.yml"
    cfg.write_text("accepted_extensions: [.csv]\n", encoding="utf-8")
    (temp_workdir / ".env").write_text(f"{CONFIG_ENV_VAR}=config/csv_only.yml\n", encoding="utf-8")

    code = cli_main(["data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=1 success=1" in out


def test_cli_partial_failure(temp_workdir: Path, export_files, capsys):
    (temp_workdir / "data" / "empty.csv").write_text("", encoding="utf-8")
    code = cli_main(["data"])
    out = capsys.readouterr().out
    assert code == 2
    assert "WARN file=empty.csv Fichier vide" in out
    assert "failed=1" in out


def test_cli_inspect(temp_workdir: Path, export_files, capsys):
    code = cli_main(["data/shopify.csv", "--inspect"])
    out = capsys.readouterr().out
    assert code == 0
    assert "FILE: shopify.csv" in out
    assert "platform=SHOPIFY" in out
    assert "separator=','" in out
    assert "pattern=Shopify base_confidence=90" in out
    assert "SUMMARY" not in out


def test_cli_legacy_amazon(temp_workdir: Path, amazon_report: str, capsys):
    (temp_workdir / "data" / "report.txt").write_text(amazon_report, encoding="utf-8")
    code = cli_main(["data", "--legacy-amazon"])
    out = capsys.readouterr().out
    assert code == 0
    assert "platform=AMAZON_SELLER" in out
    assert "addresses=2" in out


def test_cli_scored_strategy(temp_workdir: Path, export_files, capsys):
    code = cli_main(["data/shopify.csv", "--strategy", "scored"])
    out = capsys.readouterr().out
    assert code == 0
    assert "platform=SHOPIFY confidence=90" in out


def test_cli_debug_mode(temp_workdir: Path, export_files, capsys):
    code = cli_main(["data", "--debug"])
    out = capsys.readouterr().out
    assert code == 0
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG resolver=priority" in out
