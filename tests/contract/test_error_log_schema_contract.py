from __future__ import annotations

import json
from pathlib import Path

from address_extractor.cli import main as cli_main

EXPECTED_KEYS = {"timestamp", "file", "row", "error_type", "message"}
ERROR_TYPES = {"ROW_FORMAT_ERROR", "PARSE_WARNING", "FILE_READ_ERROR"}


def test_error_log_lines_have_fixed_schema(temp_workdir: Path, shopify_csv: str):
    data = temp_workdir / "data"
    (data / "orders.csv").write_text(shopify_csv + "\n#9,x@y.z,Bad\x00,,1 rue X,,Nice,06000,,FR\n", encoding="utf-8")
    (data / "empty.csv").write_text("", encoding="utf-8")

    assert cli_main(["data"]) == 2

    (log_file,) = (temp_workdir / "logs").glob("errors-*.log")
    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert len(records) == 2
    for record in records:
        assert set(record) == EXPECTED_KEYS
        assert record["error_type"] in ERROR_TYPES
        assert record["timestamp"].endswith("Z")
        assert isinstance(record["row"], int)

    by_file = {r["file"]: r for r in records}
    assert by_file["empty.csv"]["row"] == -1
    assert by_file["empty.csv"]["message"] == "Fichier vide"
    assert by_file["orders.csv"]["row"] == 4
