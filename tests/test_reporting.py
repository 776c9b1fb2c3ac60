import csv
from pathlib import Path
from exifwrap.models import MediaRecord
from exifwrap.reporting import SummaryReport
from exifwrap import config

def test_build_row_full_record():
    rec = MediaRecord(Path("/photos/a.jpg"), {
        "Camera Model Name": "Canon EOS 5D",
        "Lens ID": "EF50mm",
        "Date/Time Original": "2023:01:02 03:04:05",
        "GPS Position": "1, 2",
    })
    row = SummaryReport().build_row(rec)
    assert row == ["/photos/a.jpg", "Canon EOS 5D", "EF50mm", "2023-01-02T03:04:05", "yes"]

def test_build_row_missing_values_are_empty():
    rec = MediaRecord(Path("/photos/b.jpg"), {"Modify Date": "not a date"})
    row = SummaryReport().build_row(rec)
    assert row == ["/photos/b.jpg", "", "", "", "no"]

def test_write_csv(tmp_path):
    records = [
        MediaRecord(Path("/photos/a.jpg"), {"Camera Model Name": "X100V"}),
        MediaRecord(Path("/photos/b.jpg"), {"GPS Position": ""}),
    ]
    out = tmp_path / "summary.csv"

    count = SummaryReport().write_csv(records, out)

    assert count == 2
    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == config.CSV_HEADERS
    assert rows[1] == ["/photos/a.jpg", "X100V", "", "", "no"]
    assert rows[2] == ["/photos/b.jpg", "", "", "", "yes"]
