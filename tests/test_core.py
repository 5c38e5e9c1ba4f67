import json

import pytest

import bench_scan
from photostats.core import PhotoStatsApp
from photostats.exceptions import ScanRootError
from photostats.main import main
from photostats.reporting import NO_PHOTOS_MESSAGE


def test_analyse_fills_counts_and_extrema(photo_tree):
    totals, records = PhotoStatsApp().analyse(photo_tree)
    assert totals.photo_count == len(records) == 4
    assert totals.largest.endswith("c.gif")
    # broken.bmp is the zero-pixel placeholder
    assert totals.smallest.endswith("broken.bmp")
    assert totals.widest.endswith("c.gif")
    assert totals.tallest.endswith("b.PNG")


def test_analyse_empty_tree_skips_aggregation(tmp_path):
    (tmp_path / "readme.txt").write_text("hi")
    totals, records = PhotoStatsApp().analyse(tmp_path)
    assert records == []
    assert totals.file_count == 1
    assert totals.largest == totals.smallest == totals.widest == totals.tallest == ""


def test_analyse_missing_root(tmp_path):
    with pytest.raises(ScanRootError):
        PhotoStatsApp().analyse(tmp_path / "nope")


def test_analyse_root_is_a_file(tmp_path):
    f = tmp_path / "file.jpg"
    f.write_bytes(b"")
    with pytest.raises(ScanRootError):
        PhotoStatsApp().analyse(f)


def test_main_prints_report(photo_tree, capsys):
    main(["-p", str(photo_tree), "--no-progress", "--no-banner"])
    out = capsys.readouterr().out
    assert f"Scanning {photo_tree}" in out
    assert "Total amount of files: 5" in out
    assert "Total amount of photos: 4" in out
    assert "Total pixels: 130,000" in out
    assert "Running photostats took" in out


def test_main_no_photos(tmp_path, capsys):
    main(["--path", str(tmp_path), "--no-progress"])
    out = capsys.readouterr().out
    assert NO_PHOTOS_MESSAGE in out
    assert "Total pixels" not in out
    assert "Time to process each photo" in out


def test_main_writes_csv(photo_tree, tmp_path, capsys):
    out_csv = tmp_path / "list.csv"
    main(["-p", str(photo_tree), "--no-progress", "--no-banner", "--csv", str(out_csv)])
    assert len(out_csv.read_text(encoding="utf-8").splitlines()) == 5


def test_main_missing_root_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["-p", str(tmp_path / "missing"), "--no-progress", "--no-banner"])
    assert exc.value.code == 1


def test_benchmark_writes_results(photo_tree, tmp_path):
    out = tmp_path / "bench" / "results.json"
    payload = bench_scan.benchmark(photo_tree, 2, out)
    assert len(payload["times"]) == 2
    assert payload["warm_avg"] is not None
    assert json.loads(out.read_text(encoding="utf-8"))["src"] == str(photo_tree)


@pytest.mark.parametrize("repeats", ["0", "-2", "abc"])
def test_benchmark_rejects_non_positive_repeats(repeats, tmp_path):
    with pytest.raises(SystemExit):
        bench_scan.parse_args([str(tmp_path), "--repeats", repeats])


def test_benchmark_parse_args_defaults(tmp_path):
    args = bench_scan.parse_args([str(tmp_path)])
    assert args.repeats == 3
