import json

from tetris3d_highscore import HighScore, load_high_score, save_high_score


def test_missing_file_is_zero(tmp_path):
    assert load_high_score(tmp_path / "nope.json") == 0


def test_round_trip(tmp_path):
    path = tmp_path / "hs.json"
    assert save_high_score(path, 120)
    assert load_high_score(path) == 120


def test_malformed_file_is_zero(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text("not json", encoding="utf-8")
    assert load_high_score(path) == 0
    path.write_text(json.dumps({"high_score": "lots"}), encoding="utf-8")
    assert load_high_score(path) == 0
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert load_high_score(path) == 0
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert load_high_score(path) == 0
    assert "malformed" in caplog.text


def test_unwritable_path_reports_false(tmp_path):
    assert save_high_score(tmp_path / "missing" / "dir" / "hs.json", 5) is False


def test_submit_only_records_improvements(tmp_path):
    path = tmp_path / "hs.json"
    save_high_score(path, 50)
    hs = HighScore(path)
    assert hs.best == 50
    assert not hs.submit(40)
    assert not hs.submit(50)
    assert hs.submit(70)
    assert HighScore(path).best == 70
