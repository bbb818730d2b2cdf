import io
import json
import re
from pathlib import Path

from packages.engine import score_guesses
from packages.reporting import timestamp_id, write_manifest, write_scores, write_scores_file

ANSWERS = ["apple", "shape", "plump"]


def test_write_scores_csv():
    buf = io.StringIO()
    n = write_scores(score_guesses(["apple", "zzzzz"], ANSWERS), buf)
    assert n == 2
    assert buf.getvalue() == (
        "WORD,COUNT,MEDIAN,MAX,SUM,IS_CANDIDATE\n"
        "apple,3,1,1,3,true\n"
        "zzzzz,3,3,3,9,false\n"
    )


def test_write_scores_header_only_when_no_guesses():
    buf = io.StringIO()
    assert write_scores([], buf) == 0
    assert buf.getvalue() == "WORD,COUNT,MEDIAN,MAX,SUM,IS_CANDIDATE\n"


def test_write_scores_file_and_manifest(tmp_path: Path):
    out = write_scores_file(score_guesses(["apple"], ANSWERS), str(tmp_path / "out" / "scores.csv"))
    assert Path(out).read_text(encoding="utf-8").splitlines()[1] == "apple,3,1,1,3,true"

    m = write_manifest({"run_id": "x", "num_guesses": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8"))["num_guesses"] == 1


def test_timestamp_id_format():
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())
