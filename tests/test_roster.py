import pytest

from monobattlemixer.exceptions import DuplicateParticipantException, FileLoadException
from monobattlemixer.roster import load_participants, parse_participants


def test_parse_skips_blank_lines_and_comments():
    lines = ["Ann\n", "  Bob  \n", "\n", "# sitting out\n", "   \n", "Cid"]
    assert parse_participants(lines) == ["Ann", "Bob", "Cid"]


def test_parse_rejects_duplicates():
    with pytest.raises(DuplicateParticipantException, match="line 3"):
        parse_participants(["Ann", "Bob", "Ann "])


def test_load_participants(tmp_path):
    path = tmp_path / "players.txt"
    path.write_text("Ann\nBob\nCid\n", encoding="utf-8")

    assert load_participants(path) == ["Ann", "Bob", "Cid"]


def test_missing_roster_file(tmp_path):
    with pytest.raises(FileLoadException):
        load_participants(tmp_path / "nobody.txt")


def test_undecodable_roster_file(tmp_path):
    path = tmp_path / "players.txt"
    path.write_bytes(b"Ann\n\xff\xfeBob\n")

    with pytest.raises(FileLoadException):
        load_participants(path)
