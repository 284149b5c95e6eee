from turngochi.persistence import PetRecord, load_record, save_record


def test_round_trip(tmp_path):
    path = tmp_path / "status.txt"
    record = PetRecord("Mister Whiskers", 0, 100, 37, 1, 12, 0)
    assert save_record(record, path).ok
    assert load_record(path).record == record


def test_file_layout(tmp_path):
    path = tmp_path / "status.txt"
    save_record(PetRecord("Rex", 1, 2, 3, 4, 5, 6), path)
    assert path.read_text() == "Rex\n1\n2\n3\n4\n5\n6\n"


def test_missing_file_is_returned_not_raised(tmp_path):
    result = load_record(tmp_path / "nope.txt")
    assert not result.ok
    assert isinstance(result.error, OSError)
    assert result.record is None


def test_unwritable_destination(tmp_path):
    result = save_record(PetRecord("Rex", 1, 2, 3, 4, 5, 6), tmp_path)
    assert isinstance(result.error, OSError)


def test_truncated_file(tmp_path):
    path = tmp_path / "status.txt"
    path.write_text("Rex\n50\n50\n")
    result = load_record(path)
    assert isinstance(result.error, ValueError)


def test_numbers_may_share_lines(tmp_path):
    path = tmp_path / "status.txt"
    path.write_text("Rex\n10 20 30\n40 5 99")
    assert load_record(path).record == PetRecord("Rex", 10, 20, 30, 40, 5, 99)


def test_undecodable_file(tmp_path):
    path = tmp_path / "status.txt"
    path.write_bytes(b"\xff\xfeRex\n1\n2\n3\n4\n5\n6\n")
    result = load_record(path)
    assert not result.ok
    assert isinstance(result.error, UnicodeDecodeError)
