from barstatus.components.num_files import num_files


def test_num_files_counts_entries(tmp_path):
    names = ["a", "b", ".hidden"]
    for name in names:
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert num_files(str(tmp_path)) == str(len(names) + 1)


def test_num_files_empty(tmp_path):
    assert num_files(str(tmp_path)) == "0"


def test_num_files_missing(tmp_path, capsys):
    assert num_files(str(tmp_path / "missing")) is None
    assert "opendir" in capsys.readouterr().err


def test_num_files_not_a_directory(tmp_path):
    path = tmp_path / "file"
    path.write_text("x")
    assert num_files(str(path)) is None