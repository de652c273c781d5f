import pytest

from tim.timfile import Source, format_source, parse_line, read, timfile_path, write


def test_timfile_path_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert timfile_path() == tmp_path / ".timfile"


def test_parse_line():
    assert parse_line("hello=git,world") == ("hello", Source("git", "world"))


@pytest.mark.parametrize(
    "line",
    ["", "nameonly", "a=b=c,d", "name=git", "name=git,a,b"],
)
def test_parse_line_malformed(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_format_source():
    assert format_source(Source("dir", "/tmp/x")) == "dir,/tmp/x"


def test_format_parse_round_trip():
    source = Source("file", "/some/file.txt")
    assert parse_line("n=" + format_source(source)) == ("n", source)


def test_read_creates_missing_file(tmp_path):
    path = tmp_path / ".timfile"
    assert read(path) == {}
    assert path.exists()


def test_write_read_round_trip(tmp_path):
    path = tmp_path / ".timfile"
    sources = {
        "hello": Source("git", "world"),
        "test": Source("file", "/somewhere/file"),
        "dadadadir": Source("dir", "/somewhere/dir/"),
    }
    write(sources, path)
    assert read(path) == sources


def test_write_replaces_content(tmp_path):
    path = tmp_path / ".timfile"
    write({"a": Source("git", "x"), "b": Source("git", "y")}, path)
    write({"c": Source("dir", "z")}, path)
    assert read(path) == {"c": Source("dir", "z")}


def test_write_format(tmp_path):
    path = tmp_path / ".timfile"
    write({"hello": Source("git", "world")}, path)
    assert path.read_text() == "hello=git,world\n"


def test_read_skips_malformed_lines(tmp_path, capsys):
    path = tmp_path / ".timfile"
    path.write_text("good=git,url\nbroken\nother=dir,/d\r\n")
    assert read(path) == {"good": Source("git", "url"), "other": Source("dir", "/d")}
    out = capsys.readouterr().out
    assert "improperly formatted source was found" in out
    assert '"broken"' in out


def test_read_default_path_uses_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    write({"k": Source("git", "v")})
    assert (tmp_path / ".timfile").exists()
    assert read() == {"k": Source("git", "v")}