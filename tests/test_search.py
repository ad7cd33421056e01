import pytest

from pipex.search import PathNotFoundError, find_path, resolve_command, split_words


def test_split_words_on_spaces():
    assert split_words("ls -l", " ") == ["ls", "-l"]


def test_split_words_collapses_repeated_separators():
    assert split_words("  grep   -v  x ", " ") == ["grep", "-v", "x"]


def test_split_words_empty_text():
    assert split_words("", " ") == []


def test_split_words_only_separators():
    assert split_words(":::", ":") == []


def test_split_words_tab_is_not_a_space():
    assert split_words("a\tb", " ") == ["a\tb"]


def test_split_words_colon_directories():
    assert split_words("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


@pytest.mark.parametrize("sep", ["", "::"])
def test_split_words_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split_words("a b", sep)


def test_split_words_join_round_trip():
    words = ["tr", "a-z", "A-Z"]
    assert split_words(" ".join(words), " ") == words


def test_find_path_in_entry_list():
    env = ["HOME=/home/someone", "PATH=/usr/bin:/bin", "SHELL=/bin/sh"]
    assert find_path(env) == "/usr/bin:/bin"


def test_find_path_in_mapping():
    assert find_path({"LANG": "C", "PATH": "/opt/bin"}) == "/opt/bin"


def test_find_path_first_match_wins():
    assert find_path(["PATH=/first", "PATH=/second"]) == "/first"


def test_find_path_missing():
    with pytest.raises(PathNotFoundError):
        find_path(["HOME=/home/someone"])


def test_find_path_empty_mapping():
    with pytest.raises(LookupError):
        find_path({})


def test_resolve_command_finds_first_directory(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (first / "tool").write_text("")
    (second / "tool").write_text("")
    assert resolve_command([str(first), str(second)], "tool") == f"{first}/tool"


def test_resolve_command_skips_missing(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (second / "tool").write_text("")
    assert resolve_command([str(first), str(second)], "tool") == f"{second}/tool"


def test_resolve_command_not_found(tmp_path):
    assert resolve_command([str(tmp_path)], "absent") is None


def test_resolve_command_no_directories():
    assert resolve_command([], "ls") is None