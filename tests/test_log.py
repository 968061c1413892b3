from scenebrowser.core.list_builder import ListBuilder
from scenebrowser.core.log import Log


def test_debug_respects_verbosity():
    start = Log.count()
    Log.debug("hidden", 1)
    assert Log.count() == start
    Log.set_verbosity(1)
    Log.debug("shown", 1)
    assert Log.count() == start + 1
    assert Log.get(-1)[1] == "[test_log.py] shown"


def test_tail_and_clear():
    Log.add("one")
    Log.add("two")
    assert [text for _, text in Log.tail(2)] == ["one", "two"]
    assert Log.tail(0) == []
    Log.clear()
    assert Log.count() == 1
    assert Log.get(0)[1] == "Log cleared"


def test_build_is_logged_at_verbose_level(abcd):
    graph, _ = abcd
    Log.set_verbosity(2)
    ListBuilder(graph).build(lambda text: True)
    assert Log.get(-1)[1].startswith("[list_builder.py] Built object list: 4 of 4 nodes")


def test_write_to_file(tmp_path):
    Log.add("saved line")
    path = tmp_path / "log.txt"
    assert Log.write_to_file(str(path))
    content = path.read_text(encoding="utf-8")
    assert "] saved line\n" in content
    assert Log.get(-1)[1] == f"Log written to file: {path}"


def test_write_to_file_failure_is_logged(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    path = blocker / "log.txt"
    assert not Log.write_to_file(str(path))
    assert Log.get(-1)[1].startswith("Failed to write log to file")
