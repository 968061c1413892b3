from scenebrowser.core.info_list import TextInfoController
from scenebrowser.core.list_builder import ListCreateData

TEXT = "{\n  \"max\": 100,\n  \"current\": 40\n}"


def test_one_item_per_line():
    info = TextInfoController(TEXT)
    info.create()
    assert info.count() == 4
    assert [info.item_at(i).text for i in range(4)] == TEXT.split("\n")
    assert info.item_at(0).actions == ()
    assert info.item_at(4) is None
    assert info.item_at(-1) is None


def test_filter_and_reverse_lines():
    info = TextInfoController(TEXT)
    info.create(ListCreateData(filter_text="\"", reverse=True))
    assert [info.item_at(i).text for i in range(info.count())] == ['  "current": 40', '  "max": 100,']


def test_refresh_keeps_filter():
    info = TextInfoController(TEXT)
    info.create(ListCreateData(filter_text="max"))
    info.refresh()
    assert info.count() == 1


def test_empty_text_has_no_rows():
    info = TextInfoController("")
    info.create()
    assert info.count() == 0
    assert info.item_at(0) is None
