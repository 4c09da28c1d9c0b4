from debank_mcp.tools.validators import coerce_positive_int, is_blank


def test_is_blank_scalars():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(False)
    assert is_blank(0)
    assert not is_blank("eth")
    assert not is_blank(True)
    assert not is_blank(5)


def test_is_blank_treats_containers_as_present():
    assert not is_blank({})
    assert not is_blank([])
    assert not is_blank({"to": "0x1"})


def test_coerce_positive_int():
    assert coerce_positive_int(None, default=5) == 5
    assert coerce_positive_int("3", default=5) == 3
    assert coerce_positive_int(2.0, default=5) == 2
    assert coerce_positive_int(0, default=5) == 5
    assert coerce_positive_int(-1, default=1) == 1
    assert coerce_positive_int("abc", default=1) == 1
    assert coerce_positive_int(True, default=1) == 1
