from group_sweeper.utils.logging_utils import mask_identifier


def test_mask_identifier_long():
    assert mask_identifier("instrutor@example.com") == "inst***.com"


def test_mask_identifier_short_or_empty():
    assert mask_identifier("1234") == "1234"
    assert mask_identifier("") == ""
