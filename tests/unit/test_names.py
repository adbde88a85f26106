from types import SimpleNamespace

import pytest

from group_sweeper.utils.names import fullname


def test_fullname_default_format():
    user = SimpleNamespace(firstname="Ana", lastname="Silva")
    assert fullname(user, "{firstname} {lastname}") == "Ana Silva"

def test_fullname_missing_fields_collapse_whitespace():
    user = SimpleNamespace(firstname="Ana", lastname="Silva", middlename=None)
    assert fullname(user, "{firstname} {middlename} {lastname}") == "Ana Silva"

def test_fullname_alternate_format():
    user = SimpleNamespace(firstname="Ana", lastname="Silva", alternatename="Aninha")
    assert fullname(user, "{lastname}, {alternatename}") == "Silva, Aninha"

def test_fullname_rejects_unknown_field():
    with pytest.raises(ValueError):
        fullname(SimpleNamespace(firstname="Ana"), "{email}")
