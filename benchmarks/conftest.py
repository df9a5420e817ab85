import gc

import pytest


SAMPLE_NAMES = (
    "TEI",
    "teiHeader",
    "fileDesc",
    "titleStmt",
    "persName",
    "placeName",
    "xml-stylesheet",
    "_private",
    "été",
    "名前",
    "a.b.c.d.e.f",
    "tempor_incididunt_ut_labore_et_dolore_magna_aliqua",
) * 64


@pytest.fixture(autouse=True)
def _collect_garbage():
    gc.collect()
    gc.collect()
