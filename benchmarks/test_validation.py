import pytest

from benchmarks.conftest import SAMPLE_NAMES
from xmlop import NameString, NcnameString, Qname, validate_name, validate_ncname
from xmlop.parser import parse_qname


def validate_all(validator, names):
    for name in names:
        validator(name)


@pytest.mark.parametrize("validator", (validate_name, validate_ncname))
def test_validation(benchmark, validator):
    benchmark(validate_all, validator, SAMPLE_NAMES)


@pytest.mark.parametrize("string_class", (NameString, NcnameString))
def test_construction(benchmark, string_class):
    benchmark(validate_all, string_class, SAMPLE_NAMES)


def recognize_qnames(text: str) -> list[Qname]:
    result = []
    position = 0
    while position < len(text):
        qname, _, position = parse_qname(text, position)
        result.append(qname)
        position += 1
    return result


def test_qname_recognition(benchmark):
    text = " ".join(f"p{i}:{name}" for i, name in enumerate(SAMPLE_NAMES))
    assert len(benchmark(recognize_qnames, text)) == len(SAMPLE_NAMES)
