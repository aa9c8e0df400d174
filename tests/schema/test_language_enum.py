import pytest

from dbpedia_loader.schema import DocumentUpdate, LanguageEnum


def test_find_by_code():
    assert LanguageEnum.find_by_code("en") is LanguageEnum.ENGLISH
    assert LanguageEnum.find_by_code("de") is LanguageEnum.GERMAN


def test_find_by_code_is_case_insensitive():
    assert LanguageEnum.find_by_code(" FR ") is LanguageEnum.FRENCH


@pytest.mark.parametrize("code", ["xx", "", "english", "undefined", "UNDEFINED"])
def test_find_by_code_unknown(code):
    with pytest.raises(ValueError):
        LanguageEnum.find_by_code(code)


def test_code_property():
    assert LanguageEnum.SPANISH.code == "es"


def test_document_defaults_to_undefined_language():
    doc = DocumentUpdate()

    assert doc.lang is LanguageEnum.UNDEFINED
    assert doc.fields == []
    assert doc.get_value("url") is None
