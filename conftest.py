import pytest

from libcatalog.library import Library
from libcatalog.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def lib():
    # Her test için yeni, boş bir kütüphane
    return Library()

@pytest.fixture
def stocked_lib(lib):
    lib.insert_book(1, "Dune", "Frank Herbert")
    lib.insert_book(2, "Ulysses", "James Joyce")
    lib.insert_book(3, "Sapiens", "Yuval Noah Harari")
    return lib

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Çıktı modu ortam değişkeninde tutulur; testler arasında sızmasın
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
