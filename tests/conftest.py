import pytest

from packages.dictionary import clear_dictionary_cache
from packages.sources import clear_word_list_cache


@pytest.fixture(autouse=True)
def _fresh_process_caches():
    # dictionary singleton and remote word lists are process-wide
    clear_dictionary_cache()
    clear_word_list_cache()
    yield
    clear_dictionary_cache()
    clear_word_list_cache()


@pytest.fixture
def words_file(tmp_path):
    p = tmp_path / "words_5.txt"
    p.write_text("crate\nCACTI\ncatch\nhello\nzebra\nabide\ncranes\n\ncrate\n", encoding="utf-8")
    return p
