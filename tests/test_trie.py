from hypothesis import given
from hypothesis import strategies as st

from classicalgo.trie import Trie

_words = st.lists(st.text(alphabet="abc", min_size=1, max_size=5), max_size=30)


def test_search_counts_insertions():
    words = ["apple", "apple", "app"]
    trie = Trie()
    for w in words:
        trie.insert(w)
    assert trie.search("apple") == words.count("apple")
    assert trie.search("app") == words.count("app")
    assert trie.search("ap") == 0


def test_prefix_number_counts_words_with_prefix():
    words = ["apple", "apple", "app", "banana"]
    trie = Trie()
    for w in words:
        trie.insert(w)
    assert trie.prefix_number("app") == sum(w.startswith("app") for w in words)
    assert trie.prefix_number("b") == sum(w.startswith("b") for w in words)
    assert trie.prefix_number("c") == 0


def test_empty_word_is_ignored():
    trie = Trie()
    trie.insert("")
    trie.insert("a")
    assert trie.search("") == 0
    assert trie.prefix_number("") == 0
    assert trie.prefix_number("a") == trie.search("a")


def test_delete_removes_one_occurrence():
    trie = Trie()
    words = ["abc", "abc", "abd"]
    for w in words:
        trie.insert(w)
    trie.delete("abc")
    assert trie.search("abc") == words.count("abc") - 1
    assert trie.prefix_number("ab") == len(words) - 1
    trie.delete("abc")
    assert trie.search("abc") == 0
    assert trie.search("abd") == words.count("abd")


def test_delete_missing_word_changes_nothing():
    trie = Trie()
    trie.insert("abc")
    trie.delete("abx")
    trie.delete("ab")
    assert trie.search("abc") == 1
    assert trie.prefix_number("ab") == 1


def test_delete_then_reinsert():
    trie = Trie()
    trie.insert("xyz")
    trie.delete("xyz")
    assert trie.prefix_number("x") == 0
    trie.insert("xyz")
    assert trie.search("xyz") == 1


@given(_words)
def test_counts_agree_with_word_list(words):
    trie = Trie()
    for w in words:
        trie.insert(w)
    for w in set(words):
        assert trie.search(w) == words.count(w)
        for end in range(1, len(w) + 1):
            prefix = w[:end]
            assert trie.prefix_number(prefix) == sum(x.startswith(prefix) for x in words)


@given(_words)
def test_deleting_everything_empties_trie(words):
    trie = Trie()
    for w in words:
        trie.insert(w)
    for w in words:
        trie.delete(w)
    for w in words:
        assert trie.search(w) == 0
        assert trie.prefix_number(w[0]) == 0