from typing import Iterable, Protocol, Self

LETTER_A = ord("A")


class Lexicon(Protocol):
    """Word and prefix membership queries. Both are case-insensitive."""

    def contains_word(self, word: str) -> bool: ...

    def contains_prefix(self, prefix: str) -> bool: ...


def to_idx(letter: str) -> int | None:
    """Index of an uppercase letter, or None for anything outside A-Z."""
    if len(letter) != 1 or not "A" <= letter <= "Z":
        return None
    return ord(letter) - LETTER_A


class PyTrie:
    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        if word == "":
            self.set_is_word()
            return self
        c = to_idx(word[0])
        assert c is not None, word
        if not self.starts_word(c):
            self._children[c] = PyTrie()
        return self.descend(c).add_word(word[1:])

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    def find_prefix(self, prefix: str) -> Self | None:
        node = self
        for letter in prefix.upper():
            c = to_idx(letter)
            if c is None:
                return None
            node = node.descend(c)
            if node is None:
                return None
        return node

    def contains_word(self, word: str) -> bool:
        node = self.find_prefix(word)
        return node is not None and node.is_word()

    def contains_prefix(self, prefix: str) -> bool:
        return self.find_prefix(prefix) is not None

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "PyTrie":
        trie = PyTrie()
        for word in words:
            word = lexiconify_word(word)
            if word is not None:
                trie.add_word(word)
        return trie

    @staticmethod
    def create_from_file(dict_input: str) -> "PyTrie":
        """Load a dictionary file with one word per line."""
        with open(dict_input) as f:
            return PyTrie.create_from_wordlist(f)


def lexiconify_word(word: str) -> str | None:
    word = word.strip().upper()
    if not word:
        return None
    for let in word:
        if let < "A" or let > "Z":
            return None
    return word
