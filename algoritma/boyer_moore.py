"""Boyer-Moore string search with bad-character and good-suffix tables."""

from __future__ import annotations


def _good_suffix_table(pattern: str) -> list[int]:
    length = len(pattern)
    shifts = [0] * (length + 1)
    borders = [0] * (length + 1)
    i = length
    j = length + 1
    borders[i] = j
    while i > 0:
        while j <= length and pattern[i - 1] != pattern[j - 1]:
            if shifts[j] == 0:
                shifts[j] = j - i
            j = borders[j]
        i -= 1
        j -= 1
        borders[i] = j

    widest = borders[0]
    for index in range(length):
        if shifts[index] == 0:
            shifts[index] = widest
        if index == widest:
            widest = borders[widest]
    return shifts


class Pattern:
    """A search pattern with its precomputed Boyer-Moore shift tables."""

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("pattern must not be empty")
        self.text = text
        length = len(text)
        self._bad_character = {
            ch: length - index - 1 for index, ch in enumerate(text)
        }
        self._good_suffix = _good_suffix_table(text)

    def _bad_shift(self, ch: str) -> int:
        return self._bad_character.get(ch, len(self.text))

    def search(self, text: str) -> list[int]:
        """Start indices of the pattern's occurrences in ``text``."""
        length = len(self.text)
        found: list[int] = []
        position = length - 1
        while position < len(text):
            text_index = position
            pattern_index = length - 1
            while pattern_index >= 0 and text[text_index] == self.text[pattern_index]:
                pattern_index -= 1
                text_index -= 1
            if pattern_index < 0:
                found.append(position - length + 1)
                position += self._good_suffix[0]
            else:
                position += max(
                    self._bad_shift(text[text_index]),
                    self._good_suffix[pattern_index + 1],
                )
        return found


def is_prefix(text: str, pattern: str) -> bool:
    """Tell whether ``text`` begins with ``pattern``."""
    return text.startswith(pattern)