"""A small book catalog searched linearly by author, title or entry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def linear_search(items: Iterable[str], target: str) -> bool:
    """Tell whether ``target`` occurs in ``items``, checking one by one."""
    for item in items:
        if item == target:
            return True
    return False


class Catalog:
    """Books kept as ``"title author"`` entries.

    Titles and authors are also recorded separately when a book is added;
    those records stay when entries are removed or cleared.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._titles: list[str] = []
        self._authors: list[str] = []

    def add(self, title: str, author: str) -> None:
        """Add a book by its title and author."""
        self._titles.append(title)
        self._authors.append(author)
        self._entries.append(f"{title} {author}")

    def remove(self, title: str) -> bool:
        """Remove the first entry containing ``title``; return whether one was found."""
        for index, entry in enumerate(self._entries):
            if title in entry:
                del self._entries[index]
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def has_author(self, name: str) -> bool:
        return linear_search(self._authors, name)

    def has_title(self, title: str) -> bool:
        return linear_search(self._titles, title)

    def has_entry(self, entry: str) -> bool:
        return linear_search(self._entries, entry)