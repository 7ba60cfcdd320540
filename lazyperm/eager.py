from typing import Sequence

from lazyperm.lptypes import Elements, T


def clone_minus(original: Sequence[T], index: int) -> list[T]:
    return [
        element for i, element in enumerate(original) if i != index
    ]


def _anagrams(letters: list[T]) -> list[list[T]]:
    if len(letters) <= 1:
        return [letters]
    result = []
    for i, letter in enumerate(letters):
        for anagram in _anagrams(clone_minus(letters, i)):
            result.append([letter] + anagram)
    return result


def anagrams(elements: Elements[T]) -> list[list[T]]:
    try:
        letters = list(elements)
    except TypeError:
        raise TypeError("Elements must be iterable")
    return _anagrams(letters)
