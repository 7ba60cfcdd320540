from lazyperm.lazyperm_core import PermutationGenerator
from lazyperm.lptypes import Elements, Permutation, T


def lperms(elements: Elements[T]) -> PermutationGenerator[T]:
    return PermutationGenerator(elements)


def lpermute(elements: Elements[T]) -> tuple[Permutation[T], ...]:
    # drains the whole enumeration; n! tuples, so keep n small
    return tuple(PermutationGenerator(elements))
