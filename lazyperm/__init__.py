from lazyperm.eager import anagrams
from lazyperm.lazyperm import lperms, lpermute
from lazyperm.lazyperm_core import PermutationGenerator
from lazyperm.lptypes import Permutation, PermutationView, SupportsStep

__all__ = [
    "PermutationGenerator",
    "Permutation",
    "PermutationView",
    "SupportsStep",
    "anagrams",
    "lperms",
    "lpermute",
]
