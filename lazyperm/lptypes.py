from typing import (
    Iterable, MutableSequence, Protocol, Sequence, TypeAlias, TypeVar
)

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)


class SupportsStep(Protocol[T_co]):
    def step(self) -> Sequence[T_co] | None:
        pass


# the generator's internal output buffer, lent to the caller until the
# next step() call
PermutationView: TypeAlias = MutableSequence[T]
Permutation: TypeAlias = tuple[T, ...]
Elements: TypeAlias = Iterable[T]
