import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an integer uniformly from a closed range."""

    def randint(self, a: int, b: int) -> int:
        ...


def fisher_yates_shuffle(items: Sequence[T], rng: Optional[RandomSource] = None) -> List[T]:
    """
    Return a shuffled copy of `items` using the Fisher-Yates algorithm.

    Walks from the last index down to 1, swapping each position with one picked
    uniformly from ``[0, i]``. The input sequence is left untouched.

    :param items: The items to shuffle
    :param rng: Random source to draw from; the global `random` module if None
    :return: A new list holding the same items in shuffled order
    """
    source = rng if rng is not None else random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = source.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def calculate_chi_square(
    observed_values: List[float], expected_values: List[float]
) -> float:
    """
    Calculate the chi-square statistic given lists of observed and expected values.

    :param observed_values: A list of observed values
    :param expected_values: A list of expected values
    :return: The calculated chi-square statistic
    :raises ValueError: If the observed_values and expected_values lists do not have the same length

    """
    if len(observed_values) != len(expected_values):
        raise ValueError("Observed and expected value lists must have the same length.")

    chi_square_stat = sum(
        (o - e) ** 2 / e for o, e in zip(observed_values, expected_values)
    )
    return chi_square_stat
