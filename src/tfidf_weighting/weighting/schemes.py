"""Weighting schemes for term frequency and inverse document frequency.

See https://en.wikipedia.org/wiki/Tf%E2%80%93idf#Definition
"""
from enum import IntEnum
from typing import Dict, Union
from typing_extensions import Literal


class TermWeighting(IntEnum):
    BINARY = 0
    RAW = 1
    LOG = 2
    DOUBLE_HALF = 3
    DOUBLE_K = 4


class IDFWeighting(IntEnum):
    UNARY = 0
    LOG = 1
    LOG_SMOOTH = 2
    LOG_MAX = 3
    PROB = 4


##########################
##### Name resolution #####
##########################
TermWeightingName = Literal["binary", "raw", "log", "double-half", "double-k"]
IDFWeightingName = Literal["unary", "log", "log-smooth", "log-max", "prob"]

TERM_WEIGHTINGS: Dict[str, TermWeighting] = {
    "binary": TermWeighting.BINARY,
    "raw": TermWeighting.RAW,
    "log": TermWeighting.LOG,
    "double-half": TermWeighting.DOUBLE_HALF,
    "double-k": TermWeighting.DOUBLE_K,
}
IDF_WEIGHTINGS: Dict[str, IDFWeighting] = {
    "unary": IDFWeighting.UNARY,
    "log": IDFWeighting.LOG,
    "log-smooth": IDFWeighting.LOG_SMOOTH,
    "log-max": IDFWeighting.LOG_MAX,
    "prob": IDFWeighting.PROB,
}


def as_term_weighting(
    weighting: Union[TermWeighting, TermWeightingName, int]
) -> TermWeighting:
    """Return the :class:`TermWeighting` member named or valued by ``weighting``.

    Raises:
        ValueError: If ``weighting`` matches no term weighting scheme
    """
    if isinstance(weighting, str):
        if weighting not in TERM_WEIGHTINGS:
            raise ValueError(f'"{weighting}" is not a valid term weighting scheme.')
        return TERM_WEIGHTINGS[weighting]
    try:
        return TermWeighting(weighting)
    except ValueError:
        raise ValueError(f"{weighting} is not a valid term weighting scheme.") from None


def as_idf_weighting(
    weighting: Union[IDFWeighting, IDFWeightingName, int]
) -> IDFWeighting:
    """Return the :class:`IDFWeighting` member named or valued by ``weighting``.

    Raises:
        ValueError: If ``weighting`` matches no inverse document frequency scheme
    """
    if isinstance(weighting, str):
        if weighting not in IDF_WEIGHTINGS:
            raise ValueError(f'"{weighting}" is not a valid idf weighting scheme.')
        return IDF_WEIGHTINGS[weighting]
    try:
        return IDFWeighting(weighting)
    except ValueError:
        raise ValueError(f"{weighting} is not a valid idf weighting scheme.") from None
