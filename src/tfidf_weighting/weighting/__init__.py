"""
This module contains term frequency and inverse document frequency weighting.

The weighting schemes follow the variants listed on
`Wikipedia <https://en.wikipedia.org/wiki/Tf%E2%80%93idf#Definition>`_,
although only the log variants have formulas of their own.
"""

from .schemes import (
    TermWeighting,
    IDFWeighting,
    TERM_WEIGHTINGS,
    IDF_WEIGHTINGS,
    as_term_weighting,
    as_idf_weighting,
)
from .term_frequency import term_frequency, term_frequencies
from .inverse_document_frequency import (
    inverse_document_frequency,
    inverse_document_frequencies,
)
