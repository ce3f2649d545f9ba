"""
handle-failure - classify result-like values and handle failures off the hot path.

    >>> from handle_failure import Maybe, unwrap_lazy
    >>> Maybe.some(1) >> unwrap_lazy(lambda: ("loading ", "config"))
    1
"""

__version__ = "0.3.0"

from handle_failure.core import *  # noqa
from handle_failure.core import __all__ as _core_all

__all__ = ["__version__", *_core_all]
