"""handle-failure core -- classify result values, handle failures off the hot path.

Architecture::

    Layer 1 -- Errors & Status
        errors.py          Exception hierarchy (HandleFailureError, UnwrapError)
        status.py          ErrorCode + StatusCategory (system, generic, enum)

    Layer 2 -- Result Shapes
        maybe.py           Maybe[T] optional wrapper
        result.py          Ok / Err envelope

    Layer 3 -- Classification
        traits.py          ErrorTraits contract + TraitsRegistry
        adapters.py        Built-in traits for every shape above

    Layer 4 -- Pipeline
        bundle.py          FailureContext, handle_failure(), ``>>`` combinator
        unwrap.py          unwrap(), unwrap_lazy(), unwrap_with()

    Cross-Cutting
        logging.py         structlog configuration
        settings.py        HF_ environment settings (pydantic-settings)

Tags:
    handle-failure, foundation, error-handling, result-shapes

Doc-Types:
    package-overview, module-index
"""

from handle_failure.core.adapters import (
    EMPTY_OPTIONAL_INFO,
    StatusPair,
    describe_status,
)
from handle_failure.core.bundle import FailureContext, FailureHandler, chain, handle_failure
from handle_failure.core.errors import (
    BundleReusedError,
    ContractViolationError,
    ErrorKind,
    HandleFailureError,
    HandlerReturnedError,
    UnregisteredShapeError,
    UnwrapError,
)
from handle_failure.core.maybe import Maybe
from handle_failure.core.result import Err, Ok, Result, from_maybe, try_result
from handle_failure.core.status import (
    EnumCategory,
    ErrorCode,
    StatusCategory,
    generic_category,
    make_error_code,
    system_category,
)
from handle_failure.core.traits import (
    ErrorTraits,
    ShapeInfo,
    TraitsRegistry,
    register_traits,
    registered_shapes,
    traits_for,
    traits_registry,
)
from handle_failure.core.unwrap import unwrap, unwrap_lazy, unwrap_with

__all__ = [
    # errors
    "ErrorKind",
    "HandleFailureError",
    "UnwrapError",
    "ContractViolationError",
    "HandlerReturnedError",
    "BundleReusedError",
    "UnregisteredShapeError",
    # status
    "StatusCategory",
    "EnumCategory",
    "ErrorCode",
    "system_category",
    "generic_category",
    "make_error_code",
    # shapes
    "Maybe",
    "Ok",
    "Err",
    "Result",
    "try_result",
    "from_maybe",
    "StatusPair",
    # classification
    "ErrorTraits",
    "ShapeInfo",
    "TraitsRegistry",
    "traits_registry",
    "register_traits",
    "traits_for",
    "registered_shapes",
    "EMPTY_OPTIONAL_INFO",
    "describe_status",
    # pipeline
    "FailureHandler",
    "FailureContext",
    "handle_failure",
    "chain",
    "unwrap",
    "unwrap_lazy",
    "unwrap_with",
]
