"""
app/flow/states.py

Purpose: Defines the dispatch pipeline stages

- Enum for each step a notification passes through
  (ELIGIBILITY_CHECK, TEMPLATE_LOOKUP, PHONE_NORMALIZE, DISPATCH, etc.)
- Reasons a dispatch stops early
- Mapping of each halt reason to the step it happens at
"""

from enum import Enum
from typing import Dict


class DispatchState(str, Enum):
    """
    Steps of a single dispatch.
    Nothing is persisted; the state only lives for one call.

    Status change:  START -> ELIGIBILITY_CHECK -> TEMPLATE_LOOKUP -> PHONE_NORMALIZE
                    -> RENDER -> CREDENTIALS_CHECK -> BUILD_REQUEST -> DISPATCH -> END
    Manual send:    START -> PHONE_NORMALIZE -> MESSAGE_CHECK -> CREDENTIALS_CHECK
                    -> BUILD_REQUEST -> DISPATCH -> END
    """

    START = "START"

    # Status-change path only
    ELIGIBILITY_CHECK = "ELIGIBILITY_CHECK"
    TEMPLATE_LOOKUP = "TEMPLATE_LOOKUP"

    PHONE_NORMALIZE = "PHONE_NORMALIZE"

    # Status-change path renders, manual path checks operator text
    RENDER = "RENDER"
    MESSAGE_CHECK = "MESSAGE_CHECK"

    CREDENTIALS_CHECK = "CREDENTIALS_CHECK"
    BUILD_REQUEST = "BUILD_REQUEST"
    DISPATCH = "DISPATCH"

    END = "END"
    STOP = "STOP"


class HaltReason(str, Enum):
    """Why a dispatch stopped without sending. Never raised to the caller."""

    INELIGIBLE_STATUS = "ineligible_status"
    MISSING_TEMPLATE = "missing_template"
    INVALID_PHONE = "invalid_phone"
    EMPTY_MESSAGE = "empty_message"
    MISSING_CREDENTIALS = "missing_credentials"
    TRANSPORT_FAILURE = "transport_failure"
    INTERNAL_ERROR = "internal_error"


HALT_STATES: Dict[HaltReason, DispatchState] = {
    HaltReason.INELIGIBLE_STATUS: DispatchState.ELIGIBILITY_CHECK,
    HaltReason.MISSING_TEMPLATE: DispatchState.TEMPLATE_LOOKUP,
    HaltReason.INVALID_PHONE: DispatchState.PHONE_NORMALIZE,
    HaltReason.EMPTY_MESSAGE: DispatchState.MESSAGE_CHECK,
    HaltReason.MISSING_CREDENTIALS: DispatchState.CREDENTIALS_CHECK,
    HaltReason.TRANSPORT_FAILURE: DispatchState.DISPATCH,
}


def get_halt_state(reason: HaltReason) -> DispatchState:
    """
    Returns the pipeline step a halt reason belongs to.

    Args:
        reason: Halt reason

    Returns:
        DispatchState where the dispatch stopped (STOP if not tied to a step)
    """
    return HALT_STATES.get(reason, DispatchState.STOP)
