"""
htmx wire vocabulary.

The browser side of the application is driven by htmx, which reads a
handful of ``hx-*`` attributes from the rendered HTML and a handful of
``HX-*`` headers from responses.  Their names and values form a fixed
protocol with the client library, so they are collected here instead
of being spelled out as string literals throughout the code.

Attribute helpers return ``(name, value)`` pairs which the view layer
renders (and escapes) into tags.  Only the attributes the application
actually emits have helpers; see https://htmx.org/reference/ for the
rest.
"""

from enum import Enum
from typing import Dict, Optional, Tuple, Union

Attribute = Tuple[str, str]


class HtmxHeader(str, Enum):
    """Response header names understood by htmx."""

    LOCATION = "HX-Location"
    PUSH_URL = "HX-Push-Url"
    REDIRECT = "HX-Redirect"
    REFRESH = "HX-Refresh"
    REPLACE_URL = "HX-Replace-Url"
    # Swap strategy for the response, see ``HxSwap``
    RESWAP = "HX-Reswap"
    # CSS selector of the element that receives the response instead of the target
    RETARGET = "HX-Retarget"
    RESELECT = "HX-Reselect"
    TRIGGER = "HX-Trigger"
    TRIGGER_AFTER_SETTLE = "HX-Trigger-After-Settle"
    TRIGGER_AFTER_SWAP = "HX-Trigger-After-Swap"


class HxSwap(str, Enum):
    """Swap strategies accepted by ``hx-swap``, ``hx-swap-oob`` and ``HX-Reswap``."""

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"


def hx_post(path: str) -> Attribute:
    """Issue a POST to ``path`` when the element is triggered."""
    return "hx-post", path


def hx_delete(path: str) -> Attribute:
    """Issue a DELETE to ``path`` when the element is triggered."""
    return "hx-delete", path


def hx_swap(swap: HxSwap) -> Attribute:
    return "hx-swap", swap.value


def hx_swap_oob(swap: Union[bool, HxSwap] = True, selector: Optional[str] = None) -> Attribute:
    """Mark an element of a response as an out‑of‑band swap.

    With a boolean the element replaces the element sharing its id.
    With a swap strategy the element's content is swapped using that
    strategy, optionally into ``selector`` instead of the element with
    the same id (``"afterbegin:#todos"``).
    """
    if isinstance(swap, HxSwap):
        value = swap.value if selector is None else f"{swap.value}:{selector}"
    else:
        value = "true" if swap else "false"
    return "hx-swap-oob", value


def hx_on(event: str, script: str) -> Attribute:
    """Run inline ``script`` when the htmx ``event`` fires on the element."""
    return f"hx-on::{event}", script


def hx_reset_form_after_success() -> Attribute:
    """Reset the form once its request completed successfully."""
    return hx_on("after-request", "if(event.detail.successful) this.reset()")


def retarget_headers(selector: str, swap: HxSwap = HxSwap.INNER_HTML) -> Dict[str, str]:
    """Headers redirecting a response into ``selector`` using ``swap``."""
    return {
        HtmxHeader.RETARGET.value: selector,
        HtmxHeader.RESWAP.value: swap.value,
    }

