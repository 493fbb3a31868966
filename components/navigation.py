"""
Smooth-scroll navigation between landing page sections.

Buttons can't scroll the page directly, so a click records the target and
the page emits a small script at the end of the run.
"""

import json
import logging
from typing import MutableMapping

import streamlit.components.v1 as components

logger = logging.getLogger(__name__)

SCROLL_TARGET_KEY = "scroll_target"
SCROLL_NONCE_KEY = "scroll_nonce"


def build_scroll_script(target_id: str, nonce: int = 0) -> str:
    """
    Script that smooth-scrolls the host page to target_id, if it exists.

    The frontend only re-runs an html component whose source changed, so
    the nonce makes every request distinct.
    """
    return f"""
<script>
    /* scroll request {int(nonce)} */
    (function () {{
        const doc = window.parent.document;
        const element = doc.getElementById({json.dumps(target_id)});
        if (!element) {{
            return;
        }}
        element.scrollIntoView({{ behavior: "smooth", block: "start" }});
    }})();
</script>
"""


def request_scroll(state: MutableMapping, target_id: str) -> None:
    """Button callback: remember where to scroll once the page is rendered"""
    state[SCROLL_TARGET_KEY] = target_id
    state[SCROLL_NONCE_KEY] = state.get(SCROLL_NONCE_KEY, 0) + 1


def flush_scroll_request(state: MutableMapping) -> bool:
    """Emit the pending scroll script, at most once. Returns True if emitted."""
    target_id = state.get(SCROLL_TARGET_KEY)
    if not target_id:
        return False

    state[SCROLL_TARGET_KEY] = None
    nonce = state.get(SCROLL_NONCE_KEY, 0)
    logger.debug("Scrolling to section %s (request %s)", target_id, nonce)
    components.html(build_scroll_script(target_id, nonce), height=0)
    return True
