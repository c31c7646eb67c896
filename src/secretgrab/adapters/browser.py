"""Runtime environment adapter: headless Chromium driven by Playwright.

Injects the interception hook before any page script runs, navigates to
the target, waits for the page to settle and reads the capture list once.
"""

from typing import Optional, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from secretgrab.config import GrabConfig
from secretgrab.kernel.capture import CaptureRecord, read_captures
from secretgrab.kernel.hook import HOOK_SCRIPT, READ_CAPTURES_SCRIPT


class CaptureError(RuntimeError):
    """Raised when the browser cannot be launched, navigated or read."""
    pass


def grab_live(config: Optional[GrabConfig] = None) -> Tuple[CaptureRecord, ...]:
    """Capture every write to `secret` made while the target page loads.

    Args:
        config: Run settings (defaults to GrabConfig())

    Returns:
        Parsed capture records, in write order

    Raises:
        CaptureError: if any browser step fails
    """
    config = config or GrabConfig()
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(
                headless=config.headless,
                args=list(config.launch_args),
            )
            try:
                context = browser.new_context(java_script_enabled=True)
                context.set_default_timeout(config.timeout_ms)
                # Init scripts re-run on every navigation; the hook's marker keeps it single.
                context.add_init_script(script=HOOK_SCRIPT)
                page = context.new_page()
                page.goto(config.target_url, timeout=config.timeout_ms)
                page.wait_for_timeout(config.settle_ms)
                raw = page.evaluate(READ_CAPTURES_SCRIPT)
            finally:
                browser.close()
    except PlaywrightError as e:
        raise CaptureError(f"Live capture from {config.target_url} failed: {e}") from e

    return read_captures(raw or [])
