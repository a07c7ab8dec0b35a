#!/usr/bin/env python3
"""
Shadow DOM Lookup Example
=========================

This example demonstrates how Warden finds and drives elements
inside Shadow DOM boundaries.

Shadow DOM creates encapsulated DOM trees that regular locators
cannot see. Warden expands the host's shadow root with JavaScript
and searches inside it, re-expanding on every lookup so a host that
re-renders is still found.

Usage:
    python examples/shadow_dom_lookup.py [URL] [HOST_SELECTOR] [CHILD_SELECTOR]
"""

import logging
import sys

from selenium.webdriver.common.by import By

from warden import HighlightState, Services
from warden.core.driver_factory import create_driver
from warden.core.errors import WardenError
from warden.core.settings import BrowserProfile
from warden.reporters import FlightRecorder


def main():
    """Find a child inside a shadow host and act on it."""
    url = sys.argv[1] if len(sys.argv) > 1 else "https://shop.polymer-project.org"
    host_selector = sys.argv[2] if len(sys.argv) > 2 else "shop-app"
    child_selector = sys.argv[3] if len(sys.argv) > 3 else "app-header"

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=" * 60)
    print("🛡️ Warden - Shadow DOM Lookup")
    print("=" * 60)
    print()

    print("Creating driver...")
    driver = create_driver(BrowserProfile(is_headless=False, is_element_highlight_enabled=True))
    recorder = FlightRecorder(run_name="shadow_dom_lookup")

    try:
        services = Services.create(driver, recorder=recorder)

        print(f"Navigating to: {url}")
        services.browser.go_to(url)
        services.browser.wait_for_page_to_load()
        print()

        factory = services.element_factory()
        host = factory.get_label((By.CSS_SELECTOR, host_selector), "Shadow host")
        child = host.find_child_in_shadow_root((By.CSS_SELECTOR, child_selector), "Shadow child")

        print("Shadow child:")
        print("-" * 40)
        print(f"  XPath: {child.js_actions.get_xpath()}")
        print(f"  On screen: {'✅' if child.js_actions.is_element_on_screen() else '❌'}")
        print(f"  Viewport: {tuple(child.js_actions.get_viewport_coordinates())}")
        print()

        # Highlight follows the profile flag; the last call suppresses it explicitly
        child.js_actions.scroll_to_the_center()
        child.js_actions.hover_mouse()
        child.js_actions.set_focus(HighlightState.NOT_HIGHLIGHT)

        print(f"Recorded {len(recorder.entries)} log entries")
        print(f"Report: {recorder.save('reports/shadow_dom_lookup.json')}")

    except WardenError as e:
        print(f"Error: {e}")
        raise

    finally:
        print()
        print("Closing browser...")
        driver.quit()
        print("Done!")


if __name__ == "__main__":
    main()
