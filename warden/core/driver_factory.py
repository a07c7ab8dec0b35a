"""
Driver Factory - WebDriver creation from a browser profile.

The action engine only borrows a session; this module is a convenience
for the CLI, examples and browser tests that need to start one.
"""

from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver

from warden.core.settings import BrowserProfile

SUPPORTED_BROWSERS = ("chrome", "firefox")


def create_driver(
    profile: Optional[BrowserProfile] = None,
    profile_path: Optional[str] = None,
) -> WebDriver:
    """
    Create a WebDriver for ``profile.browser_name``.

    Args:
        profile: Browser profile; headed Chrome when omitted
        profile_path: Path to a browser user-data directory (Chrome only)

    Returns:
        A started WebDriver

    Example:
        >>> driver = create_driver(BrowserProfile(is_headless=True))
        >>> driver.get("https://example.com")
    """
    profile = profile or BrowserProfile()
    browser_name = profile.browser_name.lower()

    if browser_name == "chrome":
        return _create_chrome_driver(profile.is_headless, profile_path)
    if browser_name == "firefox":
        return _create_firefox_driver(profile.is_headless)

    raise ValueError(
        f"Unsupported browser '{profile.browser_name}', expected one of {', '.join(SUPPORTED_BROWSERS)}"
    )


def _create_chrome_driver(headless: bool = False, profile_path: Optional[str] = None) -> webdriver.Chrome:
    """Create a Chrome WebDriver with stability options."""
    options = ChromeOptions()

    if headless:
        options.add_argument("--headless=new")

    if profile_path:
        options.add_argument(f"--user-data-dir={profile_path}")

    # Common stability options
    options.add_argument("--disable-extensions")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--window-size=1920,1080")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    return webdriver.Chrome(options=options)


def _create_firefox_driver(headless: bool = False) -> webdriver.Firefox:
    options = FirefoxOptions()
    if headless:
        options.add_argument("-headless")
    return webdriver.Firefox(options=options)
