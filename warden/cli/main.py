"""
Warden CLI - Run a single JavaScript element action from the shell.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from warden import __version__

console = Console()

ACTIONS = [
    "click",
    "click-and-wait",
    "highlight",
    "scroll",
    "scroll-by",
    "scroll-center",
    "set-value",
    "focus",
    "hover",
    "text",
    "xpath",
    "on-screen",
    "coordinates",
]


@click.group()
@click.version_option(version=__version__, prog_name="warden")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs")
def cli(verbose):
    """🛡️ Warden - Resilient DOM actions over Selenium."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command()
def scripts():
    """List the JavaScript catalog."""
    from warden.layers.action.scripts import JavaScript

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Member", style="green")
    table.add_column("Script", style="yellow")
    table.add_column("Returns value", justify="center")

    for script in JavaScript:
        table.add_row(script.name, script.script_name, "✅" if "return" in script.body else "")

    console.print(table)


@cli.command()
@click.argument("url")
@click.argument("selector")
@click.argument("action", type=click.Choice(ACTIONS))
@click.option("--value", default=None, help="Value for set-value")
@click.option("--x", "offset_x", default=0, type=int, help="Horizontal offset for scroll-by")
@click.option("--y", "offset_y", default=0, type=int, help="Vertical offset for scroll-by")
@click.option("--shadow-host", default=None, help="CSS selector of a shadow host containing SELECTOR")
@click.option("--headless/--headed", default=None, help="Override the profile's headless flag")
@click.option("--highlight/--no-highlight", default=None, help="Force or suppress highlighting")
@click.option("--settings", "settings_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="JSON settings file")
@click.option("--report", "report_path", default=None, type=click.Path(dir_okay=False),
              help="Write the flight record as JSON")
def act(url, selector, action, value, offset_x, offset_y, shadow_host, headless, highlight,
        settings_path, report_path):
    """
    Open URL, find SELECTOR (CSS) and perform ACTION on it.

    \b
    Examples:

        warden act https://example.com h1 text

        warden act https://example.com "#go" click --highlight

        warden act https://shop.example "button" click --shadow-host "cart-widget"
    """
    from dataclasses import replace
    from selenium.webdriver.common.by import By

    from warden.core.driver_factory import create_driver
    from warden.core.errors import WardenError
    from warden.core.services import Services
    from warden.core.settings import BrowserProfile, JsonSettings
    from warden.layers.action.js_actions import HighlightState
    from warden.reporters.flight_recorder import FlightRecorder

    if action == "set-value" and value is None:
        raise click.UsageError("set-value requires --value")

    settings = JsonSettings.from_file(settings_path) if settings_path else JsonSettings.defaults()
    profile = BrowserProfile.from_settings(settings)
    if headless is not None:
        profile = replace(profile, is_headless=headless)

    highlight_state = {
        None: HighlightState.DEFAULT,
        True: HighlightState.HIGHLIGHT,
        False: HighlightState.NOT_HIGHLIGHT,
    }[highlight]

    console.print(Panel.fit(
        f"[bold blue]🛡️ Warden[/bold blue]\n"
        f"[dim]{action} → {selector}[/dim]",
        border_style="blue"
    ))

    recorder = FlightRecorder()
    driver = create_driver(profile)
    try:
        services = Services.create(driver, settings, recorder=recorder)
        services.browser_profile = profile
        services.browser.go_to(url)
        services.browser.wait_for_page_to_load()

        factory = services.element_factory()
        if shadow_host:
            host = factory.get_label((By.CSS_SELECTOR, shadow_host), "Shadow host")
            element = host.find_child_in_shadow_root((By.CSS_SELECTOR, selector), selector)
        else:
            element = factory.get_label((By.CSS_SELECTOR, selector), selector)

        result = _perform(element.js_actions, action, value, offset_x, offset_y, highlight_state)
        console.print(f"\n[bold green]✅ {action} done[/bold green]")
        if result is not None:
            console.print(f"[bold]Result:[/bold] {result}")
    except WardenError as e:
        console.print(f"\n[bold red]❌ {action} failed[/bold red]")
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
    finally:
        driver.quit()
        if report_path:
            recorder.save(report_path)
            console.print(f"[dim]Report: {report_path}[/dim]")


def _perform(actions, action, value, offset_x, offset_y, highlight_state):
    """Dispatch one CLI action name onto JsActions."""
    if action == "click":
        return actions.click(highlight_state)
    if action == "click-and-wait":
        return actions.click_and_wait(highlight_state)
    if action == "highlight":
        return actions.highlight_element(highlight_state)
    if action == "scroll":
        return actions.scroll_into_view()
    if action == "scroll-by":
        return actions.scroll_by(offset_x, offset_y)
    if action == "scroll-center":
        return actions.scroll_to_the_center()
    if action == "set-value":
        return actions.set_value(value, highlight_state)
    if action == "focus":
        return actions.set_focus(highlight_state)
    if action == "hover":
        return actions.hover_mouse(highlight_state)
    if action == "text":
        return actions.get_element_text()
    if action == "xpath":
        return actions.get_xpath()
    if action == "on-screen":
        return actions.is_element_on_screen()
    if action == "coordinates":
        return tuple(actions.get_viewport_coordinates())
    raise click.UsageError(f"Unknown action '{action}'")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
