from playwright.sync_api import Locator


def highlight_element(locator: Locator):
    """
    Highlights an element by adding a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "el => el.setAttribute('style', (el.getAttribute('style') || '') + '; border: 2px solid red !important;')"
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: Value returned by highlight_element(), None removes the attribute.
    """
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)


def get_text_content(locator: Locator) -> str:
    """
    Returns the trimmed textContent of an element.
    Works for elements that are in the DOM but not rendered (e.g. a closed menu),
    where inner_text() would return an empty string.
    """
    return locator.evaluate("el => (el.textContent || '').trim()")


def get_all_text_contents(locator: Locator) -> list[str]:
    """Returns the trimmed textContent of every element matched by the locator."""
    return [get_text_content(item) for item in locator.all()]
