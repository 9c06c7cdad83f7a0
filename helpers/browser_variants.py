from dataclasses import dataclass
from typing import Callable

CHROME = "chrome"
MSEDGE = "msedge"

# Names accepted on the command line / in config.json for each variant
VARIANT_ALIASES = {
    "chrome": CHROME,
    "googlechrome": CHROME,
    "msedge": MSEDGE,
    "edge": MSEDGE,
    "microsoftedge": MSEDGE,
}


@dataclass(frozen=True)
class BrowserVariant:
    """
    Capability descriptor for one browser the suite runs against.

    Attributes:
        name: Variant name used in test ids and logs.
        browser_type: Playwright browser type attribute (e.g. "chromium").
        channel: Branded browser channel passed to launch().
        privacy_flag: Command line switch that opens a private window.
        options_builder: Callable (variant, config) -> kwargs for launch().
    """
    name: str
    browser_type: str
    channel: str
    privacy_flag: str
    options_builder: Callable[["BrowserVariant", dict], dict]

    def launch_options(self, config: dict) -> dict:
        return self.options_builder(self, config)

    def __str__(self):
        return self.name


def build_chromium_options(variant: BrowserVariant, config: dict) -> dict:
    args = list(config.get("browser_args", []))
    if config.get("private_mode", True):
        args.append(variant.privacy_flag)

    options = {
        "channel": variant.channel,
        "headless": config.get("headless", True),
        "args": args,
    }
    slow_mo = config.get("slow_mo")
    if slow_mo:
        options["slow_mo"] = float(slow_mo)
    return options


VARIANTS = {
    CHROME: BrowserVariant(CHROME, "chromium", "chrome", "--incognito", build_chromium_options),
    MSEDGE: BrowserVariant(MSEDGE, "chromium", "msedge", "--inprivate", build_chromium_options),
}


def get_variant(name: str) -> BrowserVariant:
    """Look up a browser variant by name or alias (case-insensitive)."""
    key = VARIANT_ALIASES.get(str(name).strip().lower())
    if key is None:
        supported = ", ".join(sorted(VARIANTS))
        raise ValueError(f"Unsupported browser variant '{name}'. Supported: {supported}")
    return VARIANTS[key]


def get_enabled_variants(names) -> list[BrowserVariant]:
    """Resolve variant names in order, dropping duplicates."""
    variants = []
    for name in names or list(VARIANTS):
        variant = get_variant(name)
        if variant not in variants:
            variants.append(variant)
    return variants
