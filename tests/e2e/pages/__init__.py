"""
Page Object Model (POM) classes for the browser suite.

Page objects encapsulate page-specific locators and interactions so
tests state what they check, not how the page is probed.
"""

from tests.e2e.pages.base_page import BasePage, LocatorRegistry, UnknownElementError
from tests.e2e.pages.landing_page import LandingPage

__all__ = ["BasePage", "LandingPage", "LocatorRegistry", "UnknownElementError"]
