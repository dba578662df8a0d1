"""
HTML view routes for the landing page fixture site.

Routes:
    GET  /          - Landing page (heading, logo, navigation controls)
    GET  /practice  - Practice page
    GET  /login     - Login page
    GET  /signup    - Signup page

Navigation controls can be hidden with the ``hidden_controls`` cookie
(comma-separated control names) or the ``HIDDEN_CONTROLS`` config key.
Hidden controls stay in the DOM but are not rendered visibly.
"""

import logging
from flask import Blueprint, current_app, render_template, request

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

HIDDEN_CONTROLS_COOKIE = "hidden_controls"

# Control name -> (button label, target path)
NAV_CONTROLS = {
    "home": ("Home", "/"),
    "practice": ("Practice", "/practice"),
    "login": ("Login", "/login"),
    "signup": ("Signup", "/signup"),
}

SECTION_HEADINGS = {
    "practice": "Practice waiting",
    "login": "Log in to Waitly",
    "signup": "Create your Waitly account",
}


def parse_hidden_controls(raw: str | None) -> set[str]:
    """
    Parse a comma-separated list of control names.

    Unknown names and surrounding whitespace are ignored.
    """
    if not raw:
        return set()
    names = {part.strip().lower() for part in raw.split(",")}
    return names.intersection(NAV_CONTROLS)


def hidden_controls() -> set[str]:
    """Controls hidden for the current request (config plus cookie)."""
    configured = set(current_app.config.get("HIDDEN_CONTROLS", ())).intersection(NAV_CONTROLS)
    return configured | parse_hidden_controls(request.cookies.get(HIDDEN_CONTROLS_COOKIE))


def _nav_items() -> list[dict]:
    hidden = hidden_controls()
    return [
        {"name": name, "label": label, "href": href, "hidden": name in hidden}
        for name, (label, href) in NAV_CONTROLS.items()
    ]


@views_bp.route("/")
def index():
    """
    Render the landing page.

    Returns:
        Rendered landing.html template.
    """
    nav_items = _nav_items()
    hidden = [item["name"] for item in nav_items if item["hidden"]]
    logger.info(f"GET / - Rendering landing page (hidden: {hidden})")
    return render_template(
        "landing.html",
        site_title=current_app.config["SITE_TITLE"],
        nav_items=nav_items,
    )


@views_bp.route("/<any(practice, login, signup):section>")
def section(section: str):
    """
    Render one of the pages the navigation controls lead to.

    Args:
        section: Control name the page belongs to.

    Returns:
        Rendered section.html template.
    """
    logger.info(f"GET /{section} - Rendering section page")
    return render_template(
        "section.html",
        site_title=current_app.config["SITE_TITLE"],
        nav_items=_nav_items(),
        heading=SECTION_HEADINGS[section],
        section=section,
    )
