"""
Navigation - Nav bar state and in-page sections
===============================================
Scroll styling, the mobile menu, and which sections a nav link may target.
"""

from dataclasses import dataclass

import config


@dataclass(frozen=True)
class NavLink:
    section_id: str
    label_key: str


# Sections rendered on the page, in order
PAGE_SECTIONS = ("introduction", "science", "impact", "lab", "authors", "contact")

DESKTOP_LINKS = [
    NavLink(section_id="introduction", label_key="nav_introduction"),
    NavLink(section_id="science", label_key="nav_mission"),
    NavLink(section_id="impact", label_key="nav_products"),
    NavLink(section_id="authors", label_key="nav_promise"),
    NavLink(section_id="contact", label_key="nav_contact"),
]

MOBILE_LINKS = [
    NavLink(section_id="introduction", label_key="nav_introduction"),
    NavLink(section_id="science", label_key="nav_science"),
    NavLink(section_id="impact", label_key="nav_impact"),
    NavLink(section_id="authors", label_key="nav_authors"),
    NavLink(section_id="contact", label_key="nav_contact"),
]


@dataclass
class NavState:
    """State of the fixed nav bar."""
    scrolled: bool = False
    menu_open: bool = False

    @classmethod
    def from_request(cls, scroll_y: float = 0, menu_open: bool = False) -> "NavState":
        state = cls(menu_open=menu_open)
        state.on_scroll(scroll_y)
        return state

    def on_scroll(self, y: float) -> None:
        self.scrolled = y > config.SCROLL_THRESHOLD_PX

    def toggle_menu(self) -> None:
        self.menu_open = not self.menu_open

    def navigate(self, section_id: str) -> str | None:
        """
        Close the menu and resolve a link target.

        Returns the section id when the page has it, None otherwise.
        """
        self.menu_open = False
        if section_id not in PAGE_SECTIONS:
            return None
        return section_id
