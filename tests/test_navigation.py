import json
import re

import pytest

from data.navigation import DESKTOP_LINKS, MOBILE_LINKS, PAGE_SECTIONS, NavState


@pytest.mark.parametrize(
    "y, expected",
    [(0, False), (49, False), (50, False), (50.5, True), (51, True), (2000, True)],
)
def test_scrolled_tracks_threshold(y, expected):
    nav = NavState()
    nav.on_scroll(y)
    assert nav.scrolled is expected


def test_scrolled_follows_live_position():
    nav = NavState()
    for y, expected in [(10, False), (300, True), (40, False), (51, True)]:
        nav.on_scroll(y)
        assert nav.scrolled is expected


def test_toggle_menu_flips_state():
    nav = NavState()
    nav.toggle_menu()
    assert nav.menu_open
    nav.toggle_menu()
    assert not nav.menu_open


def test_navigate_closes_menu_and_resolves_section():
    nav = NavState(menu_open=True)
    assert nav.navigate("contact") == "contact"
    assert not nav.menu_open


def test_navigate_to_missing_section_is_silent():
    nav = NavState(menu_open=True)
    assert nav.navigate("pricing") is None
    assert not nav.menu_open


def test_every_link_targets_a_page_section():
    for link in DESKTOP_LINKS + MOBILE_LINKS:
        assert link.section_id in PAGE_SECTIONS


def test_menu_endpoint_opens_and_closes(client):
    opened = client.get("/ui/nav/menu", params={"menu_open": "false", "scroll_y": 0})
    assert opened.status_code == 200
    assert 'class="mobile-menu"' in opened.text
    assert 'aria-expanded="true"' in opened.text
    assert 'hx-get="/ui/nav/menu?menu_open=true"' in opened.text

    closed = client.get("/ui/nav/menu", params={"menu_open": "true", "scroll_y": 0})
    assert 'class="mobile-menu"' not in closed.text
    assert 'aria-expanded="false"' in closed.text


def test_menu_endpoint_keeps_scroll_styling(client):
    response = client.get("/ui/nav/menu", params={"menu_open": "false", "scroll_y": 400})
    assert "is-scrolled" in response.text


def test_goto_section_triggers_scroll_below_header(client):
    response = client.get("/ui/nav/goto/science", params={"scroll_y": 0})
    assert response.status_code == 200
    trigger = json.loads(response.headers["HX-Trigger"])
    assert trigger == {"site:scroll-to": {"section": "science", "offset": 100}}
    assert 'class="mobile-menu"' not in response.text


def test_goto_missing_section_is_a_no_op(client):
    response = client.get("/ui/nav/goto/nowhere")
    assert response.status_code == 200
    assert "HX-Trigger" not in response.headers
    assert 'id="site-nav"' in response.text


def test_section_links_suppress_the_native_hash_jump(client):
    html = client.get("/").text
    links = re.findall(r'<a href="#(\w+)"[^>]*hx-get="/ui/nav/goto/(\w+)"', html)
    assert {href for href, _ in links} >= set(link.section_id for link in DESKTOP_LINKS)
    assert all(href == target for href, target in links)

    script = client.get("/static/js/site.js").text
    assert 'event.target.closest(\'a[hx-get^="/ui/nav/goto/"]\')' in script
    assert "event.preventDefault()" in script
