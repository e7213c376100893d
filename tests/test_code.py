from __future__ import annotations

import pytest

import csplint
from csplint._offense import EVENT_IN_CODE

from .helpers import make_code


def test_helper_call():
    node = make_code('link_to "/x", onchange: "y()"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    offense = offenses[0]
    assert offense.code == EVENT_IN_CODE
    assert offense.loc == node.loc
    assert offense.message == (
        'Usage of inline event handlers `onchange` violates our Content Security Policy.\n'
        'Remove the handler from the helper method and refactor code using a `script` block'
    )


def test_many_events():
    node = make_code('button_tag "Go", onload: "a()", :onclick => "b()"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    assert 'handlers `onclick`,`onload` violates' in offenses[0].message


def test_case_insensitive():
    node = make_code('link_to "/x", "onClick" => "y()"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    assert '`onclick`' in offenses[0].message


def test_substring_match():
    node = make_code('render partial: "xonclickx"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    assert '`onclick`' in offenses[0].message


def test_overlapping_names():
    node = make_code('tag.div ondragstart: "x()"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    assert 'handlers `ondrag`,`ondragstart` violates' in offenses[0].message


@pytest.mark.parametrize('indicator', ['=', '==', '-', '#', None])
def test_indicator_ignored(indicator: str | None):
    node = make_code('link_to "/x", onclick: "y()"', indicator=indicator)
    assert len(list(csplint.scan_code([node]))) == 1


@pytest.mark.parametrize('code', [
    None,
    '',
    'link_to "/x", class: "btn"',
    'user.name',
    'on_click_path',
])
def test_no_offense(code: str | None):
    assert list(csplint.scan_code([make_code(code)])) == []


def test_missing_code_does_not_stop_scan():
    nodes = [
        make_code(None),
        make_code('link_to "/a", onclick: "x()"'),
        make_code(None),
        make_code('link_to "/b", onblur: "y()"'),
    ]
    offenses = list(csplint.scan_code(nodes))
    assert [o.loc for o in offenses] == [nodes[1].loc, nodes[3].loc]


def test_custom_message():
    node = make_code('link_to "/x", onclick: "y()"')
    offenses = list(csplint.scan_code([node], custom_message='CSP!'))
    assert offenses[0].message.startswith('CSP!\nUsage of inline event handlers')


def test_unicode_case_folding():
    node = make_code('link_to "/", onſcroll: "x()"')
    offenses = list(csplint.scan_code([node]))
    assert len(offenses) == 1
    assert '`onscroll`' in offenses[0].message
