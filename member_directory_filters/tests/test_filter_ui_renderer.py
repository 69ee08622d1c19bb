import pytest

from member_directory_filters.registry.filter_registry import default_registry
from member_directory_filters.services.filter_ui_renderer import (
    FilterUiRenderer,
    RenderContext,
    build_reset_url,
    current_value,
)


@pytest.fixture
def renderer():
    return FilterUiRenderer(default_registry())


def test_renders_one_input_per_field(renderer):
    markup = renderer.render(RenderContext(), {}, "/members/")
    assert markup.startswith('<fieldset id="mdf-filters"')
    for name in ("skills", "location", "interests"):
        assert f'name="{name}"' in markup
    assert 'placeholder="City, Country"' in markup
    assert 'id="mdf-apply"' in markup

def test_renders_once_per_context(renderer):
    context = RenderContext()
    assert renderer.render(context, {}, "/members/")
    assert context.rendered
    assert renderer.render(context, {}, "/members/") == ""

def test_fresh_context_renders_again(renderer):
    renderer.render(RenderContext(), {}, "/members/")
    assert renderer.render(RenderContext(), {}, "/members/") != ""

def test_outside_directory_renders_nothing(renderer):
    context = RenderContext()
    assert renderer.render(context, {}, "/blog/", is_members_directory=False) == ""
    assert not context.rendered

def test_current_values_are_prefilled_and_escaped(renderer):
    markup = renderer.render(RenderContext(), {"skills": 'Go, "Rust"', "location": ["Berlin", "Paris"]}, "/members/")
    assert 'value="Go, &quot;Rust&quot;"' in markup
    assert 'value="Berlin, Paris"' in markup

def test_reset_link_strips_filter_params(renderer):
    markup = renderer.render(RenderContext(), {}, "/members/?skills=Go&page=2")
    assert 'href="/members/?page=2"' in markup

def test_build_reset_url_keeps_other_params():
    url = build_reset_url("https://example.org/members/?skills=Go&location=Berlin&sort=alpha#list",
                          ["skills", "location", "interests"])
    assert url == "https://example.org/members/?sort=alpha#list"

def test_build_reset_url_strips_array_forms():
    assert build_reset_url("/members/?skills[]=Go&skills[]=Rust&page=3", ["skills"]) == "/members/?page=3"

def test_build_reset_url_without_query():
    assert build_reset_url("/members/", ["skills"]) == "/members/"

def test_current_value():
    assert current_value({"skills": " <b>Go</b> "}, "skills") == "Go"
    assert current_value({}, "skills") == ""
    assert current_value(None, "skills") == ""

def test_build_reset_url_strips_indexed_and_encoded_forms():
    url = build_reset_url("/members/?skills[0]=Go&skills%5B1%5D=Rust&location=Berlin&page=2", ["skills", "location"])
    assert url == "/members/?page=2"

def test_build_reset_url_keeps_other_segments_verbatim():
    url = build_reset_url("/members/?preview&q=a%20b&skills[0]=Go&page=2", ["skills"])
    assert url == "/members/?preview&q=a%20b&page=2"
