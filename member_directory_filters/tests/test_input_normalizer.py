import pytest

from member_directory_filters.utils.input_normalizer import normalize, sanitize_text, unslash


# ----------------------------
# Scalar values
# ----------------------------

def test_plain_text_is_trimmed():
    assert normalize("  JavaScript  ") == "JavaScript"

def test_tags_are_stripped():
    assert normalize("<b>Java</b>Script") == "JavaScript"

def test_script_payload_does_not_survive():
    assert normalize("Berlin<script>alert('x')</script>") == "Berlin"

def test_stray_less_than_is_encoded():
    assert normalize("5 < 6") == "5 &lt; 6"

def test_whitespace_and_line_breaks_collapse():
    assert normalize("Hiking\n\t  Startups") == "Hiking Startups"

def test_percent_octets_are_removed():
    assert normalize("Ber%41lin") == "Berlin"

def test_slashes_are_removed():
    assert normalize("O\\'Brien") == "O'Brien"

@pytest.mark.parametrize("raw", [None, "", "   ", "<p></p>"])
def test_empty_input_normalizes_to_empty_string(raw):
    assert normalize(raw) == ""

def test_non_string_scalar_is_stringified():
    assert normalize(42) == "42"


# ----------------------------
# Sequence values
# ----------------------------

def test_list_keeps_shape_and_order():
    assert normalize(["Design", " JavaScript "]) == ["Design", "JavaScript"]

def test_list_drops_elements_empty_after_sanitation():
    assert normalize(["Berlin", "<i></i>", "  ", "Paris"]) == ["Berlin", "Paris"]

def test_nested_containers_are_dropped():
    assert normalize(["Berlin", ["nested"], {"a": 1}]) == ["Berlin"]

def test_empty_list_stays_list():
    assert normalize([]) == []


# ----------------------------
# Helpers
# ----------------------------

def test_unslash_trailing_backslash():
    assert unslash("abc\\") == "abc"

def test_sanitize_text_keeps_commas():
    assert sanitize_text("JavaScript, Design") == "JavaScript, Design"
