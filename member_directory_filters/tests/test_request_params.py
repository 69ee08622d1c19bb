from member_directory_filters.utils.request_params import parse_query_string


def test_plain_keys():
    assert parse_query_string("skills=JavaScript%2C+Design&location=Berlin") == {
        "skills": "JavaScript, Design",
        "location": "Berlin",
    }

def test_array_keys_collect_into_list():
    assert parse_query_string("?skills[]=Go&skills[]=Rust&page=2") == {
        "skills": ["Go", "Rust"],
        "page": "2",
    }

def test_repeated_plain_key_keeps_last():
    assert parse_query_string("location=Paris&location=Berlin") == {"location": "Berlin"}

def test_blank_values_are_kept():
    assert parse_query_string("skills=") == {"skills": ""}

def test_empty_query_string():
    assert parse_query_string("") == {}
