import pytest

from jsonapi_normalizer import extract_metadata, split_endpoint


DOCUMENT = {
    "data": [
        {
            "id": "1",
            "type": "blog-posts",
            "attributes": {"title": "ignored"},
            "relationships": {"main_author": {"data": {"id": "9", "type": "people"}}},
        },
        {"id": "2", "type": "blog-posts"},
    ],
    "links": {"next_page": "/posts?page=2"},
    "meta": {"total_count": 2},
}


@pytest.mark.parametrize(
    "endpoint, expected",
    [
        ("/articles", ("/articles", "")),
        ("/articles?include=author", ("/articles", "?include=author")),
        ("/articles?a=1?b=2", ("/articles", "?a=1?b=2")),
        ("", ("", "")),
    ],
)
def test_split_endpoint(endpoint, expected):
    assert split_endpoint(endpoint) == expected


def test_query_endpoint_is_nested_under_base_path():
    result = extract_metadata(DOCUMENT, "/posts?include=author")

    entry = result["meta"]["/posts"]["?include=author"]
    assert entry["data"] == [
        {
            "id": "1",
            "type": "blogPosts",
            "relationships": {"mainAuthor": {"data": {"id": "9", "type": "people"}}},
        },
        {"id": "2", "type": "blogPosts"},
    ]
    assert entry["links"] == {"next_page": "/posts?page=2"}
    assert entry["meta"] == {"total_count": 2}
    assert result["meta"]["/posts"]["links"] == {"next_page": "/posts?page=2"}


def test_endpoint_without_query_is_a_single_level():
    result = extract_metadata(DOCUMENT, "/posts")
    assert set(result["meta"]) == {"/posts"}
    assert set(result["meta"]["/posts"]) == {"data", "links", "meta"}


def test_unfiltered_endpoint_uses_raw_key():
    result = extract_metadata(DOCUMENT, "/posts?include=author", filter_endpoint=False)

    assert result["meta"]["/posts?include=author"]["meta"] == {"total_count": 2}
    assert len(result["meta"]["/posts?include=author"]["data"]) == 2
    assert result["meta"]["/posts"] == {"links": {"next_page": "/posts?page=2"}}


def test_missing_data_leaves_an_empty_object():
    result = extract_metadata({"meta": {"total": 0}}, "/posts")
    assert result == {"meta": {"/posts": {"data": {}, "meta": {"total": 0}}}}


def test_single_resource_data_becomes_a_list():
    result = extract_metadata({"data": {"id": "1", "type": "posts"}}, "/posts/1")
    assert result["meta"]["/posts/1"]["data"] == [{"id": "1", "type": "posts"}]


def test_casing_options_apply_to_identifiers_and_relationships():
    result = extract_metadata(
        DOCUMENT,
        "/posts",
        camelize_keys=False,
        camelize_type_values=False,
    )
    first = result["meta"]["/posts"]["data"][0]
    assert first == {
        "id": "1",
        "type": "blog-posts",
        "relationships": {"main_author": {"data": {"id": "9", "type": "people"}}},
    }
