from jsonapi_normalizer import extract_relationships, to_identifier


def test_to_many_and_to_one_linkage_reduced_to_identifiers():
    relationships = {
        "comments": {
            "data": [
                {"id": "5", "type": "comments", "attributes": {"body": "ignored"}},
                {"id": "12", "type": "comments"},
            ]
        },
        "author": {"data": {"id": "9", "type": "people", "meta": {"ignored": True}}},
    }
    assert extract_relationships(relationships) == {
        "comments": {"data": [{"id": "5", "type": "comments"}, {"id": "12", "type": "comments"}]},
        "author": {"data": {"id": "9", "type": "people"}},
    }


def test_relationship_names_and_type_values_are_camelized_independently():
    relationships = {"blog_post": {"data": {"id": "1", "type": "blog-posts"}}}

    assert extract_relationships(relationships) == {"blogPost": {"data": {"id": "1", "type": "blogPosts"}}}
    assert extract_relationships(relationships, camelize_keys=False) == {
        "blog_post": {"data": {"id": "1", "type": "blogPosts"}}
    }
    assert extract_relationships(relationships, camelize_type_values=False) == {
        "blogPost": {"data": {"id": "1", "type": "blog-posts"}}
    }


def test_null_data_is_kept_and_empty_entries_are_dropped():
    relationships = {
        "editor": {"data": None},
        "reviewers": {},
        "orphan_meta": {"meta": {"count": 1}},
    }
    assert extract_relationships(relationships) == {"editor": {"data": None}}


def test_empty_to_many_is_kept():
    assert extract_relationships({"tags": {"data": []}}) == {"tags": {"data": []}}


def test_meta_is_always_camelized():
    relationships = {"tags": {"data": [], "meta": {"total_count": 0}}}
    assert extract_relationships(relationships, camelize_keys=False) == {
        "tags": {"data": [], "meta": {"totalCount": 0}}
    }


def test_links_follow_camelize_keys():
    links = {"self": "/articles/1/relationships/author", "related_link": {"href": "/x", "link_meta": {"a_b": 1}}}
    relationships = {"author": {"links": links}}

    camelized = extract_relationships(relationships)
    assert camelized == {
        "author": {
            "links": {
                "self": "/articles/1/relationships/author",
                "relatedLink": {"href": "/x", "linkMeta": {"aB": 1}},
            }
        }
    }
    verbatim = extract_relationships(relationships, camelize_keys=False)
    assert verbatim == {"author": {"links": links}}


def test_missing_relationships_and_non_object_entries():
    assert extract_relationships(None) == {}
    assert extract_relationships({"broken": None, "ok": {"data": None}}) == {"ok": {"data": None}}


def test_to_identifier_keeps_only_id_and_type():
    resource = {"id": "1", "type": "blog_posts", "attributes": {"title": "x"}}
    assert to_identifier(resource) == {"id": "1", "type": "blogPosts"}
    assert to_identifier(resource, camelize_type_values=False) == {"id": "1", "type": "blog_posts"}


def test_non_object_linkage_has_no_members():
    relationships = {"tags": {"data": ["a", None]}, "owner": {"data": 7}}
    assert extract_relationships(relationships) == {
        "tags": {"data": [{"id": None, "type": None}, {"id": None, "type": None}]},
        "owner": {"data": {"id": None, "type": None}},
    }
    assert to_identifier("a") == {"id": None, "type": None}


def test_non_object_relationships_member_is_returned_unchanged():
    assert extract_relationships(["author"]) == ["author"]
