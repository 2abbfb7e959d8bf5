"""
Tests for modify.
"""
from request_dsl import HttpMethod, JsonBody, RawBody, TextBody, Timeout, http_request, modify


def test_modify_method():
    original = http_request(lambda r: r.url("https://api.example.com/users").method(HttpMethod.GET))

    modified = original.modify(lambda r: r.method(HttpMethod.POST))

    assert original.method == HttpMethod.GET
    assert modified.method == HttpMethod.POST
    assert modified.url == original.url


def test_modify_adds_headers():
    original = http_request(
        lambda r: r.url("https://api.example.com/users").headers(lambda h: h.set("Accept", "application/json"))
    )

    modified = original.modify(lambda r: r.headers(lambda h: h.set("Authorization", "Bearer token")))

    assert len(original.headers) == 1
    assert modified.headers == {"Accept": "application/json", "Authorization": "Bearer token"}


def test_modify_overrides_header():
    original = http_request(
        lambda r: r.url("https://api.example.com/users").headers(lambda h: h.set("Accept", "text/plain"))
    )

    modified = modify(original, lambda r: r.headers(lambda h: h.set("Accept", "application/json")))

    assert modified.headers == {"Accept": "application/json"}
    assert original.headers == {"Accept": "text/plain"}


def test_modify_adds_body():
    original = http_request(lambda r: r.url("https://api.example.com/users"))

    modified = original.modify(
        lambda r: r.method(HttpMethod.POST).body(lambda b: b.json(lambda j: j.set("name", "Jane")))
    )

    assert original.body is None
    assert isinstance(modified.body, JsonBody)


def test_modify_replaces_body():
    original = http_request(lambda r: r.url("https://api.example.com").body(lambda b: b.text("old")))

    modified = original.modify(lambda r: r.body(lambda b: b.raw(b"new")))

    assert modified.body == RawBody(b"new")
    assert original.body == TextBody("old")


def test_json_body_preserved():
    original = http_request(
        lambda r: r.url("https://api.example.com/users")
        .method(HttpMethod.POST)
        .body(lambda b: b.json(lambda j: j.set("name", "John").set("age", 30)))
    )

    modified = original.modify(lambda r: r.headers(lambda h: h.set("X-Custom", "value")))

    assert isinstance(modified.body, JsonBody)
    assert modified.body.data == {"name": "John", "age": 30}


def test_nested_json_preserved():
    original = http_request(
        lambda r: r.url("https://api.example.com/users").body(
            lambda b: b.json(lambda j: j.nested("address", lambda a: a.set("city", "Paris")))
        )
    )

    modified = original.modify(lambda r: None)

    assert modified.body.data == {"address": {"city": "Paris"}}


def test_text_body_preserved():
    original = http_request(
        lambda r: r.url("https://api.example.com/data")
        .method(HttpMethod.POST)
        .body(lambda b: b.text("Original text"))
    )

    modified = original.modify(lambda r: r.headers(lambda h: h.set("Content-Type", "text/plain")))

    assert modified.body == TextBody("Original text")
    assert modified.headers["Content-Type"] == "text/plain"


def test_raw_body_preserved():
    original = http_request(
        lambda r: r.url("https://api.example.com/upload")
        .method(HttpMethod.POST)
        .body(lambda b: b.raw(b"binary data"))
    )

    modified = original.modify(lambda r: r.headers(lambda h: h.set("Content-Type", "application/octet-stream")))

    assert isinstance(modified.body, RawBody)
    assert modified.body.bytes == b"binary data"
    assert modified.headers["Content-Type"] == "application/octet-stream"


def test_timeout_preserved_and_overridden_per_field():
    def timeout(t):
        t.connect = 1000
        t.read = 2000

    original = http_request(lambda r: r.url("https://api.example.com").timeout(timeout))

    def faster(t):
        t.read = 500

    modified = original.modify(lambda r: r.timeout(faster))

    assert original.timeout == Timeout(connect=1000, read=2000)
    assert modified.timeout == Timeout(connect=1000, read=500, write=None)


def test_unchanged_modify_equals_original():
    original = http_request(
        lambda r: r.url("https://api.example.com")
        .method("PUT")
        .headers(lambda h: h.set("A", "1"))
        .body(lambda b: b.json(lambda j: j.set("k", [1, 2])))
    )
    assert original.modify(lambda r: None) == original


def test_empty_body_block_removes_body():
    original = http_request(
        lambda r: r.url("https://api.example.com/users")
        .method(HttpMethod.POST)
        .body(lambda b: b.text("t"))
    )

    modified = original.modify(lambda r: r.method("GET").body(lambda b: None))

    assert modified.method == HttpMethod.GET
    assert modified.body is None
    assert original.body == TextBody("t")
