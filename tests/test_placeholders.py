"""Tests for placeholder extraction and template rendering."""

from oracle_cmdref.knowledge.catalog import Entry, EntryKind
from oracle_cmdref.knowledge.query import get_entry
from oracle_cmdref.knowledge.render import extract_placeholders, missing_placeholders, render


HOST_PORT = Entry(
    "Check Listener Port",
    ("Net",),
    "# probe <host> on <port>\nnc -zv <host> <port> && echo \"<host>:<port> open\"",
)


class TestExtractPlaceholders:
    def test_names(self):
        assert extract_placeholders("sqlplus <user>/<pass>@<host>:<port>/<svc>") == {
            "user",
            "pass",
            "host",
            "port",
            "svc",
        }

    def test_repeated_token_counted_once(self):
        assert extract_placeholders("<a> <a> <b_2>") == {"a", "b_2"}

    def test_ignores_non_tokens(self):
        text = "rman target / <<EOF\nSELECT 1 FROM dual WHERE 1 <> 2 AND x <= 3;\nEOF\n<1st> < spaced >"
        assert extract_placeholders(text) == frozenset()


class TestRender:
    def test_replaces_tokens_and_preserves_other_text(self):
        rendered = render(HOST_PORT, {"host": "db01", "port": "1521"})
        assert rendered == HOST_PORT.template.replace("<host>", "db01").replace("<port>", "1521")
        assert rendered == "# probe db01 on 1521\nnc -zv db01 1521 && echo \"db01:1521 open\""

    def test_empty_values_return_template_unchanged(self):
        assert render(HOST_PORT, {}) == HOST_PORT.template
        assert render(HOST_PORT) == HOST_PORT.template

    def test_missing_values_left_verbatim(self):
        assert render(HOST_PORT, {"host": "db01"}) == (
            "# probe db01 on <port>\nnc -zv db01 <port> && echo \"db01:<port> open\""
        )

    def test_unknown_keys_ignored(self):
        assert render(HOST_PORT, {"service_name": "orclpdb"}) == HOST_PORT.template

    def test_pure_and_repeatable(self):
        values = {"host": "db01", "port": "1521"}
        first = render(HOST_PORT, values)
        assert render(HOST_PORT, values) == first
        assert values == {"host": "db01", "port": "1521"}
        assert "<host>" in HOST_PORT.template

    def test_values_are_not_expanded_again(self):
        rendered = render(HOST_PORT, {"host": "<port>", "port": "1521"})
        assert rendered.startswith("# probe <port> on 1521")

    def test_bundled_easy_connect(self, catalog):
        entry = get_entry(catalog, "Connect with Easy Connect")
        rendered = render(entry, {"hostname": "db01", "port": "1521"})
        assert rendered == "sqlplus <username>/<password>@db01:1521/<service_name>"

    def test_sql_entry(self):
        entry = Entry("Unlock", ("DB",), "ALTER USER <username> ACCOUNT UNLOCK;", EntryKind.SQL)
        assert render(entry, {"username": "SCOTT"}) == "ALTER USER SCOTT ACCOUNT UNLOCK;"


def test_missing_placeholders():
    assert missing_placeholders(HOST_PORT, {"host": "db01", "other": "x"}) == ["port"]
    assert missing_placeholders(HOST_PORT) == ["host", "port"]
    assert missing_placeholders(HOST_PORT, {"host": "a", "port": "b"}) == []
