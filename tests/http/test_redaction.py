"""Tests for cosmos.http.redaction."""

from cosmos.http.redaction import FILTERED, filter_sensitive_data, resolve_filter_parameters


class TestFilterSensitiveData:
    def test_nested_mappings_keep_shape(self):
        payload = {"password": "x", "nested": {"token": "y", "ok": "z"}}

        filtered = filter_sensitive_data(payload, {"password", "token"})

        assert filtered == {"password": FILTERED, "nested": {"token": FILTERED, "ok": "z"}}

    def test_unconfigured_keys_pass_through(self):
        payload = {"username": "user", "count": 3, "flag": None}
        assert filter_sensitive_data(payload, {"password"}) == payload

    def test_input_is_not_mutated(self):
        payload = {"password": "secret", "deep": {"token": "t"}}
        filter_sensitive_data(payload, {"password", "token"})
        assert payload == {"password": "secret", "deep": {"token": "t"}}

    def test_lists_of_mappings_are_redacted(self):
        payload = {"users": [{"name": "ada", "password": "p1"}, {"name": "bob", "password": "p2"}]}

        filtered = filter_sensitive_data(payload, {"password"})

        assert filtered == {
            "users": [{"name": "ada", "password": FILTERED}, {"name": "bob", "password": FILTERED}]
        }

    def test_list_under_sensitive_key_is_masked_whole(self):
        filtered = filter_sensitive_data({"token": ["a", "b"], "ids": [1, 2]}, {"token"})
        assert filtered == {"token": FILTERED, "ids": [1, 2]}

    def test_sensitive_key_holding_mapping_is_walked(self):
        filtered = filter_sensitive_data({"token": {"value": "v", "kind": "bearer"}}, {"token", "value"})
        assert filtered == {"token": {"value": FILTERED, "kind": "bearer"}}

    def test_top_level_list(self):
        filtered = filter_sensitive_data([{"token": "y"}, "plain"], {"token"})
        assert filtered == [{"token": FILTERED}, "plain"]

    def test_tuples_stay_tuples(self):
        filtered = filter_sensitive_data(({"token": "y"},), {"token"})
        assert filtered == ({"token": FILTERED},)

    def test_scalars_pass_through(self):
        assert filter_sensitive_data("password=secret", {"password"}) == "password=secret"
        assert filter_sensitive_data(None, {"password"}) is None

    def test_non_string_keys_compare_by_name(self):
        assert filter_sensitive_data({1: "a"}, {"1"}) == {1: FILTERED}


class TestResolveFilterParameters:
    def test_defaults_come_from_settings(self):
        assert "password" in resolve_filter_parameters()

    def test_settings_are_read_fresh(self, monkeypatch):
        monkeypatch.setenv("COSMOS_FILTER_PARAMETERS", '["ssn"]')
        assert resolve_filter_parameters() == frozenset({"ssn"})
        assert filter_sensitive_data({"ssn": "1", "password": "p"}) == {"ssn": FILTERED, "password": "p"}

    def test_callable_provider(self):
        keys = {"pin"}
        provider = lambda: keys  # noqa: E731
        assert resolve_filter_parameters(provider) == frozenset({"pin"})
        keys.add("cvv")
        assert resolve_filter_parameters(provider) == frozenset({"pin", "cvv"})
