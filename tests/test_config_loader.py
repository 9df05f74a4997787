from mention_highlighter.config_loader import load_settings
from mention_highlighter.highlighting import configured_usernames, highlight_with_settings
from mention_highlighter.models import MentionSegment, PlainTextSegment


def test_configured_usernames_from_mapping():
    settings = {"known_usernames": ["vic", "rstacruz", "vic"]}

    assert configured_usernames(settings) == {"vic", "rstacruz"}


def test_configured_usernames_missing_key():
    assert configured_usernames({}) == set()
    assert configured_usernames({"known_usernames": None}) == set()


def test_configured_usernames_coerces_to_str():
    assert configured_usernames({"known_usernames": [42]}) == {"42"}


def test_highlight_with_settings():
    settings = {"known_usernames": ["vic"]}

    segments = highlight_with_settings("hi @vic and @bob", settings)

    assert segments == [
        PlainTextSegment(content="hi "),
        MentionSegment(username="vic"),
        PlainTextSegment(content=" and "),
        PlainTextSegment(content="@bob"),
    ]


def test_default_settings_object_is_used(monkeypatch):
    from mention_highlighter import config_loader

    monkeypatch.setattr(config_loader, "settings", {"known_usernames": ["rstacruz"]})

    assert configured_usernames() == {"rstacruz"}


class TestLoadSettings:
    """Tests reading known_usernames through real dynaconf settings."""

    def test_packaged_defaults(self, monkeypatch):
        monkeypatch.delenv("MENTIONS_KNOWN_USERNAMES", raising=False)

        assert configured_usernames(load_settings()) == {"rstacruz", "vic"}

    def test_defaults_load_outside_repo_root(self, monkeypatch, tmp_path):
        monkeypatch.delenv("MENTIONS_KNOWN_USERNAMES", raising=False)
        monkeypatch.chdir(tmp_path)

        segments = highlight_with_settings("hi @vic", load_settings())

        assert segments == [PlainTextSegment(content="hi "), MentionSegment(username="vic")]

    def test_env_var_replaces_file_list(self, monkeypatch):
        monkeypatch.setenv("MENTIONS_KNOWN_USERNAMES", '["a","b"]')

        assert configured_usernames(load_settings()) == {"a", "b"}

    def test_reloaded_module_settings_pick_up_env(self, monkeypatch):
        from mention_highlighter import config_loader

        monkeypatch.setenv("MENTIONS_KNOWN_USERNAMES", '["a"]')
        config_loader.settings.reload()
        try:
            assert configured_usernames() == {"a"}
        finally:
            monkeypatch.delenv("MENTIONS_KNOWN_USERNAMES")
            config_loader.settings.reload()

        assert configured_usernames() == {"rstacruz", "vic"}
