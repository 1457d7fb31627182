"""
tests.test_extensions - Extension hooks run by the renderer
"""
from xml.etree.ElementTree import SubElement

import pytest

from feedwriter import ExtensionRegistry, RssRenderer

CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"


class ContentModule:
    def render(self, descriptor, root, channel):
        root.set("xmlns:content", CONTENT_NS)
        SubElement(channel, "content:encoded").text = descriptor.description


class TestExtensionRegistry:
    def test_register_and_lookup(self):
        registry = ExtensionRegistry()
        hook = lambda descriptor, root, channel: None
        registry.register("noop", hook)
        assert "noop" in registry
        assert len(registry) == 1
        assert registry.get("noop") is hook
        assert registry.names() == ["noop"]

    def test_duplicate_name(self):
        registry = ExtensionRegistry()
        registry.register("content", ContentModule())
        with pytest.raises(ValueError):
            registry.register("content", ContentModule())

    def test_not_callable(self):
        with pytest.raises(TypeError):
            ExtensionRegistry().register("broken", object())

    def test_unregister(self):
        registry = ExtensionRegistry()
        registry.register("content", ContentModule())
        registry.unregister("content")
        assert "content" not in registry
        with pytest.raises(KeyError):
            registry.unregister("content")

    def test_for_format_keeps_registration_order(self):
        registry = ExtensionRegistry()
        registry.register("b", lambda *args: None)
        registry.register("atom-only", lambda *args: None, formats=("atom",))
        registry.register("a", lambda *args: None, formats=("RSS", "atom"))
        assert [name for name, _ in registry.for_format("rss")] == ["b", "a"]
        assert [name for name, _ in registry.for_format("atom")] == ["atom-only", "a"]


class TestRendererExtensions:
    def test_extension_output_is_appended(self, valid_feed, read_feed):
        registry = ExtensionRegistry()
        registry.register("content", ContentModule())
        feed = read_feed(RssRenderer(valid_feed, extensions=registry).save_xml())
        assert feed.channel[-1].tag == f"{{{CONTENT_NS}}}encoded"
        assert feed.channel[-1].text == "This is a test description."

    def test_extensions_receive_resolved_descriptor(self, valid_feed):
        seen = []
        registry = ExtensionRegistry()
        registry.register("spy", lambda descriptor, root, channel: seen.append(descriptor.encoding))
        RssRenderer(valid_feed, extensions=registry).render()
        assert seen == ["UTF-8"]

    def test_extensions_do_not_run_on_invalid_feed(self, valid_feed):
        seen = []
        registry = ExtensionRegistry()
        registry.register("spy", lambda *args: seen.append(args))
        valid_feed.remove("link")
        with pytest.raises(Exception):
            RssRenderer(valid_feed, extensions=registry).render()
        assert seen == []

    def test_extension_errors_propagate(self, valid_feed):
        def broken(descriptor, root, channel):
            raise RuntimeError("boom")

        registry = ExtensionRegistry()
        registry.register("broken", broken)
        with pytest.raises(RuntimeError, match="boom"):
            RssRenderer(valid_feed, extensions=registry).render()
