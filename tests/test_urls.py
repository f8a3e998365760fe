"""Tests for the URL scheme policy."""

import unittest

from sublimehtml import DEFAULT_URL_POLICY, DangerousUrlScheme, UrlPolicy, check_url, create, is_dangerous_url
from sublimehtml.serialize import serialize_attributes
from sublimehtml.tags import a, div, p


class TestUrlPolicy(unittest.TestCase):
    def test_default_policy(self):
        assert DEFAULT_URL_POLICY.url_attributes == {"href", "src", "action", "formaction"}
        assert DEFAULT_URL_POLICY.blocked_schemes == ("javascript:", "data:text/html", "vbscript:")

    def test_policy_normalizes_inputs(self):
        policy = UrlPolicy(url_attributes=["HREF", "poster"], blocked_schemes=["FILE:"])
        assert policy.url_attributes == frozenset({"href", "poster"})
        assert policy.blocked_schemes == ("file:",)

    def test_policy_accepts_pre_normalized_values(self):
        attributes = frozenset({"href"})
        policy = UrlPolicy(url_attributes=attributes, blocked_schemes=("javascript:",))
        assert policy.url_attributes is attributes

    def test_policy_is_frozen(self):
        with self.assertRaises(AttributeError):
            DEFAULT_URL_POLICY.blocked_schemes = ()

    def test_blocked_scheme(self):
        assert DEFAULT_URL_POLICY.blocked_scheme(" Data:Text/HTML;base64,x") == "data:text/html"
        assert DEFAULT_URL_POLICY.blocked_scheme("https://example.com") is None


class TestCheckUrl(unittest.TestCase):
    def test_is_dangerous_url(self):
        assert is_dangerous_url("javascript:alert(1)")
        assert is_dangerous_url("  VBScript:x")
        assert not is_dangerous_url("https://example.com/javascript:")
        assert not is_dangerous_url("data:image/png;base64,AAAA")

    def test_check_url_ignores_other_attributes(self):
        check_url("title", "javascript:alert(1)")

    def test_check_url_raises(self):
        with self.assertRaises(DangerousUrlScheme) as ctx:
            check_url("src", "vbscript:x")
        assert ctx.exception.value == "vbscript:x"

    def test_check_url_coerces_values(self):
        check_url("href", 42)

    def test_custom_policy(self):
        policy = UrlPolicy(url_attributes=["poster"], blocked_schemes=["http:"])
        with self.assertRaises(DangerousUrlScheme):
            check_url("poster", "http://insecure.example", policy)
        check_url("href", "javascript:x", policy)

    def test_serialize_attributes_with_policy(self):
        policy = UrlPolicy(url_attributes=["href"], blocked_schemes=["ftp:"])
        assert serialize_attributes({"href": "javascript:x"}, policy=policy) == ' href="javascript:x"'
        with self.assertRaises(DangerousUrlScheme):
            serialize_attributes({"href": "ftp://x"}, policy=policy)


class TestRenderWithPolicy(unittest.TestCase):
    def setUp(self):
        self.policy = UrlPolicy(url_attributes=["href", "poster"], blocked_schemes=["http:"])

    def test_render_applies_policy_to_subtree(self):
        page = div(p(a("x", href="http://insecure.example")))
        with self.assertRaises(DangerousUrlScheme):
            page.render(self.policy)

    def test_custom_policy_render_is_not_cached(self):
        page = div(a("x", href="javascript:void(0)"))
        assert page.render(self.policy) == '<div><a href="javascript:void(0)">x</a></div>'
        assert page._rendered is None
        with self.assertRaises(DangerousUrlScheme):
            page.render()

    def test_stream_applies_policy(self):
        page = div(create("video", poster="http://insecure.example/p.png"))
        with self.assertRaises(DangerousUrlScheme):
            list(page.stream(self.policy))
        assert "".join(page.stream()) == '<div><video poster="http://insecure.example/p.png"></video></div>'

    def test_default_policy_reuses_cache(self):
        page = div(a("x", href="/"))
        cached = page.render()
        assert page.render(DEFAULT_URL_POLICY) is cached
