"""
Tests for path resolution and URL validation.
"""

import unittest

from js_outlinks.config import ExtractorConfig
from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.utils.url import folder_base, resolve_path, validate_url


REGISTRY = PatternRegistry.from_config(ExtractorConfig())


class TestFolderBase(unittest.TestCase):
    def test_strips_file_name(self):
        self.assertEqual(folder_base("http://h/a/b/tree.js"), "http://h/a/b")

    def test_strips_trailing_slash_only(self):
        self.assertEqual(folder_base("http://h/a/b/"), "http://h/a/b")

    def test_no_slash_unchanged(self):
        self.assertEqual(folder_base("tree.js"), "tree.js")

    def test_host_without_path_keeps_root(self):
        self.assertEqual(folder_base("http://example.com"), "http://example.com")
        self.assertEqual(folder_base("https://example.com:8443"), "https://example.com:8443")

    def test_host_root_slash_keeps_root(self):
        self.assertEqual(folder_base("http://example.com/"), "http://example.com")


class TestResolvePath(unittest.TestCase):
    BASE = "http://h/a/b"

    def test_relative_path_is_joined(self):
        for path in ("x.js", "c/d.html", "c/d/e.pdf?x=1#top"):
            with self.subTest(path=path):
                self.assertEqual(
                    resolve_path(self.BASE, path, REGISTRY), f"{self.BASE}/{path}"
                )

    def test_absolute_url_returned_unchanged(self):
        for path in ("https://other.org/z.html", "HTTP://X/Y", "ftp://f/g",
                     "www.example.com/a.html"):
            with self.subTest(path=path):
                self.assertEqual(resolve_path(self.BASE, path, REGISTRY), path)

    def test_single_ascension(self):
        self.assertEqual(
            resolve_path(self.BASE, "../x.js", REGISTRY), "http://h/a/x.js"
        )

    def test_ascends_one_level_per_marker(self):
        base = "http://h/1/2/3/4"
        for n in range(1, 5):
            with self.subTest(levels=n):
                expected = base.rsplit("/", n)[0] + "/f.js"
                self.assertEqual(
                    resolve_path(base, "../" * n + "f.js", REGISTRY), expected
                )

    def test_ascension_clamped_at_root(self):
        self.assertEqual(resolve_path("http://h", "../x.js", REGISTRY), "http://h/x.js")
        self.assertEqual(
            resolve_path("http://h/a", "../../../x.js", REGISTRY), "http://h/x.js"
        )

    def test_base_without_scheme(self):
        self.assertEqual(resolve_path("a/b", "../c", REGISTRY), "a/c")
        self.assertEqual(resolve_path("a", "../c", REGISTRY), "a/c")

    def test_join_is_purely_syntactic(self):
        self.assertEqual(
            resolve_path(self.BASE, "./x.js", REGISTRY), "http://h/a/b/./x.js"
        )
        self.assertEqual(
            resolve_path(self.BASE, "/root.js", REGISTRY), "http://h/a/b//root.js"
        )


class TestValidateUrl(unittest.TestCase):
    def test_valid_urls(self):
        for url in ("http://h/p/x.js", "https://example.com:8443/a?b=c#d",
                    "ftp://files.example.com/pub/x.zip", "file:///tmp/x.js"):
            with self.subTest(url=url):
                self.assertEqual(validate_url(url), url)

    def test_rejected_urls(self):
        for url in ("", "relative/path.js", "javascript:void(0)",
                    "mailto:someone@example.com", "gopher://h/x", "http:///x.js",
                    "http://h:port/x.js", "http://[::1/x", "http://h/a b.html",
                    "http://h/a\tb.html"):
            with self.subTest(url=url):
                with self.assertRaises(ValueError):
                    validate_url(url)


if __name__ == "__main__":
    unittest.main()
