import unittest

from lecture_slides.titles import DEFAULT_TITLE, extract_title, title_from_elements
from tests.utils.trees import StubParser, el


class TestTitleExtraction(unittest.TestCase):
    def test_heading_beats_bold(self):
        fragment = "<p><strong>Bold first</strong> text</p><h3>The heading</h3>"
        self.assertEqual(extract_title(fragment), "The heading")

    def test_bold_when_no_heading(self):
        self.assertEqual(extract_title("<p>Some <b>Key idea</b> here.</p>"), "Key idea")

    def test_first_sentence_of_paragraph(self):
        fragment = "<p>Clouds form when air cools. Then it rains.</p>"
        self.assertEqual(extract_title(fragment), "Clouds form when air cools")

    def test_long_sentence_is_truncated(self):
        sentence = "a" * 60
        title = extract_title(f"<p>{sentence}. tail</p>")
        self.assertEqual(title, "a" * 50 + "...")

    def test_exactly_fifty_characters_kept_whole(self):
        self.assertEqual(extract_title(f"<p>{'b' * 50}</p>"), "b" * 50)

    def test_default_when_nothing_matches(self):
        self.assertEqual(extract_title("<div>loose text</div>"), DEFAULT_TITLE)
        self.assertEqual(extract_title(""), DEFAULT_TITLE)

    def test_empty_first_sentence_gives_none(self):
        self.assertIsNone(extract_title("<p>. Leading period</p>"))

    def test_blank_heading_is_skipped(self):
        self.assertEqual(extract_title("<h2>  </h2><strong>Bold</strong>"), "Bold")

    def test_nested_heading_found_in_document_order(self):
        fragment = "<div><section><h4> Deep </h4></section></div><h1>Later</h1>"
        self.assertEqual(extract_title(fragment), "Deep")

    def test_idempotent(self):
        fragment = "<p>Same every time. Really.</p>"
        self.assertEqual(extract_title(fragment), extract_title(fragment))

    def test_synthetic_tree_through_stub_parser(self):
        tree = (el("p", "Intro ", el("strong", "Stub bold")),)
        parser = StubParser({"<fragment>": tree})
        self.assertEqual(extract_title("<fragment>", parser), "Stub bold")
        self.assertEqual(parser.calls, ["<fragment>"])

    def test_title_from_elements_without_parsing(self):
        self.assertEqual(title_from_elements((el("h2", "Direct"),)), "Direct")


if __name__ == "__main__":
    unittest.main()
