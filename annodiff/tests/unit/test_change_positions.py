#!/usr/bin/env python3

import unittest

from annodiff.diff import ChangeType, Pane, WordChange, belongs_to_pane, diff_words, map_changes


class TestMapChanges(unittest.TestCase):

    def test_added_word_with_indentation(self):
        words = diff_words("foo baz", "    foo bar baz").changes
        self.assertEqual(map_changes("    foo bar baz", words, Pane.NEW), [(8, 11, ChangeType.ADDED)])

    def test_removed_word_on_old_pane(self):
        words = diff_words("foo BAR baz", "foo bar baz").changes
        self.assertEqual(map_changes("foo BAR baz", words, Pane.OLD), [(4, 7, ChangeType.REMOVED)])
        self.assertEqual(map_changes("foo bar baz", words, Pane.NEW), [(4, 7, ChangeType.ADDED)])

    def test_ranges_slice_back_to_the_word(self):
        old = "\tif (count >= limit) {"
        new = "    if (count > max_limit) {"
        words = diff_words(old, new).changes

        for line, pane, wanted in ((old, Pane.OLD, ChangeType.REMOVED), (new, Pane.NEW, ChangeType.ADDED)):
            with self.subTest(pane=pane):
                ranges = map_changes(line, words, pane)
                expected = [w.text for w in words if w.change_type == wanted]
                self.assertEqual([line[start:end] for start, end, _ in ranges], expected)
                self.assertTrue(all(change_type == wanted for _, _, change_type in ranges))

    def test_unicode_string_offsets(self):
        words = diff_words("naïve café", "naïve thé").changes
        ranges = map_changes("naïve thé", words, Pane.NEW)
        self.assertEqual(ranges, [(6, 9, ChangeType.ADDED)])
        self.assertEqual("naïve thé"[6:9], "thé")

    def test_unicode_byte_offsets(self):
        old = "naïve café"
        new = "naïve thé"
        words = diff_words(old, new).changes

        ranges = map_changes(new, words, Pane.NEW, byte_offsets=True)
        self.assertEqual(ranges, [(7, 11, ChangeType.ADDED)])
        start, end, _ = ranges[0]
        self.assertEqual(new.encode('utf-8')[start:end].decode('utf-8'), "thé")

        start, end, _ = map_changes(old, words, Pane.OLD, byte_offsets=True)[0]
        self.assertEqual(old.encode('utf-8')[start:end].decode('utf-8'), "café")

    def test_emoji(self):
        old = "x = '🙂'"
        new = "x = '🙃'"
        words = diff_words(old, new).changes
        self.assertEqual(map_changes(new, words, Pane.NEW), [(5, 6, ChangeType.ADDED)])
        self.assertEqual(map_changes(new, words, Pane.NEW, byte_offsets=True), [(5, 9, ChangeType.ADDED)])

    def test_trailing_annotation_on_working_line(self):
        words = diff_words("foo baz", "foo bar baz").changes
        line = "foo bar baz  // [ANNOTATION] why bar?"
        self.assertEqual(map_changes(line, words, Pane.NEW), [(4, 7, ChangeType.ADDED)])

    def test_word_not_on_the_line_is_skipped(self):
        words = [
            WordChange("zzz", ChangeType.ADDED),
            WordChange("foo", ChangeType.UNCHANGED),
            WordChange("bar", ChangeType.ADDED),
        ]
        self.assertEqual(map_changes("foo bar", words, Pane.NEW), [(4, 7, ChangeType.ADDED)])

    def test_unchanged_only(self):
        words = diff_words("a = b", "a = b").changes
        self.assertEqual(map_changes("a = b", words, Pane.NEW), [])
        self.assertEqual(map_changes("a = b", words, Pane.OLD), [])

    def test_empty(self):
        self.assertEqual(map_changes("", [], Pane.NEW), [])
        self.assertEqual(map_changes("", [WordChange("x", ChangeType.ADDED)], Pane.NEW), [])


class TestBelongsToPane(unittest.TestCase):

    def test_belongs_to_pane(self):
        self.assertTrue(belongs_to_pane(ChangeType.UNCHANGED, Pane.OLD))
        self.assertTrue(belongs_to_pane(ChangeType.UNCHANGED, Pane.NEW))
        self.assertTrue(belongs_to_pane(ChangeType.ADDED, Pane.NEW))
        self.assertFalse(belongs_to_pane(ChangeType.ADDED, Pane.OLD))
        self.assertTrue(belongs_to_pane(ChangeType.REMOVED, Pane.OLD))
        self.assertFalse(belongs_to_pane(ChangeType.REMOVED, Pane.NEW))


if __name__ == '__main__':
    unittest.main()
