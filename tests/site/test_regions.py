"""Tests for kasos_docs.site.regions: tagged section tokenizer."""

from __future__ import annotations

from kasos_docs.site.regions import scan_tagged_regions


class TestScanTaggedRegions:
    def test_regions_in_document_order(self):
        html = (
            '<main>\n<section id="b"><p>B</p></section>\n\n'
            '<section id="a">\n<p>A</p>\n</section></main>'
        )

        regions = scan_tagged_regions(html)

        assert [r.topic for r in regions] == ["b", "a"]
        assert regions[0].inner == "<p>B</p>"
        assert regions[1].inner == "\n<p>A</p>\n"

    def test_markup_rewraps_with_same_delimiters(self):
        html = '<section id="t" class="doc-section" data-x="1">\n  body\n</section>'

        (region,) = scan_tagged_regions(html)

        assert region.opening_tag == '<section id="t" class="doc-section" data-x="1">'
        assert region.markup == html

    def test_id_not_first_attribute(self):
        (region,) = scan_tagged_regions('<section class="x" id="late">L</section>')

        assert region.topic == "late"

    def test_hyphenated_id_attributes_ignored(self):
        (region,) = scan_tagged_regions('<section data-id="x" id="real">A</section>')

        assert region.topic == "real"

    def test_only_data_id_is_untagged(self):
        assert scan_tagged_regions('<section data-id="x">A</section>') == []

    def test_offsets_cover_the_region(self):
        html = 'xx<section id="a">A</section>yy'

        (region,) = scan_tagged_regions(html)

        assert html[region.start:region.end] == region.markup

    def test_section_without_id_skipped(self):
        html = '<section class="plain">P</section><section id="b">B</section>'

        regions = scan_tagged_regions(html)

        assert [(r.topic, r.inner) for r in regions] == [("b", "B")]

    def test_nested_region_flagged_and_ends_at_first_close(self):
        html = '<section id="outer"><section id="inner">x</section></section>'

        regions = scan_tagged_regions(html)

        assert len(regions) == 1
        assert regions[0].topic == "outer"
        assert regions[0].inner == '<section id="inner">x'
        assert regions[0].nested is True

    def test_flat_regions_not_flagged(self):
        regions = scan_tagged_regions('<section id="a">A</section><section id="b">B</section>')

        assert [r.nested for r in regions] == [False, False]

    def test_unterminated_region_ignored(self):
        html = '<section id="a">A</section><section id="open">never closed'

        assert [r.topic for r in scan_tagged_regions(html)] == ["a"]

    def test_similar_tag_names_not_matched(self):
        assert scan_tagged_regions('<sections id="a">A</sections>') == []

    def test_empty_text(self):
        assert scan_tagged_regions("") == []
