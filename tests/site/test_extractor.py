"""Tests for kasos_docs.site.extractor."""

from __future__ import annotations

import pytest

from kasos_docs.core.errors import ExtractionError, FragmentWriteError
from kasos_docs.site.assembler import Assembler
from kasos_docs.site.extractor import Extractor


class TestExtract:
    def test_regions_written_verbatim(self, repo, site_root):
        (site_root / "index.html").write_text(
            '<main><section id="a" class="doc-section">\n<p>A</p>\n</section>'
            '<section id="b"><p>B</p></section></main>',
            encoding="utf-8",
        )

        result = Extractor(repo).extract()

        assert result.written == ["a", "b"]
        assert result.ok
        assert (site_root / "partials" / "a.html").read_text(encoding="utf-8") == (
            '<section id="a" class="doc-section">\n<p>A</p>\n</section>'
        )
        assert (site_root / "partials" / "b.html").read_text(encoding="utf-8") == (
            '<section id="b"><p>B</p></section>'
        )

    def test_existing_partials_overwritten(self, repo, site_root, write_partial):
        write_partial("a", "old")
        (site_root / "index.html").write_text('<section id="a">new</section>', encoding="utf-8")

        Extractor(repo).extract()

        assert (site_root / "partials" / "a.html").read_text(encoding="utf-8") == (
            '<section id="a">new</section>'
        )

    def test_round_trip_through_assembler(self, repo, site_root, write_partial):
        (site_root / "template.html").write_text(
            "<body>{{SECTIONS_CONTENT}}</body>", encoding="utf-8"
        )
        fragments = {
            "a": '<section id="a">\n  <h1>A</h1>\n</section>',
            "b": '<section id="b" class="doc-section"><p>B</p></section>',
        }
        for topic, markup in fragments.items():
            write_partial(topic, markup)

        Assembler(repo, order=["a", "b"]).build()
        for path in (site_root / "partials").iterdir():
            path.unlink()
        Extractor(repo).extract()

        for topic, markup in fragments.items():
            assert (site_root / "partials" / f"{topic}.html").read_text(encoding="utf-8") == markup

    def test_file_named_after_id_not_data_id(self, repo, site_root):
        (site_root / "index.html").write_text(
            '<section data-id="x" id="real">A</section>', encoding="utf-8"
        )

        result = Extractor(repo).extract()

        assert result.written == ["real"]
        assert (site_root / "partials" / "real.html").is_file()
        assert not (site_root / "partials" / "x.html").exists()

    def test_ids_outside_canonical_order_are_written(self, repo, site_root):
        (site_root / "index.html").write_text(
            '<section id="not-in-order">X</section>', encoding="utf-8"
        )

        result = Extractor(repo).extract()

        assert result.written == ["not-in-order"]
        assert (site_root / "partials" / "not-in-order.html").exists()

    def test_partials_dir_created(self, tmp_path):
        from kasos_docs.site.repository import SiteRepository

        (tmp_path / "index.html").write_text('<section id="a">A</section>', encoding="utf-8")

        Extractor(SiteRepository(tmp_path)).extract()

        assert (tmp_path / "partials" / "a.html").is_file()

    def test_explicit_source(self, repo, site_root, tmp_path_factory):
        source = tmp_path_factory.mktemp("src") / "combined.html"
        source.write_text('<section id="x">X</section>', encoding="utf-8")

        result = Extractor(repo).extract(source)

        assert result.source == source
        assert (site_root / "partials" / "x.html").exists()

    def test_nested_region_reported(self, repo, site_root):
        (site_root / "index.html").write_text(
            '<section id="outer"><section id="inner">x</section></section>', encoding="utf-8"
        )

        result = Extractor(repo).extract()

        assert result.nested == ["outer"]
        assert result.written == ["outer"]

    def test_document_without_regions(self, repo, site_root):
        (site_root / "index.html").write_text("<html></html>", encoding="utf-8")

        result = Extractor(repo).extract()

        assert result.written == []
        assert result.ok


class TestExtractFailures:
    def test_missing_document_raises(self, repo):
        with pytest.raises(ExtractionError) as exc_info:
            Extractor(repo).extract()

        assert exc_info.value.context.path.endswith("index.html")
        assert exc_info.value.to_dict()["category"] == "PARSE"

    def test_invalid_id_recorded_and_rest_processed(self, repo, site_root):
        (site_root / "index.html").write_text(
            '<section id="../evil">E</section><section id="good">G</section>',
            encoding="utf-8",
        )

        result = Extractor(repo).extract()

        assert result.written == ["good"]
        assert not result.ok
        (failure,) = result.failures
        assert isinstance(failure, FragmentWriteError)
        assert failure.context.topic == "../evil"
        assert not (site_root / "evil.html").exists()

    def test_unwritable_fragment_recorded(self, repo, site_root):
        (site_root / "partials" / "a.html").mkdir()
        (site_root / "index.html").write_text(
            '<section id="a">A</section><section id="b">B</section>', encoding="utf-8"
        )

        result = Extractor(repo).extract()

        assert result.written == ["b"]
        assert [f.context.topic for f in result.failures] == ["a"]
