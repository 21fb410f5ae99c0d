"""Tests for kasos_docs.site.repository."""

import pytest

from kasos_docs.site.repository import SiteRepository


class TestSectionStore:
    def test_count_sections_ignores_directories(self, repo, site_root, write_partial):
        write_partial("a", "<p>A</p>")
        write_partial("b", "<p>B</p>")
        (site_root / "partials" / "c.html").mkdir()
        (site_root / "partials" / "notes.txt").write_text("x", encoding="utf-8")

        assert repo.count_sections() == 2

    def test_count_sections_without_store(self, tmp_path):
        assert SiteRepository(tmp_path).count_sections() == 0

    def test_list_partials_sorted_files(self, repo, site_root, write_partial):
        write_partial("b", "B")
        write_partial("a", "A")
        (site_root / "partials" / "sub").mkdir()

        assert [e.name for e in repo.list_partials()] == ["a.html", "b.html"]

    @pytest.mark.parametrize("topic", ["../evil", "", ".hidden", "a/b", "a..b"])
    def test_invalid_topic_rejected(self, repo, topic):
        with pytest.raises(ValueError, match="Invalid topic"):
            repo.fragment_path(topic)


class TestMetadataFiles:
    def test_read_stats(self, repo, site_root):
        (site_root / "stats.json").write_text('{"buildNumber": 4}', encoding="utf-8")

        assert repo.read_stats() == {"buildNumber": 4}

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_read_stats_unusable(self, repo, site_root, content):
        (site_root / "stats.json").write_text(content, encoding="utf-8")

        assert repo.read_stats() is None

    def test_read_stats_absent(self, repo):
        assert repo.read_stats() is None

    def test_build_number_written_without_newline(self, repo, site_root):
        repo.write_build_number(7)

        assert (site_root / "build-number.txt").read_text(encoding="utf-8") == "7"
        assert repo.read_build_number() == 7
