"""Tests for wifilog/pipeline.py — per-line isolation and stats accounting."""

import logging

from wifilog.pipeline import REJECT_BAD_CODE, cleanse_lines
from wifilog.stats import CleanseStats


class TestCleanseLines:
    def test_emits_only_recognized_lines(self, classifier, lines):
        stream = [lines["AUTH_REQUEST"], "noise", lines["IP_RECYCLE"]]
        out = list(cleanse_lines(stream, classifier))
        assert len(out) == 2
        assert out[0].split("\t")[2] == "0"
        assert out[1].split("\t")[2] == "6"

    def test_strips_line_endings(self, classifier, lines):
        stream = [lines["IP_ALLOCATION"] + "\r\n", lines["IP_ALLOCATION"] + "\n"]
        out = list(cleanse_lines(stream, classifier))
        assert out[0] == out[1]
        assert out[0].endswith("10.185.3.77\n")

    def test_bad_code_does_not_stop_stream(self, classifier, lines, caplog):
        stream = [
            "<190>Oct 11 23:56:00 2013 x: <5abc> <NOTI> corrupted",
            lines["DEAUTH"],
        ]
        stats = CleanseStats()
        with caplog.at_level(logging.WARNING, logger="wifilog.pipeline"):
            out = list(cleanse_lines(stream, classifier, stats))
        assert len(out) == 1
        assert "Line 1 skipped" in caplog.text
        assert stats.reject_counts[REJECT_BAD_CODE] == 1

    def test_stats_accounting(self, classifier, lines):
        stats = CleanseStats()
        stream = list(lines.values()) + ["noise", "<190>x <599999> y"]
        out = list(cleanse_lines(stream, classifier, stats))
        assert len(out) == 7
        assert stats.total_lines == 9
        assert stats.emitted == 7
        assert stats.rejected == 2
        assert stats.reject_counts["envelope"] == 1
        assert stats.reject_counts["unknown_code"] == 1
        assert all(stats.kind_counts[name] == 1 for name in lines)

    def test_empty_input(self, classifier):
        stats = CleanseStats()
        assert list(cleanse_lines([], classifier, stats)) == []
        assert stats.total_lines == 0

    def test_lazy(self, classifier, lines):
        def source():
            yield lines["DISASSOC"]
            raise AssertionError("read past first record")

        gen = cleanse_lines(source(), classifier)
        assert next(gen).split("\t")[2] == "3"
