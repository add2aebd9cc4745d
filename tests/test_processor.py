"""
Tests for ScoreProcessor: tiered scoring of metric sets and bulk files.
"""

import json
import logging
from decimal import Decimal

import pytest

from cvss_engine import InvalidArgumentError, MissingMetricError, Severity
from cvss_engine.config.settings import CVSSConfig
from cvss_engine.processing.processor import ScoreProcessor
from cvss_engine.scoring.severity import calculate_severity


class TestSeverity:
    """Qualitative severity rating."""

    @pytest.mark.parametrize('score, expected', [
        (None, Severity.NONE),
        (Decimal('0.0'), Severity.NONE),
        (Decimal('3.9'), Severity.LOW),
        (Decimal('4.0'), Severity.MEDIUM),
        (Decimal('5.6'), Severity.MEDIUM),
        (Decimal('8.5'), Severity.HIGH),
        (Decimal('9.0'), Severity.CRITICAL),
        (Decimal('10.0'), Severity.CRITICAL),
    ])
    def test_thresholds(self, score, expected):
        assert calculate_severity(score) is expected


class TestProcessSingle:
    """Scoring one metric set."""

    def test_base_only(self, cve_2002_0392):
        result = ScoreProcessor().process_single(cve_2002_0392['base'], label='CVE-2002-0392')

        assert result.label == 'CVE-2002-0392'
        assert result.base_score == Decimal('8.5')
        assert result.temporal_score is None
        assert result.environmental_score is None
        assert result.severity is Severity.HIGH
        assert result.metrics['Authentication'] == 'not-required'

    def test_all_tiers(self, cve_2002_0392):
        metrics = {**cve_2002_0392['base'], **cve_2002_0392['temporal'], **cve_2002_0392['environmental']}
        result = ScoreProcessor().process_single(metrics)

        assert result.base_score == Decimal('8.5')
        assert result.temporal_score == Decimal('7.0')
        assert result.environmental_score == Decimal('5.9')
        assert result.final_score == Decimal('5.9')
        assert result.severity is Severity.MEDIUM

    def test_environmental_skipped_without_temporal(self, cve_2002_0392, caplog):
        metrics = {**cve_2002_0392['base'], **cve_2002_0392['environmental']}
        with caplog.at_level(logging.WARNING):
            result = ScoreProcessor().process_single(metrics, label='partial')

        assert result.environmental_score is None
        assert result.final_score == Decimal('8.5')
        assert 'environmental metrics ignored' in caplog.text

    def test_missing_base_metric_propagates(self, cve_2002_0392):
        with pytest.raises(MissingMetricError):
            ScoreProcessor().process_single(cve_2002_0392['temporal'])


class TestProcessBulk:
    """Scoring lists of entries."""

    def test_failed_entries_recorded(self, cve_2003_0818, caplog):
        entries = [
            {'id': 'CVE-2003-0818', 'metrics': {**cve_2003_0818['base'], **cve_2003_0818['temporal']}},
            {'id': 'broken', 'metrics': {'AccessVector': 'Adjacent'}},
            {'metrics': cve_2003_0818['base']},
            'not an entry',
        ]
        with caplog.at_level(logging.ERROR):
            results = ScoreProcessor().process_bulk(entries)

        assert [r.label for r in results] == ['CVE-2003-0818', 'broken', 'entry-3', 'entry-4']
        assert results[0].temporal_score == Decimal('8.3')
        assert results[0].error is None
        assert "Invalid value 'adjacent' for AccessVector" in results[1].error
        assert results[1].base_score is None
        assert results[2].base_score == Decimal('10.0')
        assert results[3].error is not None
        assert 'Failed to score broken' in caplog.text

    @pytest.mark.parametrize('metrics', [None, ['AccessVector', 'remote'], 'AccessVector=remote'])
    def test_entry_metrics_must_be_mapping(self, metrics):
        results = ScoreProcessor().process_bulk([{'id': 'x', 'metrics': metrics}])

        assert results[0].error == "x has no 'metrics' mapping"
        assert results[0].base_score is None

    def test_stop_on_error(self):
        processor = ScoreProcessor(CVSSConfig(stop_on_error=True))
        with pytest.raises(MissingMetricError):
            processor.process_bulk([{'id': 'incomplete', 'metrics': {'AccessVector': 'remote'}}])


class TestLoadEntries:
    """Reading metric sets from JSON files."""

    def test_list_of_entries(self, tmp_path, cve_2003_0062):
        path = tmp_path / 'advisories.json'
        path.write_text(json.dumps([{'id': 'CVE-2003-0062', 'metrics': cve_2003_0062['base']}]))

        entries = ScoreProcessor.load_entries(path)
        assert entries == [{'id': 'CVE-2003-0062', 'metrics': cve_2003_0062['base']}]

    def test_flat_mapping_labelled_by_file_name(self, tmp_path, cve_2003_0062):
        path = tmp_path / 'CVE-2003-0062.json'
        path.write_text(json.dumps(cve_2003_0062['base']))

        entries = ScoreProcessor.load_entries(str(path))
        assert entries == [{'id': 'CVE-2003-0062', 'metrics': cve_2003_0062['base']}]

    def test_single_entry(self, tmp_path, cve_2003_0062):
        path = tmp_path / 'entry.json'
        path.write_text(json.dumps({'id': 'nod32', 'metrics': cve_2003_0062['base']}))

        assert ScoreProcessor.load_entries(path)[0]['id'] == 'nod32'

    @pytest.mark.parametrize('content', ['{not json', '42', '"AccessVector"'])
    def test_malformed_files(self, tmp_path, content):
        path = tmp_path / 'bad.json'
        path.write_text(content)

        with pytest.raises(InvalidArgumentError):
            ScoreProcessor.load_entries(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / 'binary.json'
        path.write_bytes(b'[{"id": "\xff\xfe"}]')

        with pytest.raises(InvalidArgumentError, match='not valid JSON'):
            ScoreProcessor.load_entries(path)
