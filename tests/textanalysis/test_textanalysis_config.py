"""
Tests for the downloader configuration and logger.
"""

import json
import logging
import os
import tempfile

from textanalysis.textanalysis_config import DownloaderConfig
from textanalysis.textanalysis_logger import TextAnalysisLogger


class TestDownloaderConfig:
    """Tests for DownloaderConfig."""

    def test_defaults(self):
        config = DownloaderConfig()
        assert config.cache_namespace == "nltk-downloads"
        assert config.install_dir == os.path.join("storage", "corpora")
        assert config.checksum_algorithm == "md5"
        assert config.use_lock is True

    def test_cache_root_defaults_to_system_temp_dir(self):
        config = DownloaderConfig()
        assert config.get_cache_root() == os.path.join(
            tempfile.gettempdir(), "nltk-downloads"
        )

    def test_from_dict_ignores_unknown_keys(self, tmp_path):
        config = DownloaderConfig.from_dict(
            {
                "temp_dir": str(tmp_path),
                "cache_namespace": "corpus-cache",
                "timeout": 5,
                "not_an_option": True,
            }
        )
        assert config.timeout == 5
        assert config.get_cache_root() == os.path.join(str(tmp_path), "corpus-cache")


class TestTextAnalysisLogger:
    """Tests for TextAnalysisLogger."""

    def test_log_line_is_json_with_caller(self, caplog):
        caplog.set_level(logging.INFO, logger="textanalysis")
        TextAnalysisLogger().log("first line\nsecond line", logging.INFO)

        record = caplog.records[-1]
        line = json.loads(record.getMessage())
        assert line["message"] == "first line second line"
        assert line["level"] == "INFO"
        assert line["caller_name"] == "test_log_line_is_json_with_caller"
        assert line["caller_file"] == "test_textanalysis_config.py"

    def test_disabled_level_is_dropped(self, caplog):
        caplog.set_level(logging.INFO, logger="textanalysis")
        TextAnalysisLogger().log("noise", logging.DEBUG)
        assert not [r for r in caplog.records if r.name == "textanalysis"]
