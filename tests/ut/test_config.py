"""Tests for core.config: configuration snapshot and YAML loading."""

from __future__ import annotations

import threading

import pytest
import yaml

from assertkit import (
    AssertConfig,
    ComparisonTolerance,
    ConfigError,
    Mismatch,
    SequenceMismatch,
    assert_almost_equal,
    assert_sequence_equal,
    get_config,
    load_config,
    reset_config,
    set_config,
)


class TestSnapshot:
    def test_defaults(self):
        cfg = get_config()
        assert cfg == AssertConfig(absolute_tol=1e-4, relative_tol=1e-4, max_output_lines=10)
        assert cfg.tolerance == ComparisonTolerance()

    def test_set_config_keeps_unset_values(self):
        cfg = set_config(absolute_tol=1e-6)
        assert cfg.absolute_tol == 1e-6
        assert cfg.relative_tol == 1e-4
        assert get_config() is cfg

    def test_snapshot_is_immutable(self):
        cfg = get_config()
        with pytest.raises(AttributeError):
            cfg.max_output_lines = 3

    def test_replacing_keeps_old_snapshot(self):
        before = get_config()
        set_config(max_output_lines=3)
        assert before.max_output_lines == 10
        assert get_config().max_output_lines == 3

    def test_reset(self):
        set_config(relative_tol=0.5)
        assert reset_config() == AssertConfig()

    def test_invalid_values_rejected(self):
        with pytest.raises(ConfigError, match="absolute_tol"):
            set_config(absolute_tol=-1.0)
        with pytest.raises(ConfigError, match="max_output_lines"):
            set_config(max_output_lines=-2)
        assert get_config() == AssertConfig()

    def test_comparators_read_snapshot(self):
        with pytest.raises(Mismatch):
            assert_almost_equal(1.0, 1.5)
        set_config(absolute_tol=1.0)
        assert_almost_equal(1.0, 1.5)

    def test_explicit_argument_wins(self):
        set_config(absolute_tol=1.0)
        with pytest.raises(Mismatch):
            assert_almost_equal(1.0, 1.5, tol=ComparisonTolerance(absolute=0.0, relative=0.0))

    def test_concurrent_updates(self):
        def worker(n):
            for _ in range(50):
                set_config(max_output_lines=n)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(1, 5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert get_config().max_output_lines in (1, 2, 3, 4)


class TestLoadConfig:
    def test_load_full_config(self, tmp_path):
        path = tmp_path / "assertkit.yaml"
        with open(path, "w") as fh:
            yaml.dump({"absolute_tol": 0.01, "relative_tol": 0.02, "max_output_lines": 3}, fh)
        cfg = load_config(path)
        assert cfg == AssertConfig(absolute_tol=0.01, relative_tol=0.02, max_output_lines=3)
        assert get_config() == cfg

    def test_loaded_cap_used_by_comparators(self, tmp_path):
        path = tmp_path / "assertkit.yaml"
        path.write_text("max_output_lines: 1\n")
        load_config(path)
        with pytest.raises(SequenceMismatch) as exc_info:
            assert_sequence_equal([1, 2], [0, 0])
        assert len(exc_info.value.report.sample_lines) == 1

    def test_exponent_without_dot(self, tmp_path):
        path = tmp_path / "assertkit.yaml"
        path.write_text("absolute_tol: 1e-6\n")
        assert load_config(path).absolute_tol == 1e-6

    def test_no_apply(self, tmp_path):
        path = tmp_path / "assertkit.yaml"
        path.write_text("max_output_lines: 4\n")
        cfg = load_config(path, apply=False)
        assert cfg.max_output_lines == 4
        assert get_config().max_output_lines == 10

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yaml")

    def test_load_invalid_yaml(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("[ invalid: yaml: {")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(bad)

    def test_load_non_dict(self, tmp_path):
        bad = tmp_path / "list.yaml"
        bad.write_text("- item1\n- item2\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(bad)

    def test_load_empty_file(self, tmp_path):
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        assert load_config(empty) == AssertConfig()

    def test_unknown_key(self, tmp_path):
        bad = tmp_path / "assertkit.yaml"
        bad.write_text("max_lines: 4\n")
        with pytest.raises(ConfigError, match="Unknown configuration keys"):
            load_config(bad)

    def test_invalid_value(self, tmp_path):
        bad = tmp_path / "assertkit.yaml"
        bad.write_text("relative_tol: lots\n")
        with pytest.raises(ConfigError, match="relative_tol"):
            load_config(bad)

    def test_config_error_is_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(tmp_path / "missing.yaml")
