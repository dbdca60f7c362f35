import threading

import pytest

from readiness.utils import PerformanceMonitor, clamp, round_half_up
from readiness.utils.config import Config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: debug\n"
        "matching:\n"
        "  neutral_score: 40\n"
        "  weights:\n"
        "    exact: 1.0\n"
        "    partial: 0.5\n"
        "persistence:\n"
        "  database_url: sqlite:///from-yaml.db\n"
    )
    return path


class TestConfig:
    def test_values_from_yaml(self, config_file, monkeypatch):
        monkeypatch.delenv("READINESS_DATABASE_URL", raising=False)
        cfg = Config(str(config_file))

        assert cfg.log_level == "DEBUG"
        assert cfg.neutral_job_score == 40
        assert cfg.matching_weights == {"exact": 1.0, "partial": 0.5}
        assert cfg.database_url == "sqlite:///from-yaml.db"
        assert cfg.get("matching.weights.partial") == 0.5

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("READINESS_DATABASE_URL", raising=False)
        cfg = Config(str(tmp_path / "missing.yaml"))

        assert cfg.log_level == "INFO"
        assert cfg.neutral_job_score == 50
        assert cfg.quick_match_partial_credit == 0.5
        assert cfg.database_url == ""
        assert cfg.get("matching.weights.exact", 1.0) == 1.0
        assert cfg.get("logging.level.deeper", "x") == "x"

    def test_env_overrides_database_url(self, config_file, monkeypatch):
        monkeypatch.setenv("READINESS_DATABASE_URL", "sqlite:///from-env.db")

        assert Config(str(config_file)).database_url == "sqlite:///from-env.db"


class TestNumbers:
    @pytest.mark.parametrize("value,digits,expected", [
        (12.5, 0, 13),
        (0.5, 0, 1),
        (62.5, 0, 63),
        (33.35, 1, 33.4),
        (66.666, 1, 66.7),
    ])
    def test_round_half_up(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_clamp(self):
        assert clamp(120, 0, 100) == 100
        assert clamp(-3, 0, 100) == 0
        assert clamp(42, 0, 100) == 42


class TestPerformanceMonitor:
    def test_counts_calls_and_failures(self):
        monitor = PerformanceMonitor()

        @monitor.measure
        def maybe_fail(fail):
            if fail:
                raise RuntimeError("boom")
            return "ok"

        assert maybe_fail(False) == "ok"
        with pytest.raises(RuntimeError):
            maybe_fail(True)

        report = monitor.get_report()["maybe_fail"]
        assert report["calls"] == 2
        assert report["failures"] == 1
        assert report["avg_latency_ms"] >= 0

    def test_reset(self):
        monitor = PerformanceMonitor()
        monitor.measure(lambda: None)()
        monitor.reset()

        assert monitor.get_report() == {}

    def test_latency_window_is_bounded(self, monkeypatch):
        monkeypatch.setattr("readiness.utils.performance.WINDOW_SIZE", 5)
        monitor = PerformanceMonitor()
        noop = monitor.measure(lambda: None)

        for _ in range(12):
            noop()

        metrics = monitor.metrics["<lambda>"]
        assert metrics.calls == 12
        assert len(metrics.latencies) == 5

    def test_concurrent_calls_are_all_counted(self):
        monitor = PerformanceMonitor()
        noop = monitor.measure(lambda: None)

        def worker():
            for _ in range(200):
                noop()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert monitor.get_report()["<lambda>"]["calls"] == 1600
