"""
Tests für Sitzungsstatistik.

Mittelwert = arithmetisches Mittel der dB-Werte (keine energetische Mittelung).
Leere Statistik löst InvalidConfiguration aus.
"""

import math
import threading

import pytest
import numpy as np

from noise_meter.core.errors import InvalidConfiguration, InvalidSample
from noise_meter.core.levels import get_leq_t
from noise_meter.core.statistics import (
    BandStatisticsAggregator,
    SplStatistics,
    StatisticsAggregator,
)


class TestStatisticsAggregator:
    """Tests für StatisticsAggregator."""
    
    def test_min_max_mean(self):
        """10, 20, 15 → (10, 20, 15)."""
        stats = StatisticsAggregator()
        stats.observe(10.0)
        stats.observe(20.0)
        stats.observe(15.0)
        
        assert stats.snapshot() == SplStatistics(min=10.0, max=20.0, mean=15.0)
    
    def test_arithmetic_mean(self):
        """Mittelwert ist arithmetisch, nicht energetisch."""
        stats = StatisticsAggregator()
        stats.observe_many([40.0, 80.0])
        
        assert stats.snapshot().mean == 60.0
    
    def test_snapshot_is_read_only(self):
        """snapshot() setzt nicht zurück."""
        stats = StatisticsAggregator()
        stats.observe(50.0)
        
        assert stats.snapshot() == stats.snapshot()
        assert stats.count == 1
    
    def test_empty_snapshot(self):
        """Ohne Beobachtungen: InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            StatisticsAggregator().snapshot()
    
    def test_reset(self):
        """reset() startet eine neue Sitzung."""
        stats = StatisticsAggregator()
        stats.observe_many([10.0, 20.0])
        stats.reset()
        
        assert stats.count == 0
        with pytest.raises(InvalidConfiguration):
            stats.snapshot()
        
        stats.observe(30.0)
        assert stats.snapshot() == SplStatistics(30.0, 30.0, 30.0)
    
    def test_silence_lowers_min_only(self):
        """-inf senkt das Minimum, nicht Maximum oder Mittelwert."""
        stats = StatisticsAggregator()
        stats.observe_many([50.0, -math.inf, 70.0])
        
        snapshot = stats.snapshot()
        assert snapshot.min == -math.inf
        assert snapshot.max == 70.0
        assert snapshot.mean == 60.0
        assert stats.count == 3
    
    def test_only_silence(self):
        """Nur -inf: alle Werte -inf."""
        stats = StatisticsAggregator()
        stats.observe(-math.inf)
        
        assert stats.snapshot() == SplStatistics(-math.inf, -math.inf, -math.inf)
    
    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_invalid_sample(self, value):
        """NaN und +inf werden abgelehnt."""
        stats = StatisticsAggregator()
        
        with pytest.raises(InvalidSample):
            stats.observe(value)
        assert stats.count == 0
    
    @pytest.mark.parametrize("value", ["loud", None])
    def test_non_numeric_sample(self, value):
        """Nicht numerische Werte: InvalidSample."""
        stats = StatisticsAggregator()
        
        with pytest.raises(InvalidSample):
            stats.observe(value)
        assert stats.count == 0
    
    def test_invalid_batch_is_atomic(self):
        """Ungültiger Wert im Batch: nichts wird übernommen."""
        stats = StatisticsAggregator()
        
        with pytest.raises(InvalidSample):
            stats.observe_many([10.0, math.nan, 20.0])
        assert stats.count == 0
    
    def test_leq_t_round_trip(self):
        """Mittelwert über Leq(T)-Folge = unabhängig berechnetes Mittel."""
        rng = np.random.default_rng(3)
        signal = rng.normal(0, 0.05, 8000)
        levels = get_leq_t(signal, 8000, 0.125)
        
        stats = StatisticsAggregator()
        for value in levels:
            stats.observe(value)
        
        assert stats.snapshot().mean == pytest.approx(np.mean(levels))
        assert stats.snapshot().min == np.min(levels)
        assert stats.snapshot().max == np.max(levels)
    
    def test_concurrent_observe_and_snapshot(self):
        """observe() in Schreib-Threads, snapshot() parallel im Lese-Thread."""
        stats = StatisticsAggregator()
        stats.observe(50.0)
        done = threading.Event()
        snapshots = []
        
        def feed(level):
            for _ in range(1000):
                stats.observe(level)
        
        def read():
            while not done.is_set():
                snapshots.append(stats.snapshot())
        
        reader = threading.Thread(target=read)
        writers = [threading.Thread(target=feed, args=(level,)) for level in (30.0, 40.0, 60.0, 70.0)]
        reader.start()
        for t in writers:
            t.start()
        for t in writers:
            t.join()
        done.set()
        reader.join()
        
        assert stats.count == 4001
        final = stats.snapshot()
        assert (final.min, final.max) == (30.0, 70.0)
        assert final.mean == pytest.approx(50.0)
        assert snapshots
        assert all(s.min <= s.mean <= s.max for s in snapshots)


class TestBandStatistics:
    """Tests für Terzband-Statistik."""
    
    def test_per_band(self):
        """Min/Max/Mittel je Band."""
        bands = BandStatisticsAggregator()
        bands.observe({1000.0: 50.0, 125.0: 40.0})
        bands.observe({1000.0: 70.0, 125.0: 44.0})
        
        result = bands.snapshot()
        
        assert list(result) == [125.0, 1000.0]
        assert result[125.0] == SplStatistics(40.0, 44.0, 42.0)
        assert result[1000.0] == SplStatistics(50.0, 70.0, 60.0)
    
    def test_bands_added_on_first_use(self):
        """Neue Bänder werden bei Bedarf angelegt."""
        bands = BandStatisticsAggregator()
        bands.observe({500.0: 30.0})
        bands.observe({250.0: 35.0, 500.0: 31.0})
        
        assert bands.bands == [250.0, 500.0]
        assert bands.snapshot()[250.0].mean == 35.0
    
    def test_empty_snapshot(self):
        """Ohne Beobachtungen: InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            BandStatisticsAggregator().snapshot()
    
    def test_invalid_level(self):
        """NaN in einem Band: nichts wird übernommen."""
        bands = BandStatisticsAggregator()
        
        with pytest.raises(InvalidSample):
            bands.observe({100.0: 40.0, 200.0: math.nan})
        assert bands.bands == []
    
    def test_reset(self):
        """reset() leert alle Bänder."""
        bands = BandStatisticsAggregator()
        bands.observe({100.0: 40.0})
        bands.reset()
        
        assert bands.bands == []
