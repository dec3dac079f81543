"""
Formatierungsfunktionen für die Pegelanzeige.

Wandelt Pegel und Statistiken in lesbare Strings. Das Klemmen von -inf
(Stille) für die Anzeige passiert hier, nie in der Pegelberechnung.
"""

import math
from typing import Optional

from ..core.statistics import SplStatistics


def format_db(db: float, precision: int = 1, floor: Optional[float] = None) -> str:
    """
    Formatiere Pegel in dB.
    
    Args:
        db: Pegel in dB
        precision: Nachkommastellen
        floor: Anzeigeuntergrenze; kleinere Werte (auch -inf) werden
            als diese Grenze angezeigt
        
    Returns:
        Formatierter String (z.B. "63.2 dB" oder "-∞ dB")
    """
    if floor is not None and db < floor:
        db = floor
    if db == -math.inf:
        return "-∞ dB"
    return f"{db:.{precision}f} dB"


def format_statistics(
    stats: SplStatistics,
    precision: int = 1,
    floor: Optional[float] = None,
) -> str:
    """
    Formatiere Sitzungsstatistik in einer Zeile.
    
    Returns:
        z.B. "min 41.0 dB / mean 55.3 dB / max 72.9 dB"
    """
    parts = [
        ("min", stats.min),
        ("mean", stats.mean),
        ("max", stats.max),
    ]
    return " / ".join(f"{label} {format_db(value, precision, floor)}" for label, value in parts)
