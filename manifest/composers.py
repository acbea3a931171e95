# manifest/composers.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Composer:
    name: str
    year_born: int
    year_died: Optional[int] = None


class ComposerNotFoundError(KeyError):
    pass


COMPOSERS = [
    Composer("Bach", 1685, 1750),
    Composer("Balakirev", 1837, 1910),
    Composer("Beethoven", 1770, 1827),
    Composer("Brahms", 1833, 1897),
    Composer("Chopin", 1810, 1849),
    Composer("Debussy", 1862, 1918),
    Composer("Glinka", 1804, 1857),
    Composer("Haydn", 1732, 1809),
    Composer("Liszt", 1811, 1886),
    Composer("Mozart", 1756, 1791),
    Composer("Prokofiev", 1891, 1953),
    Composer("Rachmaninoff", 1873, 1943),
    Composer("Ravel", 1875, 1937),
    Composer("Schubert", 1797, 1828),
    Composer("Schumann", 1810, 1856),
    Composer("Scriabin", 1872, 1915),
]

_BY_NAME = {c.name.lower(): c for c in COMPOSERS}


def get_composer(name: str) -> Composer:
    """Case-insensitive lookup. A miss is fatal for the manifest update."""
    try:
        return _BY_NAME[str(name).strip().lower()]
    except KeyError:
        raise ComposerNotFoundError(f"Composer {name} not found.") from None
