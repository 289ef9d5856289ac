from __future__ import annotations

import math

from src.config import TEMP_CHANGE_THRESHOLD_C
from src.models import PersistedObservation, Reading


def is_significant(
    prev: PersistedObservation,
    nxt: Reading,
    threshold_c: float = TEMP_CHANGE_THRESHOLD_C,
) -> bool:
    """
    Onko uusi lukema niin eri kuin edellinen tallennettu, että widgetit piirretään?

    Merkittävä, jos
      * säätila vaihtui (kirjainkoosta riippumatta), tai
      * edellistä lämpötilaa ei ole (ensimmäinen havainto), tai
      * lämpötila muuttui vähintään threshold_c astetta.
    """
    if prev.last_condition.casefold() != nxt.condition.casefold():
        return True

    if math.isnan(prev.last_temperature_c):
        return True

    # NaN uudessa lukemassa → vertailu on False, ei piirretä turhaan
    return abs(prev.last_temperature_c - nxt.temperature_c) >= threshold_c
