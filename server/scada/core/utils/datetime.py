# coding: utf-8
# server/scada/core/utils/datetime.py
"""server/scada/core/utils/datetime.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilitaires temps : tous les horodatages exposés sont des secondes epoch (int).
"""

import time


def now_epoch() -> int:
    """Horodatage courant en secondes depuis epoch."""
    return int(time.time())
