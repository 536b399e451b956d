"""
Common framerates.

Every constant is built through new_framerate(), so each one satisfies the
same invariants as any caller-constructed framerate.
"""

from typing import Dict

from .models import Framerate, Ntsc
from .validation import new_framerate

F23_98 = new_framerate(24, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
F24 = new_framerate(24, ntsc=None)
F25 = new_framerate(25, ntsc=None)
F29_97_NDF = new_framerate(30, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
F29_97_DF = new_framerate(30, ntsc=Ntsc.DROP, coerce_ntsc=True)
F30 = new_framerate(30, ntsc=None)
F47_95 = new_framerate(48, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
F48 = new_framerate(48, ntsc=None)
F50 = new_framerate(50, ntsc=None)
F59_94_NDF = new_framerate(60, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
F59_94_DF = new_framerate(60, ntsc=Ntsc.DROP, coerce_ntsc=True)
F60 = new_framerate(60, ntsc=None)
F119_88_NDF = new_framerate(120, ntsc=Ntsc.NON_DROP, coerce_ntsc=True)
F119_88_DF = new_framerate(120, ntsc=Ntsc.DROP, coerce_ntsc=True)
F120 = new_framerate(120, ntsc=None)

ALL_RATES: Dict[str, Framerate] = {
    "23.98": F23_98,
    "24": F24,
    "25": F25,
    "29.97 NDF": F29_97_NDF,
    "29.97 DF": F29_97_DF,
    "30": F30,
    "47.95": F47_95,
    "48": F48,
    "50": F50,
    "59.94 NDF": F59_94_NDF,
    "59.94 DF": F59_94_DF,
    "60": F60,
    "119.88 NDF": F119_88_NDF,
    "119.88 DF": F119_88_DF,
    "120": F120,
}
