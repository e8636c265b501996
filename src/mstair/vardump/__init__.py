"""
package: mstair.vardump
"""

# <AUTOGEN_INIT>
from mstair.vardump import (
    base,
    selective,
    xlogging,
)


__all__ = [
    "base",
    "selective",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
