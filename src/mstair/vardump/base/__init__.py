"""
package: mstair.vardump.base
"""

# <AUTOGEN_INIT>
from mstair.vardump.base import (
    config,
    fs_helpers,
)


__all__ = [
    "config",
    "fs_helpers",
]
# </AUTOGEN_INIT>
