"""
package: mstair.vardump.selective
"""

# <AUTOGEN_INIT>
from mstair.vardump.selective import dump_api
from mstair.vardump.selective import dumper_config
from mstair.vardump.selective import errors
from mstair.vardump.selective import property_reflection
from mstair.vardump.selective import selective_var_dumper
from mstair.vardump.selective import type_names
from mstair.vardump.selective import value_kind

__all__ = ['dump_api', 'dumper_config', 'errors', 'property_reflection',
           'selective_var_dumper', 'type_names', 'value_kind']
# </AUTOGEN_INIT>
