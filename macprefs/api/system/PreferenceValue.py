"""Strictly typed preference value.

The Python type is the tag: a bool stays a bool and is never coerced to an int.
"""

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

PreferenceValue = StrictBool | StrictInt | StrictFloat | StrictStr
