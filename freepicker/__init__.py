"""
__init__

Composite date, time and date-time picker widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import PickerSettings, configure, current_settings
from .core import Bounds, Clock, PickerConfig
from .core.values import DateParts, DateTimeParts, TimeParts
from .host import FormControl
from .widgets import (
    DatePickerWidget,
    DateTimePickerWidget,
    TimePickerWidget,
    WidgetContext,
    registry,
)
from .meta import __version__

# The End
