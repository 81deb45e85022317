# -*- coding: utf-8 -*-
"""
host

In-process implementation of the host form-control protocol.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .control import FormControl

__all__ = ["FormControl"]


# The End
