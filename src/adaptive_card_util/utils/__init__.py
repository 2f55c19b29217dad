# -*- coding: utf-8 -*-
"""Utility modules."""

from adaptive_card_util.utils.environment import get_machine_name
from adaptive_card_util.utils.timezones import EASTERN, now_formatted, to_tz_format

__all__ = ["EASTERN", "get_machine_name", "now_formatted", "to_tz_format"]
