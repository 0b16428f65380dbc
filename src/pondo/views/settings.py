#!/usr/bin/env python3
"""
Settings View

Display currency selection. The settings are read by every other view on
activation, so a change takes effect the next time a view is shown.
"""

import logging

from ..core.models import AppSettings
from .base import View

logger = logging.getLogger(__name__)


class SettingsView(View):
    name = "settings"
    uses_transactions = False

    def change_currency(self, code: str) -> AppSettings:
        """
        Switch the display currency and persist it.

        Unknown codes are stored as given and display with the default symbol.
        """
        self.settings = AppSettings.for_code(code.strip().upper())
        self.store.save_settings(self.settings)
        logger.info("Currency set to %s (%s)", self.settings.currency_code, self.settings.currency_symbol)
        return self.settings
