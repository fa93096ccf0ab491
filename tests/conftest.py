"""
Pytest configuration and fixtures: temporary assets directory and a scripted console.
"""
import locale
from decimal import Decimal

import pytest

from asset_tracker.models import Asset
from asset_tracker.ui import ConsoleUI


class ScriptedConsole(ConsoleUI):
    """ConsoleUI fed from a list of input lines; output is captured in .lines."""

    def __init__(self, inputs=None):
        self.inputs = list(inputs or [])
        self.lines = []
        self.prompts = []
        super().__init__(
            input_fn=self._read,
            output_fn=self.lines.append,
            clear_fn=lambda: None,
            color=False,
            width_fn=lambda: 80,
        )

    def _read(self, prompt):
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def feed(self, *lines):
        self.inputs.extend(lines)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture(autouse=True)
def c_locale(monkeypatch):
    """Force the currency fallback so formatting does not depend on the host locale."""
    def no_currency(*args, **kwargs):
        raise ValueError("Currency formatting is not possible using the 'C' locale.")

    monkeypatch.setattr(locale, "currency", no_currency)


@pytest.fixture
def assets_dir(tmp_path):
    directory = tmp_path / "Assets"
    directory.mkdir()
    return directory


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def laptop():
    return Asset("ATS0001", "Laptop", "X1", 3, Decimal("999.99"), "SWE")
