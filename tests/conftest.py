# Shared fixtures. Qt-backed tests run against the offscreen platform so no
# display is needed; they skip themselves when PyQt6 is not installed.

import os
import sys

import pytest

from slotforge.services.event_registry import EventRegistry
from slotforge.surfaces import ContainerFactory

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def registry():
    return EventRegistry()


@pytest.fixture
def factory():
    return ContainerFactory("memory")


@pytest.fixture
def qapp():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication(sys.argv)
