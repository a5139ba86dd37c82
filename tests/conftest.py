import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6 import QtCore
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp(tmp_path_factory):
    QtCore.QSettings.setDefaultFormat(QtCore.QSettings.IniFormat)
    QtCore.QSettings.setPath(QtCore.QSettings.IniFormat, QtCore.QSettings.UserScope,
                             str(tmp_path_factory.mktemp("settings")))
    QtCore.QCoreApplication.setOrganizationName("TutorAppTest")
    QtCore.QCoreApplication.setApplicationName("DrawingCanvasTest")
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store(qapp, tmp_path):
    return QtCore.QSettings(str(tmp_path / "board.ini"), QtCore.QSettings.IniFormat)
