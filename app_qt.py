# app_qt.py
"""
Main Application Entry Point - Bảng vẽ
Khởi động cửa sổ bảng vẽ với logging và QSettings
"""

import sys
import argparse
import logging
from pathlib import Path
from datetime import datetime

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from canvas_qt.board.settings import APPLICATION_NAME, ORGANIZATION_NAME, BoardSettings
from canvas_qt.board.window import DrawingBoardWindowQt


# ========== LOGGING SETUP ==========
def setup_logging(level=logging.INFO, log_dir="logs"):
    """Cấu hình logging cho ứng dụng"""
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True)

    log_file = log_dir / f"canvas_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Bảng vẽ: nét tự do và hình kéo thả")
    parser.add_argument("--debug", action="store_true", help="Bật log mức DEBUG")
    parser.add_argument("--no-clamp", action="store_true", help="Cho phép kéo hình ra ngoài bảng vẽ")
    return parser.parse_args(argv)


# ======= Entrypoint =======
def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logger = setup_logging(logging.DEBUG if args.debug else logging.INFO)

    app = QApplication.instance() or QApplication(sys.argv)
    QCoreApplication.setOrganizationName(ORGANIZATION_NAME)
    QCoreApplication.setApplicationName(APPLICATION_NAME)

    settings = BoardSettings.load()
    if args.no_clamp:
        settings.clamp_drag = False

    logger.info("Khởi động bảng vẽ")
    win = DrawingBoardWindowQt(settings=settings)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
