import logging
from pathlib import Path

from reqlayer.core.logger import logger, setup_logging


def test_setup_logging_creates_file_sinks(tmp_path: Path) -> None:
    setup_logging("INFO", log_dir=tmp_path, production=True)
    logger.error("写入错误日志")
    logger.complete()

    assert (tmp_path / "app.log").exists()
    assert "写入错误日志" in (tmp_path / "error.log").read_text(encoding="utf-8")
    assert logging.getLogger("httpx").level == logging.WARNING

    # 恢复为仅控制台输出，避免后续测试继续写入临时目录
    setup_logging("INFO")
