"""Unit tests for session logger setup."""

import pytest
from loguru import logger

from cvpress.contexts.templating.logger import _log_info, setup_templating_logger


@pytest.mark.unit
def test_templating_logger_writes_session_file(tmp_path):
    """Test that the session log gets the provenance header and prefixed messages."""
    log_file = setup_templating_logger(tmp_path / "session", template_id="v2", language="ru")
    _log_info("Rendering started")
    logger.debug("detail only in the file")
    # Closes the file sink
    logger.remove()

    assert log_file == tmp_path / "session" / "template.log"
    content = log_file.read_text(encoding="utf-8")
    assert "Template: v2" in content
    assert "Language: ru" in content
    assert "[template] Rendering started" in content
    assert "detail only in the file" in content
